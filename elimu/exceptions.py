class ElimuError(Exception):
    """Base class for predictable service-layer exceptions."""


class NotFoundError(ElimuError):
    """Raised when a record does not exist or is not attached to the given school."""


class EntityNotFoundError(NotFoundError):
    """Raised when the parent record referenced by an entity no longer exists."""


class DependentRecordsError(ElimuError):
    """Raised when a record cannot be removed because dependents remain."""
