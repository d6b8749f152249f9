import os


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///elimu.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")

    # Deleting a school also deletes its students. When off, a school
    # that still has students cannot be unregistered.
    ELIMU_CASCADE_STUDENTS = _flag("ELIMU_CASCADE_STUDENTS", "true")

    # Place students without an explicit classroom in the least filled
    # classroom of their grade.
    ELIMU_AUTO_ASSIGN_CLASSROOM = _flag("ELIMU_AUTO_ASSIGN_CLASSROOM", "false")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    LOG_FILE = None
