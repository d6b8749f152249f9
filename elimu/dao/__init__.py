from .record_store import RecordStore
