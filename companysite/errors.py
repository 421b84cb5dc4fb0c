class StorageError(Exception):
    """The backing store failed in a way the caller cannot fix."""


class NotFoundError(StorageError):
    """No record matches the requested id."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found")


class ConflictError(StorageError):
    """The write would break a uniqueness rule."""
