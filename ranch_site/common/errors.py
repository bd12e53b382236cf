"""
Error types for content retrieval
"""
from typing import Optional


class ContentStoreError(Exception):
    """The content store rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class RetrievalError(Exception):
    """
    A repository operation failed for a reason other than absence.

    Carries the entity kind and the operation so callers can report
    which fetch broke without inspecting the cause.
    """

    def __init__(self, entity: str, operation: str, message: Optional[str] = None):
        self.entity = entity
        self.operation = operation
        super().__init__(message or f"Failed to retrieve {entity} ({operation})")


class EntityValidationError(RetrievalError):
    """Payload returned by the content store does not match the entity schema."""
