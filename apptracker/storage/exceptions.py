"""Storage exceptions."""

from enum import Enum


class StoragePhase(Enum):
    """Step of a storage operation in which a failure happened."""

    RESOLVE = "resolve"
    WRITE = "write"
    FINALIZE = "finalize"
    SIGN = "sign"
    DELETE = "delete"


class StorageError(Exception):
    """Base exception for storage operations."""

    pass


class StorageConfigurationError(StorageError):
    """Raised when the object store client cannot be constructed."""

    pass


class StorageOperationError(StorageError):
    """Raised when a call against the object store fails."""

    def __init__(
        self,
        operation: str,
        phase: StoragePhase,
        key: str,
        reason: str,
    ) -> None:
        self.operation = operation
        self.phase = phase
        self.key = key
        self.reason = reason
        super().__init__(
            f"Storage {operation} of '{key}' failed during {phase.value}: {reason}"
        )


class BucketResolutionError(StorageOperationError):
    """Raised when the default bucket cannot be resolved."""

    def __init__(self, operation: str, key: str, reason: str) -> None:
        super().__init__(operation, StoragePhase.RESOLVE, key, reason)
