"""Signed URL value object."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SignedURL:
    """Time-limited URL granting access to a single stored object.

    Never persisted; every request for access produces a new one.
    """

    url: str
    key: str
    method: str
    expires_at: datetime
