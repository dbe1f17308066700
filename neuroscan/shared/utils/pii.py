"""Subject fingerprints for diagnostic logs.

Subject names belong in the user's own results and reminder files, never
in application logs. Log records carry a keyed fingerprint instead, so
lines about the same subject can be correlated without naming them.

The key is either supplied by the installation (NEUROSCAN_PII_SALT) or
generated per process and never written anywhere; in the second case
fingerprints are only comparable within one session.
"""
import hashlib
import hmac
import logging
import os
import secrets
from typing import Optional

logger = logging.getLogger(__name__)


class SubjectHasher:
    """Keyed HMAC-SHA256 fingerprints of subject names."""

    MIN_SALT_LENGTH = 32
    FINGERPRINT_LENGTH = 16

    def __init__(self, salt: Optional[str] = None):
        """Initialize hasher.

        Args:
            salt: Secret key of at least MIN_SALT_LENGTH characters.
                A random per-process key is generated when omitted.

        Raises:
            ValueError: If an explicit salt is too short
        """
        if salt is None:
            salt = secrets.token_hex(self.MIN_SALT_LENGTH)
            self.ephemeral = True
        elif len(salt) < self.MIN_SALT_LENGTH:
            logger.error(
                "SUBJECT_HASHER_SALT_REJECTED",
                extra={"min_length": self.MIN_SALT_LENGTH}
            )
            raise ValueError(
                f"PII salt must be at least {self.MIN_SALT_LENGTH} characters"
            )
        else:
            self.ephemeral = False

        self._key = salt.encode()
        logger.debug("SUBJECT_HASHER_READY", extra={"ephemeral": self.ephemeral})

    @classmethod
    def from_env(cls) -> "SubjectHasher":
        """Key from NEUROSCAN_PII_SALT, or a per-process key when unset."""
        return cls(os.getenv("NEUROSCAN_PII_SALT") or None)

    def fingerprint(self, subject_name: str) -> str:
        """Truncated hex digest, stable for one key and name."""
        digest = hmac.new(self._key, subject_name.encode(), hashlib.sha256)
        return digest.hexdigest()[:self.FINGERPRINT_LENGTH]
