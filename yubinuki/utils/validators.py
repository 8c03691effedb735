# =======================================================================================
# yubinuki/utils/validators.py - Validation Helpers
# =======================================================================================
from typing import Optional

# Yubico OTP: modhex public id followed by a 32 character encrypted part
OTP_SUFFIX_LENGTH = 32


class TokenValidator:
    """Structural checks on credential tokens."""

    @staticmethod
    def is_well_formed(token: str) -> bool:
        """A token must be long enough to hold a non-empty identity prefix."""
        return len(token) > OTP_SUFFIX_LENGTH

    @staticmethod
    def identity_prefix(token: str) -> Optional[str]:
        """Return the identity part of the token, or None if it is malformed."""
        if not TokenValidator.is_well_formed(token):
            return None
        return token[:-OTP_SUFFIX_LENGTH]

    @staticmethod
    def strip_prefix(payload: str, prefixes) -> Optional[str]:
        """
        Strip the first matching prefix from payload.

        Exact string match only. A payload equal to a prefix yields "".
        """
        for prefix in prefixes:
            if prefix and payload.startswith(prefix):
                return payload[len(prefix):]
        return None
