# =======================================================================================
# yubinuki/services/local_authorizer.py - Allow-list Authorization
# =======================================================================================
import logging
from typing import Iterable
from ..utils.validators import TokenValidator

logger = logging.getLogger(__name__)


class LocalAuthorizer:
    """Checks a token's Yubikey public id against the configured allow-list."""

    def __init__(self, allow_list: Iterable[str]):
        # tuple: order preserved, immutable for the process lifetime
        self.allow_list = tuple(allow_list)

    def authorize(self, token: str) -> bool:
        """Exact, case-sensitive match of the identity prefix. No side effects."""
        identity = TokenValidator.identity_prefix(token)
        if identity is None:
            logger.info("Malformed token rejected (length %d)", len(token))
            return False

        for user in self.allow_list:
            if user == identity:
                logger.info("Authorized user: %s", identity)
                return True

        logger.info("Not authorized token ID: %s", identity)
        return False
