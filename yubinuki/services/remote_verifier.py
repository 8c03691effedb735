# =======================================================================================
# yubinuki/services/remote_verifier.py - Remote OTP Verification
# =======================================================================================
import base64
import binascii
import logging
import re
from typing import Optional
from yubico_client import Yubico
from yubico_client.yubico_exceptions import StatusCodeError
from .interfaces import VerificationService
from ..utils.exceptions import ConfigError, VerificationTransportError

logger = logging.getLogger(__name__)

# Yubicloud statuses that mean the OTP itself was judged invalid
INVALID_OTP_STATUSES = frozenset({"BAD_OTP", "REPLAYED_OTP"})

_STATUS_RE = re.compile(r"status=([A-Z0-9_]+)")


class StatusReportingYubico(Yubico):
    """
    Yubico client that raises StatusCodeError for every invalid-OTP status.

    The stock client raises only for REPLAYED_OTP; BAD_OTP makes it drop the
    answer and end with NO_VALID_ANSWERS, which reads like an outage.
    """

    def verify_response(self, response, *args, **kwargs):
        result = super().verify_response(response, *args, **kwargs)
        if result:
            return result
        match = _STATUS_RE.search(response or "")
        if match and match.group(1) in INVALID_OTP_STATUSES:
            raise StatusCodeError(match.group(1))
        return result


class YubicloudVerificationService:
    """VerificationService backed by the Yubicloud validation API."""

    def __init__(self, client_id: str, secret_key: str, timeout: Optional[float] = None,
                 client: Optional[Yubico] = None):
        if client is None:
            key = secret_key or None
            if key is not None:
                try:
                    base64.b64decode(key, validate=True)
                except (binascii.Error, ValueError) as e:
                    raise ConfigError(f"Yubicloud secret key is not valid base64: {e}") from e
            client = StatusReportingYubico(client_id, key)
        self.client = client
        self.timeout = timeout

    def verify(self, token: str) -> bool:
        try:
            return bool(self.client.verify(token, timeout=self.timeout))
        except StatusCodeError as e:
            if e.status_code in INVALID_OTP_STATUSES:
                logger.info("Yubicloud rejected OTP: %s", e.status_code)
                return False
            raise VerificationTransportError(f"Yubicloud status {e.status_code}") from e
        except Exception as e:
            # network errors, NO_VALID_ANSWERS, response signature mismatch
            raise VerificationTransportError(f"Yubicloud verification failed: {e}") from e


class RemoteVerifier:
    """Asks the issuer service whether a locally authorized token is currently valid."""

    def __init__(self, service: VerificationService):
        self.service = service

    def verify(self, token: str) -> bool:
        """
        Returns True/False when the issuer decided.

        Raises VerificationTransportError when validity could not be determined,
        so callers can keep "unreachable" apart from "invalid".
        """
        valid = self.service.verify(token)
        if valid:
            logger.info("Verified token: %s", token)
        else:
            logger.info("Issuer reports token invalid: %s", token)
        return valid
