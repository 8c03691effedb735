# =======================================================================================
# yubinuki/services/credential_extractor.py - Credential Extraction
# =======================================================================================
import logging
from typing import Iterable
from ..models.schemas import DEFAULT_PAYLOAD_URL_PREFIXES, TagRead
from ..utils.exceptions import NoRecordsError, UnrecognizedPayloadError
from ..utils.validators import TokenValidator

logger = logging.getLogger(__name__)


class CredentialExtractor:
    """Turns a tag read into a Yubikey OTP token."""

    def __init__(self, prefixes: Iterable[str] = DEFAULT_PAYLOAD_URL_PREFIXES):
        self.prefixes = tuple(prefixes)

    def extract(self, tag_read: TagRead) -> str:
        if not tag_read.records:
            raise NoRecordsError("no ndef records present")

        url = tag_read.records[0].payload
        token = TokenValidator.strip_prefix(url, self.prefixes)
        if not token:
            raise UnrecognizedPayloadError(url)

        logger.info("Read token: %s", token)
        return token
