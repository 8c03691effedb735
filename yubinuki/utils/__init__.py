# =======================================================================================
# yubinuki/utils/__init__.py - Utils Package
# =======================================================================================
from .exceptions import *
from .validators import *

__all__ = [
    "YubiNukiError", "ConfigError", "ReaderUnavailableError", "ReaderError",
    "NoTargetDetected", "CredentialError", "NoRecordsError", "UnrecognizedPayloadError",
    "VerificationTransportError", "ActuationError", "ActuationTransportError",
    "MalformedResponseError", "TokenValidator", "OTP_SUFFIX_LENGTH",
]
