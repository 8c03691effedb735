# =======================================================================================
# yubinuki/utils/exceptions.py - Custom Exceptions
# =======================================================================================
class YubiNukiError(Exception):
    """Base exception for the YubiNuki gatekeeper."""
    pass

# ---------- Startup (fatal) ----------

class ConfigError(YubiNukiError):
    """Raised when the gatekeeper configuration cannot be loaded."""
    pass

class ReaderUnavailableError(YubiNukiError):
    """Raised when the NFC reader cannot be opened at startup."""
    pass

# ---------- Reading ----------

class ReaderError(YubiNukiError):
    """Raised when the NFC reader malfunctions during a poll."""
    pass

class NoTargetDetected(ReaderError):
    """Raised when no tag is in the reader field. Not a failure."""
    pass

class CredentialError(YubiNukiError):
    """Raised when a tag read does not carry a usable credential."""
    pass

class NoRecordsError(CredentialError):
    """Raised when the tag read produced zero NDEF records."""
    pass

class UnrecognizedPayloadError(CredentialError):
    """Raised when the first record is not a known credential URL."""

    def __init__(self, payload: str):
        super().__init__(f"unknown token url: {payload!r}")
        self.payload = payload

# ---------- Verification ----------

class VerificationTransportError(YubiNukiError):
    """Raised when the issuer service could not determine token validity."""
    pass

# ---------- Actuation ----------

class ActuationError(YubiNukiError):
    """Raised when the lock controller command did not complete."""
    pass

class ActuationTransportError(ActuationError):
    """Raised when the request could not be sent or the response not read."""
    pass

class MalformedResponseError(ActuationError):
    """Raised when the lock controller response cannot be decoded."""
    pass
