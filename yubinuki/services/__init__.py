# =======================================================================================
# yubinuki/services/__init__.py - Services Package
# =======================================================================================
from .access_control import AccessControlService
from .credential_extractor import CredentialExtractor
from .local_authorizer import LocalAuthorizer
from .remote_verifier import RemoteVerifier, YubicloudVerificationService
from .lock_actuator import LockActuator
from .nfc_reader import NfcReader
from .retry_policy import RetryPolicy

__all__ = [
    "AccessControlService", "CredentialExtractor", "LocalAuthorizer", "RemoteVerifier",
    "YubicloudVerificationService", "LockActuator", "NfcReader", "RetryPolicy",
]
