# =======================================================================================
# yubinuki/services/interfaces.py - Collaborator Interfaces
# =======================================================================================
from typing import Protocol
from ..models.schemas import LockCommandResult, TagRead


class TagReader(Protocol):
    def poll(self) -> TagRead:
        """Read the tag in the field. Raises NoTargetDetected when there is none."""
        ...


class VerificationService(Protocol):
    def verify(self, token: str) -> bool:
        """True if valid, False if determined invalid, VerificationTransportError otherwise."""
        ...


class LockController(Protocol):
    def send_unlock(self) -> LockCommandResult:
        """Unlatch the door. Raises ActuationError subclasses on failure."""
        ...
