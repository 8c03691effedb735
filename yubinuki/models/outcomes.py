# =======================================================================================
# yubinuki/models/outcomes.py - Cycle Outcomes
# =======================================================================================
from dataclasses import dataclass
from typing import Optional
from .enums import OutcomeKind
from .schemas import LockCommandResult


@dataclass(frozen=True)
class CycleOutcome:
    """
    How one access cycle ended.

    Created fresh per cycle and handed to the worker for logging and pause
    selection. Nothing in here outlives the cycle.
    """
    kind: OutcomeKind
    token: Optional[str] = None
    identity: Optional[str] = None
    reason: Optional[str] = None
    lock_result: Optional[LockCommandResult] = None

    @property
    def is_failure(self) -> bool:
        return self.kind not in (OutcomeKind.NO_TARGET, OutcomeKind.OPENED)

    # ---------- constructors ----------

    @classmethod
    def no_target(cls) -> "CycleOutcome":
        return cls(OutcomeKind.NO_TARGET)

    @classmethod
    def read_failed(cls, reason: str) -> "CycleOutcome":
        return cls(OutcomeKind.READ_FAILED, reason=reason)

    @classmethod
    def unauthorized(cls, token: str, identity: Optional[str]) -> "CycleOutcome":
        return cls(OutcomeKind.UNAUTHORIZED, token=token, identity=identity,
                   reason=f"unknown token ID for: {token}")

    @classmethod
    def verification_failed(cls, token: str, identity: str) -> "CycleOutcome":
        return cls(OutcomeKind.VERIFICATION_FAILED, token=token, identity=identity,
                   reason=f"BAD YUBIKEY STATUS: {token}")

    @classmethod
    def verification_error(cls, token: str, identity: str, reason: str) -> "CycleOutcome":
        return cls(OutcomeKind.VERIFICATION_ERROR, token=token, identity=identity, reason=reason)

    @classmethod
    def actuation_failed(cls, token: str, identity: str, reason: str) -> "CycleOutcome":
        return cls(OutcomeKind.ACTUATION_FAILED, token=token, identity=identity, reason=reason)

    @classmethod
    def opened(cls, token: str, identity: str, lock_result: LockCommandResult) -> "CycleOutcome":
        return cls(OutcomeKind.OPENED, token=token, identity=identity, lock_result=lock_result)
