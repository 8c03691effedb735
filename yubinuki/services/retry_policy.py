# =======================================================================================
# yubinuki/services/retry_policy.py - Pause Selection Between Cycles
# =======================================================================================
from typing import Dict, Mapping
from ..models.enums import OutcomeKind, PauseKind
from ..models.outcomes import CycleOutcome

# Every outcome kind maps to exactly one pause class
PAUSE_FOR_OUTCOME: Mapping[OutcomeKind, PauseKind] = {
    OutcomeKind.NO_TARGET: PauseKind.POLL,
    OutcomeKind.READ_FAILED: PauseKind.BACKOFF,
    OutcomeKind.UNAUTHORIZED: PauseKind.BACKOFF,
    OutcomeKind.VERIFICATION_FAILED: PauseKind.BACKOFF,
    OutcomeKind.VERIFICATION_ERROR: PauseKind.BACKOFF,
    OutcomeKind.ACTUATION_FAILED: PauseKind.BACKOFF,
    OutcomeKind.OPENED: PauseKind.SETTLE,
}


class RetryPolicy:
    """Decides how long the worker pauses after a cycle."""

    def __init__(self, wait_no_target: float = 0.4, wait_error: float = 5.0,
                 wait_settle: float = 10.0):
        self.pauses: Dict[PauseKind, float] = {
            PauseKind.POLL: wait_no_target,
            PauseKind.BACKOFF: wait_error,
            PauseKind.SETTLE: wait_settle,
        }
        missing = set(OutcomeKind) - set(PAUSE_FOR_OUTCOME)
        if missing:
            raise ValueError(f"no pause defined for outcomes: {sorted(k.value for k in missing)}")

    @classmethod
    def from_settings(cls, settings) -> "RetryPolicy":
        return cls(settings.WAIT_NO_TARGET, settings.WAIT_ERROR, settings.WAIT_SETTLE)

    def pause_kind(self, outcome: CycleOutcome) -> PauseKind:
        return PAUSE_FOR_OUTCOME[outcome.kind]

    def delay_for(self, outcome: CycleOutcome) -> float:
        return self.pauses[self.pause_kind(outcome)]
