# =======================================================================================
# yubinuki/models/enums.py - Enums and Constants
# =======================================================================================
from enum import Enum

class OutcomeKind(Enum):
    """Every way a single access cycle can end."""
    NO_TARGET = "NO_TARGET"
    READ_FAILED = "READ_FAILED"
    UNAUTHORIZED = "UNAUTHORIZED"
    VERIFICATION_FAILED = "VERIFICATION_FAILED"
    VERIFICATION_ERROR = "VERIFICATION_ERROR"
    ACTUATION_FAILED = "ACTUATION_FAILED"
    OPENED = "OPENED"

class PauseKind(Enum):
    """Pause classes between cycles."""
    POLL = "POLL"        # nothing presented, poll again quickly
    BACKOFF = "BACKOFF"  # cycle failed, throttle external services
    SETTLE = "SETTLE"    # door opened, let the user withdraw the key

class LockAction(Enum):
    """Nuki bridge lockAction codes."""
    UNLATCH = 3
