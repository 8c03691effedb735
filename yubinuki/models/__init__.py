# =======================================================================================
# yubinuki/models/__init__.py - Models Package
# =======================================================================================
from .schemas import *
from .enums import *
from .outcomes import *

__all__ = [
    "GatekeeperConfig", "NdefRecord", "TagRead", "LockCommandResult",
    "DEFAULT_PAYLOAD_URL_PREFIXES", "OutcomeKind",
    "PauseKind", "LockAction", "CycleOutcome",
]
