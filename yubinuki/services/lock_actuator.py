# =======================================================================================
# yubinuki/services/lock_actuator.py - Nuki Bridge Lock Actuation
# =======================================================================================
import logging
from typing import Any, Dict, Optional
import requests
from pydantic import ValidationError
from ..models.enums import LockAction
from ..models.schemas import GatekeeperConfig, LockCommandResult
from ..utils.exceptions import ActuationTransportError, MalformedResponseError

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 10


class LockActuator:
    """
    Sends an unlatch command to the Nuki bridge HTTP API.

    One request per call; no retries here. A failed command surfaces to the
    access loop, which owns re-attempt timing.
    """

    def __init__(self, bridge_addr: str, bridge_token: str, lock_id: str,
                 timeout: float = _DEFAULT_TIMEOUT, session: Optional[requests.Session] = None):
        self.bridge_addr = bridge_addr
        self.bridge_token = bridge_token
        self.lock_id = lock_id
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, cfg: GatekeeperConfig, timeout: float = _DEFAULT_TIMEOUT,
                    session: Optional[requests.Session] = None) -> "LockActuator":
        return cls(cfg.nuki_bridge_addr, cfg.nuki_bridge_token, cfg.nuki_lock_id,
                   timeout=timeout, session=session)

    @property
    def url(self) -> str:
        return f"http://{self.bridge_addr}/lockAction"

    def build_params(self) -> Dict[str, Any]:
        return {
            "nukiId": self.lock_id,
            "noWait": "0",
            "action": str(LockAction.UNLATCH.value),
            "token": self.bridge_token,
        }

    def send_unlock(self) -> LockCommandResult:
        try:
            resp = self.session.get(self.url, params=self.build_params(), timeout=self.timeout)
            resp.raise_for_status()
            body = resp.content
        except requests.RequestException as e:
            raise ActuationTransportError(f"lockAction request failed: {e}") from e

        try:
            result = LockCommandResult.model_validate_json(body)
        except ValidationError as e:
            raise MalformedResponseError(f"cannot decode lockAction response: {body[:200]!r}") from e

        if result.battery_critical:
            logger.warning("Nuki lock %s reports critical battery", self.lock_id)
        logger.debug("lockAction response: success=%s batteryCritical=%s",
                     result.success, result.battery_critical)
        return result
