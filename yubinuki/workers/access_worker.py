# =======================================================================================
# yubinuki/workers/access_worker.py - Access Control Loop Worker
# =======================================================================================
import logging
import threading
from typing import Optional, Tuple
from ..models.enums import OutcomeKind
from ..models.outcomes import CycleOutcome
from ..services.access_control import AccessControlService
from ..services.retry_policy import RetryPolicy
from ..utils.log import get_audit_logger

logger = logging.getLogger(__name__)
audit = get_audit_logger()


class AccessWorker:
    """Runs access cycles back to back until stopped."""

    def __init__(self, access_service: AccessControlService, retry_policy: Optional[RetryPolicy] = None):
        self.access_service = access_service
        self.retry_policy = retry_policy or RetryPolicy()
        self.running = False
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Start / Stop
    # ------------------------------------------------------------------
    def start(self) -> threading.Thread:
        """Start the loop in a background thread."""
        self._stop_event.clear()
        self.running = True
        self._thread = threading.Thread(target=self._run_loop, name="yubinuki-access", daemon=True)
        self._thread.start()
        logger.info("Access worker started")
        return self._thread

    def stop(self) -> None:
        """Stop after the current cycle; an in-flight call is never interrupted."""
        self.running = False
        self._stop_event.set()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def run_forever(self) -> None:
        """Run the loop in the calling thread until stop() is called."""
        self._stop_event.clear()
        self.running = True
        self._run_loop()

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def _run_loop(self) -> None:
        while self.running and not self._stop_event.is_set():
            try:
                _, delay = self.run_once()
            except Exception:
                logger.exception("Unexpected error in access cycle")
                delay = self.retry_policy.delay_for(CycleOutcome.read_failed("unexpected error"))
            # wait() returns early on stop(), so shutdown is prompt between cycles
            self._stop_event.wait(delay)
        self.running = False
        logger.info("Access worker stopped")

    def run_once(self) -> Tuple[CycleOutcome, float]:
        """Run exactly one cycle and report it. Returns (outcome, pause in seconds)."""
        outcome = self.access_service.run_cycle()
        delay = self.retry_policy.delay_for(outcome)
        self._report(outcome, delay)
        return outcome, delay

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------
    def _report(self, outcome: CycleOutcome, delay: float) -> None:
        if outcome.kind is OutcomeKind.NO_TARGET:
            logger.debug("No tag present, polling again in %.1fs", delay)
            return

        if outcome.kind is OutcomeKind.OPENED:
            result = outcome.lock_result
            audit.info("OPENED identity=%s success=%s batteryCritical=%s",
                       outcome.identity, result.success, result.battery_critical)
            if not result.success:
                logger.warning("Nuki bridge accepted the command but reported success=false")
            logger.info("Opened door. Success: %s. Settling for %.1fs", result.success, delay)
            return

        audit.info("%s identity=%s reason=%s", outcome.kind.value, outcome.identity, outcome.reason)
        logger.warning("%s, retrying in %.1fs", outcome.reason, delay)
