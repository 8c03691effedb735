import logging
import pytest
from yubinuki.models.enums import OutcomeKind, PauseKind
from yubinuki.models.outcomes import CycleOutcome
from yubinuki.services.retry_policy import PAUSE_FOR_OUTCOME, RetryPolicy
from yubinuki.utils.exceptions import ActuationTransportError, VerificationTransportError
from yubinuki.workers.access_worker import AccessWorker

from conftest import (
    KEY_ID,
    FakeLockController,
    FakeReader,
    FakeVerificationService,
    build_service,
)


@pytest.fixture
def policy():
    return RetryPolicy(wait_no_target=0.4, wait_error=5.0, wait_settle=10.0)


def test_every_outcome_has_a_pause(policy):
    assert set(PAUSE_FOR_OUTCOME) == set(OutcomeKind)
    for kind in OutcomeKind:
        assert policy.delay_for(CycleOutcome(kind)) > 0


def test_unreachable_and_denied_share_backoff(policy):
    denied = CycleOutcome(OutcomeKind.VERIFICATION_FAILED)
    unreachable = CycleOutcome(OutcomeKind.VERIFICATION_ERROR)
    assert policy.pause_kind(denied) is policy.pause_kind(unreachable) is PauseKind.BACKOFF


def test_no_target_polls_quickly_without_failure_log(policy, caplog):
    caplog.set_level(logging.DEBUG, logger="yubinuki")
    worker = AccessWorker(build_service(FakeReader()), policy)

    outcome, delay = worker.run_once()

    assert outcome.kind is OutcomeKind.NO_TARGET
    assert delay == 0.4
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert not [r for r in caplog.records if r.name == "yubinuki.audit"]


def test_successful_open_settles(policy, caplog, yubikey_tag):
    caplog.set_level(logging.INFO, logger="yubinuki")
    lock = FakeLockController(success=True, battery_critical=False)
    worker = AccessWorker(build_service(FakeReader(yubikey_tag), lock=lock), policy)

    outcome, delay = worker.run_once()

    assert outcome.kind is OutcomeKind.OPENED
    assert delay == 10.0
    audit = [r.getMessage() for r in caplog.records if r.name == "yubinuki.audit"]
    assert audit == [f"OPENED identity={KEY_ID} success=True batteryCritical=False"]


def test_unsuccessful_open_is_logged_as_warning_but_settles(policy, caplog, yubikey_tag):
    caplog.set_level(logging.INFO, logger="yubinuki")
    worker = AccessWorker(build_service(FakeReader(yubikey_tag), lock=FakeLockController(success=False)), policy)

    outcome, delay = worker.run_once()

    assert delay == 10.0
    assert any(r.levelno == logging.WARNING and "success=false" in r.getMessage() for r in caplog.records)


def test_actuation_network_error_backs_off_then_starts_fresh(policy, caplog, yubikey_tag):
    caplog.set_level(logging.INFO, logger="yubinuki")
    lock = FakeLockController(error=ActuationTransportError("connection refused"))
    reader = FakeReader(yubikey_tag)
    worker = AccessWorker(build_service(reader, lock=lock), policy)

    outcome, delay = worker.run_once()
    assert outcome.kind is OutcomeKind.ACTUATION_FAILED
    assert delay == 5.0
    assert any("connection refused" in r.getMessage() for r in caplog.records if r.name == "yubinuki.audit")

    outcome, delay = worker.run_once()
    assert outcome.kind is OutcomeKind.NO_TARGET
    assert reader.polls == 2
    assert lock.calls == 1


def test_unauthorized_is_audited_with_identity(policy, caplog, yubikey_tag):
    caplog.set_level(logging.INFO, logger="yubinuki")
    worker = AccessWorker(build_service(FakeReader(yubikey_tag), allow_list=[]), policy)

    outcome, delay = worker.run_once()

    assert delay == 5.0
    audit = [r.getMessage() for r in caplog.records if r.name == "yubinuki.audit"]
    assert len(audit) == 1
    assert audit[0].startswith(f"UNAUTHORIZED identity={KEY_ID}")


def test_verification_error_backs_off(policy, yubikey_tag):
    verification = FakeVerificationService(error=VerificationTransportError("no answer"))
    worker = AccessWorker(build_service(FakeReader(yubikey_tag), verification=verification), policy)
    outcome, delay = worker.run_once()
    assert outcome.kind is OutcomeKind.VERIFICATION_ERROR
    assert delay == 5.0


class StoppingReader(FakeReader):
    """Stops the worker once the queued reads are used up."""

    def __init__(self, worker_ref, *results):
        super().__init__(*results)
        self.worker_ref = worker_ref

    def poll(self):
        if not self.results:
            self.worker_ref[0].stop()
        return super().poll()


def test_run_forever_stops_at_cycle_boundary(yubikey_tag):
    worker_ref = []
    lock = FakeLockController()
    reader = StoppingReader(worker_ref, yubikey_tag)
    worker = AccessWorker(build_service(reader, lock=lock), RetryPolicy(0.0, 0.0, 0.0))
    worker_ref.append(worker)

    worker.run_forever()

    assert worker.running is False
    assert reader.polls == 2
    assert lock.calls == 1


def test_loop_survives_unexpected_errors(caplog):
    caplog.set_level(logging.ERROR, logger="yubinuki")
    worker_ref = []

    class ExplodingReader(StoppingReader):
        def poll(self):
            if self.polls == 0:
                self.polls += 1
                raise RuntimeError("driver bug")
            return super().poll()

    reader = ExplodingReader(worker_ref)
    worker = AccessWorker(build_service(reader), RetryPolicy(0.0, 0.0, 0.0))
    worker_ref.append(worker)

    worker.run_forever()

    assert reader.polls == 2
    assert any("Unexpected error" in r.getMessage() for r in caplog.records)


def test_background_thread_start_and_stop():
    worker = AccessWorker(build_service(FakeReader()), RetryPolicy(0.01, 0.01, 0.01))
    worker.start()
    worker.stop()
    worker.join(timeout=2)
    assert worker.running is False
