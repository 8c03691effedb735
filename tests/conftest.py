import pytest
from yubinuki.models.schemas import LockCommandResult, NdefRecord, TagRead
from yubinuki.services.access_control import AccessControlService
from yubinuki.services.credential_extractor import CredentialExtractor
from yubinuki.services.local_authorizer import LocalAuthorizer
from yubinuki.services.remote_verifier import RemoteVerifier
from yubinuki.utils.exceptions import NoTargetDetected

YUBICO_PREFIX = "https://my.yubico.com/neo/"
KEY_ID = "cccccccccccc"
OTP = KEY_ID + "v" * 32


class FakeReader:
    """Returns queued results in order; exceptions are raised."""

    def __init__(self, *results):
        self.results = list(results)
        self.polls = 0

    def poll(self):
        self.polls += 1
        if not self.results:
            raise NoTargetDetected("no targets detected")
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class FakeVerificationService:
    def __init__(self, valid=True, error=None):
        self.valid = valid
        self.error = error
        self.calls = []

    def verify(self, token):
        self.calls.append(token)
        if self.error is not None:
            raise self.error
        return self.valid


class FakeLockController:
    def __init__(self, success=True, battery_critical=False, error=None):
        self.success = success
        self.battery_critical = battery_critical
        self.error = error
        self.calls = 0

    def send_unlock(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return LockCommandResult(success=self.success, battery_critical=self.battery_critical)


def tag_read(payload):
    return TagRead(records=[NdefRecord(type="urn:nfc:wkt:U", payload=payload)])


def build_service(reader, allow_list=(KEY_ID,), verification=None, lock=None):
    return AccessControlService(
        reader=reader,
        extractor=CredentialExtractor([YUBICO_PREFIX]),
        authorizer=LocalAuthorizer(allow_list),
        verifier=RemoteVerifier(verification or FakeVerificationService()),
        actuator=lock or FakeLockController(),
    )


@pytest.fixture
def yubikey_tag():
    return tag_read(YUBICO_PREFIX + OTP)
