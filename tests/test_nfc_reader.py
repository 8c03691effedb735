import types
import pytest
from yubinuki.services import nfc_reader
from yubinuki.services.nfc_reader import NfcReader
from yubinuki.utils.exceptions import NoTargetDetected, ReaderError, ReaderUnavailableError

from conftest import OTP, YUBICO_PREFIX


class FakeUriRecord:
    type = "urn:nfc:wkt:U"

    def __init__(self, uri):
        self.uri = uri


class FakeTextRecord:
    type = "urn:nfc:wkt:T"
    data = b"hello"


class FakeTag:
    def __init__(self, records=None, identifier=b"\x04\xaa\xbb"):
        self.ndef = types.SimpleNamespace(records=records) if records is not None else None
        self.identifier = identifier


class FakeFrontend:
    def __init__(self, path, target=object(), tag=None, sense_error=None):
        self.path = path
        self.target = target
        self.tag = tag
        self.sense_error = sense_error
        self.closed = False

    def sense(self, *targets, iterations=1, interval=0.1):
        if self.sense_error is not None:
            raise self.sense_error
        return self.target

    def close(self):
        self.closed = True


@pytest.fixture
def fake_nfc(monkeypatch):
    state = types.SimpleNamespace(frontend=None)

    def activate(clf, target):
        return clf.tag

    fake = types.SimpleNamespace(
        ContactlessFrontend=lambda path: state.frontend,
        tag=types.SimpleNamespace(activate=activate),
    )
    monkeypatch.setattr(nfc_reader, "nfc", fake)
    monkeypatch.setattr(nfc_reader, "RemoteTarget", lambda brty: brty)
    return state


def test_missing_library_is_unavailable(monkeypatch):
    monkeypatch.setattr(nfc_reader, "nfc", None)
    with pytest.raises(ReaderUnavailableError):
        NfcReader().open()


def test_device_open_failure_is_unavailable(monkeypatch):
    def fail(path):
        raise IOError("no such device")

    monkeypatch.setattr(nfc_reader, "nfc", types.SimpleNamespace(ContactlessFrontend=fail))
    with pytest.raises(ReaderUnavailableError):
        NfcReader("usb:072f:2200").open()


def test_poll_returns_uri_records(fake_nfc):
    fake_nfc.frontend = FakeFrontend("usb", tag=FakeTag([FakeUriRecord(YUBICO_PREFIX + OTP), FakeTextRecord()]))
    with NfcReader() as reader:
        read = reader.poll()
    assert [r.payload for r in read.records] == [YUBICO_PREFIX + OTP, "hello"]
    assert read.uid == "04aabb"
    assert fake_nfc.frontend.closed


def test_no_target(fake_nfc):
    fake_nfc.frontend = FakeFrontend("usb", target=None)
    reader = NfcReader().open()
    with pytest.raises(NoTargetDetected):
        reader.poll()


def test_tag_without_ndef_has_no_records(fake_nfc):
    fake_nfc.frontend = FakeFrontend("usb", tag=FakeTag(records=None))
    assert NfcReader().open().poll().records == []


def test_activation_failure(fake_nfc):
    fake_nfc.frontend = FakeFrontend("usb", tag=None)
    with pytest.raises(ReaderError) as exc_info:
        NfcReader().open().poll()
    assert not isinstance(exc_info.value, NoTargetDetected)


def test_driver_error_is_reader_error(fake_nfc):
    fake_nfc.frontend = FakeFrontend("usb", sense_error=IOError("usb transfer failed"))
    with pytest.raises(ReaderError):
        NfcReader().open().poll()


def test_poll_before_open():
    with pytest.raises(ReaderError):
        NfcReader().poll()
