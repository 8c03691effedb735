# =======================================================================================
# yubinuki/services/nfc_reader.py - nfcpy Tag Reader
# =======================================================================================
import logging
from typing import List, Optional
from ..models.schemas import NdefRecord, TagRead
from ..utils.exceptions import NoTargetDetected, ReaderError, ReaderUnavailableError

try:
    import nfc
    from nfc.clf import RemoteTarget
except ImportError:
    nfc = None
    RemoteTarget = None

logger = logging.getLogger(__name__)


class NfcReader:
    """
    TagReader backed by an nfcpy ContactlessFrontend.

    Each poll senses once for an ISO 14443-A target (Yubikey NEO / 5 NFC) and
    returns its NDEF records. The frontend stays open between polls.
    """

    def __init__(self, device_path: str = "usb", sense_interval: float = 0.1):
        self.device_path = device_path
        self.sense_interval = sense_interval
        self._clf = None

    # ------------------------------------------------------------------
    # Open / Close
    # ------------------------------------------------------------------
    def open(self) -> "NfcReader":
        if nfc is None:
            raise ReaderUnavailableError("nfcpy not installed; cannot open NFC reader")
        try:
            self._clf = nfc.ContactlessFrontend(self.device_path)
        except (IOError, OSError) as e:
            raise ReaderUnavailableError(f"cannot open NFC device {self.device_path!r}: {e}") from e
        logger.info("NFC reader open: %s", self._clf)
        return self

    def close(self) -> None:
        if self._clf is not None:
            self._clf.close()
            self._clf = None

    def __enter__(self) -> "NfcReader":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------------
    def poll(self) -> TagRead:
        if self._clf is None:
            raise ReaderError("NFC reader is not open")

        try:
            target = self._clf.sense(RemoteTarget("106A"), iterations=1, interval=self.sense_interval)
            if target is None:
                raise NoTargetDetected("no targets detected")
            tag = nfc.tag.activate(self._clf, target)
            if tag is None:
                raise ReaderError("tag could not be activated")
            return TagRead(records=self._records(tag), uid=self._uid(tag))
        except ReaderError:
            raise
        except Exception as e:
            raise ReaderError(f"NFC read failed: {e}") from e

    @staticmethod
    def _records(tag) -> List[NdefRecord]:
        ndef = getattr(tag, "ndef", None)
        if ndef is None:
            return []

        records = []
        for record in ndef.records:
            uri = getattr(record, "uri", None)
            if uri is not None:
                payload = uri
            else:
                payload = bytes(getattr(record, "data", b"")).decode("utf-8", errors="replace")
            records.append(NdefRecord(type=str(getattr(record, "type", "")), payload=payload))
        return records

    @staticmethod
    def _uid(tag) -> Optional[str]:
        identifier = getattr(tag, "identifier", None)
        return identifier.hex() if identifier else None
