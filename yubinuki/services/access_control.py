# =======================================================================================
# yubinuki/services/access_control.py - Core Business Logic
# =======================================================================================
import logging
from .credential_extractor import CredentialExtractor
from .interfaces import LockController, TagReader
from .local_authorizer import LocalAuthorizer
from .remote_verifier import RemoteVerifier
from ..models.outcomes import CycleOutcome
from ..utils.exceptions import (
    ActuationError,
    CredentialError,
    NoTargetDetected,
    ReaderError,
    VerificationTransportError,
)
from ..utils.validators import TokenValidator

logger = logging.getLogger(__name__)


class AccessControlService:
    """
    Runs one access cycle: read -> authorize -> verify -> actuate.

    Every step is blocking. The first failing step ends the cycle and the
    result is returned as a CycleOutcome; nothing is kept between cycles.
    """

    def __init__(self, reader: TagReader, extractor: CredentialExtractor,
                 authorizer: LocalAuthorizer, verifier: RemoteVerifier,
                 actuator: LockController):
        self.reader = reader
        self.extractor = extractor
        self.authorizer = authorizer
        self.verifier = verifier
        self.actuator = actuator

    def read_token(self) -> str:
        """Poll the reader and extract the OTP. Raises NoTargetDetected when idle."""
        tag_read = self.reader.poll()
        return self.extractor.extract(tag_read)

    def run_cycle(self) -> CycleOutcome:
        # Reading
        try:
            token = self.read_token()
        except NoTargetDetected:
            return CycleOutcome.no_target()
        except (ReaderError, CredentialError) as e:
            return CycleOutcome.read_failed(str(e))

        # Authorizing
        identity = TokenValidator.identity_prefix(token)
        if not self.authorizer.authorize(token):
            return CycleOutcome.unauthorized(token, identity)

        # Verifying
        try:
            valid = self.verifier.verify(token)
        except VerificationTransportError as e:
            return CycleOutcome.verification_error(token, identity, str(e))
        if not valid:
            return CycleOutcome.verification_failed(token, identity)

        # Actuating
        try:
            result = self.actuator.send_unlock()
        except ActuationError as e:
            return CycleOutcome.actuation_failed(token, identity, str(e))

        return CycleOutcome.opened(token, identity, result)
