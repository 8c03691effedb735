# =======================================================================================
# yubinuki/main.py - Gatekeeper Entry Point
# =======================================================================================
import argparse
import logging
import signal
import sys
from typing import List, Optional
from . import __version__
from .config import Settings, load_config, settings as default_settings
from .models.schemas import GatekeeperConfig
from .services.access_control import AccessControlService
from .services.credential_extractor import CredentialExtractor
from .services.interfaces import LockController, TagReader, VerificationService
from .services.local_authorizer import LocalAuthorizer
from .services.lock_actuator import LockActuator
from .services.nfc_reader import NfcReader
from .services.remote_verifier import RemoteVerifier, YubicloudVerificationService
from .services.retry_policy import RetryPolicy
from .utils.exceptions import YubiNukiError
from .utils.log import configure_logging
from .workers.access_worker import AccessWorker

logger = logging.getLogger("yubinuki.main")


def create_gatekeeper(cfg: GatekeeperConfig, settings: Settings = default_settings,
                      reader: Optional[TagReader] = None,
                      verification_service: Optional[VerificationService] = None,
                      lock_controller: Optional[LockController] = None) -> AccessWorker:
    """Wire the access loop. Collaborators default to the real NFC/Yubicloud/Nuki adapters."""
    if verification_service is None:
        verification_service = YubicloudVerificationService(
            cfg.yubicloud_client_id, cfg.yubicloud_secret_key, timeout=settings.VERIFY_TIMEOUT
        )
    if lock_controller is None:
        lock_controller = LockActuator.from_config(cfg, timeout=settings.ACTUATE_TIMEOUT)
    if reader is None:
        reader = NfcReader(settings.NFC_DEVICE).open()

    access_service = AccessControlService(
        reader=reader,
        extractor=CredentialExtractor(cfg.payload_url_prefixes),
        authorizer=LocalAuthorizer(cfg.authorized_yubikeys),
        verifier=RemoteVerifier(verification_service),
        actuator=lock_controller,
    )
    return AccessWorker(access_service, RetryPolicy.from_settings(settings))


def parse_args(argv: Optional[List[str]] = None, settings: Settings = default_settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="yubinuki", description="Open a Nuki lock with a Yubikey over NFC")
    parser.add_argument("--config", default=settings.CONFIG_PATH, help="Path to config file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        configure_logging(default_settings)
        cfg = load_config(args.config)
        worker = create_gatekeeper(cfg)
    except YubiNukiError as e:
        logger.error("Startup failed: %s", e)
        return 1

    def _handle_sigterm(signum, frame):
        logger.info("Received signal %s, stopping after current cycle", signum)
        worker.stop()

    signal.signal(signal.SIGTERM, _handle_sigterm)

    reader = worker.access_service.reader
    logger.info("YubiNuki %s running with %d authorized keys", __version__, len(cfg.authorized_yubikeys))
    try:
        worker.run_forever()
    except KeyboardInterrupt:
        worker.stop()
        logger.info("Interrupted, exiting")
    finally:
        close = getattr(reader, "close", None)
        if close is not None:
            close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
