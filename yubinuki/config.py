# =======================================================================================
# yubinuki/config.py - Configuration Management
# =======================================================================================
import json
import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import ValidationError
from .models.schemas import GatekeeperConfig
from .utils.exceptions import ConfigError

load_dotenv()

def _env_float(name: str, default: float) -> float:
    """Helper to parse float environment variables."""
    v = os.getenv(name)
    try:
        return float(v) if v else default
    except ValueError:
        return default

class Settings:
    # Gatekeeper config file
    CONFIG_PATH: str = os.getenv("YUBINUKI_CONFIG", "yubinuki.json")

    # NFC reader (nfcpy device path)
    NFC_DEVICE: str = os.getenv("NFC_DEVICE", "usb")

    # Pauses between cycles, seconds
    WAIT_NO_TARGET: float = _env_float("WAIT_NO_TARGET", 0.4)
    WAIT_ERROR: float = _env_float("WAIT_ERROR", 5.0)
    WAIT_SETTLE: float = _env_float("WAIT_SETTLE", 10.0)

    # External call timeouts, seconds
    VERIFY_TIMEOUT: float = _env_float("VERIFY_TIMEOUT", 10.0)
    ACTUATE_TIMEOUT: float = _env_float("ACTUATE_TIMEOUT", 10.0)

    # Logging
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE") or None

settings = Settings()


def load_config(path: str) -> GatekeeperConfig:
    """
    Load the gatekeeper JSON config file.

    Any failure here is fatal to startup and surfaces as ConfigError.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"malformed JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"config file {path} must contain a JSON object")

    try:
        return GatekeeperConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"invalid config in {path}: {e}") from e
