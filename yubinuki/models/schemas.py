# =======================================================================================
# yubinuki/models/schemas.py - Pydantic Models
# =======================================================================================
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictBool

DEFAULT_PAYLOAD_URL_PREFIXES = ["https://my.yubico.com/neo/"]

# ========== Gatekeeper configuration file ==========

class GatekeeperConfig(BaseModel):
    """Static gatekeeper configuration, read once from the JSON config file."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    nuki_bridge_addr: str = Field(..., alias="NukiBridgeAddr", description="host[:port] of the Nuki bridge")
    nuki_bridge_token: str = Field(..., alias="NukiBridgeToken", description="Nuki bridge API token")
    nuki_lock_id: str = Field(..., alias="NukiLockID", description="nukiId of the lock to unlatch")
    authorized_yubikeys: List[str] = Field(..., alias="AuthorizedYubikeys", description="Allowed Yubikey public ids")
    yubicloud_client_id: str = Field(..., alias="YubicloudClientID", description="Yubicloud API client id")
    yubicloud_secret_key: str = Field(..., alias="YubicloudSecretKey", description="Yubicloud API secret key (base64)")
    payload_url_prefixes: List[str] = Field(
        default_factory=lambda: list(DEFAULT_PAYLOAD_URL_PREFIXES),
        alias="PayloadURLPrefixes",
        description="Accepted credential URL prefixes",
    )

# ========== Tag reads ==========

class NdefRecord(BaseModel):
    """A single NDEF record as seen by the gatekeeper."""
    type: str = ""
    payload: str = ""

class TagRead(BaseModel):
    """Result of one successful reader poll."""
    records: List[NdefRecord] = Field(default_factory=list)
    uid: Optional[str] = None

# ========== Lock controller ==========

class LockCommandResult(BaseModel):
    """Decoded Nuki bridge lockAction response."""
    model_config = ConfigDict(populate_by_name=True)

    success: StrictBool
    battery_critical: StrictBool = Field(..., alias="batteryCritical")
