"""Bridge configuration record. All times are UTC."""

from typing import Any

from pydantic import Field, field_validator

from huelink import codec
from huelink._internal.model import HueModel


class WhitelistEntry(HueModel):
    """An application registered with the bridge through pairing."""

    last_use_date: str = Field(alias="last use date")
    create_date: str = Field(alias="create date")
    name: str


class Config(HueModel):
    """Full configuration of the bridge from ``GET /config``."""

    # uPnP name of the bridge, after any conflicts were resolved
    name: str
    # 11, 15, 20 or 25; 0 when factory new
    zigbee_channel: int = Field(alias="zigbeechannel")
    bridge_id: str = Field(alias="bridgeid")
    is_dhcp: bool = Field(alias="dhcp")
    ip_address: str = Field(alias="ipaddress")
    # BSB001 or BSB002
    model_id: str = Field(alias="modelid")
    api_version: str = Field(alias="apiversion")
    # keyed by username
    whitelist: codec.KeyedCollection[WhitelistEntry] = Field(default_factory=dict)

    @field_validator("whitelist", mode="before")
    @classmethod
    def _decode_whitelist(cls, value: Any) -> codec.KeyedCollection[WhitelistEntry]:
        return codec.decode_keyed(value, WhitelistEntry)
