"""Access point records and the small value types they use."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SSID_MAX_LEN = 32
MAC_LEN = 6
BAND_24_MAX_CHANNEL = 14


class AuthMode(Enum):
    """Authentication mode advertised by an access point."""

    OPEN = 0
    WEP = 1
    WPA_PSK = 2
    WPA2_PSK = 3
    WPA_WPA2_PSK = 4
    WPA2_ENTERPRISE = 5
    WPA3_PSK = 6
    WPA2_WPA3_PSK = 7

    def label(self) -> str:
        """Short name used in reports; unknown modes show as OPEN."""
        return _AUTH_LABELS.get(self, "OPEN")


_AUTH_LABELS = {
    AuthMode.WEP: "WEP",
    AuthMode.WPA_PSK: "WPA",
    AuthMode.WPA2_PSK: "WPA2",
    AuthMode.WPA_WPA2_PSK: "WPA/WPA2",
    AuthMode.WPA3_PSK: "WPA3",
    AuthMode.WPA2_WPA3_PSK: "WPA2/WPA3",
}


@dataclass
class AccessPoint:
    """One network found by a scan."""

    ssid: str
    channel: int
    rssi: int
    bssid: bytes
    authmode: AuthMode = AuthMode.OPEN
    client_count: int = 0

    def __post_init__(self) -> None:
        self.bssid = bytes(self.bssid)
        if len(self.bssid) != MAC_LEN:
            raise ValueError(f"BSSID must be {MAC_LEN} bytes, got {len(self.bssid)}")
        self.ssid = self.ssid[:SSID_MAX_LEN]

    def band(self) -> str:
        """Frequency band derived from the primary channel."""
        return "2.4G" if self.channel <= BAND_24_MAX_CHANNEL else "5G"


def format_mac(mac: bytes) -> str:
    """Format a MAC address as colon-separated upper-case hex."""
    return ":".join(f"{octet:02X}" for octet in bytes(mac))