"""Text tables for scan results and memory usage."""

from __future__ import annotations

from typing import Iterable, Optional

from .models import AccessPoint, format_mac
from .nmea import GpsFix

_SEPARATOR = "|---------------------------|------|-------|--------|------|-------------------|------------|"
_GPS_SEPARATOR = _SEPARATOR + "--------------|--------------|---------|"


def sort_by_rssi(access_points: Iterable[AccessPoint]) -> list[AccessPoint]:
    """Strongest signal first."""
    return sorted(access_points, key=lambda ap: ap.rssi, reverse=True)


def format_results(
    access_points: Iterable[AccessPoint],
    gps_enabled: bool = False,
    fix: Optional[GpsFix] = None,
) -> str:
    """Render the result table, with position columns when GPS is enabled."""
    header = (
        f"| {'SSID':<25} | {'Band':<4} | {'Chan':<5} | {'RSSI':<6} | {'Cli':<4} "
        f"| {'BSSID':<17} | {'Security':<10} |"
    )
    if gps_enabled:
        header += f" {'Latitude':<12} | {'Longitude':<12} | {'GPS Fix':<7} |"
    lines = ["", header, _GPS_SEPARATOR if gps_enabled else _SEPARATOR]

    if fix is not None:
        lat, lon, status = f"{fix.latitude:.5f}", f"{fix.longitude:.5f}", "OK"
    else:
        lat, lon, status = "No fix", "No fix", "NOFIX"

    for ap in access_points:
        row = (
            f"| {ap.ssid:<25} | {ap.band():<4} | {ap.channel:<5} | {ap.rssi:<6} "
            f"| {ap.client_count:<4} | {format_mac(ap.bssid)} | {ap.authmode.label():<10} |"
        )
        if gps_enabled:
            row += f" {lat:<12} | {lon:<12} | {status:<7} |"
        lines.append(row)
    return "\n".join(lines) + "\n"


def format_memory(used: int, total: int) -> str:
    """One-line memory usage summary."""
    if total <= 0:
        raise ValueError("total memory must be positive")
    percent = used / total * 100.0
    return f"Memory: used {used} / {total} bytes ({percent:.1f}% used)"