"""NMEA sentence parsing and a GPS receiver on a serial-like stream."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

SENTENCE_LIMIT = 127
MAX_FIELDS = 15
READ_SIZE = 127
DETECT_ATTEMPTS = 30

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


@dataclass(frozen=True)
class GpsFix:
    """A position in decimal degrees, with the satellite count if reported."""

    latitude: float
    longitude: float
    satellites: Optional[int] = None


def _fields(sentence: str) -> list[str]:
    # Empty fields are skipped, so later fields shift left.
    text = sentence[:SENTENCE_LIMIT]
    return [field for field in text.split(",") if field][:MAX_FIELDS]


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _to_degrees(value: float) -> float:
    degrees = int(value / 100)
    minutes = value - degrees * 100
    return degrees + minutes / 60.0


def parse_rmc(sentence: str) -> Optional[datetime]:
    """Return the UTC time carried by an RMC sentence, or None."""
    fields = _fields(sentence)
    if len(fields) < 10:
        return None
    time_str, date_str = fields[1], fields[9]
    if len(time_str) < 6 or len(date_str) != 6:
        return None
    if not time_str[:6].isdigit() or not date_str.isdigit():
        return None
    try:
        return datetime(
            2000 + int(date_str[4:6]),
            int(date_str[2:4]),
            int(date_str[0:2]),
            int(time_str[0:2]),
            int(time_str[2:4]),
            int(time_str[4:6]),
            tzinfo=timezone.utc,
        )
    except ValueError:
        return None


def parse_gga(sentence: str) -> Optional[GpsFix]:
    """Return the position from a GGA sentence, or None without a fix."""
    fields = _fields(sentence)
    if len(fields) < 7:
        return None
    if fields[6].startswith("0"):
        return None
    latitude = _to_degrees(_atof(fields[2]))
    if fields[3].startswith("S"):
        latitude = -latitude
    longitude = _to_degrees(_atof(fields[4]))
    if fields[5].startswith("W"):
        longitude = -longitude
    satellites = _atoi(fields[7]) if len(fields) > 7 else None
    return GpsFix(latitude, longitude, satellites)


def contains_gps_talker(data: Union[bytes, str]) -> bool:
    """True if the data holds a GPS talker sentence start."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("latin-1")
    return "$GP" in data


class GpsReceiver:
    """GPS module reached through a binary stream with read() and write()."""

    def __init__(self, stream) -> None:
        self._stream = stream
        self.enabled = False
        self.fix: Optional[GpsFix] = None
        self.time: Optional[datetime] = None

    @property
    def fix_valid(self) -> bool:
        return self.fix is not None

    def _read(self) -> bytes:
        return self._stream.read(READ_SIZE) or b""

    def detect(self, attempts: int = DETECT_ATTEMPTS) -> bool:
        """Look for GPS output over a number of reads; enables the receiver if found."""
        self.enabled = any(contains_gps_talker(self._read()) for _ in range(attempts))
        return self.enabled

    def send_command(self, command: str) -> None:
        """Send one command line to the module."""
        self._stream.write(command.encode("ascii") + b"\r\n")

    def feed(self, data: Union[bytes, str]) -> None:
        """Process a block of received text, updating fix and time."""
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("latin-1")
        for line in filter(None, re.split(r"[\r\n]+", data)):
            if "GGA" in line:
                self.fix = parse_gga(line)
            elif "RMC" in line and "*" in line:
                stamp = parse_rmc(line)
                if stamp is not None:
                    self.time = stamp

    def poll(self) -> None:
        """Read whatever is waiting and process it, if the receiver is enabled."""
        if not self.enabled:
            return
        data = self._read()
        if data:
            self.feed(data)