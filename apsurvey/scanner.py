"""Scan, sniff and report loop over an abstract radio."""

from __future__ import annotations

import abc
import dataclasses
import itertools
import time
from typing import Callable, Iterable, Optional

from .clients import ClientTracker
from .models import AccessPoint
from .nmea import GpsReceiver
from .report import format_results, sort_by_rssi

MAX_APS = 10
MAX_CLIENTS = 10
SNIFF_TIME = 3.0
SCAN_INTERVAL = 60.0


class Radio(abc.ABC):
    """The Wi-Fi interface the scanner drives."""

    @abc.abstractmethod
    def scan(self) -> Iterable[AccessPoint]:
        """Run an active scan and return the networks found."""

    @abc.abstractmethod
    def set_promiscuous(self, enabled: bool) -> None:
        """Turn capture of foreign frames on or off."""

    @abc.abstractmethod
    def sniff(self, channel: int, duration: float) -> Iterable[bytes]:
        """Listen on a channel for a while and return the data frames captured."""


class Scanner:
    """Finds access points, counts their clients and reports the results."""

    def __init__(
        self,
        radio: Radio,
        gps: Optional[GpsReceiver] = None,
        max_aps: int = MAX_APS,
        max_clients: int = MAX_CLIENTS,
        retain_clients: bool = True,
        sort_by_rssi: bool = True,
    ) -> None:
        self.radio = radio
        self.gps = gps
        self.max_aps = max_aps
        self.retain_clients = retain_clients
        self.sort_by_rssi = sort_by_rssi
        self.tracker = ClientTracker(max_clients)
        self.access_points: list[AccessPoint] = []

    def scan_once(self) -> list[AccessPoint]:
        """Scan and replace the current list of access points."""
        if self.gps is not None:
            self.gps.poll()
        self.radio.set_promiscuous(False)
        found = itertools.islice(self.radio.scan(), self.max_aps)
        points = []
        for slot, record in enumerate(found):
            if not self.retain_clients:
                self.tracker.reset(slot)
            points.append(
                dataclasses.replace(record, client_count=self.tracker.count(slot))
            )
        self.access_points = points
        return points

    def sniff_clients(self, duration: float = SNIFF_TIME) -> None:
        """Listen on each access point's channel and record the clients seen."""
        self.radio.set_promiscuous(True)
        try:
            for ap in list(self.access_points):
                for frame in self.radio.sniff(ap.channel, duration):
                    self.tracker.observe(frame, self.access_points)
        finally:
            self.radio.set_promiscuous(False)

    def report(self) -> str:
        """Result table; sorts the access points first when configured to."""
        if self.sort_by_rssi and len(self.access_points) > 1:
            self.access_points[:] = sort_by_rssi(self.access_points)
        gps_enabled = self.gps is not None and self.gps.enabled
        fix = self.gps.fix if self.gps is not None else None
        return format_results(self.access_points, gps_enabled, fix)

    def cycle(self, sniff_time: float = SNIFF_TIME) -> str:
        """One full scan, sniff and report pass."""
        self.scan_once()
        self.sniff_clients(sniff_time)
        return self.report()

    def run(
        self,
        cycles: Optional[int] = None,
        sniff_time: float = SNIFF_TIME,
        interval: float = SCAN_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Repeat cycles, printing each report; forever when cycles is None."""
        passes = itertools.count() if cycles is None else range(cycles)
        for _ in passes:
            print(self.cycle(sniff_time), end="")
            print(f"Next scan in {int(interval)} seconds...")
            sleep(interval)