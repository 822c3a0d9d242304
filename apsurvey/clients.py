"""Tracking of client stations seen talking to scanned access points."""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence

from .models import AccessPoint

BSSID_OFFSET = 10
SOURCE_OFFSET = 16
MAC_LEN = 6


class ClientTracker:
    """Distinct client MACs per access point slot, capped per slot."""

    def __init__(self, max_clients: int = 10) -> None:
        self.max_clients = max_clients
        self._clients: defaultdict[int, list[bytes]] = defaultdict(list)

    def observe(self, frame: bytes, access_points: Sequence[AccessPoint]) -> bool:
        """Record the sender of a data frame; True if a new client was added."""
        if len(frame) < SOURCE_OFFSET + MAC_LEN:
            return False
        bssid = bytes(frame[BSSID_OFFSET:BSSID_OFFSET + MAC_LEN])
        source = bytes(frame[SOURCE_OFFSET:SOURCE_OFFSET + MAC_LEN])
        for slot, ap in enumerate(access_points):
            if ap.bssid != bssid:
                continue
            known = self._clients[slot]
            if source in known or len(known) >= self.max_clients:
                return False
            known.append(source)
            ap.client_count = len(known)
            return True
        return False

    def count(self, slot: int) -> int:
        """Number of clients recorded for a slot."""
        return len(self._clients.get(slot, ()))

    def reset(self, slot: int) -> None:
        """Forget the clients of a slot."""
        self._clients.pop(slot, None)