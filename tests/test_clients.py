from apsurvey.clients import ClientTracker
from apsurvey.models import AccessPoint

AP_MAC = bytes([0x02, 0, 0, 0, 0, 0xAA])
OTHER_MAC = bytes([0x02, 0, 0, 0, 0, 0xBB])


def client(n):
    return bytes([0x06, 0, 0, 0, 0, n])


def frame(bssid, source):
    return bytes(10) + bssid + source + bytes(8)


def aps():
    return [AccessPoint("one", 1, -40, AP_MAC), AccessPoint("two", 6, -60, OTHER_MAC)]


def test_observe_adds_client():
    tracker, points = ClientTracker(), aps()
    assert tracker.observe(frame(OTHER_MAC, client(1)), points) is True
    assert tracker.count(1) == 1
    assert points[1].client_count == 1
    assert points[0].client_count == 0


def test_duplicate_ignored():
    tracker, points = ClientTracker(), aps()
    tracker.observe(frame(AP_MAC, client(1)), points)
    assert tracker.observe(frame(AP_MAC, client(1)), points) is False
    assert tracker.count(0) == 1


def test_cap_respected():
    tracker, points = ClientTracker(max_clients=3), aps()
    for n in range(5):
        tracker.observe(frame(AP_MAC, client(n)), points)
    assert tracker.count(0) == 3
    assert points[0].client_count == 3


def test_unknown_bssid_and_short_frame():
    tracker, points = ClientTracker(), aps()
    assert tracker.observe(frame(client(9), client(1)), points) is False
    assert tracker.observe(bytes(12), points) is False
    assert tracker.count(0) == 0 and tracker.count(1) == 0


def test_reset():
    tracker, points = ClientTracker(), aps()
    tracker.observe(frame(AP_MAC, client(1)), points)
    tracker.reset(0)
    assert tracker.count(0) == 0
    assert tracker.observe(frame(AP_MAC, client(1)), points) is True