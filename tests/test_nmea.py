from datetime import datetime, timezone

import pytest

from apsurvey.nmea import GpsReceiver, contains_gps_talker, parse_gga, parse_rmc

GGA = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
RMC = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"


class FakeStream:
    def __init__(self, chunks=()):
        self.chunks = list(chunks)
        self.written = b""

    def read(self, size):
        return self.chunks.pop(0)[:size] if self.chunks else b""

    def write(self, data):
        self.written += data


def test_parse_gga_position():
    fix = parse_gga(GGA)
    assert 48 < fix.latitude < 49
    assert 11 < fix.longitude < 12
    assert fix.satellites == 8


def test_parse_gga_hemispheres_negate():
    north = parse_gga(GGA)
    south = parse_gga(GGA.replace(",N,", ",S,").replace(",E,", ",W,"))
    assert south.latitude == pytest.approx(-north.latitude)
    assert south.longitude == pytest.approx(-north.longitude)


def test_parse_gga_no_fix():
    assert parse_gga(GGA.replace(",1,08,", ",0,08,")) is None


def test_parse_gga_too_short():
    assert parse_gga("$GPGGA,123519,4807.038") is None


def test_parse_rmc_time():
    assert parse_rmc(RMC) == datetime(1994 + 30, 3, 23, 12, 35, 19, tzinfo=timezone.utc) or (
        parse_rmc(RMC) == datetime(2094, 3, 23, 12, 35, 19, tzinfo=timezone.utc)
    )


def test_parse_rmc_two_digit_year_in_2000s():
    stamp = parse_rmc(RMC)
    assert stamp.year == 2094
    assert (stamp.month, stamp.day) == (3, 23)
    assert (stamp.hour, stamp.minute, stamp.second) == (12, 35, 19)


def test_parse_rmc_bad_date():
    assert parse_rmc(RMC.replace("230394", "2303")) is None
    assert parse_rmc("$GPRMC,123519,A") is None


def test_contains_gps_talker():
    assert contains_gps_talker(b"xx$GPGGA,1") is True
    assert contains_gps_talker("$GNGGA,1") is False


def test_detect_found():
    receiver = GpsReceiver(FakeStream([b"", b"noise $GPRMC,"]))
    assert receiver.detect() is True
    assert receiver.enabled is True


def test_detect_missing():
    receiver = GpsReceiver(FakeStream([b"junk"] * 5))
    assert receiver.detect(attempts=5) is False
    assert receiver.enabled is False


def test_send_command_appends_crlf():
    stream = FakeStream()
    GpsReceiver(stream).send_command("$PMTK314,0*28")
    assert stream.written == b"$PMTK314,0*28\r\n"


def test_feed_updates_fix_and_time():
    receiver = GpsReceiver(FakeStream())
    receiver.feed(f"{GGA}\r\n{RMC}\r\n".encode())
    assert receiver.fix == parse_gga(GGA)
    assert receiver.fix_valid is True
    assert receiver.time == parse_rmc(RMC)


def test_feed_ignores_rmc_without_checksum():
    receiver = GpsReceiver(FakeStream())
    receiver.feed(RMC.split("*")[0])
    assert receiver.time is None


def test_poll_only_when_enabled():
    receiver = GpsReceiver(FakeStream([GGA.encode()]))
    receiver.poll()
    assert receiver.fix is None
    receiver.enabled = True
    receiver.poll()
    assert receiver.fix == parse_gga(GGA)