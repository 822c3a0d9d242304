# apsurvey

A small library for surveying Wi-Fi access points. It takes the scan results
from a radio you supply. While the radio listens on each access point's
channel, it counts the distinct client stations seen talking to that access
point. It can tag the results with a GPS position read from an NMEA receiver,
and it renders the survey as a fixed-width text table.

It depends only on the standard library.

## Modules

### `apsurvey.models`

- `AccessPoint` is a dataclass with the fields `ssid`, `channel`, `rssi`,
  `bssid`, `authmode` (default `AuthMode.OPEN`) and `client_count`
  (default 0). The SSID is cut to 32 characters. The BSSID must be 6 bytes,
  and any other length raises `ValueError`. `band()` returns `"2.4G"` for
  channels up to 14 and `"5G"` above.
- `AuthMode` is an enum of the security modes. `label()` returns the short
  name used in reports: `"WEP"`, `"WPA"`, `"WPA2"`, `"WPA/WPA2"`, `"WPA3"`
  or `"WPA2/WPA3"`. Every other mode, `WPA2_ENTERPRISE` included, shows as
  `"OPEN"`.
- `format_mac(mac)` writes a hardware address as upper-case hex separated
  by colons, for example `"02:00:00:00:00:01"`.

### `apsurvey.nmea`

- `parse_rmc(sentence)` returns the UTC `datetime` carried by an RMC
  sentence. It returns `None` if the time or date field is missing or
  malformed.
- `parse_gga(sentence)` returns a `GpsFix`, which holds `latitude`,
  `longitude` and `satellites`. Latitude and longitude are in signed decimal
  degrees, negative for south and west. The function returns `None` if the
  sentence is too short or its fix quality starts with `0`.
- Both parsers skip empty fields, so a sentence with blank fields reads its
  later fields from shifted positions.
- `contains_gps_talker(data)` tells whether bytes or text contain `"$GP"`.
- `GpsReceiver(stream)` wraps a binary stream that has `read()` and
  `write()`:
  - `detect(attempts=30)` reads up to `attempts` times, sets `enabled` and
    returns it.
  - `send_command(command)` writes the command followed by CR LF.
  - `feed(data)` processes received lines. GGA lines replace `fix`, and a
    GGA line without a fix clears it. RMC lines that contain `*` update
    `time`.
  - `poll()` reads and feeds one block, and only does so when `enabled`.
  - `fix_valid` is true while a fix is held.

### `apsurvey.clients`

- `ClientTracker(max_clients=10)` records distinct source addresses from raw
  data frames. The BSSID is read at byte offset 10 and the source address at
  offset 16.
- `observe(frame, access_points)` matches the frame's BSSID against the
  access points. A new client is added to the matching slot unless the slot
  is full, and that access point's `client_count` is updated. The method
  returns `True` when a client was added.
- `count(slot)` returns the number of clients recorded for a slot, and
  `reset(slot)` forgets them.

### `apsurvey.report`

- `sort_by_rssi(access_points)` returns a new list, strongest signal first.
- `format_results(access_points, gps_enabled=False, fix=None)` renders the
  table. With `gps_enabled` it adds Latitude, Longitude and GPS Fix columns,
  which show `"No fix"` and `"NOFIX"` when `fix` is `None`.
- `format_memory(used, total)` returns a line such as
  `Memory: used 512 / 1024 bytes (50.0% used)`. It raises `ValueError` if
  `total` is not positive.

### `apsurvey.pager`

- `SsidPager(per_page=4)` splits a list of SSIDs into pages for a small
  display.
- `render(ssids)` returns `(x, y, text)` items. The first item is the
  `"Networks"` title at y 0, followed by the page's SSIDs from y 15 in steps
  of 10.
- `advance(count)` moves to the next page and wraps to page 0 once the end
  of `count` entries is passed.

### `apsurvey.scanner`

- `Radio` is the abstract interface you implement. It has three methods:
  `scan()`, `set_promiscuous(enabled)` and `sniff(channel, duration)`.
  `sniff` returns the captured data frames.
- `Scanner(radio, gps=None, max_aps=10, max_clients=10, retain_clients=True, sort_by_rssi=True)`
  runs the survey with these methods:
  - `scan_once()` polls the GPS receiver, scans, and keeps up to `max_aps`
    access points. It fills in client counts from the tracker, or first
    clears them when `retain_clients` is false.
  - `sniff_clients(duration=3.0)` listens on each access point's channel in
    promiscuous mode and records clients.
  - `report()` returns the table, sorted by RSSI when configured to.
  - `cycle(sniff_time=3.0)` does all three and returns the report.
  - `run(cycles=None, sniff_time=3.0, interval=60.0, sleep=time.sleep)`
    prints each report and a `Next scan in N seconds...` line, then waits.
    It repeats forever when `cycles` is `None`.

## Example

```python
from apsurvey.models import AccessPoint, AuthMode
from apsurvey.scanner import Radio, Scanner

class FakeRadio(Radio):
    def scan(self):
        return [AccessPoint("lab", 6, -40, bytes.fromhex("020000000001"), AuthMode.WPA2_PSK)]

    def set_promiscuous(self, enabled):
        pass

    def sniff(self, channel, duration):
        return []

print(Scanner(FakeRadio()).cycle(0), end="")
```

## What it does not do

The package drives no hardware. It has no Wi-Fi driver or packet capture,
and you provide these through `Radio`. It opens no serial port, so you pass
`GpsReceiver` an already opened stream. It draws nothing on a screen, because
`SsidPager` only computes the text items. It measures no memory, because
`format_memory` formats the numbers you give it. It does not set the system
clock from GPS time. There is no command-line program.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.