# rvbridge

Helpers for RV-C traffic on a CAN bus: taking a message identifier apart,
building outgoing frames, handing received frames to devices and pacing
outgoing frames through a small send queue.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Message identifiers (`rvbridge.dgn`)

An RV-C identifier packs a priority, a DGN and a source address into one
29-bit extended CAN identifier.

```python
from rvbridge.dgn import RvcDgn, get_dgn, get_msg_bits
from rvbridge.packet import make_msg

msg_id = make_msg(RvcDgn.THERMOSTAT_COMMAND_1, 145, 6)

get_dgn(msg_id)               # RvcDgn.THERMOSTAT_COMMAND_1 (0x1FEF9)
get_msg_bits(msg_id, 7, 8)    # source address, 145
get_msg_bits(msg_id, 28, 3)   # priority, 6
```

- `get_msg_bits(msg, start_bit, num_bits)` returns the `num_bits` bits whose
  highest bit is `start_bit`. A start bit outside 0..31, a width outside
  1..32, or a field that would run below bit 0 gives 0.
- `get_dgn(msg_id)` returns the 17-bit DGN as an `RvcDgn` member when it is
  a known one, as a plain `int` otherwise, and `RvcDgn.ERROR` for `None`.
- `RvcDgn` is an `IntEnum` of the DGNs for dimmers, lighting controllers,
  tanks and pumps, HVAC, transfer switches, DC/AC loads, chargers,
  generators, inverters, locks, awnings, batteries and more.

The module also defines the field positions (`DGN_START_BIT`,
`SOURCE_ADDRESS_START_BIT`, `PRIORITY_START_BIT` and their widths) and
`RVC_PERCENT_MAX` (250).

## Frames (`rvbridge.packet`)

`CanFrame` holds one frame: `msg_id`, `data` (padded with zeros to eight
bytes), `dlc`, `rtr` and `extended`. It raises `ValueError` for an
identifier beyond 32 bits, more than eight data bytes or a bad `dlc`.

- `make_msg(dgn, source_id=0, priority=6)` builds an identifier; a source
  id of 0 stands for this bridge's address, `SOURCE_ADDRESS` (145).
- `init_packet(index, dgn)` returns an extended data frame with the
  instance `index` in byte 0 and `0xFF` in the other seven bytes.
- `is_remote_transmission_request(frame)`, `source_address(frame)` and
  `priority(frame)` read a frame; `source_address` and `priority` give 0
  for `None`.
- `get_byte(data, i)`, `get_index(data)` (byte 0, the instance) and
  `get_group(data)` (byte 1) read data bytes. They give `0xFF` for `None`
  data and raise `IndexError` for an index out of range.

### Showing frames

`format_packet(frame)` returns a line of text for remote transmission
requests and for `THERMOSTAT_COMMAND_1` / `THERMOSTAT_STATUS_1` frames with
an instance below 5, and `None` for everything else.

`display_packet(frame, print_mode=PacketPrint.YES)` prints that text and
returns it, or returns `None` without printing. `PacketPrint.NO` never
prints; `IF_KNOWN` and `IF_UNKNOWN` print only when the frame's DGN is, or
is not, a member of `RvcDgn`.

### Dispatching frames

`process_packet(frame, dispatcher)` ignores `None`, remote transmission
requests and a missing dispatcher. Otherwise it calls
`dispatcher.get_device_by_data(dgn, data)` and, if that returns a device,
`device.execute_command(dgn, data, source_address)`. It returns `True`
when a device received the command.

### Command strings

```python
from rvbridge.packet import next_value, parse_value_pair

parse_value_pair("3=40,5=60")   # (3, 40, "5=60")
parse_value_pair("3=40")        # (3, 40, None)
parse_value_pair("nothing")     # (-1, -2, None)
next_value("7,8")               # (7, "8")
next_value("")                  # (-1, None)
```

Numbers are read like C's `atoi` (leading digits, 0 if none) and wrapped
to 16-bit signed values.

## Sending (`rvbridge.packet_queue`)

`PacketQueue(writer=None, clock=None)` holds up to seven outgoing frames
and sends them in order. `writer` is called with each frame as it is sent;
without one, sending is only simulated and a line is printed. `clock`
returns the time in milliseconds (default: a monotonic clock).

```python
from rvbridge.packet import init_packet
from rvbridge.packet_queue import PacketQueue

sent = []
queue = PacketQueue(sent.append)
queue.queue_packet(init_packet(1, 0x1FEF9))
queue.process_queue()           # returns the frame sent, or None
```

- `queue_packet(frame, short_gap=False)` appends a frame, first sending
  earlier ones while the queue is full. Queuing `None` raises
  `ValueError`.
- `process_queue()` sends at most one frame, once 50 ms have passed since
  the last send, or 5 ms for a frame queued with `short_gap`.
- `packet_received(frame, handler=None)` passes a received frame to
  `handler`, then calls `process_queue()`; it returns whether a frame was
  given.
- `clear_last_receive_time()` records that a frame has just arrived.
- `indicators(connected=True)` returns `Indicators(send, heartbeat,
  receive)`: send and receive are lit for 25 ms after activity; the
  heartbeat blinks for 10 ms every 3 s when connected and with a faster
  pattern when not.
- `len(queue)` is the number of frames waiting.

## Device records (`rvbridge.devices`)

Frozen dataclasses describing the accessories a bridge exposes:
`SwitchDeviceRec` (with `SwitchType`: `LAMP`, `DIMMABLE_LAMP`, `SWITCH`),
`FanDeviceRec`, `ThermostatDeviceRec` and `AwningDeviceRec`. Indexes must
fit in 16 signed bits and awning times in 32 unsigned bits, or
`ValueError` is raised.

`BridgeConfig` holds a bridge's settings: `ssid`, `password`,
`source_address` (default 145, one byte), `create_batteries` (default
`True`), an optional six-byte `mac_address` and `skip_wifi_credentials`.

## What this package does not do

It does not talk to CAN hardware, Wi-Fi or HomeKit, and it has no device
objects, device factory or command-line program. Received frames must be
supplied by the caller, outgoing frames leave through the `writer` you pass
to `PacketQueue`, and `process_packet` relies on a dispatcher you provide.