"""RV-C CAN frames: building identifiers, reading fields, display and dispatch."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol

from rvbridge.dgn import (
    PRIORITY_NUM_BITS,
    PRIORITY_START_BIT,
    SOURCE_ADDRESS_NUM_BITS,
    SOURCE_ADDRESS_START_BIT,
    RvcDgn,
    get_dgn,
    get_msg_bits,
)

SOURCE_ADDRESS = 145
DEFAULT_PRIORITY = 6
FRAME_LENGTH = 8
INSTANCE_INDEX = 0
GROUP_INDEX = 1

_WORD_MASK = 0xFFFFFFFF
_BYTE_MASK = 0xFF
_THERMOSTAT_DGNS = (RvcDgn.THERMOSTAT_COMMAND_1, RvcDgn.THERMOSTAT_STATUS_1)
_THERMOSTAT_MAX_INDEX = 5


class PacketPrint(IntEnum):
    """When received packets are shown."""

    NO = 0
    YES = 1
    IF_UNKNOWN = 2
    IF_KNOWN = 3


@dataclass
class CanFrame:
    """One CAN frame: identifier, eight data bytes and header flags."""

    msg_id: int = 0
    data: bytes = field(default_factory=lambda: bytes(FRAME_LENGTH))
    dlc: int = FRAME_LENGTH
    rtr: bool = False
    extended: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.msg_id <= _WORD_MASK:
            raise ValueError(f"message id out of 32-bit range: {self.msg_id:#x}")
        data = bytes(self.data)
        if len(data) > FRAME_LENGTH:
            raise ValueError(f"a CAN frame holds at most {FRAME_LENGTH} bytes, got {len(data)}")
        self.data = data.ljust(FRAME_LENGTH, b"\x00")
        if not 0 <= self.dlc <= FRAME_LENGTH:
            raise ValueError(f"data length code out of range: {self.dlc}")


class _Device(Protocol):
    def execute_command(self, dgn: RvcDgn | int, data: bytes, source_address: int) -> object: ...


class _Dispatcher(Protocol):
    def get_device_by_data(self, dgn: RvcDgn | int, data: bytes) -> _Device | None: ...


def make_msg(dgn: int, source_id: int = 0, priority: int = DEFAULT_PRIORITY) -> int:
    """Build a 29-bit identifier; a source id of 0 means this bridge's address."""
    if source_id == 0:
        source_id = SOURCE_ADDRESS
    source_id &= _BYTE_MASK
    priority &= _BYTE_MASK
    return ((priority << 26) | (dgn << 8) | source_id) & _WORD_MASK


def init_packet(index: int, dgn: int) -> CanFrame:
    """Return an extended data frame for ``dgn`` with ``index`` and 0xFF filler."""
    data = bytes([index & _BYTE_MASK]) + b"\xff" * (FRAME_LENGTH - 1)
    return CanFrame(msg_id=make_msg(dgn), data=data, dlc=FRAME_LENGTH, rtr=False, extended=True)


def is_remote_transmission_request(frame: CanFrame | None) -> bool:
    """True when the frame is a remote transmission request."""
    return frame is not None and frame.rtr


def source_address(frame: CanFrame | None) -> int:
    """Source address field of the frame's identifier, 0 for no frame."""
    if frame is None:
        return 0
    return get_msg_bits(frame.msg_id, SOURCE_ADDRESS_START_BIT, SOURCE_ADDRESS_NUM_BITS)


def priority(frame: CanFrame | None) -> int:
    """Priority field of the frame's identifier, 0 for no frame."""
    if frame is None:
        return 0
    return get_msg_bits(frame.msg_id, PRIORITY_START_BIT, PRIORITY_NUM_BITS)


def get_byte(data: bytes | None, i: int) -> int:
    """Byte ``i`` of ``data``; 0xFF when there is no data."""
    if data is None:
        return _BYTE_MASK
    if not 0 <= i < len(data):
        raise IndexError(f"byte index {i} out of range for {len(data)} bytes")
    return data[i]


def get_index(data: bytes | None) -> int:
    """Instance byte of a packet's data."""
    return get_byte(data, INSTANCE_INDEX)


def get_group(data: bytes | None) -> int:
    """Group byte of a packet's data."""
    return get_byte(data, GROUP_INDEX)


def format_packet(frame: CanFrame | None) -> str | None:
    """Text shown for a frame, or None when the frame is not of interest.

    Remote transmission requests and thermostat command/status frames for
    instances below 5 are shown.
    """
    if frame is None:
        return None
    if is_remote_transmission_request(frame):
        return (
            f"Remote transmission request received with ID 0x{frame.msg_id:08X}, "
            f"DLC {frame.dlc}"
        )
    dgn = get_dgn(frame.msg_id)
    data = frame.data
    if dgn in _THERMOSTAT_DGNS and get_index(data) < _THERMOSTAT_MAX_INDEX:
        rest = ", ".join(f"d[{n}]={byte:#x}" for n, byte in enumerate(data) if n > 0)
        return (
            f"DGN {int(dgn):#x}, Source Address {source_address(frame):#x}, "
            f"Data : d[0]={data[0]}, {rest}"
        )
    return None


def display_packet(frame: CanFrame | None, print_mode: PacketPrint = PacketPrint.YES) -> str | None:
    """Print the frame's text according to ``print_mode`` and return what was printed."""
    text = format_packet(frame)
    if text is None or print_mode == PacketPrint.NO:
        return None
    if print_mode in (PacketPrint.IF_KNOWN, PacketPrint.IF_UNKNOWN):
        dgn = get_dgn(frame.msg_id)
        known = isinstance(dgn, RvcDgn) and dgn != RvcDgn.ERROR
        if known != (print_mode == PacketPrint.IF_KNOWN):
            return None
    print(text)
    return text


def process_packet(frame: CanFrame | None, dispatcher: _Dispatcher | None) -> bool:
    """Hand a data frame to the device the dispatcher finds for it.

    Returns True when a device received the command.
    """
    if frame is None or is_remote_transmission_request(frame) or dispatcher is None:
        return False
    dgn = get_dgn(frame.msg_id)
    device = dispatcher.get_device_by_data(dgn, frame.data)
    if device is None:
        return False
    device.execute_command(dgn, frame.data, source_address(frame))
    return True


def _atoi(text: str) -> int:
    """Leading decimal integer of ``text`` as a 16-bit signed value, 0 if none."""
    s = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    digits = ""
    for ch in s:
        if not ch.isdigit() or not ch.isascii():
            break
        digits += ch
    value = sign * int(digits) if digits else 0
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def parse_value_pair(buff: str | None) -> tuple[int, int, str | None]:
    """Parse ``a=b[,rest]`` into ``(a, b, rest)``.

    Without an ``=`` the result is ``(-1, -2, None)``; ``rest`` is None when
    no comma follows the pair.
    """
    if buff is None or "=" not in buff:
        return -1, -2, None
    after_equals = buff[buff.index("=") + 1:]
    val1 = _atoi(buff)
    val2 = _atoi(after_equals)
    comma = after_equals.find(",")
    rest = after_equals[comma + 1:] if comma >= 0 else None
    return val1, val2, rest


def next_value(buff: str | None) -> tuple[int, str | None]:
    """Parse the leading value of a comma-separated list into ``(value, rest)``.

    An empty or missing buffer gives ``(-1, None)``.
    """
    if not buff:
        return -1, None
    value = _atoi(buff)
    comma = buff.find(",")
    rest = buff[comma + 1:] if comma >= 0 else None
    return value, rest