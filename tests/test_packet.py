import pytest

from rvbridge.dgn import RvcDgn, get_dgn
from rvbridge.packet import (
    CanFrame,
    PacketPrint,
    display_packet,
    format_packet,
    get_byte,
    get_group,
    get_index,
    init_packet,
    is_remote_transmission_request,
    make_msg,
    next_value,
    parse_value_pair,
    priority,
    process_packet,
    source_address,
)


class _Device:
    def __init__(self):
        self.calls = []

    def execute_command(self, dgn, data, source_address):
        self.calls.append((dgn, data, source_address))


class _Dispatcher:
    def __init__(self, device):
        self.device = device
        self.lookups = []

    def get_device_by_data(self, dgn, data):
        self.lookups.append((dgn, data))
        return self.device


def test_make_msg_default_source_is_bridge_address():
    msg = make_msg(RvcDgn.DC_DIMMER_COMMAND_2)
    assert source_address(CanFrame(msg_id=msg)) == 145
    assert priority(CanFrame(msg_id=msg)) == 6


@pytest.mark.parametrize("dgn", [RvcDgn.THERMOSTAT_COMMAND_1, RvcDgn.LOCK_STATUS, RvcDgn.DATE_TIME_STATUS])
@pytest.mark.parametrize("src", [1, 42, 200])
@pytest.mark.parametrize("prio", [0, 3, 7])
def test_make_msg_round_trip(dgn, src, prio):
    frame = CanFrame(msg_id=make_msg(dgn, src, prio))
    assert get_dgn(frame.msg_id) == dgn
    assert source_address(frame) == src
    assert priority(frame) == prio


def test_init_packet_layout():
    frame = init_packet(3, RvcDgn.DC_DIMMER_COMMAND_2)
    assert frame.data == bytes([3]) + b"\xff" * 7
    assert frame.dlc == 8
    assert frame.extended is True
    assert frame.rtr is False
    assert get_dgn(frame.msg_id) == RvcDgn.DC_DIMMER_COMMAND_2
    assert source_address(frame) == 145


def test_frame_data_padded_and_validated():
    assert CanFrame(data=b"\x01\x02").data == b"\x01\x02" + bytes(6)
    with pytest.raises(ValueError):
        CanFrame(data=bytes(9))
    with pytest.raises(ValueError):
        CanFrame(msg_id=-1)


def test_none_frame_fields():
    assert source_address(None) == 0
    assert priority(None) == 0
    assert is_remote_transmission_request(None) is False


def test_remote_transmission_request_flag():
    assert is_remote_transmission_request(CanFrame(rtr=True)) is True
    assert is_remote_transmission_request(CanFrame()) is False


def test_get_byte_index_and_group():
    data = bytes([7, 9, 1, 2, 3, 4, 5, 6])
    assert get_index(data) == 7
    assert get_group(data) == 9
    assert get_byte(data, 4) == 3
    assert get_byte(None, 0) == 0xFF
    with pytest.raises(IndexError):
        get_byte(data, 8)


def _thermostat_frame(index):
    frame = init_packet(index, RvcDgn.THERMOSTAT_COMMAND_1)
    return frame


def test_format_thermostat_packet():
    text = format_packet(_thermostat_frame(2))
    assert text is not None
    assert text.startswith(f"DGN {int(RvcDgn.THERMOSTAT_COMMAND_1):#x}")
    assert "d[0]=2" in text
    assert "d[7]=0xff" in text


def test_format_skips_high_index_and_other_dgns():
    assert format_packet(_thermostat_frame(5)) is None
    assert format_packet(init_packet(1, RvcDgn.LOCK_STATUS)) is None
    assert format_packet(None) is None


def test_format_remote_request():
    text = format_packet(CanFrame(msg_id=0x1234, rtr=True))
    assert "Remote transmission request" in text
    assert "0x00001234" in text


def test_display_packet_modes(capsys):
    frame = _thermostat_frame(1)
    assert display_packet(frame, PacketPrint.NO) is None
    assert capsys.readouterr().out == ""
    text = display_packet(frame, PacketPrint.YES)
    assert capsys.readouterr().out == text + "\n"
    assert display_packet(frame, PacketPrint.IF_KNOWN) == text
    assert display_packet(frame, PacketPrint.IF_UNKNOWN) is None


def test_process_packet_dispatches():
    device = _Device()
    dispatcher = _Dispatcher(device)
    frame = CanFrame(msg_id=make_msg(RvcDgn.LOCK_STATUS, 17), data=bytes([1, 2, 3]))
    assert process_packet(frame, dispatcher) is True
    assert device.calls == [(RvcDgn.LOCK_STATUS, frame.data, 17)]


def test_process_packet_ignores_rtr_and_missing_device():
    device = _Device()
    dispatcher = _Dispatcher(device)
    assert process_packet(CanFrame(rtr=True), dispatcher) is False
    assert dispatcher.lookups == []
    assert process_packet(init_packet(0, RvcDgn.LOCK_STATUS), _Dispatcher(None)) is False
    assert process_packet(None, dispatcher) is False


def test_parse_value_pair():
    assert parse_value_pair("3=5,7=9") == (3, 5, "7=9")
    assert parse_value_pair("7=9") == (7, 9, None)
    assert parse_value_pair("abc") == (-1, -2, None)
    assert parse_value_pair(" -4=x") == (-4, 0, None)


def test_parse_value_pair_chain():
    rest = "1=2,3=4,5=6"
    pairs = []
    while rest is not None:
        a, b, rest = parse_value_pair(rest)
        pairs.append((a, b))
    assert pairs == [(1, 2), (3, 4), (5, 6)]


def test_next_value():
    assert next_value("12,34") == (12, "34")
    assert next_value("34") == (34, None)
    assert next_value("") == (-1, None)
    assert next_value(None) == (-1, None)