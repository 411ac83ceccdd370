"""Device description records and bridge configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_INT16_MIN, _INT16_MAX = -0x8000, 0x7FFF
_UINT32_MAX = 0xFFFFFFFF


def _check_int16(name: str, value: int) -> None:
    if not _INT16_MIN <= value <= _INT16_MAX:
        raise ValueError(f"{name} out of 16-bit signed range: {value}")


def _check_uint32(name: str, value: int) -> None:
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"{name} out of 32-bit unsigned range: {value}")


class SwitchType(IntEnum):
    """Kind of accessory a DC load switch appears as."""

    LAMP = 0
    DIMMABLE_LAMP = 1
    SWITCH = 2


@dataclass(frozen=True)
class SwitchDeviceRec:
    """A switched or dimmable load."""

    index: int
    type: SwitchType
    name: str

    def __post_init__(self) -> None:
        _check_int16("index", self.index)
        object.__setattr__(self, "type", SwitchType(self.type))


@dataclass(frozen=True)
class FanDeviceRec:
    """A roof fan with power, lid-up and lid-down loads."""

    index: int
    up_index: int
    down_index: int
    name: str

    def __post_init__(self) -> None:
        for field in ("index", "up_index", "down_index"):
            _check_int16(field, getattr(self, field))


@dataclass(frozen=True)
class ThermostatDeviceRec:
    """A thermostat zone with its cooling and furnace loads."""

    cooling_instance: int
    compressor_index: int
    fan_h_index: int
    fan_l_index: int
    furnace_instance: int
    combustion_index: int
    name: str

    def __post_init__(self) -> None:
        for field in ("cooling_instance", "compressor_index", "fan_h_index",
                      "fan_l_index", "furnace_instance", "combustion_index"):
            _check_int16(field, getattr(self, field))


@dataclass(frozen=True)
class AwningDeviceRec:
    """An awning driven by extend and retract loads with travel times."""

    extend_index: int
    retract_index: int
    extend_time_ms: int
    roll_extend_time_ms: int
    retract_time_ms: int
    roll_retract_time_ms: int
    name: str

    def __post_init__(self) -> None:
        _check_int16("extend_index", self.extend_index)
        _check_int16("retract_index", self.retract_index)
        for field in ("extend_time_ms", "roll_extend_time_ms",
                      "retract_time_ms", "roll_retract_time_ms"):
            _check_uint32(field, getattr(self, field))


@dataclass(frozen=True)
class BridgeConfig:
    """Settings of one bridge installation."""

    ssid: str
    password: str
    source_address: int = 145
    create_batteries: bool = True
    mac_address: bytes | None = None
    skip_wifi_credentials: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.source_address <= 0xFF:
            raise ValueError(f"source address must fit in one byte: {self.source_address}")
        if self.mac_address is not None:
            mac = bytes(self.mac_address)
            if len(mac) != 6:
                raise ValueError(f"MAC address must be 6 bytes, got {len(mac)}")
            object.__setattr__(self, "mac_address", mac)