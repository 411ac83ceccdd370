import dataclasses

import pytest

from rvbridge.devices import (
    AwningDeviceRec,
    BridgeConfig,
    FanDeviceRec,
    SwitchDeviceRec,
    SwitchType,
    ThermostatDeviceRec,
)


def test_switch_type_values():
    assert [t.value for t in SwitchType] == [0, 1, 2]
    assert SwitchType(1) is SwitchType.DIMMABLE_LAMP


def test_switch_record_coerces_type():
    rec = SwitchDeviceRec(index=3, type=2, name="Porch")
    assert rec.type is SwitchType.SWITCH


def test_switch_record_rejects_bad_type():
    with pytest.raises(ValueError):
        SwitchDeviceRec(index=3, type=7, name="Porch")


def test_switch_record_index_range():
    with pytest.raises(ValueError):
        SwitchDeviceRec(index=40000, type=SwitchType.LAMP, name="Big")
    assert SwitchDeviceRec(index=-1, type=SwitchType.LAMP, name="None").index == -1


def test_records_are_frozen():
    rec = FanDeviceRec(index=1, up_index=2, down_index=3, name="Fan")
    with pytest.raises(dataclasses.FrozenInstanceError):
        rec.index = 5
    assert (rec.index, rec.up_index, rec.down_index, rec.name) == (1, 2, 3, "Fan")


def test_fan_record_range():
    with pytest.raises(ValueError):
        FanDeviceRec(index=1, up_index=-40000, down_index=3, name="Fan")


def test_thermostat_record():
    rec = ThermostatDeviceRec(0, 1, 2, 3, 4, 5, "Front")
    assert (rec.cooling_instance, rec.combustion_index, rec.name) == (0, 5, "Front")
    with pytest.raises(ValueError):
        ThermostatDeviceRec(0, 1, 2, 3, 4, 70000, "Front")


def test_awning_times():
    rec = AwningDeviceRec(1, 2, 10000, 5000, 11000, 6000, "Awning")
    assert rec.retract_time_ms == 11000
    with pytest.raises(ValueError):
        AwningDeviceRec(1, 2, -1, 5000, 11000, 6000, "Awning")


def test_bridge_config_defaults():
    password = "password"
    config = BridgeConfig(ssid="camper", password=password)
    assert config.source_address == 145
    assert config.create_batteries is True
    assert config.mac_address is None
    assert config.skip_wifi_credentials is False


def test_bridge_config_mac_normalised():
    password = "password"
    config = BridgeConfig(ssid="camper", password=password,
                          mac_address=(0x02, 0, 0, 0, 0, 0x01))
    assert config.mac_address == b"\x02\x00\x00\x00\x00\x01"


def test_bridge_config_rejects_bad_mac():
    password = "password"
    with pytest.raises(ValueError):
        BridgeConfig(ssid="camper", password=password, mac_address=b"\x02\x00")


def test_bridge_config_rejects_bad_source_address():
    password = "password"
    with pytest.raises(ValueError):
        BridgeConfig(ssid="camper", password=password, source_address=256)