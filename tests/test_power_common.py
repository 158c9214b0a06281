import pytest

from powerkit.constants import (
    XFPM_AC_ADAPTER_ICON,
    XFPM_MEDIA_PLAYER_PREFIX,
    XFPM_PRIMARY_ICON_PREFIX,
    XFPM_UPS_ICON_PREFIX,
)
from powerkit.power_common import (
    Device,
    DeviceKind,
    DeviceState,
    battery_icon_index,
    device_description,
    device_icon_name,
    icon_prefix_for_kind,
    time_string,
    translate_device_type,
    translate_technology,
)


def test_translate_device_type_known_kinds():
    assert translate_device_type(DeviceKind.UPS) == "UPS"
    assert translate_device_type(DeviceKind.LINE_POWER) == "Line power"
    assert translate_device_type(DeviceKind.UNKNOWN) == "Unknown"


def test_translate_device_type_falls_back_to_battery():
    assert translate_device_type(DeviceKind.MEDIA_PLAYER) == "Battery"
    assert translate_device_type(99) == "Battery"


@pytest.mark.parametrize(
    "value, name",
    [(0, "Unknown"), (1, "Lithium ion"), (4, "Lead acid"), (6, "Nickel metal hybride"), (7, "Unknown")],
)
def test_translate_technology(value, name):
    assert translate_technology(value) == name


@pytest.mark.parametrize(
    "percent, index",
    [(0, "000"), (9, "000"), (10, "020"), (29, "020"), (30, "040"), (50, "060"),
     (70, "080"), (89, "080"), (90, "100"), (100, "100")],
)
def test_battery_icon_index(percent, index):
    assert battery_icon_index(percent) == index


def test_time_string_zero_is_unknown():
    assert time_string(0) == "Unknown time"
    assert time_string(29) == "Unknown time"


def test_time_string_minutes_and_hours():
    assert time_string(60).startswith("1 ")
    assert time_string(120).startswith("2 ")
    assert "hour" in time_string(3600)
    assert "minute" not in time_string(7200)
    assert "hours" in time_string(7200 + 5 * 60)
    assert "minutes" in time_string(7200 + 5 * 60)


def test_time_string_rounds_to_nearest_minute():
    assert time_string(90) == time_string(120)
    assert time_string(89) == time_string(60)


def test_icon_prefix_for_kind():
    assert icon_prefix_for_kind(DeviceKind.UPS) == XFPM_UPS_ICON_PREFIX
    assert icon_prefix_for_kind(DeviceKind.MEDIA_PLAYER) == XFPM_MEDIA_PLAYER_PREFIX
    assert icon_prefix_for_kind(DeviceKind.UNKNOWN) == XFPM_PRIMARY_ICON_PREFIX


def test_icon_line_power():
    on = Device("/ac", kind=DeviceKind.LINE_POWER, online=True)
    off = Device("/ac", kind=DeviceKind.LINE_POWER, online=False)
    assert device_icon_name(on, None) == XFPM_AC_ADAPTER_ICON
    assert device_icon_name(off, None) == XFPM_PRIMARY_ICON_PREFIX + "060"


def test_icon_battery_states():
    bat = Device("/bat", kind=DeviceKind.BATTERY, is_present=True, percentage=45.7)
    bat.state = DeviceState.CHARGING
    assert device_icon_name(bat, None) == XFPM_PRIMARY_ICON_PREFIX + "040-charging"
    bat.state = DeviceState.DISCHARGING
    assert device_icon_name(bat, None) == XFPM_PRIMARY_ICON_PREFIX + "040"
    bat.state = DeviceState.FULLY_CHARGED
    assert device_icon_name(bat, None) == XFPM_PRIMARY_ICON_PREFIX + "charged"
    bat.state = DeviceState.EMPTY
    assert device_icon_name(bat, None) == XFPM_PRIMARY_ICON_PREFIX + "000"
    bat.state = DeviceState.UNKNOWN
    assert device_icon_name(bat, None) is None
    bat.is_present = False
    assert device_icon_name(bat, None) == XFPM_PRIMARY_ICON_PREFIX + "missing"


def test_icon_display_device_and_other():
    mouse = Device("/display", kind=DeviceKind.MOUSE)
    assert device_icon_name(mouse, "/display") == XFPM_AC_ADAPTER_ICON
    assert device_icon_name(mouse, "/other") == icon_prefix_for_kind(DeviceKind.MOUSE)


def test_description_uses_type_when_vendor_missing():
    dev = Device("/bat", kind=DeviceKind.BATTERY, state=DeviceState.EMPTY)
    assert device_description(dev, None) == "<b>Battery </b>\nis empty"


def test_description_hides_hex_identifiers():
    dev = Device("/m", kind=DeviceKind.MOUSE, state=DeviceState.EMPTY,
                 vendor="a" * 31, model="b" * 31)
    assert device_description(dev, None) == "<b>Mouse </b>\nis empty"


def test_description_charging_with_time():
    dev = Device("/bat", kind=DeviceKind.BATTERY, state=DeviceState.CHARGING,
                 vendor="Acme", model="X1", percentage=50.0, time_to_full=3600)
    text = device_description(dev, None)
    assert text == "<b>Acme X1</b>\nCharging (50%%, %s)" % time_string(3600)


def test_description_fully_charged_without_time():
    dev = Device("/bat", kind=DeviceKind.BATTERY, state=DeviceState.FULLY_CHARGED,
                 vendor="Acme", model="X1", percentage=100.0)
    assert device_description(dev, None) == "<b>Acme X1</b>\nFully charged (100%)"


def test_description_pending_states_are_swapped_as_in_source():
    dev = Device("/bat", kind=DeviceKind.BATTERY, state=DeviceState.PENDING_CHARGE,
                 vendor="Acme", model="X1", percentage=20.0)
    assert "Waiting to discharge" in device_description(dev, None)
    dev.state = DeviceState.PENDING_DISCHARGE
    assert "Waiting to charge" in device_description(dev, None)


def test_description_line_power():
    dev = Device("/ac", kind=DeviceKind.LINE_POWER, online=True)
    assert device_description(dev, None) == "<b>Line power </b>\nPlugged in"
    dev.online = False
    assert device_description(dev, None).endswith("\nNot plugged in")


def test_description_display_device():
    dev = Device("/display", kind=DeviceKind.UNKNOWN, vendor="Acme", model="X1")
    assert device_description(dev, "/display") == "<b>Computer </b>"
    assert device_description(dev, None).endswith("\nUnknown state")