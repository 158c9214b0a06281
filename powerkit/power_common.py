"""Device kinds, states and the text and icon names shown for power devices."""

from dataclasses import dataclass
from enum import IntEnum
from gettext import gettext as _
from gettext import ngettext

from .constants import (
    XFPM_AC_ADAPTER_ICON,
    XFPM_COMPUTER_ICON_PREFIX,
    XFPM_KBD_ICON_PREFIX,
    XFPM_MEDIA_PLAYER_PREFIX,
    XFPM_MONITOR_PREFIX,
    XFPM_MOUSE_ICON_PREFIX,
    XFPM_PDA_ICON_PREFIX,
    XFPM_PHONE_ICON_PREFIX,
    XFPM_PRIMARY_ICON_PREFIX,
    XFPM_TABLET_ICON_PREFIX,
    XFPM_UPS_ICON_PREFIX,
)


class DeviceKind(IntEnum):
    """Kind of a power device, numbered as the power daemon numbers them."""

    UNKNOWN = 0
    LINE_POWER = 1
    BATTERY = 2
    UPS = 3
    MONITOR = 4
    MOUSE = 5
    KEYBOARD = 6
    PDA = 7
    PHONE = 8
    MEDIA_PLAYER = 9
    TABLET = 10
    COMPUTER = 11


class DeviceState(IntEnum):
    """Charge state of a power device."""

    UNKNOWN = 0
    CHARGING = 1
    DISCHARGING = 2
    EMPTY = 3
    FULLY_CHARGED = 4
    PENDING_CHARGE = 5
    PENDING_DISCHARGE = 6


@dataclass
class Device:
    """A snapshot of the properties of one power device."""

    object_path: str
    kind: DeviceKind = DeviceKind.UNKNOWN
    state: DeviceState = DeviceState.UNKNOWN
    is_present: bool = False
    percentage: float = 0.0
    online: bool = False
    vendor: str = ""
    model: str = ""
    time_to_empty: int = 0
    time_to_full: int = 0


_DEVICE_TYPE_NAMES = {
    DeviceKind.BATTERY: "Battery",
    DeviceKind.UPS: "UPS",
    DeviceKind.LINE_POWER: "Line power",
    DeviceKind.MOUSE: "Mouse",
    DeviceKind.KEYBOARD: "Keyboard",
    DeviceKind.MONITOR: "Monitor",
    DeviceKind.PDA: "PDA",
    DeviceKind.PHONE: "Phone",
    DeviceKind.TABLET: "Tablet",
    DeviceKind.COMPUTER: "Computer",
    DeviceKind.UNKNOWN: "Unknown",
}

_TECHNOLOGY_NAMES = {
    0: "Unknown",
    1: "Lithium ion",
    2: "Lithium polymer",
    3: "Lithium iron phosphate",
    4: "Lead acid",
    5: "Nickel cadmium",
    6: "Nickel metal hybride",
}

_ICON_PREFIXES = {
    DeviceKind.BATTERY: XFPM_PRIMARY_ICON_PREFIX,
    DeviceKind.UPS: XFPM_UPS_ICON_PREFIX,
    DeviceKind.MOUSE: XFPM_MOUSE_ICON_PREFIX,
    DeviceKind.KEYBOARD: XFPM_KBD_ICON_PREFIX,
    DeviceKind.PHONE: XFPM_PHONE_ICON_PREFIX,
    DeviceKind.PDA: XFPM_PDA_ICON_PREFIX,
    DeviceKind.MEDIA_PLAYER: XFPM_MEDIA_PLAYER_PREFIX,
    DeviceKind.LINE_POWER: XFPM_AC_ADAPTER_ICON,
    DeviceKind.MONITOR: XFPM_MONITOR_PREFIX,
    DeviceKind.TABLET: XFPM_TABLET_ICON_PREFIX,
    DeviceKind.COMPUTER: XFPM_COMPUTER_ICON_PREFIX,
}

_ICON_INDEX_STEPS = ((10, "000"), (30, "020"), (50, "040"), (70, "060"), (90, "080"))


def translate_device_type(kind):
    """Return a readable name for a device kind; unknown values read "Battery"."""
    return _(_DEVICE_TYPE_NAMES.get(kind, "Battery"))


def translate_technology(value):
    """Return a readable name for a battery technology number."""
    return _(_TECHNOLOGY_NAMES.get(value, "Unknown"))


def battery_icon_index(percent):
    """Return the three-digit icon suffix for a charge percentage."""
    for limit, index in _ICON_INDEX_STEPS:
        if percent < limit:
            return index
    return "100"


def time_string(seconds):
    """Describe a duration in seconds as hours and minutes, rounded to the minute."""
    minutes = int(seconds / 60.0 + 0.5)
    if minutes == 0:
        return _("Unknown time")
    if minutes < 60:
        return ngettext("%i minute", "%i minutes", minutes) % minutes
    hours, minutes = divmod(minutes, 60)
    if minutes == 0:
        return ngettext("%i hour", "%i hours", hours) % hours
    return _("%i %s %i %s") % (
        hours,
        ngettext("hour", "hours", hours),
        minutes,
        ngettext("minute", "minutes", minutes),
    )


def icon_prefix_for_kind(kind):
    """Return the icon name prefix for a device kind."""
    return _ICON_PREFIXES.get(kind, XFPM_PRIMARY_ICON_PREFIX)


def _is_display_device(device, display_device_path):
    return display_device_path is not None and device.object_path == display_device_path


def device_icon_name(device, display_device_path):
    """Return the icon name for a device, or None for a battery in an unknown state."""
    prefix = icon_prefix_for_kind(device.kind)

    if device.kind == DeviceKind.LINE_POWER:
        if device.online:
            return XFPM_AC_ADAPTER_ICON
        return XFPM_PRIMARY_ICON_PREFIX + "060"

    if device.kind in (DeviceKind.BATTERY, DeviceKind.UPS):
        state = device.state
        index = battery_icon_index(int(device.percentage))
        if not device.is_present:
            return prefix + "missing"
        if state == DeviceState.FULLY_CHARGED:
            return prefix + "charged"
        if state in (DeviceState.CHARGING, DeviceState.PENDING_CHARGE):
            return "%s%s-charging" % (prefix, index)
        if state in (DeviceState.DISCHARGING, DeviceState.PENDING_DISCHARGE):
            return prefix + index
        if state == DeviceState.EMPTY:
            return prefix + "000"
        return None

    if _is_display_device(device, display_device_path):
        # A desktop system with no batteries.
        return XFPM_AC_ADAPTER_ICON
    return prefix


def device_description(device, display_device_path):
    """Return the markup text that describes a device and its charge state."""
    vendor = device.vendor
    model = device.model
    is_display = _is_display_device(device, display_device_path)

    if is_display:
        vendor = _("Computer")
        model = ""

    if vendor == "" and model == "":
        vendor = translate_device_type(device.kind)
    elif len(vendor) == 31 and len(model) == 31:
        # Hex identifiers of devices unknown to the kernel are not worth showing.
        vendor = translate_device_type(device.kind)
        model = ""

    state = device.state
    percentage = device.percentage

    if state == DeviceState.FULLY_CHARGED:
        if device.time_to_empty > 0:
            return _("<b>%s %s</b>\nFully charged (%0.0f%%, %s runtime)") % (
                vendor, model, percentage, time_string(device.time_to_empty))
        return _("<b>%s %s</b>\nFully charged (%0.0f%%)") % (vendor, model, percentage)

    if state == DeviceState.CHARGING:
        if device.time_to_full != 0:
            return _("<b>%s %s</b>\nCharging (%0.0f%%, %s)") % (
                vendor, model, percentage, time_string(device.time_to_full))
        return _("<b>%s %s</b>\nCharging (%0.0f%%)") % (vendor, model, percentage)

    if state == DeviceState.DISCHARGING:
        if device.time_to_empty != 0:
            return _("<b>%s %s</b>\nDischarging (%0.0f%%, %s)") % (
                vendor, model, percentage, time_string(device.time_to_empty))
        return _("<b>%s %s</b>\nDischarging (%0.0f%%)") % (vendor, model, percentage)

    if state == DeviceState.PENDING_CHARGE:
        return _("<b>%s %s</b>\nWaiting to discharge (%0.0f%%)") % (vendor, model, percentage)

    if state == DeviceState.PENDING_DISCHARGE:
        return _("<b>%s %s</b>\nWaiting to charge (%0.0f%%)") % (vendor, model, percentage)

    if state == DeviceState.EMPTY:
        return _("<b>%s %s</b>\nis empty") % (vendor, model)

    if device.kind == DeviceKind.LINE_POWER:
        plugged = _("Plugged in") if device.online else _("Not plugged in")
        return _("<b>%s %s</b>\n%s") % (vendor, model, plugged)
    if is_display:
        return _("<b>%s %s</b>") % (vendor, model)
    return _("<b>%s %s</b>\nUnknown state") % (vendor, model)