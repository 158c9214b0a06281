"""Power management building blocks: devices, brightness, bus tracking and panel state."""

__version__ = "0.1.0"

__all__ = [
    "brightness",
    "bus",
    "common",
    "constants",
    "dbus_monitor",
    "debug",
    "enums",
    "panel",
    "panel_devices",
    "power_common",
]