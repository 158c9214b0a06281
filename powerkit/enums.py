"""Enumerations used by the power manager."""

from enum import IntEnum, IntFlag


class BatteryCharge(IntEnum):
    """Battery charge level; the order of members matters."""

    UNKNOWN = 0
    CRITICAL = 1
    LOW = 2
    OK = 3


class ShutdownRequest(IntEnum):
    DO_NOTHING = 0
    DO_SUSPEND = 1
    DO_HIBERNATE = 2
    ASK = 3
    DO_SHUTDOWN = 4


class LidTriggerAction(IntEnum):
    NOTHING = 0
    SUSPEND = 1
    HIBERNATE = 2
    LOCK_SCREEN = 3


class ButtonKey(IntEnum):
    UNKNOWN = 0
    POWER_OFF = 1
    HIBERNATE = 2
    SLEEP = 3
    MON_BRIGHTNESS_UP = 4
    MON_BRIGHTNESS_DOWN = 5
    LID_CLOSED = 6
    BATTERY = 7
    KBD_BRIGHTNESS_UP = 8
    KBD_BRIGHTNESS_DOWN = 9
    NUMBER_OF_BUTTONS = 10


class SpindownRequest(IntEnum):
    NEVER = 0
    ON_BATTERY = 1
    PLUGGED_IN = 2
    ALWAYS = 3


class ShowIcon(IntEnum):
    ALWAYS = 0
    WHEN_BATTERY_PRESENT = 1
    WHEN_BATTERY_CHARGING_DISCHARGING = 2
    NEVER = 3


class SystemFormFactor(IntEnum):
    LAPTOP = 0
    DESKTOP = 1
    SERVER = 2
    UNKNOWN = 3


class Keys(IntFlag):
    LID_KEY = 1 << 0
    BRIGHTNESS_KEY_UP = 1 << 1
    BRIGHTNESS_KEY_DOWN = 1 << 2
    SLEEP_KEY = 1 << 3
    HIBERNATE_KEY = 1 << 4
    POWER_KEY = 1 << 5
    KBD_BRIGHTNESS_KEY_UP = 1 << 6
    KBD_BRIGHTNESS_KEY_DOWN = 1 << 7


class CpuGovernor(IntFlag):
    UNKNOWN = 1 << 0
    POWERSAVE = 1 << 1
    ONDEMAND = 1 << 2
    PERFORMANCE = 1 << 3