"""Small helpers shared by the power manager components."""

from . import debug


def bool_to_string(value):
    """Return "TRUE" for True and "FALSE" otherwise."""
    return "TRUE" if value is True else "FALSE"


def string_to_bool(string):
    """Return True only for the exact string "TRUE"."""
    return string == "TRUE"


def is_multihead_connected(screen_count, monitor_count):
    """Tell whether more than one screen or monitor is connected.

    ``monitor_count`` is the number of monitors on the first screen; it is
    only consulted when there is exactly one screen.
    """
    if screen_count == 1:
        if monitor_count > 1:
            debug.debug("Multiple monitor connected")
            return True
        return False
    if screen_count > 1:
        debug.debug("Multiple screen connected")
        return True
    return False