"""Trace output to standard output, switched on and off at run time."""

import inspect
import os
import sys
from enum import Enum

_enabled = False


def debug_init(enabled):
    """Switch trace output on or off."""
    global _enabled
    _enabled = bool(enabled)


def is_enabled():
    """Return whether trace output is on."""
    return _enabled


def _format(message, args):
    return message % args if args else message


def _location():
    frame = inspect.currentframe()
    # Skip this helper and the public function that called it.
    for _ in range(2):
        if frame is None:
            break
        frame = frame.f_back
    caller = frame.f_back if frame is not None else None
    if caller is None:
        return "TRACE[?:0] ?(): "
    code = caller.f_code
    return "TRACE[%s:%d] %s(): " % (
        os.path.basename(code.co_filename),
        caller.f_lineno,
        code.co_name,
    )


def debug(message, *args):
    """Print a trace line with the caller's location."""
    if not _enabled:
        return
    sys.stdout.write(_location() + _format(message, args) + "\n")


def warn(message, *args):
    """Print a trace line marked as a warning."""
    if not _enabled:
        return
    sys.stdout.write(_location() + "***WARNING***: " + _format(message, args) + "\n")


def debug_enum(value, message, *args):
    """Print a trace line followed by the name of an enumeration value."""
    if not _enabled:
        return
    content = value.name if isinstance(value, Enum) else str(value)
    sys.stdout.write(_location() + "%s: %s" % (_format(message, args), content) + "\n")