"""Display backlight control through an output property or a helper."""

import re
import warnings
from dataclasses import dataclass

from . import debug

_BACKLIGHT_OUTPUT_PREFIXES = ("LVDS", "eDP")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class BrightnessError(Exception):
    """Raised when the backlight cannot be read or changed."""


def compute_step(max_level):
    """Return the step between levels: 1 up to 20 levels, else a tenth of the maximum."""
    if max_level <= 20:
        return 1
    return int(max_level / 10)


def parse_helper_value(text, freebsd=False):
    """Turn the helper's output into a number.

    Outside FreeBSD a leading "N" reads as 0 and a leading "Y" as 1.
    Otherwise the leading integer is taken, and 0 if there is none.
    """
    if not freebsd and text[:1] == "N":
        return 0
    if not freebsd and text[:1] == "Y":
        return 1
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class BacklightOutput:
    """A display output that may carry a backlight property.

    ``limits`` is the property's range as a (min, max) pair, or None when
    no range is reported. ``level`` is the current value, or None when the
    property cannot be read. Subclasses may override ``read_level`` and
    ``write_level`` to talk to a real display server.
    """

    name: str
    limits: tuple = None
    level: int = None
    writable: bool = True

    def read_level(self):
        """Return the current level, or None if it cannot be read."""
        return self.level

    def write_level(self, level):
        """Store a new level; return whether the write was accepted."""
        if not self.writable:
            return False
        self.level = level
        return True


class BacklightHelper:
    """Access to a privileged backlight helper.

    ``query(argument)`` returns the helper's output text for a query such as
    "get-brightness", or None when the helper could not be run or failed.
    ``apply(argument, value)`` runs a setting such as "set-brightness" and
    returns whether it succeeded.
    """

    def __init__(self, query, apply, freebsd=False):
        self._query = query
        self._apply = apply
        self.freebsd = freebsd

    def get_value(self, argument):
        """Return the helper's answer as a number, or -1 on failure."""
        text = self._query(argument)
        if text is None:
            warnings.warn("failed to get value: %s" % argument, RuntimeWarning, stacklevel=2)
            return -1
        return parse_helper_value(text, self.freebsd)

    def apply_value(self, argument, value):
        """Run a setting command; return whether it succeeded."""
        ok = bool(self._apply(argument, value))
        debug.debug("executed --%s %i; success: %s", argument, value, ok)
        return ok


class Brightness:
    """Backlight control that prefers output properties and falls back to a helper."""

    def __init__(self, outputs=None, helper=None):
        self._outputs = list(outputs) if outputs is not None else None
        self._helper = helper
        self._output = None
        self._xrandr_has_hw = False
        self._helper_has_hw = False
        self._min_level = 0
        self._max_level = 0
        self._step = 0

    @property
    def min_level(self):
        return self._min_level

    @property
    def step(self):
        return self._step

    # --- output property backend -------------------------------------

    @staticmethod
    def _output_limits(output):
        limits = output.limits
        if limits is None or len(limits) != 2:
            warnings.warn("no range found", RuntimeWarning, stacklevel=3)
            return None
        return int(limits[0]), int(limits[1])

    def _setup_outputs(self):
        if self._outputs is None:
            warnings.warn("No XRANDR extension found", RuntimeWarning, stacklevel=3)
            return False
        found = False
        for output in self._outputs:
            if not output.name.startswith(_BACKLIGHT_OUTPUT_PREFIXES):
                continue
            limits = self._output_limits(output)
            if limits is not None and limits[0] != limits[1]:
                found = True
                self._output = output
                self._step = compute_step(limits[1])
        return found

    def _output_get_level(self):
        level = self._output.read_level()
        if level is None:
            raise BrightnessError("failed to get property")
        return int(level)

    def _output_set_level(self, level):
        if not self._output.write_level(level):
            warnings.warn(
                "failed to change output property for brightness %d" % level,
                RuntimeWarning,
                stacklevel=3,
            )
            return False
        return True

    # --- helper backend ----------------------------------------------

    def _setup_helper(self):
        value = self._helper.get_value("get-max-brightness")
        debug.debug("get-max-brightness returned %i", value)
        if value < 0:
            self._helper_has_hw = False
        else:
            self._helper_has_hw = True
            self._min_level = 0
            self._max_level = value
            self._step = compute_step(value)
        return self._helper_has_hw

    def _helper_get_level(self):
        if not self._helper_has_hw:
            raise BrightnessError("no helper backlight")
        value = self._helper.get_value("get-brightness")
        debug.debug("get-brightness returned %i", value)
        if value < 0:
            raise BrightnessError("helper failed to report the brightness")
        return value

    def _helper_set_level(self, level):
        return self._helper.apply_value("set-brightness", level)

    # --- shared stepping ----------------------------------------------

    def _step_level(self, read, write, upward):
        hw_level = read()
        if upward:
            limit = self._max_level
            at_limit = hw_level == limit if self._xrandr_has_hw else hw_level >= limit
        else:
            limit = self._min_level
            at_limit = hw_level == limit if self._xrandr_has_hw else hw_level <= limit
        if at_limit:
            return limit
        if upward:
            set_level = min(hw_level + self._step, limit)
        else:
            set_level = max(hw_level - self._step, limit)
        if not write(set_level):
            warnings.warn("setting brightness %d failed" % set_level, RuntimeWarning, stacklevel=3)
        try:
            new_level = read()
        except BrightnessError as error:
            raise BrightnessError("changing brightness failed for %d" % set_level) from error
        if new_level == hw_level:
            raise BrightnessError("the hardware level did not change to %d" % set_level)
        return new_level

    # --- public interface --------------------------------------------

    def setup(self):
        """Find a backlight to control; return whether one was found."""
        self._output = None
        self._xrandr_has_hw = self._setup_outputs()
        if self._xrandr_has_hw:
            limits = self._output_limits(self._output)
            if limits is not None:
                self._min_level, self._max_level = limits
            debug.debug(
                "Brightness controlled by xrandr, min_level=%d max_level=%d",
                self._min_level,
                self._max_level,
            )
            return True
        if self._helper is not None and self._setup_helper():
            debug.debug(
                "xrandr not available, brightness controlled by %s helper; "
                "min_level=%d max_level=%d",
                "sysctl" if self._helper.freebsd else "sysfs",
                self._min_level,
                self._max_level,
            )
            return True
        debug.debug("no brightness controls available")
        return False

    def has_hw(self):
        """Tell whether a backlight can be controlled."""
        return self._xrandr_has_hw or self._helper_has_hw

    def max_level(self):
        """Return the highest brightness level."""
        return self._max_level

    def up(self):
        """Raise the brightness by one step and return the new level."""
        if self._xrandr_has_hw:
            return self._step_level(self._output_get_level, self._output_set_level, True)
        if self._helper_has_hw:
            return self._step_level(self._helper_get_level, self._helper_set_level, True)
        raise BrightnessError("no brightness hardware")

    def down(self):
        """Lower the brightness by one step and return the new level."""
        if self._xrandr_has_hw:
            self._step_level(self._output_get_level, self._output_set_level, False)
            return self._output_get_level()
        if self._helper_has_hw:
            return self._step_level(self._helper_get_level, self._helper_set_level, False)
        raise BrightnessError("no brightness hardware")

    def get_level(self):
        """Return the current brightness level."""
        if self._xrandr_has_hw:
            return self._output_get_level()
        if self._helper_has_hw:
            return self._helper_get_level()
        raise BrightnessError("no brightness hardware")

    def set_level(self, level):
        """Set the brightness level."""
        if self._xrandr_has_hw:
            ok = self._output_set_level(level)
        elif self._helper_has_hw:
            ok = self._helper_set_level(level)
        else:
            raise BrightnessError("no brightness hardware")
        if not ok:
            raise BrightnessError("failed to set brightness %d" % level)

    def dim_down(self):
        """Set the brightness to its lowest level."""
        self.set_level(self._min_level)

    def get_switch(self):
        """Return the helper's brightness switch value."""
        if not self._helper_has_hw:
            raise BrightnessError("brightness switch needs the helper")
        value = self._helper.get_value("get-brightness-switch")
        if value < 0:
            raise BrightnessError("failed to get the brightness switch")
        return value

    def set_switch(self, value):
        """Set the helper's brightness switch value."""
        if not self._helper_has_hw:
            raise BrightnessError("brightness switch needs the helper")
        if not self._helper.apply_value("set-brightness-switch", value):
            raise BrightnessError("failed to set the brightness switch to %d" % value)