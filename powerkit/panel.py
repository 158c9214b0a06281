"""The panel button: brightness control by scrolling and the device menu."""

from dataclasses import dataclass, field
from enum import IntEnum
from gettext import gettext as _

from . import debug
from .brightness import BrightnessError
from .constants import XFPM_DISPLAY_BRIGHTNESS_ICON
from .panel_devices import DeviceList

SAFE_SLIDER_MIN_LEVEL = 5


class ScrollDirection(IntEnum):
    """Direction of a scroll event over the button or the slider."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    SMOOTH = 4


@dataclass
class Slider:
    """The display brightness slider shown in the menu."""

    minimum: int
    maximum: int
    value: int
    description: str = ""
    icon_name: str = XFPM_DISPLAY_BRIGHTNESS_ICON

    def clamp(self, level):
        """Return ``level`` limited to the slider's range."""
        return max(self.minimum, min(level, self.maximum))


@dataclass
class Menu:
    """The popup menu shown when the button is pressed."""

    device_entries: list = field(default_factory=list)
    show_separator: bool = False
    slider: Slider = None
    presentation_mode_label: str = ""
    settings_label: str = ""


class PowerButton:
    """State and behaviour of the power manager panel button."""

    def __init__(self, brightness, devices=None):
        self.brightness = brightness
        self.brightness.setup()
        self.devices = devices if devices is not None else DeviceList()
        self.menu = None
        self.active = False
        self.brightness_min_level = 0
        self.set_brightness_min_level(-1)

    # --- brightness ------------------------------------------------------

    def set_brightness_min_level(self, level):
        """Set the lowest slider level; -1, or a level above the maximum, picks a safe default."""
        max_level = self.brightness.max_level()
        if level > max_level:
            level = -1
        if level == -1:
            self.brightness_min_level = SAFE_SLIDER_MIN_LEVEL if max_level > 100 else 0
        else:
            self.brightness_min_level = level
        debug.debug("brightness_min_level : %d", self.brightness_min_level)
        slider = self._slider
        if slider is not None:
            slider.minimum = self.brightness_min_level
            slider.maximum = max_level

    @property
    def _slider(self):
        return self.menu.slider if self.menu is not None else None

    def slider_range(self):
        """Return the slider's (minimum, maximum), or None when no slider is shown."""
        slider = self._slider
        if slider is None:
            return None
        return slider.minimum, slider.maximum

    def _current_level(self):
        try:
            return self.brightness.get_level()
        except BrightnessError as error:
            debug.warn("could not read the brightness: %s", error)
            return None

    def _follow(self, level):
        slider = self._slider
        if slider is not None and level is not None:
            slider.value = level

    def increase_brightness(self):
        """Raise the brightness one step; return the new level, or None if unchanged."""
        if not self.brightness.has_hw():
            return None
        max_level = self.brightness.max_level()
        level = self._current_level()
        if level is None or level >= max_level:
            return None
        try:
            level = self.brightness.up()
        except BrightnessError as error:
            debug.warn("raising the brightness failed: %s", error)
            return None
        self._follow(level)
        return level

    def decrease_brightness(self):
        """Lower the brightness one step; return the new level, or None if unchanged."""
        if not self.brightness.has_hw():
            return None
        level = self._current_level()
        if level is None or level <= self.brightness_min_level:
            return None
        try:
            level = self.brightness.down()
        except BrightnessError as error:
            debug.warn("lowering the brightness failed: %s", error)
            return None
        self._follow(level)
        return level

    def brightness_up(self):
        """Raise the brightness if it is below the maximum."""
        level = self._current_level()
        if level is not None and level < self.brightness.max_level():
            return self.increase_brightness()
        return None

    def brightness_down(self):
        """Lower the brightness if it is above the slider minimum."""
        level = self._current_level()
        if level is not None and level > self.brightness_min_level:
            return self.decrease_brightness()
        return None

    def scroll(self, direction):
        """Handle a scroll over the button; return whether it was handled."""
        if not self.brightness.has_hw():
            return False
        if direction == ScrollDirection.UP:
            self.brightness_up()
            return True
        if direction == ScrollDirection.DOWN:
            self.brightness_down()
            return True
        return False

    def set_slider_level(self, level):
        """Move the slider to ``level`` and apply it to the hardware if it differs."""
        slider = self._slider
        if slider is None:
            slider = Slider(self.brightness_min_level, self.brightness.max_level(), level)
        level = slider.clamp(int(level))
        slider.value = level
        hw_level = self._current_level()
        if hw_level is not None and hw_level != level:
            self.brightness.set_level(level)
        return level

    # --- menu ------------------------------------------------------------

    def show_menu(self):
        """Build and show the popup menu; return it."""
        entries = self.devices.menu_entries()
        slider = None
        if self.brightness.has_hw():
            current = self._current_level()
            slider = Slider(
                minimum=self.brightness_min_level,
                maximum=self.brightness.max_level(),
                value=current if current is not None else 0,
                description=_("<b>Display brightness</b>"),
            )
        self.menu = Menu(
            device_entries=entries,
            show_separator=bool(entries),
            slider=slider,
            presentation_mode_label=_("Presentation _mode"),
            settings_label=_("_Power manager settings..."),
        )
        self.active = True
        return self.menu

    def hide_menu(self):
        """Close the menu and untoggle the button."""
        self.menu = None
        self.active = False