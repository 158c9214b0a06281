import pytest

from powerkit.brightness import (
    BacklightHelper,
    BacklightOutput,
    Brightness,
    BrightnessError,
    compute_step,
    parse_helper_value,
)


class _FakeHelperState:
    def __init__(self, max_brightness=100, brightness=50, switch=0, working=True, responsive=True):
        self.values = {
            "get-max-brightness": max_brightness,
            "get-brightness": brightness,
            "get-brightness-switch": switch,
        }
        self.working = working
        self.responsive = responsive

    def query(self, argument):
        if not self.working:
            return None
        return "%d\n" % self.values[argument]

    def apply(self, argument, value):
        if not self.working:
            return False
        if not self.responsive:
            return True
        key = "get-" + argument[len("set-"):]
        self.values[key] = value
        return True

    def helper(self):
        return BacklightHelper(self.query, self.apply)


def _panel_brightness(level=50, limits=(0, 100), writable=True):
    output = BacklightOutput("eDP-1", limits, level, writable)
    brightness = Brightness([BacklightOutput("VGA-1", (0, 10), 3), output])
    assert brightness.setup()
    return brightness, output


def test_compute_step():
    assert compute_step(20) == 1
    assert compute_step(7) == 1
    assert compute_step(100) == 10


def test_parse_helper_value():
    assert parse_helper_value("Y\n", False) == 1
    assert parse_helper_value("N\n", False) == 0
    assert parse_helper_value("  42\n", False) == 42
    assert parse_helper_value("", False) == 0
    assert parse_helper_value("abc", False) == 0
    assert parse_helper_value("Y", True) == 0
    assert parse_helper_value("-3", False) == -3


def test_setup_picks_panel_output():
    brightness, output = _panel_brightness(limits=(0, 255))
    assert brightness.has_hw()
    assert brightness.max_level() == 255
    assert brightness.min_level == 0
    assert brightness.step == compute_step(255)


def test_setup_without_panel_output():
    brightness = Brightness([BacklightOutput("HDMI-1", (0, 100), 50)])
    assert brightness.setup() is False
    assert not brightness.has_hw()


def test_output_with_equal_limits_is_ignored():
    brightness = Brightness([BacklightOutput("LVDS-1", (5, 5), 5)])
    assert brightness.setup() is False


def test_last_matching_output_wins():
    first = BacklightOutput("LVDS-1", (0, 10), 3)
    second = BacklightOutput("eDP-1", (0, 300), 100)
    brightness = Brightness([first, second])
    assert brightness.setup()
    assert brightness.max_level() == 300
    brightness.set_level(150)
    assert second.level == 150
    assert first.level == 3


def test_up_steps_and_clamps():
    brightness, output = _panel_brightness(level=50)
    assert brightness.up() == 50 + brightness.step
    output.level = brightness.max_level() - 1
    assert brightness.up() == brightness.max_level()
    assert brightness.up() == brightness.max_level()


def test_down_steps_and_clamps():
    brightness, output = _panel_brightness(level=50)
    assert brightness.down() == 50 - brightness.step
    output.level = brightness.min_level + 1
    assert brightness.down() == brightness.min_level
    assert brightness.down() == brightness.min_level


def test_up_raises_when_hardware_unchanged():
    brightness, _ = _panel_brightness(level=50, writable=False)
    with pytest.warns(RuntimeWarning):
        with pytest.raises(BrightnessError):
            brightness.up()


def test_unreadable_level_raises():
    brightness, output = _panel_brightness()
    output.level = None
    with pytest.raises(BrightnessError):
        brightness.get_level()


def test_set_and_get_level_round_trip():
    brightness, _ = _panel_brightness()
    brightness.set_level(77)
    assert brightness.get_level() == 77


def test_dim_down_sets_minimum():
    brightness, output = _panel_brightness(level=80, limits=(3, 100))
    brightness.dim_down()
    assert output.level == 3


def test_no_hardware_raises():
    brightness = Brightness(None, None)
    assert brightness.setup() is False
    with pytest.raises(BrightnessError):
        brightness.get_level()
    with pytest.raises(BrightnessError):
        brightness.up()
    with pytest.raises(BrightnessError):
        brightness.set_level(5)


def test_helper_fallback():
    state = _FakeHelperState(max_brightness=937, brightness=400)
    brightness = Brightness([], state.helper())
    assert brightness.setup()
    assert brightness.has_hw()
    assert brightness.max_level() == 937
    assert brightness.min_level == 0
    assert brightness.get_level() == 400
    assert brightness.up() == 400 + compute_step(937)
    assert brightness.down() == 400


def test_helper_clamps_above_max():
    state = _FakeHelperState(max_brightness=10, brightness=15)
    brightness = Brightness(None, state.helper())
    assert brightness.setup()
    assert brightness.up() == 10


def test_helper_unresponsive_raises():
    state = _FakeHelperState(responsive=False)
    brightness = Brightness(None, state.helper())
    assert brightness.setup()
    with pytest.raises(BrightnessError):
        brightness.down()


def test_helper_failure_means_no_hardware():
    state = _FakeHelperState(working=False)
    brightness = Brightness(None, state.helper())
    with pytest.warns(RuntimeWarning):
        assert brightness.setup() is False
    assert not brightness.has_hw()


def test_switch_round_trip_through_helper():
    state = _FakeHelperState(switch=0)
    brightness = Brightness(None, state.helper())
    assert brightness.setup()
    brightness.set_switch(1)
    assert brightness.get_switch() == 1


def test_switch_needs_helper():
    brightness, _ = _panel_brightness()
    with pytest.raises(BrightnessError):
        brightness.get_switch()
    with pytest.raises(BrightnessError):
        brightness.set_switch(1)


def test_output_preferred_over_helper():
    state = _FakeHelperState(max_brightness=7)
    output = BacklightOutput("eDP-1", (0, 100), 20)
    brightness = Brightness([output], state.helper())
    assert brightness.setup()
    assert brightness.max_level() == 100
    brightness.set_level(30)
    assert output.level == 30
    assert state.values["get-brightness"] == 50