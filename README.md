# powerkit

The logic behind a desktop power manager, written in plain Python with no
third-party dependencies: how power devices are described and given icons,
how a backlight is stepped up and down, how bus names are tracked, and
what a panel button shows.

## Modules

- `powerkit.constants` – configuration property names (such as
  `BRIGHTNESS_SLIDER_MIN_LEVEL`, `PRESENTATION_MODE`) and icon names (such
  as `XFPM_AC_ADAPTER_ICON`, `XFPM_PRIMARY_ICON_PREFIX`).
- `powerkit.enums` – `BatteryCharge`, `ShutdownRequest`,
  `LidTriggerAction`, `ButtonKey`, `SpindownRequest`, `ShowIcon`,
  `SystemFormFactor`, and the flag types `Keys` and `CpuGovernor`.
- `powerkit.debug` – trace lines on standard output, off until
  `debug_init(True)`: `debug`, `warn`, `debug_enum`, `is_enabled`.
- `powerkit.common` – `bool_to_string`, `string_to_bool` (only the exact
  string `"TRUE"` is true) and `is_multihead_connected(screen_count,
  monitor_count)`.
- `powerkit.power_common` – `DeviceKind`, `DeviceState` and the `Device`
  dataclass; `device_icon_name` and `device_description` turn a device into
  an icon name and a markup description. Also `translate_device_type`,
  `translate_technology`, `battery_icon_index`, `time_string` and
  `icon_prefix_for_kind`.
- `powerkit.bus` – `Bus`, an in-process registry of well-known name owners
  whose requests never queue, raising `BusError` for invalid names; and
  `name_has_owner`, `register_name`, `release_name`, which return False and
  issue a `RuntimeWarning` instead of raising.
- `powerkit.dbus_monitor` – `DBusMonitor` keeps watched unique names and
  services per `BusType`. Feed it `name_owner_changed(...)`,
  `system_bus_disconnected()` and `system_bus_connected()`, and it calls
  back the handlers registered with `connect()` for
  `"unique-name-lost"`, `"service-connection-changed"` and
  `"system-bus-connection-changed"`. `get_monitor()` returns a shared
  instance while one is alive.
- `powerkit.brightness` – `Brightness` controls a backlight through a list
  of `BacklightOutput` objects (an output whose name starts with `LVDS` or
  `eDP` and has a range) or, failing that, a `BacklightHelper`. It offers
  `setup`, `has_hw`, `max_level`, `up`, `down`, `get_level`, `set_level`,
  `dim_down`, `get_switch` and `set_switch`, and raises `BrightnessError`
  on failure. `compute_step` and `parse_helper_value` are exposed too.
- `powerkit.panel_devices` – `DeviceList` holds the attached devices as
  `DeviceEntry` objects and works out the displayed device, the tooltip,
  the panel icon name and the entries listed in the menu.
- `powerkit.panel` – `PowerButton` ties a `Brightness` and a `DeviceList`
  together: scrolling (`scroll` with a `ScrollDirection`) changes the
  brightness, `show_menu()` builds the menu with its brightness slider,
  `set_slider_level` applies a slider value, and `set_brightness_min_level`
  sets the slider's lower bound (`-1` picks 5 when the maximum is above
  100, else 0).

## Installing

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Examples

Describing a battery:

```python
from powerkit.power_common import Device, DeviceKind, DeviceState, device_description

battery = Device(
    object_path="/devices/battery_BAT0",
    kind=DeviceKind.BATTERY,
    state=DeviceState.DISCHARGING,
    percentage=54.0,
    time_to_empty=5400,
    vendor="ACME",
    model="Cell",
)
print(device_description(battery, display_device_path=None))
# <b>ACME Cell</b>
# Discharging (54%, 1 hour 30 minutes)
```

Stepping a backlight:

```python
from powerkit.brightness import BacklightOutput, Brightness

brightness = Brightness(outputs=[BacklightOutput("eDP-1", limits=(0, 100), level=50)])
brightness.setup()   # True
brightness.up()      # 60: one step is a tenth of the maximum
```

## What it does not do

powerkit does not talk to a display server, a message bus daemon, the
power daemon or a backlight helper program by itself. `BacklightOutput`
keeps its level in memory unless a subclass overrides `read_level` and
`write_level`; `BacklightHelper` calls the `query` and `apply` functions
you hand it; `Bus` is an in-process registry; and `DBusMonitor` and
`DeviceList` only react to what you pass them. It draws no widgets and
installs no command: the panel's menu and slider are plain data objects
for a user interface to render.