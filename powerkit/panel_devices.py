"""The set of power devices shown by the panel button, with their text and icons."""

from dataclasses import dataclass
from gettext import gettext as _

from . import debug
from .constants import XFPM_AC_ADAPTER_ICON
from .power_common import DeviceKind, device_description, device_icon_name

_DEFAULT_TOOLTIP = "Display battery levels for attached devices"


@dataclass
class DeviceEntry:
    """One device known to the panel, with its current description and icon name."""

    object_path: str
    device: object
    details: str = None
    icon_name: str = None


class DeviceList:
    """Devices attached to the system, in the order they were added.

    ``display_device_path`` names the aggregate device that the power daemon
    offers for the panel icon and tooltip; it may be None.
    """

    def __init__(self, display_device_path=None):
        self.display_device_path = display_device_path
        self._entries = []
        self._panel_icon_name = XFPM_AC_ADAPTER_ICON

    def __iter__(self):
        return iter(list(self._entries))

    def __len__(self):
        return len(self._entries)

    def find(self, object_path):
        """Return the entry for ``object_path``, or None if it is not known."""
        for entry in self._entries:
            if entry.object_path == object_path:
                return entry
        return None

    def add(self, device):
        """Add a device; return its entry, or None if it was already known."""
        if self.find(device.object_path) is not None:
            return None
        entry = DeviceEntry(object_path=device.object_path, device=device)
        self._entries.append(entry)
        self.update(device)
        return entry

    def remove(self, object_path):
        """Forget a device; return whether it was known."""
        entry = self.find(object_path)
        if entry is None:
            return False
        self._entries.remove(entry)
        return True

    def update(self, device):
        """Refresh the details and icon of a known device from a new snapshot.

        Returns the entry, or None if the device is not known. When the
        device is the one the panel displays, the panel icon follows it.
        """
        entry = self.find(device.object_path)
        if entry is None:
            return None
        entry.device = device
        entry.icon_name = device_icon_name(device, self.display_device_path)
        entry.details = device_description(device, self.display_device_path)
        if entry is self.display_entry():
            debug.debug("this is the display device, updating")
            self._panel_icon_name = entry.icon_name
        return entry

    def display_entry(self):
        """Return the entry the panel shows.

        That is the display device when it is known; otherwise the battery
        or UPS with the highest charge, or None when no battery has any.
        """
        if self.display_device_path is not None:
            entry = self.find(self.display_device_path)
            if entry is not None:
                return entry
        best = None
        highest = 0.0
        for entry in self._entries:
            device = entry.device
            if device is None:
                continue
            if device.kind in (DeviceKind.BATTERY, DeviceKind.UPS) and highest < device.percentage:
                best = entry
                highest = device.percentage
        return best

    def tooltip(self):
        """Return the panel tooltip: the displayed device's details or a generic text."""
        entry = self.display_entry()
        if entry is not None and entry.details:
            return entry.details
        # Most likely a desktop without any batteries attached.
        return _(_DEFAULT_TOOLTIP)

    def panel_icon_name(self):
        """Return the icon name for the panel button."""
        return self._panel_icon_name

    def menu_entries(self):
        """Return the entries listed in the menu: all but line power and the display device."""
        result = []
        for entry in self._entries:
            device = entry.device
            if device is not None:
                if device.kind == DeviceKind.LINE_POWER:
                    continue
                if self.display_device_path is not None and entry.object_path == self.display_device_path:
                    continue
            result.append(entry)
        return result