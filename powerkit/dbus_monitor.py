"""Watch message bus names and services and report when they come and go."""

import weakref
from enum import IntEnum

from . import debug

UNIQUE_NAME_LOST = "unique-name-lost"
SERVICE_CONNECTION_CHANGED = "service-connection-changed"
SYSTEM_BUS_CONNECTION_CHANGED = "system-bus-connection-changed"

_SIGNALS = (UNIQUE_NAME_LOST, SERVICE_CONNECTION_CHANGED, SYSTEM_BUS_CONNECTION_CHANGED)


class BusType(IntEnum):
    """Which message bus a name lives on."""

    SESSION = 0
    SYSTEM = 1
    STARTER = 2


class DBusMonitor:
    """Tracks watched unique names and services on the session and system buses.

    Callbacks are registered with :meth:`connect` for one of the signals
    ``"unique-name-lost"`` (name, on_session),
    ``"service-connection-changed"`` (name, connected, on_session) and
    ``"system-bus-connection-changed"`` (connected).
    """

    def __init__(self):
        self._handlers = {signal: [] for signal in _SIGNALS}
        self._names = []
        self._services = []
        self.system_bus_available = True

    def connect(self, signal, callback):
        """Call ``callback`` whenever ``signal`` is emitted."""
        if signal not in self._handlers:
            raise ValueError("Unknown signal %r" % (signal,))
        self._handlers[signal].append(callback)

    def _emit(self, signal, *args):
        for callback in list(self._handlers[signal]):
            callback(*args)

    @staticmethod
    def _watch_key(bus_type, name):
        return (name, BusType(bus_type))

    def add_unique_name(self, bus_type, name):
        """Watch a unique connection name; return False if already watched."""
        if name is None:
            raise ValueError("a unique name is required")
        key = self._watch_key(bus_type, name)
        if key in self._names:
            return False
        self._names.append(key)
        return True

    def remove_unique_name(self, bus_type, name):
        """Stop watching a unique connection name."""
        key = self._watch_key(bus_type, name)
        if key in self._names:
            self._names.remove(key)

    def add_service(self, bus_type, name):
        """Watch a service name; return False if already watched."""
        key = self._watch_key(bus_type, name)
        if key in self._services:
            return False
        self._services.append(key)
        return True

    def remove_service(self, bus_type, name):
        """Stop watching a service name."""
        key = self._watch_key(bus_type, name)
        if key in self._services:
            self._services.remove(key)

    @property
    def unique_names(self):
        """The watched unique names as (name, bus type) pairs."""
        return list(self._names)

    @property
    def services(self):
        """The watched services as (name, bus type) pairs."""
        return list(self._services)

    def _unique_name_lost(self, bus_type, name):
        key = self._watch_key(bus_type, name)
        on_session = key[1] == BusType.SESSION
        for watched in [w for w in self._names if w == key]:
            self._emit(UNIQUE_NAME_LOST, watched[0], on_session)
            self._names.remove(watched)

    def _service_connection_changed(self, bus_type, name, connected):
        key = self._watch_key(bus_type, name)
        on_session = key[1] == BusType.SESSION
        for watched in [w for w in self._services if w == key]:
            self._emit(SERVICE_CONNECTION_CHANGED, name, connected, on_session)

    def name_owner_changed(self, bus_type, name, prev, new):
        """Handle a change of owner of ``name`` from ``prev`` to ``new``."""
        if prev:
            self._unique_name_lost(bus_type, prev)
            if name:
                self._service_connection_changed(bus_type, name, False)
        elif name and new:
            self._service_connection_changed(bus_type, name, True)

    def system_bus_disconnected(self):
        """Report that the system bus went away."""
        debug.debug("System bus is disconnected")
        self.system_bus_available = False
        self._emit(SYSTEM_BUS_CONNECTION_CHANGED, False)

    def system_bus_connected(self):
        """Report that the system bus is back."""
        self.system_bus_available = True
        self._emit(SYSTEM_BUS_CONNECTION_CHANGED, True)


_shared = None


def get_monitor():
    """Return the shared monitor, creating it if none is alive."""
    global _shared
    monitor = _shared() if _shared is not None else None
    if monitor is None:
        monitor = DBusMonitor()
        _shared = weakref.ref(monitor)
    return monitor