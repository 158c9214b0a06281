"""A message bus name registry and helpers to own and release names on it."""

import itertools
import re
import warnings

REQUEST_NAME_REPLY_PRIMARY_OWNER = 1
REQUEST_NAME_REPLY_IN_QUEUE = 2
REQUEST_NAME_REPLY_EXISTS = 3
REQUEST_NAME_REPLY_ALREADY_OWNER = 4

RELEASE_NAME_REPLY_RELEASED = 1
RELEASE_NAME_REPLY_NON_EXISTENT = 2
RELEASE_NAME_REPLY_NOT_OWNER = 3

_MAX_NAME_LENGTH = 255
_ELEMENT = re.compile(r"[A-Za-z_-][A-Za-z0-9_-]*\Z")
_UNIQUE_ELEMENT = re.compile(r"[A-Za-z0-9_-]+\Z")
_serials = itertools.count(1)


class BusError(Exception):
    """Raised when the bus refuses a request."""


def _check_name(name, allow_unique):
    if not isinstance(name, str) or not name or len(name) > _MAX_NAME_LENGTH:
        raise BusError("Invalid bus name %r" % (name,))
    if name.startswith(":"):
        if not allow_unique:
            raise BusError("Cannot acquire a unique name %r" % name)
        elements = name[1:].split(".")
        pattern = _UNIQUE_ELEMENT
    else:
        elements = name.split(".")
        pattern = _ELEMENT
    if len(elements) < 2 or not all(pattern.match(e) for e in elements):
        raise BusError("Invalid bus name %r" % name)


class Bus:
    """A connection to a message bus that tracks well-known name owners.

    Requests never queue: a name owned by someone else is refused at once.
    """

    def __init__(self):
        self.unique_name = ":1.%d" % next(_serials)
        self._owners = {}

    def request_name(self, name, owner):
        """Ask for ``name`` on behalf of ``owner``; return a request reply code."""
        _check_name(name, allow_unique=False)
        current = self._owners.get(name)
        if current is None:
            self._owners[name] = owner
            return REQUEST_NAME_REPLY_PRIMARY_OWNER
        if current == owner:
            return REQUEST_NAME_REPLY_ALREADY_OWNER
        return REQUEST_NAME_REPLY_EXISTS

    def release_name(self, name, owner):
        """Give up ``name`` held by ``owner``; return a release reply code."""
        _check_name(name, allow_unique=False)
        current = self._owners.get(name)
        if current is None:
            return RELEASE_NAME_REPLY_NON_EXISTENT
        if current != owner:
            return RELEASE_NAME_REPLY_NOT_OWNER
        del self._owners[name]
        return RELEASE_NAME_REPLY_RELEASED

    def has_owner(self, name):
        """Tell whether ``name`` currently has an owner."""
        _check_name(name, allow_unique=True)
        return name == self.unique_name or name in self._owners


def name_has_owner(bus, name):
    """Return whether ``name`` has an owner; False if the bus reports an error."""
    try:
        return bus.has_owner(name)
    except BusError as error:
        warnings.warn("Failed to get name owner: %s" % error, RuntimeWarning, stacklevel=2)
        return False


def register_name(bus, name):
    """Take ``name`` for this connection; True only if it became the primary owner."""
    try:
        reply = bus.request_name(name, bus.unique_name)
    except BusError as error:
        warnings.warn("Error: %s" % error, RuntimeWarning, stacklevel=2)
        return False
    return reply == REQUEST_NAME_REPLY_PRIMARY_OWNER


def release_name(bus, name):
    """Release ``name`` for this connection; False only if the bus reports an error."""
    try:
        bus.release_name(name, bus.unique_name)
    except BusError as error:
        warnings.warn("Error: %s" % error, RuntimeWarning, stacklevel=2)
        return False
    return True