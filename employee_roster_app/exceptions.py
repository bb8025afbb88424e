from __future__ import annotations


class RosterError(Exception):
    """Base class for errors raised by the employee roster."""


class InvalidArgument(RosterError, ValueError):
    """A non-positive id, a negative salary or a duplicate id."""


class EmptyCollection(RosterError, LookupError):
    """An aggregate was requested over an empty roster."""
