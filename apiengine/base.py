"""Shared foundations: the engine error type, named objects and debug output."""

import logging

_log = logging.getLogger("apiengine")


class EngineError(RuntimeError):
    """Raised when the engine is asked to do something it cannot do."""


class EngineObject:
    """An object carrying a name; subclasses may override the ``name`` property."""

    def __init__(self, name=""):
        self._name = str(name)

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = str(value)

    def __repr__(self):
        return f"{type(self).__name__}(name={self._name!r})"


def output_string(text):
    """Send a line of text to the engine's debug log."""
    _log.debug("%s", text)