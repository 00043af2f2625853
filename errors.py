# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every fault the machine or its loaders report."""


class AlphabetError(EnigmaError):
    """Duplicate, reserved, or unknown alphabet character."""


class CycleError(EnigmaError):
    """Malformed cycle notation."""


class RotorError(EnigmaError):
    """Bad rotor definition, unknown rotor name, or slot-role violation."""


class SettingError(EnigmaError):
    """Bad initial setting or ring setting."""


class PlugboardError(EnigmaError):
    """Plugboard wiring that is not an involution."""


class InputError(EnigmaError):
    """Bad message stream."""


class ConfigError(EnigmaError):
    """Configuration file that cannot be read or does not parse."""


__all__ = [
    "EnigmaError",
    "AlphabetError",
    "CycleError",
    "RotorError",
    "SettingError",
    "PlugboardError",
    "InputError",
    "ConfigError",
]
