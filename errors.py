# errors.py
from __future__ import annotations


class MachineConfigError(ValueError):
    """Base class for every settings problem caught while building a machine."""


class InvalidWiring(MachineConfigError):
    """Wiring string is not a 26-letter permutation."""


class AsymmetricReflector(MachineConfigError):
    """Reflector wiring is not a fixed-point-free involution."""


class InvalidPlugPair(MachineConfigError):
    """Plugboard pair is a self-pair, malformed, or reuses a letter."""


class NoRotors(MachineConfigError):
    """Engine built without any rotor."""


__all__ = [
    "MachineConfigError",
    "InvalidWiring",
    "AsymmetricReflector",
    "InvalidPlugPair",
    "NoRotors",
]
