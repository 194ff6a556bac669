# utilities.py
from __future__ import annotations

from typing import Dict

from keyboard_and_plugboard import ALPHABET

# ────────────────────────────────────────────────────────────────────────
#  1. Text preprocessing
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(msg: str, alpha: str = ALPHABET) -> str:
    """Upper‑case and drop every character that is not in *alpha*.

    Characters are upper-cased one at a time; one that expands on
    upper-casing (``"ß"`` -> ``"SS"``) is dropped, so each key press yields
    at most one letter.
    """
    out = []
    for ch in msg:
        up = ch.upper()
        if len(up) == 1 and up in alpha:
            out.append(up)
    return "".join(out)


def group_blocks(text: str, size: int = 5) -> str:
    """Split *text* into space-separated groups of *size* letters."""
    if size <= 0:
        return text
    return " ".join(text[i : i + size] for i in range(0, len(text), size))


# ────────────────────────────────────────────────────────────────────────
#  2. Wheel database
# ────────────────────────────────────────────────────────────────────────

# Rotors -----------------------------------------------------------------
ROTOR_WIRINGS: Dict[str, str] = {
    "I":   "EKMFLGDQVZNTOWYHXUSPAIBRCJ",
    "II":  "AJDKSIRUXBLHWTMCQGZNPYFVOE",
    "III": "BDFHJLCPRTXVZNYEIWGAKMUSQO",
    "IV":  "ESOVPZJAYQUIRHXLNFTGKDCMWB",
    "V":   "VZBRGITYUPSDNHLXAWMJQOFECK",
    "VI":  "JPGVOUMFYQBENHZRDKASXLICTW",
    "VII": "NZJHGRCXMYSWBOUFAIVLPEKQDT",
}

# Reflectors -------------------------------------------------------------
REFLECTOR_WIRINGS: Dict[str, str] = {
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
}

# Machine used when no configuration file is supplied --------------------
DEFAULT_SETTINGS: Dict[str, object] = {
    "rotors": ["I", "II", "III"],
    "positions": [0, 0, 0],
    "reflector": "B",
    "plugs": ["AM", "GL", "ET"],
}


def resolve_wiring(label: str, table: Dict[str, str]) -> str:
    """Turn a wheel name (``"II"``, ``"b"``) or a literal wiring into wiring.

    Anything with the full alphabet length is taken as wiring as-is and left
    for the wheel constructor to validate.
    """
    if not isinstance(label, str):
        raise ValueError(f"Wheel must be a name or wiring string, got {label!r}")
    if len(label) == len(ALPHABET):
        return label
    try:
        return table[label.strip().upper()]
    except KeyError:
        names = ", ".join(table)
        raise ValueError(f"Unknown wheel {label!r}. Expected one of: {names}") from None


__all__ = [
    "ROTOR_WIRINGS",
    "REFLECTOR_WIRINGS",
    "DEFAULT_SETTINGS",
    "preprocess_message",
    "group_blocks",
    "resolve_wiring",
]
