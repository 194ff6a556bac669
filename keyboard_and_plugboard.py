# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Iterable, Mapping

from debug import Debug
from errors import InvalidPlugPair

ALPHABET = string.ascii_uppercase

debug = Debug()


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """The 26 keys and lamps: letters in, alphabet positions through the
    machine, letters back out. Keys are case-insensitive."""

    _keys: dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}
    _keys.update({ch.lower(): i for ch, i in _keys.items()})

    def __contains__(self, letter: object) -> bool:
        return isinstance(letter, str) and letter in self._keys

    # key → alphabet position
    def forward(self, letter: str) -> int:
        try:
            sig = self._keys[letter]
        except (KeyError, TypeError):
            raise ValueError(f"No key for {letter!r}; expected a letter A–Z") from None
        return sig

    # alphabet position → lamp
    def backward(self, signal: int) -> str:
        if not 0 <= signal < len(ALPHABET):
            raise ValueError(f"Signal {signal} out of range 0–{len(ALPHABET) - 1}")
        lamp = ALPHABET[signal]
        if debug.active("keyboard"):
            debug.log("keyboard", f"lamp {lamp}")
        return lamp


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    """Symmetric letter swaps applied on the way in and on the way out.

    *pairs* may hold two-letter strings (``"AM"``), 2-tuples (``("A", "M")``)
    or be a mapping ``{"A": "M"}``. Letters are case-insensitive.
    """

    def __init__(
        self,
        pairs: Iterable[str | tuple[str, str]] | Mapping[str, str] = (),
    ) -> None:
        if isinstance(pairs, Mapping):
            pairs = list(pairs.items())

        self._swap: list[int] = list(range(len(ALPHABET)))
        self._pairs: list[str] = []
        used: set[str] = set()

        for raw in pairs:
            a, b = self._normalise(raw)

            if a == b:
                raise InvalidPlugPair(f"Plugboard cannot map a letter to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise InvalidPlugPair(f"Letter {dup!r} already used in plugboard")

            # passed validation → commit swap
            ia, ib = ALPHABET.index(a), ALPHABET.index(b)
            self._swap[ia], self._swap[ib] = ib, ia
            self._pairs.append(a + b)
            used.update((a, b))

    @staticmethod
    def _normalise(raw) -> tuple[str, str]:
        if isinstance(raw, str):
            if len(raw) != 2:
                raise InvalidPlugPair(f"Pair {raw!r} must be exactly 2 letters")
            a, b = raw
        else:
            try:
                a, b = raw
            except (TypeError, ValueError):
                raise InvalidPlugPair(f"Pair {raw!r} must hold exactly 2 letters") from None
            if not (isinstance(a, str) and isinstance(b, str)):
                raise InvalidPlugPair(f"Pair {raw!r} must hold letters")

        a, b = a.upper(), b.upper()
        for ch in (a, b):
            if len(ch) != 1 or ch not in ALPHABET:
                raise InvalidPlugPair(f"Symbol {ch!r} is not a letter A–Z")
        return a, b

    @property
    def pairs(self) -> tuple[str, ...]:
        return tuple(self._pairs)

    def swap(self, signal: int) -> int:
        out = self._swap[signal]
        debug.log("plugboard", f"{ALPHABET[signal]}->{ALPHABET[out]}")
        return out

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self._pairs) or '-'}>"
