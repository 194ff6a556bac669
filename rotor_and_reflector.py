# rotor_and_reflector.py
from __future__ import annotations

from debug import Debug
from errors import AsymmetricReflector, InvalidWiring
from keyboard_and_plugboard import ALPHABET

SIZE = len(ALPHABET)

debug = Debug()


def check_wiring(wiring: str, kind: str = "rotor") -> str:
    """Return *wiring* upper-cased, or raise InvalidWiring if it is not a
    permutation of A–Z."""
    if not isinstance(wiring, str):
        raise InvalidWiring(f"{kind} wiring must be a string, got {type(wiring).__name__}")

    wiring = wiring.upper()
    if len(wiring) != SIZE:
        raise InvalidWiring(f"{kind} wiring must be {SIZE} letters, got {len(wiring)}")

    dupes = sorted({c for c in wiring if wiring.count(c) > 1})
    missing = sorted(set(ALPHABET) - set(wiring))
    if dupes or missing:
        raise InvalidWiring(
            f"{kind} wiring {wiring!r} is not a permutation "
            f"(repeated: {''.join(dupes) or '-'}, missing: {''.join(missing) or '-'})"
        )
    return wiring


class Rotor:
    def __init__(self, wiring: str, position: int = 0) -> None:
        self.wiring = check_wiring(wiring, "rotor")

        # integer lookup tables
        self._fwd = [ALPHABET.index(c) for c in self.wiring]
        self._rev = [0] * SIZE
        for contact, out in enumerate(self._fwd):
            self._rev[out] = contact

        self.initial_position = position % SIZE
        self._position = self.initial_position

    @property
    def position(self) -> int:
        return self._position

    # ── stepping --------------------------------------------------
    def step(self) -> None:
        self._position = (self._position + 1) % SIZE
        if debug.active("rotor"):
            debug.log("rotor", f"{self.wiring[:4]}… -> pos {self._position}")

    def at_notch(self) -> bool:
        """True while the rotor sits on its zero mark."""
        return self._position == 0

    def reset(self) -> None:
        """Return to the position the rotor was built with."""
        self._position = self.initial_position

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        return self._fwd[(sig + self._position) % SIZE]

    def backward(self, sig: int) -> int:
        return (self._rev[sig] - self._position) % SIZE

    def __repr__(self) -> str:
        return f"<Rotor {self.wiring} pos={self._position}>"


class Reflector:
    def __init__(self, wiring: str) -> None:
        self.wiring = check_wiring(wiring, "reflector")

        # involution (w[i] = j ⇒ w[j] = i) with no self-maps
        for i, c in enumerate(self.wiring):
            j = ALPHABET.index(c)
            if i == j:
                raise AsymmetricReflector(f"Reflector maps {c!r} to itself")
            if self.wiring[j] != ALPHABET[i]:
                raise AsymmetricReflector(
                    f"Reflector maps {ALPHABET[i]!r}->{c!r} but {c!r}->{self.wiring[j]!r}"
                )

        self._map = [ALPHABET.index(c) for c in self.wiring]

    def reflect(self, sig: int) -> int:
        out = self._map[sig]
        debug.log("reflector", f"{ALPHABET[sig]}->{ALPHABET[out]}")
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring}>"
