# cipher_engine.py
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from errors import NoRotors
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import Reflector, Rotor
from utilities import preprocess_message

debug = Debug()


class CipherEngine:
    """Plugboard, rotor stack and reflector wired into one machine.

    ``rotors[0]`` is the entry (fastest) rotor. The engine owns its rotors;
    the reflector and plugboard are read-only and may be shared.
    """

    def __init__(
        self,
        rotors: Sequence[Rotor],
        reflector: Reflector,
        plugboard: Plugboard | None = None,
    ) -> None:
        if not rotors:
            raise NoRotors("At least one rotor is required")

        self.kb = Keyboard()
        self.pb = plugboard if plugboard is not None else Plugboard()
        self._rotors: tuple[Rotor, ...] = tuple(rotors)
        self.reflector = reflector

    @property
    def rotors(self) -> tuple[Rotor, ...]:
        return self._rotors

    @property
    def positions(self) -> tuple[int, ...]:
        return tuple(r.position for r in self._rotors)

    def reset(self) -> None:
        """Put every rotor back on its starting position."""
        for rotor in self._rotors:
            rotor.reset()

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance the prefix of rotors that were on their notch at key-press.

        Rotor 0 always moves; rotor i moves only if rotor i-1 moved and was
        sitting at its notch *before* moving.
        """
        carry = True
        for rotor in self._rotors:
            if not carry:
                break
            carry = rotor.at_notch()
            rotor.step()
        if debug.active("stepping"):
            debug.log("stepping", f"Rotor pos {list(self.positions)}")

    # ── encipher  ───────────────────────────────────────────────

    def encrypt_letter(self, signal: int) -> int:
        """Step, then push one alphabet position through the machine."""
        self._step_rotors()

        out = self.pb.swap(signal)

        for rotor in self._rotors:
            out = rotor.forward(out)

        out = self.reflector.reflect(out)

        for rotor in reversed(self._rotors):
            out = rotor.backward(out)

        return self.pb.swap(out)

    def encrypt(self, text: str) -> str:
        """Encipher *text*; anything outside A–Z (after upper-casing) is dropped.

        Running the ciphertext through a machine reset to the same starting
        positions gives the plaintext back.
        """
        result = []
        for letter in preprocess_message(text):
            out = self.kb.backward(self.encrypt_letter(self.kb.forward(letter)))
            if debug.active("encrypt"):
                debug.log("encrypt", f"{letter}->{out}")
            result.append(out)
        return "".join(result)

    decrypt = encrypt

    def __repr__(self) -> str:
        return f"<CipherEngine rotors={len(self._rotors)} pos={list(self.positions)}>"
