# main.py
from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from cipher_engine import CipherEngine
from debug import COMPONENTS, Debug
from keyboard_and_plugboard import Plugboard
from rotor_and_reflector import Reflector, Rotor
from utilities import (
    DEFAULT_SETTINGS,
    REFLECTOR_WIRINGS,
    ROTOR_WIRINGS,
    group_blocks,
    resolve_wiring,
)

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────

DEFAULT_CONFIG_PATH = Path("machine_config.json")
REQUIRED_KEYS = {"rotors", "positions", "reflector", "plugs"}

debug = Debug()


@dataclass(slots=True)
class Config:
    """Runtime switches for the command-line front end."""

    block: int = 5          # display group size, 0 = no grouping
    verify: bool = True     # reset and decrypt after encrypting


# ────────────────────────────────────────────────────────────────────────
#  1. JSON loading helpers
# ────────────────────────────────────────────────────────────────────────


def load_config(path: str | Path) -> dict:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a JSON object")
    missing = REQUIRED_KEYS - data.keys()
    if missing:
        raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")
    return data


def _list_of(cfg: dict, key: str) -> list:
    value = cfg.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"{key!r} must be a list, got {type(value).__name__}")
    return value


def build_from_cfg(cfg: dict) -> CipherEngine:
    """Build a fresh engine from a settings dictionary."""
    labels = _list_of(cfg, "rotors")
    positions = _list_of(cfg, "positions")
    if len(positions) != len(labels):
        raise ValueError(
            f"positions length mismatch: {len(positions)} for {len(labels)} rotors"
        )
    for pos in positions:
        # bool is an int subclass; JSON true/false is not a position
        if isinstance(pos, bool) or not isinstance(pos, int):
            raise ValueError(f"Rotor position must be an integer, got {pos!r}")

    rotors = [
        Rotor(resolve_wiring(label, ROTOR_WIRINGS), pos)
        for label, pos in zip(labels, positions)
    ]
    reflector = Reflector(resolve_wiring(cfg["reflector"], REFLECTOR_WIRINGS))
    plugboard = Plugboard(_list_of(cfg, "plugs"))
    return CipherEngine(rotors, reflector, plugboard)


def select_settings(config_path: str | None) -> tuple[dict, str]:
    """Return `(settings, source)`; falls back to the built-in machine."""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if config_path or path.exists():
        return load_config(path), str(path)
    return dict(DEFAULT_SETTINGS), "built-in defaults"


# ────────────────────────────────────────────────────────────────────────
#  2. Session
# ────────────────────────────────────────────────────────────────────────


def run_message(engine: CipherEngine, text: str, cfg: Config) -> list[str]:
    """Encrypt *text* from the starting positions and return the report lines."""
    engine.reset()
    cipher = engine.encrypt(text)
    lines = [f"Encrypted: {group_blocks(cipher, cfg.block)}"]

    if cfg.verify:
        engine.reset()
        lines.append(f"Decrypted: {engine.decrypt(cipher)}")
    return lines


# ────────────────────────────────────────────────────────────────────────
#  3. CLI
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a rotor cipher machine")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encrypt. If omitted, an interactive REPL starts.")
    p.add_argument("--config", metavar="FILE", help=f"Load machine settings from JSON (default: {DEFAULT_CONFIG_PATH} if present).")
    p.add_argument("--block", type=int, default=5, help="Group ciphertext in blocks of N letters, 0 to disable. Default: 5")
    p.add_argument("--no-verify", dest="verify", action="store_false", help="Skip the decrypt-back check.")
    p.add_argument("--debug", nargs="+", metavar="COMPONENT", choices=COMPONENTS, default=[], help=f"Trace components: {', '.join(COMPONENTS)}")
    return p.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    if args.debug:
        debug.enable(*args.debug)

    try:
        settings, source = select_settings(args.config)
        engine = build_from_cfg(settings)
    except (OSError, ValueError) as e:  # JSON and wiring errors are ValueErrors
        raise SystemExit(f"Failed to load configuration: {e}")

    cfg = Config(block=args.block, verify=args.verify)

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        print("\n".join(run_message(engine, args.message, cfg)))
        return

    # interactive REPL ---------------------------------------------------
    print(f"Loaded {len(engine.rotors)}-rotor machine from {source}.")
    print("Type blank line to quit.\n")
    while True:
        try:
            txt = input("Message > ")
        except EOFError:
            break
        if not txt.strip():
            break
        print("\n".join(run_message(engine, txt, cfg)))
        print()


if __name__ == "__main__":
    main()
