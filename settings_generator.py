# settings_generator.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from random import Random, SystemRandom
from typing import Dict, List, Sequence

from keyboard_and_plugboard import ALPHABET
from utilities import REFLECTOR_WIRINGS, ROTOR_WIRINGS

MAX_PAIRS = len(ALPHABET) // 2

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs (capped at half the alphabet)."""
    k = max(0, min(k, len(alpha) // 2))
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(
    rng: Random | SystemRandom,
    n_rotors: int = 3,
    max_pairs: int = 10,
) -> Dict[str, object]:
    """Pick a random machine from the wheel database.

    Rotor names are drawn without replacement, so *n_rotors* cannot exceed
    the number of known rotors.
    """
    pool = list(ROTOR_WIRINGS)
    if not 1 <= n_rotors <= len(pool):
        raise ValueError(f"n_rotors must be in 1–{len(pool)}, got {n_rotors}")

    rotors = rng.sample(pool, n_rotors)
    return {
        "rotors": rotors,
        "positions": [rng.randrange(len(ALPHABET)) for _ in rotors],
        "reflector": rng.choice(list(REFLECTOR_WIRINGS)),
        "plugs": choose_pairs(ALPHABET, max_pairs, rng),
    }


def parse_cli(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a rotor machine config")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--rotors", type=int, default=3, help="Number of rotors (default: 3)")
    p.add_argument("--pairs", type=int, default=10, help=f"Plugboard pairs, 0–{MAX_PAIRS} (default: 10)")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("machine_config.json"),
        help="Destination JSON file (default: machine_config.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_cli(argv)
    rng = build_rng(args.seed)

    try:
        cfg = generate_settings(rng, n_rotors=args.rotors, max_pairs=args.pairs)
    except ValueError as e:
        raise SystemExit(str(e))

    args.outfile.write_text(json.dumps(cfg, indent=2), encoding="utf-8")
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {cfg['rotors']}\n"
        f"   positions   : {cfg['positions']}\n"
        f"   reflector   : {cfg['reflector']}\n"
        f"   plug pairs  : {len(cfg['plugs'])}")


if __name__ == "__main__":
    main()
