"""
Keyboard letter/signal conversion and plugboard swaps.
"""

import string

import pytest

from errors import InvalidPlugPair
from keyboard_and_plugboard import ALPHABET, Keyboard, Plugboard


def sig(letter):
    return ALPHABET.index(letter)


# ── keyboard ──────────────────────────────────────────────────────────────────
def test_keyboard_round_trip():
    kb = Keyboard()
    assert kb.forward("A") == 0
    assert kb.forward("Z") == 25
    assert kb.backward(kb.forward("Q")) == "Q"


def test_keyboard_keys_are_case_insensitive():
    kb = Keyboard()
    assert kb.forward("a") == kb.forward("A") == 0
    assert "q" in kb and "Q" in kb
    assert kb.backward(kb.forward("m")) == "M"


@pytest.mark.parametrize("key", ["1", "", "AB", "ß", "é", None])
def test_keyboard_rejects_unknown_symbols(key):
    kb = Keyboard()
    assert key not in kb
    with pytest.raises(ValueError):
        kb.forward(key)


@pytest.mark.parametrize("signal", [-1, 26])
def test_keyboard_rejects_out_of_range_signal(signal):
    with pytest.raises(ValueError):
        Keyboard().backward(signal)


# ── plugboard ─────────────────────────────────────────────────────────────────
def test_swap_is_symmetric():
    pb = Plugboard(["AM", "GL", "ET"])
    assert pb.swap(sig("A")) == sig("M")
    assert pb.swap(sig("M")) == sig("A")
    assert pb.swap(sig("L")) == sig("G")
    assert pb.swap(sig("T")) == sig("E")


def test_unpaired_letters_pass_through():
    pb = Plugboard(["AM"])
    for letter in "BCDEFGHIJKLNOPQRSTUVWXYZ":
        assert pb.swap(sig(letter)) == sig(letter)


def test_empty_plugboard_is_identity():
    pb = Plugboard()
    assert all(pb.swap(i) == i for i in range(26))
    assert pb.pairs == ()


def test_pair_forms_are_interchangeable():
    by_str = Plugboard(["am", "Gl"])
    by_tuple = Plugboard([("A", "M"), ("g", "L")])
    by_map = Plugboard({"A": "M", "G": "L"})
    for i in range(26):
        assert by_str.swap(i) == by_tuple.swap(i) == by_map.swap(i)
    assert by_str.pairs == ("AM", "GL")


def test_thirteen_pairs_fill_the_board():
    letters = string.ascii_uppercase
    pairs = [letters[i : i + 2] for i in range(0, 26, 2)]
    pb = Plugboard(pairs)
    assert all(pb.swap(i) != i for i in range(26))


@pytest.mark.parametrize("pairs", [
    ["AA"],
    ["AB", "BC"],
    ["AB", "CA"],
    ["ABC"],
    ["A"],
    ["A1"],
    [("A",)],
    [("A", 1)],
    [42],
])
def test_bad_pairs_rejected(pairs):
    with pytest.raises(InvalidPlugPair):
        Plugboard(pairs)


def test_repr_lists_pairs():
    assert repr(Plugboard(["AM", "ET"])) == "<Plugboard AM ET>"
