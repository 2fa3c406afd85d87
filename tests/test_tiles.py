# tests/test_tiles.py
"""Letter extraction, escaping, and the tiered tile/score distribution."""

from __future__ import annotations

import pytest

from emoticon_generator.generation.catalog import EasternComponent, Pair, StandardComponent
from emoticon_generator.generation.catalog import constants as C
from emoticon_generator.tiles import (
    TIER_VALUES,
    build_distribution,
    build_tiers,
    distinct_letters,
    escape_char,
    format_row,
    letters_of,
    unescape_char,
)


# ────────────────────────────────────────────────────────────────────────────
# Letters
# ────────────────────────────────────────────────────────────────────────────

def test_letters_of_standard_entry_first_seen_order():
    entry = StandardComponent(reversible=("|", ""), l2r=(">", "|"), r2l=("<",))
    assert letters_of(entry) == ("|", ">", "<")


def test_letters_of_eastern_entry_includes_pair_members():
    entry = EasternComponent(
        reversible=("^",), left=(">",), right=("<",), paired=(Pair(">", "v"), Pair("", ""))
    )
    assert letters_of(entry) == ("^", ">", "<", "v")


def test_letters_of_builtin_sides():
    assert letters_of(C.EASTERN_SIDES) == ("(", ")", "[", "]", "{", "}", "d", "b")


@pytest.mark.parametrize("entry", [C.STANDARD_NOSE, C.STANDARD_BROWS, C.EASTERN_EYES])
def test_letters_never_empty_or_duplicated(entry):
    letters = letters_of(entry)
    assert "" not in letters
    assert len(letters) == len(set(letters))


def test_distinct_letters():
    assert distinct_letters(["a", "", "b", "a"]) == ("a", "b")


# ────────────────────────────────────────────────────────────────────────────
# Escaping
# ────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "ch,literal",
    [("'", "\\'"), ("\\", "\\\\"), (":", ":"), (" ", " ")],
)
def test_escape_and_unescape(ch, literal):
    assert escape_char(ch) == literal
    assert unescape_char(literal) == ch


def test_format_row():
    assert format_row(":", 5) == "{ ':' , 5 } ,\n"
    assert format_row(escape_char("'"), 9) == "{ '\\'' , 9 } ,\n"


# ────────────────────────────────────────────────────────────────────────────
# Distribution
# ────────────────────────────────────────────────────────────────────────────

def test_tier_values_table():
    assert TIER_VALUES == {0: (5, 1), 1: (2, 2), 2: (3, 6), 3: (2, 9)}
    assert 4 not in TIER_VALUES


def test_build_tiers_layout():
    tiers = build_tiers()
    assert len(tiers) == 5
    assert tiers[0] == letters_of(C.STANDARD_EYES)
    assert tiers[2] == letters_of(C.STANDARD_NOSE) + letters_of(C.STANDARD_BROWS)
    # Eastern mouths are appended raw (not deduplicated against the eyes)
    assert tiers[3][-len(C.EASTERN_MOUTH.reversible):] == C.EASTERN_MOUTH.reversible
    assert tiers[4] == letters_of(C.EASTERN_SIDES)


def test_first_tier_wins():
    dist = build_distribution([("a", "b"), ("b", "c"), ("c", "a", "d")])
    assert [(r.char, r.tier) for r in dist.rows] == [("a", 0), ("b", 0), ("c", 1), ("d", 2)]


def test_tier_four_and_beyond_emit_nothing():
    dist = build_distribution([(), (), (), (), ("x",), ("y",)])
    assert dist.rows == []
    assert dist.alphabet == ""


def test_tier_four_char_is_kept_when_seen_earlier():
    dist = build_distribution([("(",), (), (), (), ("(", ")")])
    assert [r.char for r in dist.rows] == ["("]


def test_escaped_rows_and_unescaped_alphabet():
    dist = build_distribution([("'",), ("\\", "a")])
    assert dist.tile_table == "{ '\\'' , 5 } ,\n{ '\\\\' , 2 } ,\n{ 'a' , 2 } ,\n"
    assert dist.score_table == "{ '\\'' , 1 } ,\n{ '\\\\' , 2 } ,\n{ 'a' , 2 } ,\n"
    assert dist.alphabet == "'\\a"


@pytest.fixture(scope="module")
def builtin():
    return build_distribution()


def test_builtin_row_counts_per_tier(builtin):
    per_tier = {}
    for r in builtin.rows:
        per_tier[r.tier] = per_tier.get(r.tier, 0) + 1
    assert per_tier == {0: 6, 1: 34, 2: 3, 3: 10}


def test_builtin_lowest_tier_attribution(builtin):
    by_char = {r.char: r for r in builtin.rows}
    assert by_char["B"].tier == 0      # standard eye and standard mouth
    assert by_char["v"].tier == 1      # mouth before nose
    assert by_char["-"].tier == 2      # nose before eastern eye/mouth
    assert (by_char["-"].tiles, by_char["-"].score) == (3, 6)
    assert by_char["'"].tier == 3
    assert (by_char["_"].tiles, by_char["_"].score) == (2, 9)
    # eastern-side letters only show up when an earlier tier holds them
    assert by_char["d"].tier == 1
    assert all(r.tier != 4 for r in builtin.rows)


def test_builtin_alphabet(builtin):
    chars = [r.char for r in builtin.rows]
    assert len(chars) == len(set(chars)) == 53
    assert builtin.alphabet == "".join(sorted(chars))
    assert builtin.alphabet.startswith(" !")


def test_builtin_tables_escape_quote_and_backslash(builtin):
    assert "{ '\\\\' , 2 } ,\n" in builtin.tile_table
    assert "{ '\\'' , 2 } ,\n" in builtin.tile_table
    assert "{ '\\'' , 9 } ,\n" in builtin.score_table
    assert builtin.tile_table.startswith("{ ':' , 5 } ,\n")


def test_as_dict_keys(builtin):
    assert set(builtin.as_dict()) == {"tiles", "scores", "alphabet"}
