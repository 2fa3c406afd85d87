# tests/test_generation_standard.py
from __future__ import annotations

import pytest

from emoticon_generator.generation.catalog import Orientation, StandardComponent
from emoticon_generator.generation.catalog import constants as C
from emoticon_generator.generation.standard import generate_standard, is_excluded_standard

L2R = Orientation.LEFT_TO_RIGHT
R2L = Orientation.RIGHT_TO_LEFT


def _builtin(orientation):
    return generate_standard(
        C.STANDARD_BROWS, C.STANDARD_EYES, C.STANDARD_NOSE, C.STANDARD_MOUTH, orientation
    )


# ────────────────────────────────────────────────────────────────────────────
# Exclusion rule
# ────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "eye,nose,mouth,expected",
    [
        (":", "*", "*", True),    # nose == mouth
        ("B", "", "B", True),     # eye == mouth, nothing in between
        ("B", "-", "B", False),   # a nose separates them
        (":", "v", "V", True),    # curated clash
        (":", "^", "V", False),
        (":", "v", "v", True),
        (":", "", ")", False),
    ],
)
def test_is_excluded_standard(eye, nose, mouth, expected):
    assert is_excluded_standard(eye, nose, mouth) is expected


# ────────────────────────────────────────────────────────────────────────────
# Generation
# ────────────────────────────────────────────────────────────────────────────

def test_left_to_right_concatenation_order():
    out = generate_standard(
        StandardComponent(reversible=(">",)),
        StandardComponent(reversible=(":",)),
        StandardComponent(reversible=("-",)),
        StandardComponent(reversible=(")",)),
        L2R,
    )
    assert out == [">:-)"]


def test_right_to_left_reverses_components_not_glyphs():
    out = generate_standard(
        StandardComponent(r2l=("<",)),
        StandardComponent(reversible=(":",)),
        StandardComponent(reversible=("-",)),
        StandardComponent(reversible=("(",)),
        R2L,
    )
    assert out == ["(-:<"]


def test_optional_components_are_elided():
    out = generate_standard(
        StandardComponent(reversible=("",)),
        StandardComponent(reversible=(":",)),
        StandardComponent(reversible=("",)),
        StandardComponent(reversible=("D",)),
        L2R,
    )
    assert out == [":D"]


def test_directional_slots_only_used_in_their_orientation():
    mouth = StandardComponent(reversible=(")",), l2r=("P",), r2l=("d",))
    eyes = StandardComponent(reversible=(":",))
    empty = StandardComponent(reversible=("",))
    assert generate_standard(empty, eyes, empty, mouth, L2R) == [":)", ":P"]
    assert generate_standard(empty, eyes, empty, mouth, R2L) == ["):", "d:"]


def test_empty_component_yields_nothing():
    assert generate_standard(
        C.STANDARD_BROWS, C.STANDARD_EYES, StandardComponent(), C.STANDARD_MOUTH, L2R
    ) == []


def test_bad_orientation_raises():
    with pytest.raises(ValueError):
        generate_standard(
            C.STANDARD_BROWS, C.STANDARD_EYES, C.STANDARD_NOSE, C.STANDARD_MOUTH, "sideways"
        )


def test_builtin_counts():
    # 4 brows x (6 eyes x 6 noses x 33 mouths - 18 nose/mouth clashes - 1 "B" eye/mouth)
    assert len(_builtin(L2R)) == 4676
    # 4 brows x (4 eyes x 6 noses x 28 mouths - 12 nose/mouth clashes)
    assert len(_builtin(R2L)) == 2640


def test_orientations_symmetric_when_directional_slots_match():
    brows = StandardComponent(reversible=("|", ""), l2r=(">",), r2l=("<",))
    mouth = StandardComponent(reversible=(")", "("), l2r=("P",), r2l=("d",))
    eyes = StandardComponent(reversible=(":", "="))
    nose = C.STANDARD_NOSE
    assert len(generate_standard(brows, eyes, nose, mouth, L2R)) == len(
        generate_standard(brows, eyes, nose, mouth, R2L)
    )


@pytest.mark.parametrize("orientation", [L2R, R2L])
def test_v_nose_never_meets_V_mouth(orientation):
    out = set(_builtin(orientation))
    if orientation is L2R:
        assert ":vV" not in out and ":^V" in out
    else:
        assert "Vv:" not in out and "V^:" in out
    assert not any("vV" in e or "Vv" in e for e in out)


def test_no_nose_equals_mouth_in_builtin_output():
    out = set(_builtin(L2R))
    assert ":**" not in out
    assert ":vv" not in out
    assert ":-*" in out


def test_eye_mouth_clash_needs_a_nose():
    out = set(_builtin(L2R))
    assert "BB" not in out
    assert "B-B" in out
