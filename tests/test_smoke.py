from emoticon_generator.generation import generate_all
from emoticon_generator.tiles import build_distribution


def test_smoke():
    out = generate_all()
    assert isinstance(out, list) and out
    assert "<3" in out and ":-)" in out and "(^_^)" in out
    dist = build_distribution()
    assert dist.tile_table and dist.score_table and dist.alphabet
