from collections import Counter

import pytest

from fillit import bitsolver
from fillit.bitsolver import (
    TEMPLATES,
    match_template,
    parse,
    solve,
    sqrt_ceil,
    sqrt_floor,
)
from fillit.parser import parse_pieces
from fillit.solver import render
from fillit.solver import solve as reference_solve
from fillit.tester.pieces import PiecesStash

SQUARE = "##..\n##..\n....\n....\n"
BAR = "####\n....\n....\n....\n"
TEE = ".#..\n###.\n....\n....\n"


@pytest.mark.parametrize(
    "sid, mask8, mask11",
    [
        (0, 0x10302, 0x401802),
        (1, 0x702, 0x3802),
        (2, 0x30202, 0xC01002),
        (3, 0x20302, 0x801802),
        (4, 0x306, 0x1806),
        (5, 0x10301, 0x401801),
        (6, 0x207, 0x1007),
        (7, 0x701, 0x3801),
        (8, 0x603, 0x3003),
        (9, 0x1010101, 0x200400801),
        (10, 0x10103, 0x400803),
        (11, 0x407, 0x2007),
        (12, 0x30101, 0xC00801),
        (13, 0x303, 0x1803),
        (14, 0x20203, 0x801003),
        (15, 0x107, 0x807),
        (16, 0x704, 0x3804),
        (17, 0x20301, 0x801801),
        (18, 0xF, 0xF),
    ],
)
def test_template_masks(sid, mask8, mask11):
    assert TEMPLATES[sid].mask(8) == mask8
    assert TEMPLATES[sid].mask(11) == mask11


@pytest.mark.parametrize("v", range(0, 200))
def test_sqrt_bounds(v):
    f = sqrt_floor(v)
    c = sqrt_ceil(v)
    assert f * f <= v < (f + 1) * (f + 1)
    assert c * c >= v
    assert c == 0 or (c - 1) * (c - 1) < v


def test_sqrt_floor_negative():
    with pytest.raises(ValueError):
        sqrt_floor(-1)


def test_every_placement_matches_a_template():
    stash = PiecesStash()
    by_shape = {}
    for piece in stash.pieces.values():
        block = piece.dump()
        template = match_template(block)
        by_shape.setdefault(piece.shape(), set()).add(template.sid)
    assert all(len(sids) == 1 for sids in by_shape.values())
    assert len({sid for sids in by_shape.values() for sid in sids}) == 19


def test_match_square():
    assert match_template("....\n.##.\n.##.\n....\n").sid == 13


def test_parse_two_pieces():
    templates = parse(SQUARE + "\n" + BAR)
    assert [t.sid for t in templates] == [13, 18]


def test_parse_ignores_partial_trailing_block():
    assert [t.sid for t in parse(SQUARE + "\n##")] == [13]


@pytest.mark.parametrize(
    "text",
    [
        "##x.\n##..\n....\n....\n",
        "#..#\n#..#\n....\n....\n",
        "###.\n....\n....\n....\n",
        SQUARE + "x" + BAR,
    ],
)
def test_parse_errors(text):
    with pytest.raises(ValueError):
        parse(text)


@pytest.mark.parametrize(
    "text",
    [
        SQUARE,
        BAR,
        TEE + "\n" + BAR + "\n" + SQUARE,
        "\n".join([TEE, TEE, BAR, SQUARE, TEE]),
        "\n".join([BAR] * 4),
    ],
)
def test_solve_agrees_with_reference(text):
    rows = solve(parse(text))
    expected = render(reference_solve(parse_pieces(text)))
    assert "".join(row + "\n" for row in rows) == expected


def test_solve_square_and_letters():
    templates = parse("\n".join([TEE, BAR, SQUARE]))
    rows = solve(templates)
    assert all(len(row) == len(rows) for row in rows)
    counts = Counter("".join(rows))
    assert counts["A"] == counts["B"] == counts["C"] == 4


def test_solve_single_square():
    assert solve([TEMPLATES[13]]) == ["AA", "AA"]


def test_solve_empty():
    with pytest.raises(ValueError):
        solve([])


def test_main_file(tmp_path, capsys):
    path = tmp_path / "map.fillit"
    path.write_text(SQUARE)
    assert bitsolver.main([str(path)]) == 0
    assert capsys.readouterr().out == "AA\nAA\n"


def test_main_bad_file(tmp_path, capsys):
    path = tmp_path / "bad.fillit"
    path.write_text("###.\n....\n....\n....\n")
    assert bitsolver.main([str(path)]) == 1
    assert "FAILED" in capsys.readouterr().err


def test_main_random(capsys):
    assert bitsolver.main([]) == 0
    out = capsys.readouterr().out
    assert out.count("A") == 4