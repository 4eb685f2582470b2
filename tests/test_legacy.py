import random
import sys

import pytest

from fillit.tester import legacy
from fillit.tester.legacy import (
    compare_binaries,
    dump_pieces,
    random_pieces,
    run_binary,
    write_shape_files,
)
from fillit.tester.pieces import Piece, PiecesStash

ECHO = [sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read())"]
UPPER = [sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read().replace('#', 'X'))"]


@pytest.fixture(scope="module")
def stash():
    return PiecesStash()


def test_random_pieces_from_stash(stash):
    pieces = random_pieces(stash, 30, random.Random(7))
    assert len(pieces) == 30
    valid = set(stash.pieces.values())
    assert all(piece in valid for piece in pieces)


def test_random_pieces_deterministic(stash):
    a = random_pieces(stash, 10, random.Random(3))
    b = random_pieces(stash, 10, random.Random(3))
    assert a == b


def test_random_pieces_negative_count(stash):
    assert random_pieces(stash, -2, random.Random(1)) == []


def test_dump_pieces_format():
    bar = Piece(("####", "....", "....", "...."))
    square = Piece(("##..", "##..", "....", "...."))
    text = dump_pieces([bar, square])
    assert text == bar.dump() + "\n" + square.dump() + "\n"
    assert text.count("\n") == 10


def test_run_binary_feeds_stdin(stash):
    pieces = random_pieces(stash, 3, random.Random(5))
    assert run_binary(ECHO, pieces) == dump_pieces(pieces)


def test_run_binary_missing(tmp_path, stash):
    with pytest.raises(OSError):
        run_binary(str(tmp_path / "missing"), random_pieces(stash, 1, random.Random(0)))


def test_compare_binaries(stash):
    pieces = random_pieces(stash, 2, random.Random(9))
    out_a, out_b = compare_binaries(ECHO, UPPER, pieces)
    assert out_a == dump_pieces(pieces)
    assert out_b == dump_pieces(pieces).replace("#", "X")


def test_write_shape_files(tmp_path, stash):
    paths = write_shape_files(stash, tmp_path)
    assert len(paths) == 19
    total = 0
    for path in paths:
        text = path.read_text()
        assert text.count("#") % 4 == 0
        total += text.count("#") // 4
        assert text.count("\n") == (text.count("#") // 4) * 5
    assert total == 113


def test_main_prints_map(capsys):
    assert legacy.main(["3"]) == 0
    out = capsys.readouterr().out
    assert out.count("#") == 12
    assert out.count("\n") == 15


def test_main_writes_shape_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert legacy.main([]) == 0
    assert len(list(tmp_path.glob("*.txt"))) == 19


def test_main_bad_size(capsys):
    assert legacy.main(["many"]) == 2
    assert "usage" in capsys.readouterr().err


def test_main_missing_binary(tmp_path, capsys):
    assert legacy.main(["1", str(tmp_path / "nope")]) == 1
    assert "Could not run" in capsys.readouterr().err