# fillit

Packs up to 26 tetrominoes into the smallest square that can hold them all,
and ships tools that generate random maps and compare two solver programs on
them.

## Install

    pip install .

For running the test suite:

    pip install ".[test]"
    pytest

## Input format

A map file holds 1 to 26 blocks of four lines, each line four characters of
`.` or `#` followed by a newline. Each block holds exactly one tetromino (four
`#` cells touching edge to edge), and blocks are separated by one empty line:

    ....
    ##..
    .#..
    .#..

    ....
    ####
    ....
    ....

## Solving a map

    fillit path/to/file.fillit

The smallest square is printed with the pieces labelled `A`, `B`, `C`… in the
order they appear in the file; empty cells are `.`. Pieces are placed in file
order, each at the first free position row by row. An invalid file prints
`error`; a missing or unreadable file, or a wrong number of arguments, prints
the usage line.

A bitmask-based solver reading the same format is also available:

    fillit-bitsolve path/to/file.fillit

Run without an argument it solves a single randomly chosen piece. A file it
cannot read or parse is reported on standard error with exit status 1.

## Comparing two solvers

    fillit-tester NPIECES NTESTS BINARY_A BINARY_B

Recreates `./map` and `./log`, writes up to `NTESTS` distinct random maps of
`NPIECES` pieces each into `./map`, then runs both programs on every map (the
map path is the program's only argument) in parallel, one worker per
processor, with a one-second timeout per run. It prints total, average,
minimum and maximum run times, crash counts, `error` output counts, timeouts
and the number of maps on which the two outputs differ. Crash details and up
to five output differences (with a unified diff) are written to `./log`.

The older single-shot tester works on one random map at a time:

    fillit-legacy-tester                        # write one <shape>.txt per shape
    fillit-legacy-tester SIZE                   # print a map of SIZE pieces
    fillit-legacy-tester SIZE BINARY            # feed it to BINARY on stdin
    fillit-legacy-tester SIZE BINARY_A BINARY_B # feed it to both

## Library use

    from fillit.parser import load_file
    from fillit.solver import solve, render

    pieces = load_file("map.fillit")
    print(render(solve(pieces)), end="")

`fillit.parser.FillitError` is raised for malformed input;
`fillit.parser.parse_pieces` takes the map text directly.

Other modules:

- `fillit.bitsolver`: `parse`, `match_template`, `solve` over the 19 fixed
  `Template` shapes.
- `fillit.tester.pieces`: `Piece` and `PiecesStash`, the 113 placements of a
  tetromino inside a 4x4 block, grouped by shape.
- `fillit.tester.combos`: `ExhaustiveHeap` and `SuperficialHSet`, generators of
  never-repeated random piece combinations.
- `fillit.tester.tasks`, `fillit.tester.runner`, `fillit.tester.report`: the
  building blocks of `fillit-tester`.
- `fillit.ft`: small character (`chars`), integer (`numbers`) and string
  (`strings`) helpers.