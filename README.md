# practica

A collection of small, self-contained exercises as an ordinary Python
package. It has no dependencies beyond the standard library. Each module
does one thing and can be used on its own:

| Module | What it does |
| --- | --- |
| `practica.binops` | Integer operators looked up by symbol: `apply("+", 10, 5)`; `divide` and `mod` truncate toward zero. |
| `practica.wordcount` | `count_words` counts words up to the end mark `-1`, skipping `the`, `but`, `and`, `or`; `format_counts` renders them; `word_lengths` pairs words with their lengths. |
| `practica.strblob` | `StrBlob`, a list of strings whose `front`, `back` and `pop` raise `IndexError` when it is empty. |
| `practica.textquery` | `TextQuery` indexes lines by word; `query` returns a `QueryResult`, rendered by `format_result`. |
| `practica.pricing` | `Book` and `DiscountedBook`, whose `price(coupon)` differ by the discount. |
| `practica.employee` | `Employee`, read with `Employee.parse("1 alice 1200.5")` and written with `str()`; malformed text gives a blank employee. |
| `practica.sorting` | `insertion_sort` and a stable `merge_sort`, each returning a sorted copy. |
| `practica.bitree` | `build_tree` from a preorder string with `#` for an empty subtree; `depth`, `parent_value`, `find` and `postorder`. |
| `practica.sudoku` | A dancing-links solver: `SudokuSolver` and `solve_sudoku`. |
| `practica.sudoku_server` | An asyncio TCP service solving `[id:]puzzle` lines; `process_request` and `handle_data` hold its protocol. |
| `practica.echo` | `EchoServer`, an asyncio TCP echo server. |
| `practica.chargen` | `ChargenServer`, which streams the block from `build_message()` without end and can report its throughput. |
| `practica.complexops` | `to_complex` (rounding parts to single precision), `split_complex`, `mag_sqr` and `safe_divide`. |
| `practica.pnseq` | `make_sequence(length, c_init)`, the length-31 Gold pseudo-random sequence. |
| `practica.dmrs` | `generate_dmrs(DMRSConfig(...))`, the uplink reference sequences of both slots of a subframe. |
| `practica.deinterleaver` | `ULSCHDeinterleaver` splits soft values of a subframe into data, CQI, ACK and RI parts. |
| `practica.keygen` | `generate_keys` has worker threads draw keys and meet at a barrier. |
| `practica.pollpipes` | `poll_pipes` writes to random pipes and reports which are readable. |
| `practica.connection` | `Connector.session` yields a `Connection` that is disconnected when the block ends. |

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Using it from Python

Solving a sudoku (81 digits, `0` for an empty cell):

```python
from practica.sudoku import solve_sudoku

puzzle = "000000010400000000020000000000050407008000300001090000300400200050100000000806000"
print(solve_sudoku(puzzle))
# 693784512487512936125963874932651487568247391741398625319475268856129743274836159
```

A puzzle with no solution, or with a character that is not a digit, gives
back the string `NoSolution`; a puzzle that is not 81 characters long
raises `ValueError`.

A checked list of strings:

```python
from practica.strblob import StrBlob

blob = StrBlob(["acer", "lenove"])
blob.append("HP")
print(blob.front(), blob.back(), len(blob))
```

Sorting:

```python
from practica.sorting import insertion_sort, merge_sort

print(merge_sort([12, 0, 11, 3, 6, 2, 1, 5]))
print(insertion_sort([3.14, 1.68, 0.0, 1.12]))
```

Binary trees from a preorder description:

```python
from practica.bitree import build_tree, depth, parent_value, postorder

root = build_tree("ab#d##c#e##")
print(depth(root), parent_value(root, "e"), postorder(root))
```

Gold sequences and reference signals:

```python
from practica.pnseq import make_sequence
from practica.dmrs import DMRSConfig, generate_dmrs

bits = make_sequence(16, 0x1234)
slot0, slot1 = generate_dmrs(DMRSConfig(cell_id=200, subframe=2, length_prb=25,
                                        group_hopping=True, group_assignment=15,
                                        cyclic_shift=5))
```

The servers are asyncio objects: `await server.start()` begins listening,
`listening_port` gives the bound port, `serve_forever()` runs and
`close()` stops listening and drops open connections.

## Commands

- `practica-wordcount` — count the words read from standard input.
- `practica-textquery [FILE]` — index a text file (default `test.txt`) and answer words read from standard input until `q`.
- `practica-bitree [TREE]` — read a tree description (or a line of standard input) and print its depth, the parent of `e`, the node `b` and the postorder.
- `practica-sudoku-server [--host H] [--port 9981]` — serve sudoku solving over TCP. Send `id:puzzle` or `puzzle` ended by `\r\n`; the reply is `id:solution` or `solution`. A wrong-length puzzle gets `Bad Request!` and more than 100 bytes without a line end get `Id too long!`, and the connection is closed.
- `practica-echo [--host H] [--port 2007]` — run the TCP echo server.
- `practica-chargen [--host H] [--port 2019] [--quiet]` — run the character generator, printing MiB/s every three seconds unless `--quiet`.
- `practica-keygen [--count N] [--seed S]` — generate keys on worker threads and print them, then each scaled by its position.
- `practica-pollpipes [--pipes N] [--writes N] [--seed S]` — write to random pipes and report which are readable.
- `practica-connection [DESTINATION]` — open a connection and watch it close when the session ends.

## Limits

- `generate_dmrs` does not support sequence hopping; asking for it raises `ValueError`.
- `ULSCHDeinterleaver` accepts QPSK, 16QAM and 64QAM only; BPSK raises `ValueError`.
- `pollpipes` relies on operating-system pipes and selectors and is meant for POSIX systems.