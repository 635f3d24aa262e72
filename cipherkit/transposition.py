"""
Columnar transposition without a keyword: write the text row by row into
`num_columns` columns, read it back column by column. The last row may be
short; missing cells are skipped, so nothing is padded.

Works on any sliceable sequence (str or bytes) and returns the same type.
"""
import math


def _columns(num_columns: int) -> int:
    # a column count below 1 behaves like a single column
    return num_columns if num_columns > 0 else 1


def _join(pieces, like):
    return like[:0].join(pieces)


def transpose(text, num_columns: int):
    ncols = _columns(num_columns)
    return _join([text[c::ncols] for c in range(ncols)], text)


def inverse_transpose(text, num_columns: int):
    ncols = _columns(num_columns)
    n = len(text)
    nrows = math.ceil(n / ncols)
    full = n % ncols
    # length of every column run in the transposed text
    col_sizes = [nrows if (c < full or full == 0) else nrows - 1 for c in range(ncols)]

    columns = []
    pos = 0
    for size in col_sizes:
        columns.append(text[pos:pos+size])
        pos += size

    out = []
    for r in range(nrows):
        for col in columns:
            if r < len(col):
                out.append(col[r:r+1])
    return _join(out, text)
