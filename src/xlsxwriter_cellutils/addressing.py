import re
from typing import Iterator, Tuple

from attr import attrs
from xlsxwriter.utility import xl_cell_to_rowcol, xl_rowcol_to_cell

from .errors import AddressError

Coords = Tuple[int, int]

# 2^20 and 2^14 are Excel limits for the amount of row and columns respectively.
MAX_ROWS = 2 ** 20
MAX_COLS = 2 ** 14

_CELL_RE = re.compile(r'^\$?([A-Z]{1,3})\$?([1-9][0-9]*)$')


@attrs(auto_attribs=True, frozen=True, order=False)
class CellRange(object):
    """A rectangle of cells bounded by `start` and `end`, both inclusive and zero-based.

    Ranges are not normalized, a range whose `start` lies after its `end` is kept as is and covers no cells.

    Examples:
        >>> r = CellRange.from_a1('A1:B2')
        >>> r
        CellRange(start=(0, 0), end=(1, 1))
        >>> [*r.iter_coords()]
        [(0, 0), (0, 1), (1, 0), (1, 1)]
        >>> r.to_a1()
        'A1:B2'
    """
    start: Coords
    end: Coords

    @property
    def first_row(self) -> int:
        return self.start[0]

    @property
    def first_col(self) -> int:
        return self.start[1]

    @property
    def last_row(self) -> int:
        return self.end[0]

    @property
    def last_col(self) -> int:
        return self.end[1]

    @property
    def n_rows(self) -> int:
        return max(self.last_row - self.first_row + 1, 0)

    @property
    def n_cols(self) -> int:
        return max(self.last_col - self.first_col + 1, 0)

    def iter_coords(self) -> Iterator[Coords]:
        """Iterate every cell of this range, left-to-right, top-to-bottom."""
        for row in range(self.first_row, self.last_row + 1):
            for col in range(self.first_col, self.last_col + 1):
                yield row, col

    def normalized(self) -> 'CellRange':
        """The same rectangle with `start` as its top left corner and `end` as its bottom right one.

        Examples:
            >>> CellRange((1, 1), (0, 0)).normalized()
            CellRange(start=(0, 0), end=(1, 1))
        """
        return CellRange(
            (min(self.first_row, self.last_row), min(self.first_col, self.last_col)),
            (max(self.first_row, self.last_row), max(self.first_col, self.last_col))
        )

    def contains(self, row: int, col: int) -> bool:
        return self.first_row <= row <= self.last_row and self.first_col <= col <= self.last_col

    def to_a1(self) -> str:
        return encode_range(self)

    @classmethod
    def from_a1(cls, text: str) -> 'CellRange':
        return decode_range(text)


def _check_coords(row, col):
    if row not in range(0, MAX_ROWS) or col not in range(0, MAX_COLS):
        raise AddressError(f'Coordinates ({row}, {col}) are outside of the sheet', address=(row, col))


def decode_cell(address: str) -> Coords:
    """Turn an A1 style `address` into zero-based (row, col). Absolute markers and lower case are accepted.

    Examples:
        >>> decode_cell('A1')
        (0, 0)
        >>> decode_cell('$c$12')
        (11, 2)
    """
    if not isinstance(address, str):
        raise AddressError(f'Cell address must be a string, got {type(address).__name__}', address=address)

    normalized = address.strip().upper()
    if _CELL_RE.match(normalized) is None:
        raise AddressError(f'Malformed cell address {address!r}', address=address)

    row, col = xl_cell_to_rowcol(normalized)
    _check_coords(row, col)
    return row, col


def encode_cell(row: int, col: int) -> str:
    """Turn zero-based `row` and `col` into an A1 style address.

    Examples:
        >>> encode_cell(0, 0)
        'A1'
        >>> encode_cell(9, 27)
        'AB10'
    """
    _check_coords(row, col)
    return xl_rowcol_to_cell(row, col)


def decode_range(text: str) -> CellRange:
    """Turn `text` like "A1:B2" into a :class:`CellRange`. A lone address gives a range of one cell."""
    if not isinstance(text, str):
        raise AddressError(f'Range must be a string, got {type(text).__name__}', address=text)

    parts = text.split(':')
    if len(parts) == 1:
        start = end = decode_cell(parts[0])
    elif len(parts) == 2:
        start, end = decode_cell(parts[0]), decode_cell(parts[1])
    else:
        raise AddressError(f'Malformed range {text!r}', address=text)

    return CellRange(start, end)


def encode_range(cell_range: CellRange) -> str:
    first = encode_cell(*cell_range.start)
    if cell_range.start == cell_range.end:
        return first
    return f'{first}:{encode_cell(*cell_range.end)}'
