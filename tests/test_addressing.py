from pytest import mark, raises

from xlsxwriter_cellutils.addressing import (
    MAX_COLS,
    MAX_ROWS,
    CellRange,
    decode_cell,
    decode_range,
    encode_cell,
    encode_range,
)
from xlsxwriter_cellutils.errors import AddressError


class TestCells:
    @mark.parametrize('address, coords', [
        ('A1', (0, 0)),
        ('B1', (0, 1)),
        ('A2', (1, 0)),
        ('Z1', (0, 25)),
        ('AA1', (0, 26)),
        ('XFD1048576', (MAX_ROWS - 1, MAX_COLS - 1)),
    ])
    def test_decode_encode(self, address, coords):
        assert decode_cell(address) == coords
        assert encode_cell(*coords) == address

    @mark.parametrize('address', ['$B$3', 'b3', '$b3', ' B3 '])
    def test_decode_lenient(self, address):
        assert decode_cell(address) == (2, 1)

    @mark.parametrize('address', ['', 'A', '1', 'A0', '1A', 'A1B', 'ABCD1', 'A-1', 'A1:B2'])
    def test_decode_malformed(self, address):
        with raises(AddressError) as e:
            decode_cell(address)

        assert e.value.address == address

    @mark.parametrize('address', ['XFE1', 'A1048577'])
    def test_decode_outside_of_sheet(self, address):
        with raises(AddressError):
            decode_cell(address)

    def test_decode_not_a_string(self):
        with raises(AddressError):
            decode_cell(None)

    @mark.parametrize('coords', [(-1, 0), (0, -1), (MAX_ROWS, 0), (0, MAX_COLS)])
    def test_encode_outside_of_sheet(self, coords):
        with raises(AddressError):
            encode_cell(*coords)

    def test_address_error_is_value_error(self):
        with raises(ValueError):
            decode_cell('?')


class TestRanges:
    def test_decode(self):
        assert decode_range('A1:B2') == CellRange(start=(0, 0), end=(1, 1))
        assert decode_range('C5:E10') == CellRange((4, 2), (9, 4))

    def test_decode_single_cell(self):
        assert decode_range('C3') == CellRange((2, 2), (2, 2))

    def test_decode_keeps_orientation(self):
        cell_range = decode_range('B2:A1')

        assert cell_range == CellRange((1, 1), (0, 0))
        assert cell_range.n_rows == 0
        assert [*cell_range.iter_coords()] == []

    @mark.parametrize('text', ['A1:', ':B2', 'A1:B2:C3', 'A1-B2', None])
    def test_decode_malformed(self, text):
        with raises(AddressError):
            decode_range(text)

    def test_encode(self):
        assert encode_range(CellRange((0, 0), (1, 1))) == 'A1:B2'
        assert encode_range(CellRange((2, 2), (2, 2))) == 'C3'

    def test_properties(self):
        cell_range = CellRange.from_a1('B3:D4')

        assert (cell_range.first_row, cell_range.first_col) == (2, 1)
        assert (cell_range.last_row, cell_range.last_col) == (3, 3)
        assert (cell_range.n_rows, cell_range.n_cols) == (2, 3)
        assert cell_range.to_a1() == 'B3:D4'

    def test_iter_coords_is_row_major(self):
        assert [*CellRange.from_a1('A1:B2').iter_coords()] == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_normalized(self):
        assert CellRange((1, 1), (0, 0)).normalized() == CellRange((0, 0), (1, 1))
        assert CellRange((0, 3), (2, 1)).normalized() == CellRange((0, 1), (2, 3))
        assert CellRange.from_a1('A1:B2').normalized() == CellRange.from_a1('A1:B2')

    def test_contains(self):
        cell_range = CellRange.from_a1('B2:C3')

        assert cell_range.contains(1, 1)
        assert cell_range.contains(2, 2)
        assert not cell_range.contains(0, 1)
        assert not cell_range.contains(1, 3)
