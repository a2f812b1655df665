from numbers import Real
from typing import Any, List, Optional, Sequence

from .addressing import CellRange, decode_cell, decode_range, encode_cell
from .formats import NumberFormats
from .numeric import round_to_decimal_places
from .records import CellRecord, Empty, NUMBER, Raw, STRING, Text, as_write_value
from .worksheet import WorksheetLike


def get_range_values(worksheet: WorksheetLike, range_text: str) -> List[List[Optional[Real]]]:
    """Get the numeric values of every cell in `range_text` of `worksheet`.

    Each inner list is a row. A cell that is absent or does not hold a number gives None.

    Raises:
        AddressError: `range_text` is not a valid range.

    Examples:
        >>> from xlsxwriter_cellutils.worksheet import Worksheet
        >>> ws = Worksheet.from_values({'A1': 1, 'B1': 2, 'A2': 3, 'B2': 4})
        >>> get_range_values(ws, 'A1:B2')
        [[1, 2], [3, 4]]
    """
    cell_range = decode_range(range_text)
    values = []

    for row in range(cell_range.first_row, cell_range.last_row + 1):
        row_values = []
        for col in range(cell_range.first_col, cell_range.last_col + 1):
            cell = worksheet.get_cell(encode_cell(row, col))
            row_values.append(cell.value if cell is not None and cell.is_number else None)
        values.append(row_values)

    return values


def get_cell_numeric_value(worksheet: WorksheetLike, address: str) -> Real:
    """Get the number at `address`, or 0 if the cell is absent or is not a number."""
    cell = worksheet.get_cell(address)
    if cell is None or not cell.is_number:
        return 0

    return cell.value


def get_cell_string_value(worksheet: WorksheetLike, address: str) -> str:
    """Get the string at `address`, or an empty string if the cell is absent or is not a string."""
    cell = worksheet.get_cell(address)
    if cell is None or not cell.is_string:
        return ''

    return cell.value


def set_cell_value(worksheet: WorksheetLike, address: str, value: Any, format_cell: bool = True):
    """Write `value` into the cell at `address`.

    Parameters:
        worksheet: Target worksheet
        address: A1 style address, used as is
        value:
            A :class:`~xlsxwriter_cellutils.records.WriteValue`, or a plain number, string, CellRecord or None
            which is converted by :func:`~xlsxwriter_cellutils.records.as_write_value`.
        format_cell:
            If True, numbers get a display format: ``'0'`` for whole numbers and ``'0.0000'`` otherwise,
            with fractional values rounded to 14 decimal places first.
            If False, the value is stored as given. Should be False when passing an entire CellRecord
            built elsewhere, although records are never changed either way.

    Raises:
        CellValueError: `value` is of a type that cannot be written.
    """
    value = as_write_value(value)

    if isinstance(value, Raw):
        worksheet.set_cell(address, value.record)
        return

    if isinstance(value, Text):
        worksheet.set_cell(address, CellRecord(STRING, value.value))
        return

    if isinstance(value, Empty):
        worksheet.set_cell(address, CellRecord() if format_cell else None)
        return

    number = value.value
    if not format_cell:
        worksheet.set_cell(address, CellRecord(NUMBER, number))
        return

    is_whole_number = number % 1 == 0

    fixed_value = number if is_whole_number else round_to_decimal_places(number)

    num_format = is_whole_number and NumberFormats.integer or NumberFormats.fixed_4

    worksheet.set_cell(address, CellRecord(NUMBER, fixed_value, num_format['num_format']))


def set_range_values(
        worksheet: WorksheetLike,
        top_left: str,
        rows: Sequence[Sequence[Any]],
        format_cell: bool = True
) -> Optional[CellRange]:
    """Write `rows` starting at `top_left`, each inner sequence going left-to-right.

    Returns:
        The range covering the written cells, or None if `rows` is empty.
    """
    first_row, first_col = decode_cell(top_left)
    written = []

    for row, row_values in enumerate(rows, first_row):
        for col, value in enumerate(row_values, first_col):
            set_cell_value(worksheet, encode_cell(row, col), value, format_cell)
            written.append((row, col))

    if not written:
        return None
    return CellRange(
        (first_row, first_col),
        (max(row for row, _ in written), max(col for _, col in written))
    )


def duplicate_to_sheet(
        source_sheet: WorksheetLike,
        target_sheet: WorksheetLike,
        source_address: str,
        target_address: Optional[str] = None
):
    """Copy the record at `source_address` of `source_sheet` into `target_sheet`.

    The record object itself is shared, not copied. It lands at `target_address`, or at `source_address`
    if that is not given.

    Notes:
        A missing source cell is not skipped: the target slot is set to None, so it becomes present but empty.
    """
    source_cell = source_sheet.get_cell(source_address)
    target_sheet.set_cell(target_address if target_address is not None else source_address, source_cell)


def merge_cells(worksheet: WorksheetLike, start_address: str, end_address: str) -> CellRange:
    """Register the rectangle from `start_address` to `end_address` as a merge region of `worksheet`.

    The region is appended as is, there is no check for reversed corners or overlap with existing merges.
    """
    merged_range = CellRange(decode_cell(start_address), decode_cell(end_address))
    worksheet.append_merge(merged_range)
    return merged_range
