"""Helpers for reading and writing cells of an in-memory worksheet addressed by A1 labels: read numeric ranges,
read typed cell values with sparse-friendly defaults, write numbers with a display format chosen by whether they
are whole, copy records between sheets, register merge regions, and finally flush the sheet into an XlsxWriter
workbook with `write_to_xlsxwriter`."""

from . import addressing, cell_utils, errors, export, formats, numeric, records, utils, worksheet

from .addressing import CellRange, decode_cell, decode_range, encode_cell, encode_range
from .cell_utils import (
    duplicate_to_sheet,
    get_cell_numeric_value,
    get_cell_string_value,
    get_range_values,
    merge_cells,
    set_cell_value,
    set_range_values,
)
from .export import add_to_workbook, write_to_xlsxwriter
from .numeric import count_decimal_places, round_to_decimal_places
from .records import CellRecord, Empty, Number, Raw, Text
from .utils import WorkbookPair
from .worksheet import Worksheet, WorksheetLike

__all__ = [
    'addressing', 'cell_utils', 'errors', 'export', 'formats', 'numeric', 'records', 'utils', 'worksheet',
    'CellRange', 'decode_cell', 'decode_range', 'encode_cell', 'encode_range',
    'duplicate_to_sheet', 'get_cell_numeric_value', 'get_cell_string_value', 'get_range_values', 'merge_cells',
    'set_cell_value', 'set_range_values',
    'add_to_workbook', 'write_to_xlsxwriter',
    'count_decimal_places', 'round_to_decimal_places',
    'CellRecord', 'Empty', 'Number', 'Raw', 'Text',
    'WorkbookPair', 'Worksheet', 'WorksheetLike',
]
