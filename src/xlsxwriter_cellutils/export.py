from typing import Optional
from warnings import warn

from xlsxwriter.format import Format

from .addressing import CellRange
from .errors import ExportError
from .formats import cell_format
from .records import CellRecord
from .utils import WorkbookPair, WorksheetPair
from .worksheet import Worksheet

_RETURN_CODE_MESSAGES = {
    -2: 'the string is longer than 32k characters',
    -3: 'the URL is longer than 2079 characters long',
    -4: 'there are more than 65530 URLs in the sheet',
}


def _check_return_code(return_code, what, address, sheet_name):
    if return_code in _RETURN_CODE_MESSAGES:
        raise ExportError(
            f'{what} failed because {_RETURN_CODE_MESSAGES[return_code]}',
            address=address,
            sheet_name=sheet_name
        )


def _resolve_format(target: WorksheetPair, record: CellRecord) -> Optional[Format]:
    return target.fmt.verify_format(cell_format(record.num_format, record.style))


def _write_record(target: WorksheetPair, row: int, col: int, record: CellRecord):
    args = row, col, record.value, _resolve_format(target, record)
    if record.data_type is not None:
        return getattr(target.ws, f'write_{record.data_type}')(*args)
    if record.value is None:
        return target.ws.write_blank(*args)
    return target.ws.write(*args)


def _write_merge(target: WorksheetPair, region: CellRange, record: Optional[CellRecord]):
    record = record or CellRecord()
    return_code = target.ws.merge_range(
        *region.start,
        *region.end,
        record.value if record.value is not None else '',
        _resolve_format(target, record)
    )

    if record.data_type is not None:
        # merge_range writes through the generic writer, so a typed cell needs a second write
        #   as shown here: <https://xlsxwriter.readthedocs.io/example_merge_rich.html>
        return_code = _write_record(target, *region.start, record)

    return return_code


def write_to_xlsxwriter(sheet: Worksheet, target: WorksheetPair) -> int:
    """Write every record and merge region of `sheet` into `target`.

    Cells go left-to-right, top-to-bottom. A merge region is written from the record in its top left cell,
    whichever order its corners were given in, other cells inside it are skipped. Regions of a single cell are
    not merged, their cell is written as usual.

    Keys that name the same cell in different spellings, like ``'a1'`` and ``'$A$1'``, are separate slots of
    `sheet` but a single cell of the workbook. Only the last of them in `sheet` order is kept and a warning is
    issued.

    Returns:
        The amount of cells and merge regions written.

    Raises:
        ExportError: XlsxWriter refused a write.
    """
    merges = [
        region.normalized()
        for region in sheet.get_merges()
        if region.start != region.end
    ]
    merge_origins = {region.start for region in merges}
    origin_records = {}
    written = 0

    located = {}
    for row, col, address, record in sheet.iter_cells():
        if (row, col) in located:
            warn(f'Cell {address} of {sheet.name!r} replaces {located[(row, col)][0]}, both name the same cell.')
        located[(row, col)] = address, record

    for (row, col), (address, record) in sorted(located.items()):
        if (row, col) in merge_origins:
            origin_records[(row, col)] = record
            continue

        covering = [region for region in merges if region.contains(row, col)]
        if covering:
            if record is not None and not record.is_empty:
                warn(f'Cell {address} of {sheet.name!r} is hidden by merge region {covering[0].to_a1()}.')
            continue

        if record is None:
            continue

        try:
            return_code = _write_record(target, row, col, record)
        except Exception as e:
            raise ExportError('Uncaught exception', address=address, sheet_name=sheet.name) from e
        _check_return_code(return_code, 'Write', address, sheet.name)
        written += 1

    for region in merges:
        try:
            return_code = _write_merge(target, region, origin_records.get(region.start))
        except Exception as e:
            raise ExportError('Uncaught exception', sheet_name=sheet.name, region=region.to_a1()) from e
        _check_return_code(return_code, 'Merge write', region.to_a1(), sheet.name)
        written += 1

    return written


def add_to_workbook(sheet: Worksheet, pair: WorkbookPair) -> WorksheetPair:
    """Create a worksheet named after `sheet` in the workbook of `pair` and write `sheet` into it."""
    target = pair.add_worksheet(sheet.name)
    write_to_xlsxwriter(sheet, target)
    return target
