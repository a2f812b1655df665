from abc import abstractmethod
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from attr import Factory, attrs

from .addressing import CellRange, decode_cell
from .records import CellRecord


class WorksheetLike(object):
    """What the cell helpers need from a worksheet: a mapping of A1 addresses to records and a merge list."""

    @abstractmethod
    def get_cell(self, address: str) -> Optional[CellRecord]:
        """Return the record stored at `address`, or None."""

    @abstractmethod
    def set_cell(self, address: str, record: Optional[CellRecord]):
        """Store `record` at `address`. A None record leaves the slot present but empty."""

    @abstractmethod
    def get_merges(self) -> Sequence[CellRange]:
        pass

    @abstractmethod
    def append_merge(self, region: CellRange):
        pass


@attrs(auto_attribs=True)
class Worksheet(WorksheetLike):
    """An in-memory worksheet.

    Attributes:
        name: Sheet name, used when flushing into a workbook
        cells:
            Records keyed by A1 address as given by the caller. A key may hold None, in which case the slot
            exists but has no record.
        merges: Merge regions in the order they were added, None until the first merge.
    """
    name: str = 'Sheet1'
    cells: Dict[str, Optional[CellRecord]] = Factory(dict)
    merges: Optional[List[CellRange]] = None

    def get_cell(self, address: str) -> Optional[CellRecord]:
        return self.cells.get(address)

    def set_cell(self, address: str, record: Optional[CellRecord]):
        self.cells[address] = record

    def get_merges(self) -> Sequence[CellRange]:
        return self.merges or []

    def append_merge(self, region: CellRange):
        if self.merges is None:
            self.merges = []
        self.merges.append(region)

    def has_cell(self, address: str) -> bool:
        return address in self.cells

    def iter_cells(self) -> Iterator[Tuple[int, int, str, Optional[CellRecord]]]:
        """Iterate `(row, col, address, record)` over present slots, left-to-right, top-to-bottom."""
        located = [
            (*decode_cell(address), address, record)
            for address, record in self.cells.items()
        ]
        located.sort(key=lambda x: (x[0], x[1]))
        return iter(located)

    @property
    def dimensions(self) -> Optional[CellRange]:
        """The smallest range covering every present slot, empty ones included."""
        coords = [decode_cell(address) for address in self.cells]
        if not coords:
            return None
        rows, cols = zip(*coords)
        return CellRange((min(rows), min(cols)), (max(rows), max(cols)))

    @classmethod
    def from_values(cls, values: Mapping[str, Any], name: str = 'Sheet1', format_cell: bool = True) -> 'Worksheet':
        """Build a sheet by writing each of `values` through :func:`set_cell_value`.

        Examples:
            >>> ws = Worksheet.from_values({'A1': 1, 'B1': 'x'})
            >>> ws.get_cell('B1')
            CellRecord(data_type='string', value='x', num_format=None, style=None)
        """
        from .cell_utils import set_cell_value

        result = cls(name)
        for address, value in values.items():
            set_cell_value(result, address, value, format_cell)
        return result
