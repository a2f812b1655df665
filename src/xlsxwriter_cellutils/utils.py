from attr import attrs
from xlsxwriter import Workbook
from xlsxwriter.worksheet import Worksheet as XlsxWriterWorksheet

from .formats import FormatHandler


@attrs(auto_attribs=True)
class WorkbookPair(object):
    """A pair used to bundle a :class:`FormatHandler` and a :ref:`Workbook <workbook>`"""
    wb: Workbook
    fmt: FormatHandler

    def add_worksheet(self, name=None):
        """Create a worksheet and bind it into a :class:`WorksheetPair`"""
        return WorksheetPair(self.wb, self.wb.add_worksheet(name), self.fmt)

    @classmethod
    def from_wb(cls, wb):
        """Bind a :class:`Workbook` into a :class:`WorkbookPair`"""
        return cls(wb, FormatHandler(wb))


@attrs(auto_attribs=True)
class WorksheetPair(object):
    """An XlsxWriter worksheet along with the workbook and format handler it belongs to."""
    wb: Workbook
    ws: XlsxWriterWorksheet
    fmt: FormatHandler
