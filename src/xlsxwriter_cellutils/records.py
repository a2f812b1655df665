from numbers import Real
from typing import Any, Optional

from attr import attrs, evolve

from .errors import CellValueError
from .formats import FormatDict

NUMBER = 'number'
STRING = 'string'


def is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@attrs(auto_attribs=True, frozen=True, order=False)
class CellRecord(object):
    """A single cell: the `value`, its `data_type` tag and an optional `num_format` and `style`.

    `data_type` names the XlsxWriter writer used for the cell, so besides :data:`NUMBER` and
    :data:`STRING` it may be any other write type such as ``'boolean'`` or ``'formula'``.
    `None` means the type is unset.
    """
    data_type: Optional[str] = None
    value: Any = None
    num_format: Optional[str] = None
    style: Optional[FormatDict] = None

    @property
    def is_number(self) -> bool:
        return self.data_type == NUMBER and is_number(self.value)

    @property
    def is_string(self) -> bool:
        return self.data_type == STRING and isinstance(self.value, str)

    @property
    def is_empty(self) -> bool:
        return self.value is None

    def with_value(self, value: Any) -> 'CellRecord':
        return evolve(self, value=value)

    def with_num_format(self, num_format: Optional[str]) -> 'CellRecord':
        return evolve(self, num_format=num_format)

    def with_style(self, style: Optional[FormatDict]) -> 'CellRecord':
        return evolve(self, style=style)


class WriteValue(object):
    """Base class for values accepted by :func:`~xlsxwriter_cellutils.cell_utils.set_cell_value`."""


@attrs(auto_attribs=True, frozen=True, order=False)
class Number(WriteValue):
    value: Real


@attrs(auto_attribs=True, frozen=True, order=False)
class Text(WriteValue):
    value: str


@attrs(auto_attribs=True, frozen=True, order=False)
class Raw(WriteValue):
    """A complete record, written without any change."""
    record: Optional[CellRecord]


@attrs(auto_attribs=True, frozen=True, order=False)
class Empty(WriteValue):
    pass


def as_write_value(value: Any) -> WriteValue:
    """Pick the :class:`WriteValue` variant for a plain Python `value`.

    Examples:
        >>> as_write_value(5)
        Number(value=5)
        >>> as_write_value('x')
        Text(value='x')
        >>> as_write_value(None)
        Empty()
    """
    if isinstance(value, WriteValue):
        return value
    if value is None:
        return Empty()
    if isinstance(value, CellRecord):
        return Raw(value)
    if isinstance(value, str):
        return Text(value)
    if is_number(value):
        return Number(value)
    raise CellValueError(f'Cannot write a value of type {type(value).__name__}: {value!r}')
