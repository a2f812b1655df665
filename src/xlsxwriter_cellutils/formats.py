from collections import defaultdict
from typing import Any, Dict, Optional

from attr import Factory, attrs
from xlsxwriter import Workbook as XlsxWriterWorkbook
from xlsxwriter.format import Format

INTEGER_FORMAT = '0'
DECIMAL_FORMAT = '0.0000'


class FormatDict(Dict[str, Any]):
    """A special variant of vanilla dictionary that implement __or__ and __hash__. Used to create and merge formats.

    Examples:
        >>> F = FormatDict
        >>> F1 = F({'font_name': 'Arial'})
        >>> F2 = F({'num_format': '0'})
        >>> F3 = F({'font_name': 'Arial',  'num_format': '0'})
        >>> F1 | F2 == F3
        True
        >>> hash(F1 | F2) == hash(F3)
        True
    """

    def __or__(self, other):
        return FormatDict({
            **self,
            **other
        })

    def __ror__(self, other):
        return FormatDict({
            **other,
            **self
        })

    def __hash__(self):
        return hash((*sorted(self.items()),))


@attrs(auto_attribs=True)
class FormatHandler(object):
    """This object is used to handle adding new formats when necessary. Only one should be used per Workbook."""
    target: XlsxWriterWorkbook
    _memoized: Dict[int, Format] = Factory(dict)

    def verify_format(self, format_: Optional[FormatDict]) -> Optional[Format]:
        if not format_:
            return None
        hashed = hash(format_)
        if hashed not in self._memoized:
            self._memoized[hashed] = self.target.add_format(dict(format_))
        return self._memoized[hashed]


def ensure_format_uniqueness(class_):
    """A class decorator used to verify that all formats in the decorated class are unique and use FormatDict."""
    hashes = defaultdict(list)
    for attr in dir(class_):
        if not attr.startswith('_'):
            attr_value = getattr(class_, attr)
            if not isinstance(attr_value, FormatDict):
                raise TypeError(f'Format {attr_value} must be a FormatDict')
            hashes[hash(attr_value)].append(attr)

    for formats in hashes.values():
        if len(formats) > 1:
            raise ValueError(f'{formats} are the same')

    return class_


@ensure_format_uniqueness
class NumberFormats(object):
    """Display formats the cell writer gives to numbers."""
    integer = FormatDict({'num_format': INTEGER_FORMAT})
    fixed_4 = FormatDict({'num_format': DECIMAL_FORMAT})


def cell_format(num_format: Optional[str], style: Optional[FormatDict] = None) -> FormatDict:
    """Combine a record's `style` with its `num_format`, the latter taking precedence."""
    result = FormatDict(style or {})
    if num_format is not None:
        result = result | {'num_format': num_format}
    return result
