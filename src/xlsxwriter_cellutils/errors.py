from pprint import pformat


class CellUtilsError(Exception):
    """Base cell utils error"""

    def __init__(self, message, address=None, sheet_name=None, region=None):
        self.message = message
        self.address = address
        self.sheet_name = sheet_name
        self.region = region

    def __str__(self):
        segments = []
        if self.sheet_name is not None:
            segments.append(f"Sheet: {self.sheet_name}")
        if self.address is not None:
            segments.append(f"Address: {pformat(self.address)}")
        if self.region is not None:
            segments.append(f"Region: {self.region}")
        additional_info = "\n".join(segments)

        full_message = [self.message]
        if additional_info:
            full_message.append(f"Additional info:\n{additional_info}")

        return "\n".join(full_message)


class AddressError(CellUtilsError, ValueError):
    """An error triggered by a malformed or out of bounds cell address or range."""


class CellValueError(CellUtilsError, TypeError):
    """An error triggered by a value that cannot be written into a cell."""


class ExportError(CellUtilsError):
    """An error triggered while flushing a worksheet into XlsxWriter."""
