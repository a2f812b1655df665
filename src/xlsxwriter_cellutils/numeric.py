import math
from numbers import Real

DEFAULT_DIGITS = 14


def round_to_decimal_places(value: Real, digits: int = DEFAULT_DIGITS) -> float:
    """Round `value` to `digits` decimal places and return it as a float rather than a string.

    Used to strip floating point noise before a number is written into a cell.

    Examples:
        >>> round_to_decimal_places(1.1234567890123456789, 6)
        1.123457
        >>> round_to_decimal_places(0.1 + 0.2)
        0.3
    """
    if digits < 0:
        raise ValueError(f'digits must be non-negative, got {digits}')
    return float(f'{float(value):.{int(digits)}f}')


def count_decimal_places(value: Real) -> int:
    """Count the decimal places of `value` as shown by its default representation.

    Notes:
        The count follows ``repr``, so noise like ``0.1 + 0.2`` reports 17 places. Values shown in
        scientific notation count every character after the ``.``, exponent included: ``1.5e-07`` reports 5,
        while ``1e-07`` has no ``.`` and reports 0.

    Examples:
        >>> count_decimal_places(1.12345)
        5
        >>> count_decimal_places(42)
        0
    """
    if not math.isfinite(value) or math.floor(value) == value:
        return 0
    _, _, fraction = repr(value).partition('.')
    return len(fraction)
