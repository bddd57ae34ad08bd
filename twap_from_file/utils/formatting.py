"""
Output formatting for averages.

Averages are written in general notation with a fixed number of
significant digits, trailing zeros dropped:

    >>> format_price(10.0)
    '10'
    >>> format_price(50 / 3)
    '16.6667'
    >>> format_price(1234567.0)
    '1.23457e+06'
"""

DEFAULT_PRECISION = 6


def format_price(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format a price with `precision` significant digits."""
    return f"{value:.{precision}g}"
