"""Exceptions raised outside the core order book / TWAP algorithms."""


class TwapError(Exception):
    """Base class for all errors raised by twap_from_file."""
    pass
