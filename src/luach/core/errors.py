class LuachError(Exception):
    """Base error."""

class IllegalArgumentError(LuachError, ValueError):
    """Raised when a date, time component or Daf query is outside the supported domain."""

class UnsupportedOperationError(LuachError, NotImplementedError):
    """Raised when a deprecated calling convention is used."""

class CalendarArithmeticError(LuachError, ArithmeticError):
    """Raised when the year-length arithmetic produces an impossible value."""
