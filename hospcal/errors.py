"""Custom exceptions."""


class HospcalError(Exception):
    """Base exception for hospcal."""


class InvalidDateError(HospcalError):
    """Raised when a date argument cannot be parsed."""


class InvalidMonthError(HospcalError):
    """Raised when a month is outside 1..12."""


class ConfigError(HospcalError):
    """Raised when the configuration holds an invalid value."""
