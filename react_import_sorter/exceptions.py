"""Exceptions raised by react-import-sorter."""


class SorterError(Exception):
    """Base class for every error raised while sorting imports."""


class NoMatchError(SorterError):
    """The given text does not contain any import statement."""

    def __init__(self, message: str = "Selected text doesn't seem to contain any imports!"):
        super().__init__(message)


class ParseError(SorterError):
    """An import statement could not be decomposed into its clauses."""

    def __init__(self, message: str, statement: str = ""):
        self.statement = statement
        if statement:
            message = f"{message}: {statement!r}"
        super().__init__(message)


class ConfigError(SorterError, ValueError):
    """A configuration value is not supported."""
