"""Exceptions raised by wastebot."""


class WastebotError(Exception):
    pass


class TableConfigError(WastebotError):
    """A keyword table failed validation."""


class UnknownEngineError(WastebotError, KeyError):
    def __str__(self) -> str:
        return f"Unknown engine: {self.args[0]!r}"


class UnknownModeError(WastebotError, KeyError):
    def __str__(self) -> str:
        return f"Unknown mode: {self.args[0]!r}"
