"""Errors raised while reading configuration values."""


class ParseError(ValueError):
    """A configuration value could not be parsed."""

    def __init__(self, value):
        super().__init__(f"invalid value: {value!r}")
        self.value = value