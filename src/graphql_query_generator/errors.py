from typing import Iterable


class InvalidVariableNameFormat(ValueError):
    """Variable name or pattern does not consist of 2 or 3 `__`-separated segments."""


class NoProviderFound(LookupError):
    """None of the provider patterns match a variable name."""

    def __init__(self, var_name: str, patterns: Iterable[str]) -> None:
        self.var_name = var_name
        self.patterns = tuple(patterns)
        super().__init__(f'No provider found for "{var_name}" in {", ".join(self.patterns) or "<empty provider map>"}.')


class SchemaExhausted(Exception):
    """No field of the root type can produce a valid selection set."""
