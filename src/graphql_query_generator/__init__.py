"""Random GraphQL operations with matching variable values for testing GraphQL servers."""
from ._generator.config import Configuration
from ._generator.naming import VariableNamer
from ._generator.primitives import get_random_enum, is_enum_type
from ._generator.providers import Literal, Resolver, get_provider, get_provider_value, match_var_name
from ._generator.strategy import from_schema, random_queries
from ._generator.walker import generate
from .errors import InvalidVariableNameFormat, NoProviderFound, SchemaExhausted

__all__ = (
    "Configuration",
    "InvalidVariableNameFormat",
    "Literal",
    "NoProviderFound",
    "Resolver",
    "SchemaExhausted",
    "VariableNamer",
    "from_schema",
    "generate",
    "get_provider",
    "get_provider_value",
    "get_random_enum",
    "is_enum_type",
    "match_var_name",
    "random_queries",
)
