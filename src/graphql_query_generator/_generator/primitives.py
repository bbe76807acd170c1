"""Value generators for simple types like scalars or enums."""
import random as _random
import string
from typing import Any, Callable, Dict, Optional

import graphql

from .kinds import is_enum, unwrap

MIN_INT = -(2**31)
MAX_INT = 2**31 - 1
MAX_FLOAT = 2.0**53
ALPHABET = string.ascii_letters + string.digits
MAX_STRING_SIZE = 16

ScalarGenerator = Callable[[_random.Random], Any]


def string_(random: _random.Random) -> str:
    size = random.randint(0, MAX_STRING_SIZE)
    return "".join(random.choice(ALPHABET) for _ in range(size))


def int_(random: _random.Random) -> int:
    return random.randint(MIN_INT, MAX_INT)


def float_(random: _random.Random) -> float:
    return random.uniform(-MAX_FLOAT, MAX_FLOAT)


def boolean(random: _random.Random) -> bool:
    return random.random() < 0.5


def id_(random: _random.Random) -> str:
    # IDs are serialized as strings, even if they look like integers
    if boolean(random):
        return str(random.randint(0, MAX_INT))
    return "".join(random.choice(ALPHABET) for _ in range(random.randint(1, MAX_STRING_SIZE)))


SCALAR_GENERATORS: Dict[str, ScalarGenerator] = {
    "Int": int_,
    "Float": float_,
    "String": string_,
    "ID": id_,
    "Boolean": boolean,
}


def scalar(type_name: str, random: _random.Random) -> Any:
    generator = SCALAR_GENERATORS.get(type_name)
    if generator is None:
        raise UnsupportedScalar(type_name)
    return generator(random)


class UnsupportedScalar(Exception):
    """There is no built-in generator for a scalar."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Scalar {type_name!r} is not supported. Provide a value for it via `provider_map`.")


def is_enum_type(type_: graphql.GraphQLType) -> bool:
    return is_enum(type_)


def get_random_enum(type_: graphql.GraphQLType, random: Optional[_random.Random] = None) -> Optional[str]:
    """A uniformly random value of the given enum type, `None` for other types."""
    if not is_enum_type(type_):
        return None
    values = tuple(unwrap(type_).values)
    if not values:
        return None
    return (random or _random).choice(values)
