"""Resolving variable values from user-supplied providers.

A provider map is an ordered mapping from name patterns to providers. Each pattern segment is either a literal
name or the `*` wildcard, e.g. `*__*__first` matches the `first` argument of every field.
"""
from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping, Optional, Sequence, Union

import attr
import graphql

from ..errors import NoProviderFound
from ..types import ProviderFunction
from .naming import join_var_name, split_var_name

if TYPE_CHECKING:
    from .config import Configuration

WILDCARD = "*"


@attr.s(slots=True, frozen=True)
class Literal:
    """A fixed value, used as is."""

    value: Any = attr.ib()


@attr.s(slots=True, frozen=True)
class Resolver:
    """A function computing the value from variables resolved earlier in the document."""

    func: ProviderFunction = attr.ib(validator=attr.validators.is_callable())

    def __call__(self, variables: Mapping[str, Any], argument_type: Optional[graphql.GraphQLNamedType] = None) -> Any:
        return self.func(variables, argument_type)


Provider = Union[Literal, Resolver]


def as_provider(value: Any) -> Provider:
    if isinstance(value, (Literal, Resolver)):
        return value
    if callable(value):
        return Resolver(value)
    return Literal(value)


def make_provider_map(providers: Optional[Mapping[str, Any]]) -> Dict[str, Provider]:
    """Normalize raw provider values. Declaration order is preserved, it defines the matching priority."""
    if not providers:
        return {}
    return {pattern: as_provider(value) for pattern, value in providers.items()}


def segments_match(left: str, right: str) -> bool:
    return left == right or left == WILDCARD or right == WILDCARD


def match_var_name(query: str, candidates: Iterable[str]) -> Optional[str]:
    """Find the first candidate pattern matching the given variable name.

    An exact match always wins, otherwise candidates are checked in the given order.
    """
    candidates = tuple(candidates)
    if query in candidates:
        return query
    return match_segments(split_var_name(query), candidates)


def match_segments(segments: Sequence[str], candidates: Iterable[str]) -> Optional[str]:
    """The same as `match_var_name`, but the name is given as separate segments.

    Segments starting or ending with `_` can not always be recovered from the joined name.
    """
    candidates = tuple(candidates)
    query = join_var_name(*segments)
    if query in candidates:
        return query
    for candidate in candidates:
        candidate_parts = split_var_name(candidate)
        if len(candidate_parts) == len(segments) and all(
            segments_match(candidate_part, segment) for candidate_part, segment in zip(candidate_parts, segments)
        ):
            return candidate
    return None


def get_provider(var_name: str, provider_map: Mapping[str, Any]) -> Provider:
    pattern = match_var_name(var_name, provider_map)
    if pattern is None:
        raise NoProviderFound(var_name, provider_map)
    return as_provider(provider_map[pattern])


def get_provider_value(
    var_name: str,
    config: "Configuration",
    variables: Mapping[str, Any],
    argument_type: Optional[graphql.GraphQLNamedType] = None,
) -> Any:
    return resolve(get_provider(var_name, config.provider_map), variables, argument_type)


def resolve(
    provider: Provider, variables: Mapping[str, Any], argument_type: Optional[graphql.GraphQLNamedType] = None
) -> Any:
    if isinstance(provider, Resolver):
        return provider(variables, argument_type)
    return provider.value
