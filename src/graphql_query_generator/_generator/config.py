from typing import Any, Dict, FrozenSet, Iterable, Optional

import attr
from hypothesis.errors import InvalidArgument

from ..types import Probability
from .providers import Provider, make_provider_map


def _frozen_names(names: Optional[Iterable[str]]) -> Optional[FrozenSet[str]]:
    if names is None:
        return None
    if isinstance(names, str):
        raise InvalidArgument(f"Expected a collection of argument names, got a string: {names!r}")
    return frozenset(names)


def _ignored_names(names: Optional[Iterable[str]]) -> FrozenSet[str]:
    return _frozen_names(names) or frozenset()


def _validate_probability(instance: Any, attribute: attr.Attribute, value: Probability) -> None:
    if callable(value):
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"`{attribute.name}` must be a number or a callable, got {value!r}")
    if not 0 <= value <= 1:
        raise InvalidArgument(f"`{attribute.name}` must be between 0 and 1, got {value!r}")


def _validate_max_depth(instance: Any, attribute: attr.Attribute, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgument(f"`max_depth` must be a non-negative integer, got {value!r}")


@attr.s(slots=True, frozen=True)
class Configuration:
    """Options for query generation.

    :param breadth_probability: Chance to select each field of a selection set.
        Either a number in [0, 1] or a function of the current depth.
    :param depth_probability: Chance to descend into a composite field. Same shape as `breadth_probability`.
    :param max_depth: Maximum nesting level of selection sets, the root selection set is at depth 0.
    :param ignore_optional_arguments: Skip nullable or defaulted arguments.
    :param arguments_to_consider: If given, only these optional arguments are generated.
        They are generated even if `ignore_optional_arguments` is set.
    :param arguments_to_ignore: Optional arguments that are never generated.
    :param consider_interfaces: Add inline fragments on implementations of interface types.
    :param consider_unions: Select union-typed fields via inline fragments on member types.
    :param provider_map: Mapping of variable name patterns to values or functions.
    :param seed: Seed for the random source, makes generation deterministic.
    """

    breadth_probability: Probability = attr.ib(default=0.5, validator=_validate_probability)
    depth_probability: Probability = attr.ib(default=0.5, validator=_validate_probability)
    max_depth: int = attr.ib(default=5, validator=_validate_max_depth)
    ignore_optional_arguments: bool = attr.ib(default=True, validator=attr.validators.instance_of(bool))
    arguments_to_consider: Optional[FrozenSet[str]] = attr.ib(default=None, converter=_frozen_names)
    arguments_to_ignore: FrozenSet[str] = attr.ib(factory=frozenset, converter=_ignored_names)
    consider_interfaces: bool = attr.ib(default=False, validator=attr.validators.instance_of(bool))
    consider_unions: bool = attr.ib(default=False, validator=attr.validators.instance_of(bool))
    provider_map: Dict[str, Provider] = attr.ib(factory=dict, converter=make_provider_map, hash=False)
    seed: Optional[int] = attr.ib(default=None, validator=attr.validators.optional(attr.validators.instance_of(int)))

    @arguments_to_ignore.validator
    def _check_conflicts(self, attribute: attr.Attribute, value: FrozenSet[str]) -> None:
        if self.arguments_to_consider is not None:
            both = sorted(value & self.arguments_to_consider)
            if both:
                raise InvalidArgument(
                    f"Arguments can not be ignored and considered at the same time: {', '.join(both)}"
                )

    def breadth_at(self, depth: int) -> float:
        return _probability_at(self.breadth_probability, depth)

    def depth_at(self, depth: int) -> float:
        return _probability_at(self.depth_probability, depth)


def _probability_at(probability: Probability, depth: int) -> float:
    if callable(probability):
        return probability(depth)
    return probability


DEFAULT_CONFIGURATION = Configuration()
