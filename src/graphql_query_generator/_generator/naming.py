"""Structured variable names: `Type__field` or `Type__field__argument`."""
import re
from typing import Dict, List, Optional, Set

import attr

from ..errors import InvalidVariableNameFormat

SEPARATOR = "__"
# A run of underscores holds one separator at its start, so segments may start with `_`
SEPARATOR_RE = re.compile(r"(?<!_)__")


def split_var_name(name: str) -> List[str]:
    parts = SEPARATOR_RE.split(name)
    if len(parts) not in (2, 3) or not all(parts):
        raise InvalidVariableNameFormat(f"Invalid variable name: {name!r}. Expected 2 or 3 segments separated by `__`")
    return parts


def join_var_name(type_name: str, field_name: str, argument_name: Optional[str] = None) -> str:
    if argument_name is None:
        return f"{type_name}{SEPARATOR}{field_name}"
    return f"{type_name}{SEPARATOR}{field_name}{SEPARATOR}{argument_name}"


@attr.s(slots=True)
class VariableNamer:
    """Derives unique variable names within a single document.

    The first occurrence of a (type, field, argument) triple gets the plain name, every next one
    gets a positional suffix on the last segment: `Query__user__id`, `Query__user__id_2`, ...
    """

    _counters: Dict[str, int] = attr.ib(factory=dict)
    _used: Set[str] = attr.ib(factory=set)

    def derive(self, type_name: str, field_name: str, argument_name: Optional[str] = None) -> str:
        base = join_var_name(type_name, field_name, argument_name)
        count = self._counters.get(base, 0) + 1
        name = base if count == 1 else f"{base}_{count}"
        # A suffixed name may clash with an actual argument called e.g. `id_2`
        while name in self._used:
            count += 1
            name = f"{base}_{count}"
        self._counters[base] = count
        self._used.add(name)
        return name
