"""Recursive descent over the schema type graph that builds a random operation."""
import random as _random
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import attr
import graphql
from graphql import is_equal_type
from hypothesis.errors import InvalidArgument

from ..errors import NoProviderFound, SchemaExhausted
from ..types import InterfaceOrObject, SelectionNodes, VariableValues
from . import factories, primitives
from .ast import make_document_node
from .config import DEFAULT_CONFIGURATION, Configuration
from .kinds import TypeKind, is_leaf, kind_of, make_type_name, unwrap, unwrap_field_type
from .naming import VariableNamer, join_var_name
from .providers import match_segments, resolve
from .validation import get_root_type, maybe_parse_schema

MAX_LIST_SIZE = 3
FieldItems = List[Tuple[str, graphql.GraphQLField]]


@attr.s(slots=True)
class SchemaWalker:
    """State of a single generation call.

    Selection sets and variables are built in document order, left-to-right and depth-first,
    therefore provider functions see exactly the variables that precede theirs in the printed query.
    """

    schema: graphql.GraphQLSchema = attr.ib()
    config: Configuration = attr.ib()
    random: _random.Random = attr.ib()
    namer: VariableNamer = attr.ib(factory=VariableNamer)
    variable_definitions: List[graphql.VariableDefinitionNode] = attr.ib(factory=list)
    variables: VariableValues = attr.ib(factory=dict)
    # (type name, depth) -> whether a valid selection set exists for this type at this depth
    _viable: Dict[Tuple[str, int], bool] = attr.ib(factory=dict)

    def walk(
        self, root: graphql.GraphQLObjectType, kind: graphql.OperationType
    ) -> Tuple[graphql.DocumentNode, VariableValues]:
        if not self.is_viable_type(root, 0):
            raise SchemaExhausted(
                f"None of the `{root.name}` fields leads to a scalar or enum field "
                f"within {self.config.max_depth} levels of nesting"
            )
        selections = self.selections(root, 0)
        return make_document_node(selections, self.variable_definitions, kind=kind), self.variables

    def is_viable_type(self, type_: graphql.GraphQLNamedType, depth: int) -> bool:
        key = (type_.name, depth)
        viable = self._viable.get(key)
        if viable is None:
            viable = self._viable[key] = self._compute_viable(type_, depth)
        return viable

    def _compute_viable(self, type_: graphql.GraphQLNamedType, depth: int) -> bool:
        kind = kind_of(type_)
        if kind is TypeKind.UNION:
            # Inline fragments don't add a nesting level
            return self.config.consider_unions and any(self.is_viable_type(member, depth) for member in type_.types)
        return any(self.is_viable_field(field, depth) for field in type_.fields.values())

    def is_viable_field(self, field: graphql.GraphQLField, depth: int) -> bool:
        """Whether the field can be selected at the given depth without producing an empty selection set."""
        field_type = unwrap_field_type(field)
        if is_leaf(field_type):
            return True
        return depth < self.config.max_depth and self.is_viable_type(field_type, depth + 1)

    def selections(
        self,
        type_: InterfaceOrObject,
        depth: int,
        prune: bool = False,
        fields: Optional[Mapping[str, graphql.GraphQLField]] = None,
    ) -> SelectionNodes:
        """Pick a non-empty subset of viable fields of the given type.

        With `prune` only leaf fields are selected if there are any, otherwise the first viable field is followed.
        """
        if fields is None:
            fields = type_.fields
        candidates = [(name, field) for name, field in fields.items() if self.is_viable_field(field, depth)]
        if prune:
            leaves = [(name, field) for name, field in candidates if is_leaf(field.type)]
            if not leaves:
                name, field = candidates[0]
                return [self.field_node(type_, name, field, depth, prune=True)]
            candidates = leaves
        return self.sample_fields(type_, candidates, depth)

    def sample_fields(self, type_: InterfaceOrObject, candidates: FieldItems, depth: int) -> SelectionNodes:
        nodes: SelectionNodes = []
        breadth = self.config.breadth_at(depth)
        for name, field in candidates:
            if self.random.random() >= breadth:
                continue
            if not is_leaf(field.type) and self.random.random() >= self.config.depth_at(depth):
                continue
            nodes.append(self.field_node(type_, name, field, depth))
        if not nodes:
            # An empty selection set is not valid
            name, field = candidates[0]
            nodes.append(self.field_node(type_, name, field, depth, prune=True))
        return nodes

    def field_node(
        self, parent: InterfaceOrObject, name: str, field: graphql.GraphQLField, depth: int, prune: bool = False
    ) -> graphql.FieldNode:
        # Arguments go first, they precede the sub-selection in the document
        arguments = self.arguments(parent.name, name, field.args)
        field_type = unwrap_field_type(field)
        if is_leaf(field_type):
            return factories.field(name, arguments)
        return factories.field(name, arguments, self.selections_for_type(field_type, depth + 1, prune))

    def selections_for_type(self, type_: graphql.GraphQLNamedType, depth: int, prune: bool) -> SelectionNodes:
        """Generate a selection set for a composite field type."""
        kind = kind_of(type_)
        if kind is TypeKind.UNION:
            return self.union_fragments(type_, depth, prune)
        nodes = self.selections(type_, depth, prune)
        if kind is TypeKind.INTERFACE and self.config.consider_interfaces and not prune:
            nodes.extend(self.interface_fragments(type_, depth))
        return nodes

    def interface_fragments(self, interface: graphql.GraphQLInterfaceType, depth: int) -> SelectionNodes:
        """Inline fragments with fields that implementations add on top of the interface."""
        fragments: List[graphql.InlineFragmentNode] = []
        breadth = self.config.breadth_at(depth)
        for implementation in self.schema.get_implementations(interface).objects:
            # Fields declared on the interface are selected outside of fragments
            own_fields = {
                name: field
                for name, field in implementation.fields.items()
                if name not in interface.fields and self.is_viable_field(field, depth)
            }
            if not own_fields or self.random.random() >= breadth:
                continue
            selections = self.selections(implementation, depth, fields=own_fields)
            fragments.append(factories.inline_fragment(implementation.name, selections))
        add_conflict_aliases(fragments, self.schema.type_map)
        return fragments

    def union_fragments(self, union: graphql.GraphQLUnionType, depth: int, prune: bool) -> SelectionNodes:
        members = [member for member in union.types if self.is_viable_type(member, depth)]
        if prune:
            chosen = members[:1]
        else:
            breadth = self.config.breadth_at(depth)
            chosen = [member for member in members if self.random.random() < breadth] or members[:1]
        fragments = [
            factories.inline_fragment(member.name, self.selections(member, depth, prune)) for member in chosen
        ]
        add_conflict_aliases(fragments, self.schema.type_map)
        return fragments

    def arguments(
        self, type_name: str, field_name: str, arguments: Dict[str, graphql.GraphQLArgument]
    ) -> List[graphql.ArgumentNode]:
        nodes = []
        selected = [
            (arg_name, argument)
            for arg_name, argument in arguments.items()
            if self.should_generate(type_name, field_name, arg_name, argument)
        ]
        field_values = self.field_provider_values(type_name, field_name) if selected else {}
        for arg_name, argument in selected:
            required = graphql.is_required_argument(argument)
            try:
                value = self.argument_value(type_name, field_name, arg_name, argument, field_values)
            except primitives.UnsupportedScalar as exc:
                if not required:
                    continue
                raise NoProviderFound(join_var_name(type_name, field_name, arg_name), self.config.provider_map) from exc
            var_name = self.namer.derive(type_name, field_name, arg_name)
            self.variable_definitions.append(factories.variable_definition(var_name, argument.type))
            self.variables[var_name] = value
            nodes.append(factories.argument(arg_name, var_name))
        return nodes

    def should_generate(
        self, type_name: str, field_name: str, arg_name: str, argument: graphql.GraphQLArgument
    ) -> bool:
        config = self.config
        required = graphql.is_required_argument(argument)
        if arg_name in config.arguments_to_ignore:
            if required:
                raise InvalidArgument(f"Can not ignore required argument {arg_name!r} of `{type_name}.{field_name}`")
            return False
        if required:
            return True
        if config.arguments_to_consider is not None:
            return arg_name in config.arguments_to_consider
        return not config.ignore_optional_arguments

    def field_provider_values(self, type_name: str, field_name: str) -> Mapping[str, Any]:
        """Values for several arguments at once, from a `Type__field` provider."""
        provider_map = self.config.provider_map
        if provider_map:
            pattern = match_segments((type_name, field_name), provider_map)
            if pattern is not None:
                values = resolve(provider_map[pattern], MappingProxyType(self.variables))
                if isinstance(values, Mapping):
                    return values
        return {}

    def argument_value(
        self,
        type_name: str,
        field_name: str,
        arg_name: str,
        argument: graphql.GraphQLArgument,
        field_values: Mapping[str, Any],
    ) -> Any:
        """Resolve via providers first, then fall back to random values for enums and built-in scalars."""
        provider_map = self.config.provider_map
        if provider_map:
            # Provider lookup ignores positional suffixes, so repeated fields are matched by the same patterns
            pattern = match_segments((type_name, field_name, arg_name), provider_map)
            if pattern is not None:
                return resolve(provider_map[pattern], MappingProxyType(self.variables), unwrap(argument.type))
        if arg_name in field_values:
            return field_values[arg_name]
        return self.random_value(argument.type)

    def random_value(self, type_: graphql.GraphQLInputType, depth: int = 0) -> Any:
        """Random JSON-compatible value of an input type. Nullable types always get a non-null value."""
        if isinstance(type_, graphql.GraphQLNonNull):
            type_ = type_.of_type
        if isinstance(type_, graphql.GraphQLList):
            # Required list fields of input objects may contain the object itself
            if depth > self.config.max_depth:
                return []
            return [self.random_value(type_.of_type, depth) for _ in range(self.random.randint(1, MAX_LIST_SIZE))]
        kind = kind_of(type_)
        if kind is TypeKind.ENUM:
            return primitives.get_random_enum(type_, self.random)
        if kind is TypeKind.SCALAR:
            return primitives.scalar(type_.name, self.random)
        return self.input_object(type_, depth)

    def input_object(self, type_: graphql.GraphQLInputObjectType, depth: int) -> Dict[str, Any]:
        value = {}
        for name, field in type_.fields.items():
            if graphql.is_required_input_field(field):
                value[name] = self.random_value(field.type, depth + 1)
            # Optional fields stop at `max_depth`, input types may reference themselves
            elif depth < self.config.max_depth and self.random.random() < 0.5:
                try:
                    value[name] = self.random_value(field.type, depth + 1)
                except primitives.UnsupportedScalar:
                    continue
        return value


def add_conflict_aliases(
    fragments: List[graphql.InlineFragmentNode], type_map: Dict[str, graphql.GraphQLNamedType]
) -> None:
    """Alias fields that have the same name as already selected ones but a different type."""
    seen: Dict[str, graphql.GraphQLType] = {}
    for fragment in fragments:
        fragment_type = type_map[fragment.type_condition.name.value]
        for selected in fragment.selection_set.selections:
            field_name = selected.name.value
            field_type = fragment_type.fields[field_name].type
            if field_name not in seen:
                seen[field_name] = field_type
            elif not is_equal_type(seen[field_name], field_type):
                selected.alias = factories.name(f"{field_name}_{make_type_name(field_type)}")


def generate(
    schema: Union[str, graphql.GraphQLSchema],
    config: Optional[Configuration] = None,
    *,
    operation: graphql.OperationType = graphql.OperationType.QUERY,
    random: Optional[_random.Random] = None,
) -> Tuple[graphql.DocumentNode, VariableValues]:
    """Generate a random operation and the values for all of its variables.

    :param schema: GraphQL schema as a string or `graphql.GraphQLSchema`.
    :param config: Generation options, defaults are used if not given.
    :param operation: Type of the root operation, query or mutation.
    :param random: Random source. If not given, it is created from `config.seed`.
    """
    parsed_schema = maybe_parse_schema(schema)
    config = config or DEFAULT_CONFIGURATION
    root = get_root_type(parsed_schema, operation)
    walker = SchemaWalker(parsed_schema, config, random or _random.Random(config.seed))
    return walker.walk(root, operation)
