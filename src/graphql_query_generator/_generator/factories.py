"""Set of functions for creating GraphQL nodes."""
from typing import List, Optional

import graphql

from ..types import SelectionNodes


def name(value: str) -> graphql.NameNode:
    return graphql.NameNode(value=value)


def variable(var_name: str) -> graphql.VariableNode:
    return graphql.VariableNode(name=name(var_name))


def argument(arg_name: str, var_name: str) -> graphql.ArgumentNode:
    return graphql.ArgumentNode(name=name(arg_name), value=variable(var_name))


def field(
    field_name: str,
    arguments: List[graphql.ArgumentNode],
    selections: Optional[SelectionNodes] = None,
    alias: Optional[str] = None,
) -> graphql.FieldNode:
    return graphql.FieldNode(
        alias=name(alias) if alias is not None else None,
        name=name(field_name),
        arguments=tuple(arguments),
        directives=(),
        selection_set=selection_set(selections) if selections else None,
    )


def inline_fragment(type_name: str, selections: SelectionNodes) -> graphql.InlineFragmentNode:
    return graphql.InlineFragmentNode(
        type_condition=graphql.NamedTypeNode(name=name(type_name)),
        directives=(),
        selection_set=selection_set(selections),
    )


def selection_set(selections: SelectionNodes) -> graphql.SelectionSetNode:
    return graphql.SelectionSetNode(selections=tuple(selections))


def type_node(type_: graphql.GraphQLInputType) -> graphql.TypeNode:
    """Type reference for a variable definition, mirroring the wrapping of `type_`."""
    if isinstance(type_, graphql.GraphQLNonNull):
        return graphql.NonNullTypeNode(type=type_node(type_.of_type))
    if isinstance(type_, graphql.GraphQLList):
        return graphql.ListTypeNode(type=type_node(type_.of_type))
    return graphql.NamedTypeNode(name=name(type_.name))


def variable_definition(var_name: str, type_: graphql.GraphQLInputType) -> graphql.VariableDefinitionNode:
    return graphql.VariableDefinitionNode(
        variable=variable(var_name),
        type=type_node(type_),
        default_value=None,
        directives=(),
    )
