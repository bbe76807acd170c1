from typing import List

import graphql

from ..types import SelectionNodes
from . import factories

OPERATION_NAMES = {
    graphql.OperationType.QUERY: "RandomQuery",
    graphql.OperationType.MUTATION: "RandomMutation",
}


def make_document_node(
    selections: SelectionNodes,
    variable_definitions: List[graphql.VariableDefinitionNode],
    *,
    kind: graphql.OperationType,
) -> graphql.DocumentNode:
    """Create top-level node for an operation AST."""
    return graphql.DocumentNode(
        definitions=(
            graphql.OperationDefinitionNode(
                operation=kind,
                name=factories.name(OPERATION_NAMES[kind]),
                variable_definitions=tuple(variable_definitions),
                directives=(),
                selection_set=factories.selection_set(selections),
            ),
        ),
    )
