from functools import reduce
from operator import or_
from random import Random
from typing import Optional, Tuple, Union

import graphql
from hypothesis import strategies as st
from hypothesis.errors import InvalidArgument
from hypothesis.strategies._internal.utils import cacheable

from ..types import AstPrinter, VariableValues
from .config import DEFAULT_CONFIGURATION, Configuration
from .validation import get_root_type, maybe_parse_schema
from .walker import generate

GeneratedOperation = Tuple[str, VariableValues]


def _make_strategy(
    schema: graphql.GraphQLSchema,
    config: Configuration,
    operation: graphql.OperationType,
    print_ast: AstPrinter,
) -> st.SearchStrategy[GeneratedOperation]:
    def build(random: Random) -> GeneratedOperation:
        document, variables = generate(schema, config, operation=operation, random=random)
        return print_ast(document), variables

    # Hypothesis owns the random source, so failing examples are replayed and shrunk
    return st.randoms(use_true_random=False).map(build)


@cacheable  # type: ignore
def random_queries(
    schema: Union[str, graphql.GraphQLSchema],
    *,
    config: Optional[Configuration] = None,
    operation: graphql.OperationType = graphql.OperationType.QUERY,
    print_ast: AstPrinter = graphql.print_ast,
) -> st.SearchStrategy[GeneratedOperation]:
    """A strategy for generating random operations with variables for the given GraphQL schema.

    Each example is a tuple of the printed operation and the values of its variables.

    :param schema: GraphQL schema as a string or `graphql.GraphQLSchema`.
    :param config: Generation options.
    :param operation: Type of the root operation, query or mutation.
    :param print_ast: A function to convert the generated AST to a string.
    """
    parsed_schema = maybe_parse_schema(schema)
    get_root_type(parsed_schema, operation)
    return _make_strategy(parsed_schema, config or DEFAULT_CONFIGURATION, operation, print_ast)


@cacheable  # type: ignore
def from_schema(
    schema: Union[str, graphql.GraphQLSchema],
    *,
    config: Optional[Configuration] = None,
    print_ast: AstPrinter = graphql.print_ast,
) -> st.SearchStrategy[GeneratedOperation]:
    """A strategy for generating random queries and mutations for the given GraphQL schema.

    :param schema: GraphQL schema as a string or `graphql.GraphQLSchema`.
    :param config: Generation options.
    :param print_ast: A function to convert the generated AST to a string.
    """
    parsed_schema = maybe_parse_schema(schema)
    config = config or DEFAULT_CONFIGURATION
    strategies = [
        _make_strategy(parsed_schema, config, operation, print_ast)
        for operation, type_ in (
            (graphql.OperationType.QUERY, parsed_schema.query_type),
            (graphql.OperationType.MUTATION, parsed_schema.mutation_type),
        )
        if type_ is not None
    ]
    if not strategies:
        raise InvalidArgument("Query or Mutation type must be provided")
    return reduce(or_, strategies)
