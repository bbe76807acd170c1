from functools import lru_cache
from typing import Union

import graphql
from hypothesis.errors import InvalidArgument


@lru_cache(maxsize=32)
def cached_build_schema(schema: str) -> graphql.GraphQLSchema:
    return graphql.build_schema(schema)


def maybe_parse_schema(schema: Union[str, graphql.GraphQLSchema]) -> graphql.GraphQLSchema:
    if isinstance(schema, str):
        return cached_build_schema(schema)
    if not isinstance(schema, graphql.GraphQLSchema):
        raise InvalidArgument(f"Expected a GraphQL schema as a string or `graphql.GraphQLSchema`, got {schema!r}")
    return schema


def get_root_type(schema: graphql.GraphQLSchema, operation: graphql.OperationType) -> graphql.GraphQLObjectType:
    if operation == graphql.OperationType.QUERY:
        root = schema.query_type
    elif operation == graphql.OperationType.MUTATION:
        root = schema.mutation_type
    else:
        raise InvalidArgument(f"Operation {operation.value!r} is not supported")
    if root is None:
        raise InvalidArgument(f"{operation.value.capitalize()} type is not defined in the schema")
    return root
