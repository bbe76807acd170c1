import graphql
import pytest
from hypothesis import HealthCheck, settings

from graphql_query_generator._generator.validation import cached_build_schema

settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow], deadline=None)
settings.load_profile("default")


SCHEMA = """
type Book {
  title: String
  pages(min: Int, max: Int): Int
  author: Author
}

type Author {
  name: String
  books(first: Int, orderBy: Order = TITLE): [Book]
  friends(first: Int!): [Author!]!
}

enum Order {
  TITLE
  PAGES
}

enum Color {
  RED
  GREEN
  BLUE
}

input BookFilter {
  title: String
  minPages: Int
  color: Color
  author: AuthorFilter
}

input AuthorFilter {
  name: String!
  nested: AuthorFilter
}

type Image {
  path: String
}
type Video {
  duration: Int
}

union Media = Image | Video

interface Node {
  id: ID
}

type Model implements Node {
  id: ID,
  int: Int,
  float: Float,
  string: String
  boolean: Boolean
  color: Color
  media: Media
}
"""

QUERY = """
type Query {
  getBooks(filter: BookFilter, first: Int): [Book]
  getAuthor(name: String!): Author
  getModel(id: ID!, colors: [Color!]): Model
  getNode(id: ID!): Node
  getMedia: [Media]
}
"""


@pytest.fixture(scope="session")
def schema():
    return SCHEMA


@pytest.fixture(scope="session")
def library_schema(schema):
    return schema + QUERY


def get_operation(document):
    return next(
        definition for definition in document.definitions if isinstance(definition, graphql.OperationDefinitionNode)
    )


def collect_field_names(selection_set, prefix=""):
    """Dotted paths of all selected fields, fragments are transparent."""
    paths = set()
    for selection in selection_set.selections:
        if isinstance(selection, graphql.InlineFragmentNode):
            paths |= collect_field_names(selection.selection_set, prefix)
            continue
        path = f"{prefix}{selection.name.value}"
        paths.add(path)
        if selection.selection_set is not None:
            paths |= collect_field_names(selection.selection_set, f"{path}.")
    return paths


@pytest.fixture(scope="session")
def validate_operation():
    def inner(schema, query, variables=None):
        if isinstance(schema, str):
            parsed_schema = cached_build_schema(schema)
        else:
            parsed_schema = schema
        if isinstance(query, graphql.DocumentNode):
            query = graphql.print_ast(query)
        query_ast = graphql.parse(query)
        errors = graphql.validate(parsed_schema, query_ast)
        for error in errors:
            print(error)
        assert not errors, query
        if variables is not None:
            # Every definition has a value and vice versa
            defined = [node.variable.name.value for node in get_operation(query_ast).variable_definitions]
            assert len(defined) == len(set(defined)), query
            assert set(defined) == set(variables), query
        return query_ast

    return inner


@pytest.fixture(scope="session")
def field_names():
    def inner(document):
        return collect_field_names(get_operation(document).selection_set)

    return inner


@pytest.fixture(scope="session")
def operation_of():
    return get_operation
