import pytest

from graphql_query_generator import InvalidVariableNameFormat, VariableNamer
from graphql_query_generator._generator.naming import split_var_name


def test_derive():
    namer = VariableNamer()
    assert namer.derive("Query", "repository", "name") == "Query__repository__name"
    assert namer.derive("Query", "repository") == "Query__repository"


def test_repeated_sites_are_unique():
    namer = VariableNamer()
    names = [namer.derive("Author", "books", "first") for _ in range(3)]
    assert names == ["Author__books__first", "Author__books__first_2", "Author__books__first_3"]
    # Other triples are counted separately
    assert namer.derive("Author", "friends", "first") == "Author__friends__first"


def test_suffix_does_not_clash_with_real_names():
    # When an argument name looks like a suffixed name
    namer = VariableNamer()
    assert namer.derive("Query", "user", "id_2") == "Query__user__id_2"
    assert namer.derive("Query", "user", "id") == "Query__user__id"
    # Then the next suffix is used
    assert namer.derive("Query", "user", "id") == "Query__user__id_3"


def test_namers_are_independent():
    assert VariableNamer().derive("A", "b", "c") == VariableNamer().derive("A", "b", "c")


@pytest.mark.parametrize(
    "name, expected",
    (
        ("Query__user", ["Query", "user"]),
        ("Query__user__id", ["Query", "user", "id"]),
        ("My_Type__a_b__c_d_2", ["My_Type", "a_b", "c_d_2"]),
        ("*__*__*", ["*", "*", "*"]),
        # Leading underscores belong to the next segment
        ("Query__user___id", ["Query", "user", "_id"]),
        ("_Type___field", ["_Type", "_field"]),
        ("A___b", ["A", "_b"]),
    ),
)
def test_split(name, expected):
    assert split_var_name(name) == expected


@pytest.mark.parametrize("name", ("Query", "", "A__b__c__d", "__typename", "A__", "A__b__"))
def test_split_invalid(name):
    with pytest.raises(InvalidVariableNameFormat, match="Invalid variable name"):
        split_var_name(name)
