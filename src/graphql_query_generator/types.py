from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import graphql

Field = Union[graphql.GraphQLField, graphql.GraphQLInputField]
InterfaceOrObject = Union[graphql.GraphQLObjectType, graphql.GraphQLInterfaceType]
SelectionNodes = List[graphql.SelectionNode]
AstPrinter = Callable[[graphql.Node], str]
VariableValues = Dict[str, Any]
# Called with the values resolved so far and the unwrapped argument type
ProviderFunction = Callable[[Mapping[str, Any], Optional[graphql.GraphQLNamedType]], Any]
# Either a fixed probability or a function of the current depth
Probability = Union[float, Callable[[int], float]]
