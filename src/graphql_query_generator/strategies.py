# pylint: disable=unused-import
from ._generator.strategy import from_schema, random_queries
