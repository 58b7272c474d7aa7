"""Value resolvers and their coercion functions."""

from .base import TypedValueResolver, ValueResolver
from .boolean import BooleanResolver, parse_boolean
from .date import DateResolver, parse_date
from .number import NumberResolver, parse_number
from .string import DefaultResolver, StringResolver, parse_string

__all__ = [
    "ValueResolver",
    "TypedValueResolver",
    "StringResolver",
    "DefaultResolver",
    "NumberResolver",
    "BooleanResolver",
    "DateResolver",
    "parse_string",
    "parse_number",
    "parse_boolean",
    "parse_date",
]
