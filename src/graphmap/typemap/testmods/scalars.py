"""Test helper scalars for loader unit tests."""

from datetime import date
from decimal import Decimal

from graphql import GraphQLNonNull, GraphQLScalarType

DecimalScalar = GraphQLScalarType(
    name="Decimal",
    serialize=str,
    parse_value=Decimal,
)

DateScalar = GraphQLScalarType(
    name="Date",
    serialize=date.isoformat,
    parse_value=date.fromisoformat,
)

RequiredDecimal = GraphQLNonNull(DecimalScalar)

# Entry point payload: (python_type, graphql_type)
DATE_LINK = (date, DateScalar)

NOT_A_GRAPHQL_TYPE = "Decimal"
