"""Tests for operator / sort order enumerations and token conversion."""

from __future__ import annotations

import pytest

from lotr_sdk.query import (
    InvalidOperatorError,
    InvalidSortOrderError,
    Operator,
    SortOrder,
    operator_token,
    parse_operator,
    sort_order_token,
)
from lotr_sdk.query.operators import MULTI_VALUE_OPERATORS


@pytest.mark.parametrize(
    ("operator", "token"),
    [
        (Operator.EQUAL, "="),
        (Operator.NOT_EQUAL, "!="),
        (Operator.LESS_THAN, "<"),
        (Operator.GREATER_THAN, ">"),
        (Operator.LESS_THAN_OR_EQUAL, "<="),
        (Operator.GREATER_THAN_OR_EQUAL, ">="),
    ],
)
def test_operator_tokens(operator: Operator, token: str) -> None:
    assert operator_token(operator) == token


def test_operator_token_accepts_raw_token() -> None:
    assert operator_token(">=") == ">="


@pytest.mark.parametrize("bad", ["~", "=>", 3, None])
def test_operator_token_rejects_values_outside_enum(bad: object) -> None:
    with pytest.raises(InvalidOperatorError):
        operator_token(bad)  # type: ignore[arg-type]


def test_sort_order_tokens() -> None:
    assert sort_order_token(SortOrder.ASCENDING) == "asc"
    assert sort_order_token(SortOrder.DESCENDING) == "desc"


@pytest.mark.parametrize("bad", ["up", "ASC", 1, None])
def test_sort_order_token_rejects_values_outside_enum(bad: object) -> None:
    with pytest.raises(InvalidSortOrderError):
        sort_order_token(bad)  # type: ignore[arg-type]


def test_only_equality_operators_allow_several_values() -> None:
    assert MULTI_VALUE_OPERATORS == {Operator.EQUAL, Operator.NOT_EQUAL}


# -- aliases ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("alias", "expected"),
    [
        ("eq", Operator.EQUAL),
        ("NE", Operator.NOT_EQUAL),
        (" lt ", Operator.LESS_THAN),
        ("gt", Operator.GREATER_THAN),
        ("lte", Operator.LESS_THAN_OR_EQUAL),
        ("gte", Operator.GREATER_THAN_OR_EQUAL),
        ("<=", Operator.LESS_THAN_OR_EQUAL),
    ],
)
def test_parse_operator_aliases(alias: str, expected: Operator) -> None:
    assert parse_operator(alias) is expected


def test_parse_operator_passes_unknown_text_through() -> None:
    assert parse_operator("like") == "like"


def test_parse_operator_keeps_members() -> None:
    assert parse_operator(Operator.NOT_EQUAL) is Operator.NOT_EQUAL
