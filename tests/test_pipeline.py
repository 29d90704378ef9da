"""Tests for the validate/transform/compose combinators."""
from __future__ import annotations

import threading
from unittest.mock import Mock, call

import pytest

from gds_core.pipeline import compose, transform, validate


def test_validate_calls_every_validator_once_in_order() -> None:
    tracker = Mock()
    f1, f2, f3 = tracker.f1, tracker.f2, tracker.f3
    params = {"foo": "123", "bar": 123}

    result = validate(f1, f2, f3)(params)

    assert result is params
    assert result == {"foo": "123", "bar": 123}
    assert tracker.mock_calls == [call.f1(params), call.f2(params), call.f3(params)]


def test_validate_propagates_error_and_stops_chain() -> None:
    f1 = Mock(side_effect=ValueError("Error"))
    f2 = Mock()

    with pytest.raises(ValueError, match="^Error$"):
        validate(f1, f2)({"foo": "123"})

    f1.assert_called_once()
    f2.assert_not_called()


def test_validate_without_validators_returns_params() -> None:
    params = {"foo": "123", "bar": 123}
    assert validate()(params) is params


def test_validate_ignores_validator_return_values() -> None:
    params = {"foo": 1}
    assert validate(lambda p: {"other": 2})(params) is params


def test_transform_does_not_mutate_input() -> None:
    params = {"me": "you", "nested": {"items": [1]}}

    def t1(working):
        working["me"] = "me"
        working["nested"]["items"].append(2)
        return working

    spy = Mock(side_effect=t1)
    result = transform(spy)(params)

    assert result == {"me": "me", "nested": {"items": [1, 2]}}
    assert params == {"me": "you", "nested": {"items": [1]}}
    assert result is not params
    spy.assert_called_once()


def test_transform_shares_values_that_cannot_be_copied() -> None:
    lock = threading.Lock()
    params = {"lock": lock, "nested": {"items": [1]}}

    def add_item(working):
        working["nested"]["items"].append(2)

    result = transform(add_item)(params)

    assert result["lock"] is lock
    assert result["nested"] == {"items": [1, 2]}
    assert params["nested"] == {"items": [1]}
    assert result is not params


def test_transform_threads_results_and_in_place_changes() -> None:
    def add_flag(working):
        working["flag"] = True

    def wrap(working):
        return {"wrapped": working}

    result = transform(add_flag, wrap)({"a": 1})

    assert result == {"wrapped": {"a": 1, "flag": True}}


def test_transform_without_transformers_returns_copy() -> None:
    params = {"me": "you"}
    result = transform()(params)
    assert result == params
    assert result is not params


def test_compose_applies_functions_left_to_right() -> None:
    add1 = lambda value: value + 1
    mul2 = lambda value: value * 2

    assert compose(add1, mul2)(5) == 12
    assert compose(mul2, add1)(5) == 11


def test_compose_without_functions_is_identity() -> None:
    marker = object()
    assert compose()(marker) is marker
