"""Combinators for building request parameter pipelines."""
from __future__ import annotations

import copy
from functools import reduce
from typing import Any, Callable, Dict

Params = Dict[str, Any]
Validator = Callable[[Params], Any]
Transformer = Callable[[Params], Any]


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Chain unary functions left to right.

    ``compose(f, g)(x)`` is ``g(f(x))``: the first argument runs first, which
    reads in the same order as the pipeline it describes. Without functions
    the result is the identity.
    """

    def composed(value: Any) -> Any:
        return reduce(lambda acc, fn: fn(acc), fns, value)

    return composed


def validate(*validators: Validator) -> Callable[[Params], Params]:
    """Run every validator against ``params`` and hand ``params`` back.

    Validators report problems by raising. The first exception stops the
    chain, so later validators are not called, and it reaches the caller
    untouched. Return values of validators are ignored.
    """

    def run(params: Params) -> Params:
        for validator in validators:
            validator(params)
        return params

    return run


def _copy_containers(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _copy_containers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy_containers(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_copy_containers(item) for item in value)
    if isinstance(value, set):
        return {_copy_containers(item) for item in value}
    return value


def _copy_params(params: Params) -> Params:
    try:
        return copy.deepcopy(params)
    except TypeError:
        # Locks, sessions and similar handles cannot be copied; they are
        # shared with the caller while the containers around them are not.
        return _copy_containers(params)


def transform(*transformers: Transformer) -> Callable[[Params], Params]:
    """Apply transformers to a deep copy of ``params``.

    Each transformer receives the current working copy and may either return
    a replacement or mutate it in place and return ``None``. The caller's
    object is never modified. Values that cannot be deep-copied, such as
    locks or open sessions, are passed through by reference inside freshly
    copied dicts and lists.
    """

    def run(params: Params) -> Params:
        working = _copy_params(params)
        for transformer in transformers:
            result = transformer(working)
            if result is not None:
                working = result
        return working

    return run
