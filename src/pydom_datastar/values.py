"""
Value composers for Datastar attributes.

Turns key/value pairs, filters and signal mappings into the strings the
client framework parses: pseudo object literals (``{title: $title}``),
filter objects (``{include: /user/}``) and compact JSON.
"""

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel

from pydom_datastar.exceptions import OddPairsError, SignalsEncodingError

PairsArg = Union[str, tuple[str, str], Mapping[str, str]]


@dataclass(frozen=True)
class Filter:
    """Include/exclude regular expressions scoping which signals are used."""

    include: str = ""
    exclude: str = ""

    def is_empty(self) -> bool:
        return not self.include and not self.exclude


def pairs_of(pairs: Iterable[PairsArg], what: str = "key") -> list[tuple[str, str]]:
    """
    Normalize the key/value arguments of the object builders.

    Accepts a flat sequence of alternating keys and expressions, a sequence
    of ``(key, expression)`` tuples, or a single mapping.

    Args:
        pairs: The positional arguments given to a builder.
        what: What a key is called, used in the error message.

    Only one form is allowed per call.

    Raises:
        OddPairsError: If a flat sequence has a key without a value.
        TypeError: If the forms are mixed, or a tuple is not a pair.
    """
    pairs = list(pairs)

    if len(pairs) == 1 and isinstance(pairs[0], Mapping):
        return [(str(k), str(v)) for k, v in pairs[0].items()]

    if pairs and all(isinstance(p, tuple) for p in pairs):
        for p in pairs:
            if len(p) != 2:
                raise TypeError(f"each {what} tuple must be a ({what}, value) pair, got {p!r}")
        return [(k, v) for k, v in pairs]

    for p in pairs:
        if not isinstance(p, str):
            raise TypeError(
                f"a mapping must be the only argument and tuples cannot be mixed with strings, got {p!r}"
            )

    if len(pairs) % 2 == 1:
        raise OddPairsError(
            f"each {what} must have a value, but {pairs[-1]!r} has none",
            dangling_key=pairs[-1],
        )

    return list(zip(pairs[0::2], pairs[1::2]))


def to_object(pairs: list[tuple[str, str]]) -> str:
    """Compose ``{k1: v1, k2: v2}``, keeping the given order."""
    return "{" + ", ".join(f"{key}: {value}" for key, value in pairs) + "}"


def to_computed(pairs: list[tuple[str, str]]) -> str:
    """Compose ``{k1: () => v1}``, wrapping each expression in a getter."""
    return "{" + ", ".join(f"{key}: () => {value}" for key, value in pairs) + "}"


def to_filter(filter: Filter) -> str:
    """Compose a filter object; include always comes before exclude."""
    parts = []
    if filter.include:
        parts.append(f"include: {filter.include}")
    if filter.exclude:
        parts.append(f"exclude: {filter.exclude}")
    return "{" + ", ".join(parts) + "}"


def _encode_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_signals(signals: Mapping[str, Any]) -> str:
    """
    Encode a signal mapping as compact JSON with sorted keys.

    Nested mappings, lists, strings, numbers, booleans and None are encoded
    as usual; pydantic models are dumped in JSON mode.

    Raises:
        SignalsEncodingError: If a value cannot be represented in JSON.
    """
    try:
        return json.dumps(
            signals,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
            default=_encode_default,
        )
    except (TypeError, ValueError) as e:
        raise SignalsEncodingError(f"failed to encode signals: {e}") from e
