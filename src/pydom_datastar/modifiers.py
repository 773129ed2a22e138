"""
Datastar attribute modifiers.

Modifiers are suffixes appended to a directive name. Behavior modifiers
(timing, event options) use the ``__`` delimiter, format modifiers (case
conversion, leading/trailing edges, numeric tags) use ``.``. Every modifier
value already carries its delimiter, so applying modifiers is concatenation
in call order.

    data-on:click__window__debounce.500ms.leading
"""

import math
from datetime import timedelta
from enum import Enum

from pydom_datastar.exceptions import ModifierValueError

BEHAVIOR_DELIMITER = "__"
FORMAT_DELIMITER = "."


class ModifierFamily(str, Enum):
    """Modifier families, keyed by their delimiter."""

    BEHAVIOR = BEHAVIOR_DELIMITER
    FORMAT = FORMAT_DELIMITER

    @property
    def delimiter(self) -> str:
        return self.value


def _family_of(value: str) -> ModifierFamily:
    if value.startswith(BEHAVIOR_DELIMITER):
        return ModifierFamily.BEHAVIOR
    return ModifierFamily.FORMAT


class Modifier(str, Enum):
    """Catalog of the modifiers understood by Datastar."""

    # Behavior modifiers
    CAPTURE = "__capture"
    CASE = "__case"
    DEBOUNCE = "__debounce"
    DELAY = "__delay"
    DURATION = "__duration"
    EXIT = "__exit"
    FULL = "__full"
    HALF = "__half"
    IF_MISSING = "__ifmissing"
    ONCE = "__once"
    OUTSIDE = "__outside"
    PASSIVE = "__passive"
    PREVENT = "__prevent"
    SELF = "__self"
    STOP = "__stop"
    TERSE = "__terse"
    THRESHOLD = "__threshold"
    THROTTLE = "__throttle"
    VIEW_TRANSITION = "__viewtransition"
    WINDOW = "__window"

    # Format modifiers
    CAMEL = ".camel"  # myEvent
    KEBAB = ".kebab"  # my-event
    LEADING = ".leading"
    NO_LEADING = ".noleading"
    NO_TRAILING = ".notrailing"
    PASCAL = ".pascal"  # MyEvent
    SNAKE = ".snake"  # my_event
    TRAILING = ".trailing"

    def __str__(self) -> str:
        return self.value

    @property
    def family(self) -> ModifierFamily:
        return _family_of(self.value)


class FormatModifier(str):
    """A computed modifier, such as a duration or a threshold tag."""

    @property
    def family(self) -> ModifierFamily:
        return _family_of(self)

    def __repr__(self) -> str:
        return f"FormatModifier({str.__repr__(self)})"


ModifierLike = Modifier | FormatModifier


def duration(value: timedelta | int | float) -> FormatModifier:
    """
    Encode a time span as a millisecond modifier, e.g. ``.500ms``.

    Args:
        value: A timedelta, or a number of milliseconds.

    Returns:
        The span rounded half-up to the nearest whole millisecond.

    Raises:
        ModifierValueError: If the span is negative or not finite.
    """
    if isinstance(value, timedelta):
        if value < timedelta(0):
            raise ModifierValueError(f"duration must not be negative, but is: {value}")
        micros = value // timedelta(microseconds=1)
        millis = (micros + 500) // 1000
    else:
        if math.isnan(value) or value < 0:
            raise ModifierValueError(f"duration must not be negative, but is: {value}ms")
        if not math.isfinite(value):
            raise ModifierValueError(f"duration must be finite, but is: {value}ms")
        millis = math.floor(value + 0.5)

    return FormatModifier(f".{millis}ms")


def threshold(value: float) -> FormatModifier:
    """
    Encode a visibility ratio for the ``__threshold`` modifier.

    The value must be in (0.0, 1.0]. It is rounded to two decimals and the
    leading zero is dropped (0.25 -> ``.25``); full visibility is ``.100``.

    Raises:
        ModifierValueError: If the value is outside the valid range.
    """
    if math.isnan(value) or value <= 0 or value > 1:
        raise ModifierValueError(
            f"threshold must be between 0.0 (exclusive) and 1.0 (inclusive), but is: {value}"
        )

    formatted = f"{value:.2f}"
    # 1.0 and anything rounding up to it means 100% visibility
    if formatted == "1.00":
        return FormatModifier(".100")

    return FormatModifier(formatted.removeprefix("0"))


def join_modifiers(modifiers: tuple[ModifierLike, ...] | list[ModifierLike]) -> str:
    """Concatenate modifiers in the given order."""
    return "".join(str(modifier) for modifier in modifiers)
