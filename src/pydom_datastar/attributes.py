"""
Datastar attribute builders for pydom.

Each builder returns a ``DataAttr``, a one-key mapping that is spread into
a pydom element:

    d.Button(**on("click", "$count++"), **attr("disabled", "$count >= 10"))

Names carrying ``__`` modifiers only survive rendering with
``DatastarContext.default()``; the HTML shown in the docstrings below is what
``render(..., context=DatastarContext.default())`` produces.

See https://data-star.dev/reference/attributes
"""

from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Literal, overload

from pydom_datastar.modifiers import Modifier, ModifierLike, duration, join_modifiers
from pydom_datastar.values import (
    Filter,
    PairsArg,
    pairs_of,
    to_computed,
    to_filter,
    to_object,
    to_signals,
)


class DataAttr:
    """A single ``data-*`` attribute, bare when its value is ``True``."""

    def __init__(self, name: str, value: str | Literal[True] = True):
        self.name = name
        self.value = value

    @property
    def is_bare(self) -> bool:
        return self.value is True

    def keys(self):
        return [self.name]

    def __getitem__(self, key):
        if key == self.name:
            return self.value
        raise KeyError(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataAttr):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.name, self.value))

    def __repr__(self) -> str:
        if self.is_bare:
            return f"DataAttr({self.name!r})"
        return f"DataAttr({self.name!r}, {self.value!r})"


def _data(name: str, value: str | None = None) -> DataAttr:
    return DataAttr(f"data-{name}", True if value is None else value)


# =======================================================================
# Directive builders
# =======================================================================


def attr(*pairs: PairsArg) -> DataAttr:
    """
    Set the values of attributes to expressions, and keep them in sync.

        <div data-attr="{title: $foo, disabled: $bar}"></div>
    """
    return _data("attr", to_object(pairs_of(pairs, "attribute name")))


def bind(name: str) -> DataAttr:
    """
    Two-way binding between a signal and an element's value.

        <input data-bind="foo" />
    """
    return _data("bind", name)


def class_(*pairs: PairsArg) -> DataAttr:
    """
    Add or remove classes based on expressions.

        <div data-class="{hidden: $foo, 'font-bold': $bar}"></div>
    """
    return _data("class", to_object(pairs_of(pairs, "class name")))


def computed(*pairs: PairsArg) -> DataAttr:
    """
    Create read-only signals computed from expressions.

        <div data-computed="{foo: () => $bar + $baz}"></div>
    """
    return _data("computed", to_computed(pairs_of(pairs, "computed signal name")))


def effect(expression: str) -> DataAttr:
    """Run an expression on load and whenever its signals change."""
    return _data("effect", expression)


def ignore(*modifiers: ModifierLike) -> DataAttr:
    """
    Tell Datastar to skip an element (and its descendants).

        <div data-ignore__self></div>
    """
    return _data("ignore" + join_modifiers(modifiers))


def ignore_morph() -> DataAttr:
    """Skip an element and its children when morphing patched elements."""
    return _data("ignore-morph")


def indicator(name: str, *modifiers: ModifierLike) -> DataAttr:
    """
    Create a signal that is true while a fetch request is in flight.

        <button data-indicator__case.kebab="fetching"></button>
    """
    return _data("indicator" + join_modifiers(modifiers), name)


def json_signals(filter: Filter | None = None, *modifiers: ModifierLike) -> DataAttr:
    """
    Show a reactive JSON dump of the signals, optionally filtered.

        <pre data-json-signals="{include: /^app/, exclude: /password/}"></pre>

    An empty filter gives a bare ``data-json-signals``.
    """
    name = "json-signals" + join_modifiers(modifiers)
    if filter is None or filter.is_empty():
        return _data(name)
    return _data(name, to_filter(filter))


@overload
def on() -> "OnChain": ...
@overload
def on(event: str, expression: str, *modifiers: ModifierLike) -> DataAttr: ...


def on(event: str | None = None, expression: str | None = None, *modifiers: ModifierLike):
    """
    Attach an event listener that runs an expression.

        <button data-on:click__window__debounce.500ms.leading="$foo = ''"></button>

    Called without arguments, returns a chained builder instead:

        on().click.window.debounce(timedelta(milliseconds=500)).leading("$foo = ''")
    """
    if event is None:
        return OnChain()
    if expression is None:
        raise TypeError(f"on() requires an expression for event {event!r}")
    return _data("on:" + event + join_modifiers(modifiers), expression)


def on_intersect(expression: str, *modifiers: ModifierLike) -> DataAttr:
    """Run an expression when the element intersects with the viewport."""
    return _data("on-intersect" + join_modifiers(modifiers), expression)


def on_interval(expression: str, *modifiers: ModifierLike) -> DataAttr:
    """
    Run an expression at a regular interval (one second unless changed).

        <div data-on-interval__duration.500ms="$count++"></div>
    """
    return _data("on-interval" + join_modifiers(modifiers), expression)


def init(expression: str, *modifiers: ModifierLike) -> DataAttr:
    """Run an expression when the element is loaded into the DOM."""
    return _data("init" + join_modifiers(modifiers), expression)


def on_signal_patch(expression: str, *modifiers: ModifierLike) -> DataAttr:
    """Run an expression whenever signals are patched; ``patch`` holds the details."""
    return _data("on-signal-patch" + join_modifiers(modifiers), expression)


def on_signal_patch_filter(filter: Filter) -> DataAttr:
    """Filter which signals ``data-on-signal-patch`` watches."""
    return _data("on-signal-patch-filter", to_filter(filter))


def preserve_attr(*attrs: str) -> DataAttr:
    """
    Preserve attribute values when morphing.

        <details open data-preserve-attr="open class"></details>
    """
    return _data("preserve-attr", " ".join(attrs))


def ref(name: str, *modifiers: ModifierLike) -> DataAttr:
    """Create a signal referencing the element."""
    return _data("ref" + join_modifiers(modifiers), name)


def show(expression: str) -> DataAttr:
    """Show or hide the element based on an expression."""
    return _data("show", expression)


def signals(signals: Mapping[str, Any], *modifiers: ModifierLike) -> DataAttr:
    """
    Patch signals into the existing signals.

        <div data-signals__ifmissing="{"foo":1}"></div>

    Setting a signal to None removes it. Signal names must not contain
    ``__``, which is the modifier delimiter.
    """
    return _data("signals" + join_modifiers(modifiers), to_signals(signals))


def style(*pairs: PairsArg) -> DataAttr:
    """
    Set inline styles from expressions, and keep them in sync.

        <div data-style="{display: $hiding ? 'none' : 'flex'}"></div>
    """
    return _data("style", to_object(pairs_of(pairs, "style property")))


def text(expression: str) -> DataAttr:
    """Bind the text content of an element to an expression."""
    return _data("text", expression)


# =======================================================================
# Chained data-on builder
# =======================================================================


class classproperty:
    def __init__(self, func):
        self.fget = func

    def __get__(self, instance, owner):
        return self.fget(owner)


class _ChainBase:
    NEXT: type["_ChainBase"] | None = None

    def __init__(self, name: str):
        self.name = name

    def _link(self, attr_name: str) -> str:
        raise NotImplementedError

    def __getattr__(self, attr_name):
        if attr_name.startswith("_") or not self.NEXT:
            raise AttributeError(f"No further attributes for {self.name}")

        return self.NEXT(f"{self.name}{self._link(attr_name)}")


class _OnModifiers:
    capture: "OnModifier"
    case: "OnModifier"
    debounce: "OnModifier"
    delay: "OnModifier"
    once: "OnModifier"
    outside: "OnModifier"
    passive: "OnModifier"
    prevent: "OnModifier"
    self: "OnModifier"
    stop: "OnModifier"
    throttle: "OnModifier"
    view_transition: "OnModifier"
    window: "OnModifier"
    camel: "OnModifier"
    kebab: "OnModifier"
    snake: "OnModifier"
    pascal: "OnModifier"
    leading: "OnModifier"
    no_leading: "OnModifier"
    trailing: "OnModifier"
    no_trailing: "OnModifier"


class OnModifier(_ChainBase, _OnModifiers):
    @classproperty
    def NEXT(cls) -> type["OnModifier"]:
        return OnModifier

    def _link(self, attr_name: str) -> str:
        try:
            return str(Modifier[attr_name.upper()])
        except KeyError:
            raise AttributeError(f"Unknown modifier {attr_name!r} for {self.name}") from None

    @overload
    def __call__(self, value: str) -> DataAttr: ...
    @overload
    def __call__(self, value: timedelta | int | float) -> "OnModifier": ...

    def __call__(self, value):
        if isinstance(value, str):
            return DataAttr(self.name, value)
        # a timing argument, e.g. debounce(500) -> __debounce.500ms
        return OnModifier(f"{self.name}{duration(value)}")


class _OnEvents:
    click: OnModifier
    change: OnModifier
    input: OnModifier
    submit: OnModifier
    keydown: OnModifier
    keyup: OnModifier
    load: OnModifier
    scroll: OnModifier
    resize: OnModifier


class OnChain(_ChainBase, _OnEvents):
    """Chained ``data-on`` builder: event first, then modifiers, then the expression."""

    NEXT = OnModifier

    def __init__(self):
        super().__init__("data-on")

    def _link(self, attr_name: str) -> str:
        # custom events use dashes, which python names can't
        return ":" + attr_name.replace("_", "-")
