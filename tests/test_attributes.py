"""
Attribute builder tests

Each builder must produce the exact attribute name and value Datastar
parses: base name, modifiers in call order, then a raw, object, filter or
JSON value. Bare directives carry no value token.
"""

from datetime import timedelta

import pytest

from pydom_datastar import (
    DataAttr,
    Filter,
    Modifier,
    OddPairsError,
    SignalsEncodingError,
    attr,
    bind,
    class_,
    computed,
    duration,
    effect,
    ignore,
    ignore_morph,
    indicator,
    init,
    json_signals,
    on,
    on_intersect,
    on_interval,
    on_signal_patch,
    on_signal_patch_filter,
    preserve_attr,
    ref,
    show,
    signals,
    style,
    text,
    threshold,
)

MS_500 = duration(timedelta(milliseconds=500))


class TestDataAttr:
    """Test the attribute node"""

    def test_spreads_as_mapping(self):
        assert dict(text("$foo")) == {"data-text": "$foo"}
        assert {**bind("foo")} == {"data-bind": "foo"}

    def test_bare_value_is_true(self):
        node = ignore()
        assert node.is_bare
        assert dict(node) == {"data-ignore": True}

    def test_missing_key(self):
        with pytest.raises(KeyError):
            text("$foo")["data-show"]

    def test_equality_and_repr(self):
        assert text("$foo") == DataAttr("data-text", "$foo")
        assert text("$foo") != DataAttr("data-text", "$bar")
        assert repr(ignore()) == "DataAttr('data-ignore')"
        assert repr(text("$foo")) == "DataAttr('data-text', '$foo')"

    def test_same_arguments_same_output(self):
        build = lambda: on("click", "$foo = ''", Modifier.WINDOW, Modifier.DEBOUNCE, MS_500)
        assert build() == build()
        assert dict(signals({"b": 1, "a": 2})) == dict(signals({"a": 2, "b": 1}))


class TestObjectBuilders:
    """attr, class_, style and computed"""

    def test_attr(self):
        assert dict(attr("title", "$title")) == {"data-attr": "{title: $title}"}
        assert dict(attr("title", "$title", "id", "$id")) == {"data-attr": "{title: $title, id: $id}"}

    def test_attr_from_mapping(self):
        assert attr({"title": "$title", "id": "$id"}).value == "{title: $title, id: $id}"

    def test_class(self):
        assert dict(class_("hidden", "$hidden", "font-bold", "$bold")) == {
            "data-class": "{hidden: $hidden, font-bold: $bold}"
        }

    def test_style(self):
        node = style("display", "$hiding ? 'none' : 'flex'", "color", "$usingRed ? 'red' : 'green'")
        assert node.value == "{display: $hiding ? 'none' : 'flex', color: $usingRed ? 'red' : 'green'}"

    def test_computed(self):
        assert computed("foo", "$bar + $baz").value == "{foo: () => $bar + $baz}"
        assert (
            computed("foo", "$bar + $baz", "total", "$price * $quantity").value
            == "{foo: () => $bar + $baz, total: () => $price * $quantity}"
        )

    @pytest.mark.parametrize("builder", [attr, class_, style, computed])
    def test_odd_pairs_fail(self, builder):
        with pytest.raises(OddPairsError):
            builder("a", "$a", "b")

    def test_mixed_pair_forms_fail(self):
        with pytest.raises(TypeError):
            attr("title", ("id", "$id"))
        with pytest.raises(TypeError):
            attr({"a": "$a"}, "b")


class TestRawBuilders:
    """Builders that pass the expression through"""

    @pytest.mark.parametrize(
        "node, expected",
        [
            (bind("foo"), {"data-bind": "foo"}),
            (effect("$foo = $bar + $baz"), {"data-effect": "$foo = $bar + $baz"}),
            (show("$foo"), {"data-show": "$foo"}),
            (text("$foo"), {"data-text": "$foo"}),
            (ref("foo"), {"data-ref": "foo"}),
            (indicator("fetching"), {"data-indicator": "fetching"}),
            (init("$count = 1"), {"data-init": "$count = 1"}),
            (on_intersect("$intersected = true"), {"data-on-intersect": "$intersected = true"}),
            (on_interval("$count++"), {"data-on-interval": "$count++"}),
            (
                on_signal_patch("console.log('Signal patch:', patch)"),
                {"data-on-signal-patch": "console.log('Signal patch:', patch)"},
            ),
        ],
    )
    def test_value_passed_through(self, node, expected):
        assert dict(node) == expected

    def test_expression_not_validated(self):
        assert show("}{ not js").value == "}{ not js"

    @pytest.mark.parametrize("case", [Modifier.CAMEL, Modifier.KEBAB, Modifier.SNAKE, Modifier.PASCAL])
    def test_case_modifiers(self, case):
        assert indicator("fetching", Modifier.CASE, case).name == f"data-indicator__case{case.value}"
        assert ref("foo", Modifier.CASE, case).name == f"data-ref__case{case.value}"

    def test_init_with_delay(self):
        assert dict(init("$count = 1", Modifier.DELAY, MS_500)) == {"data-init__delay.500ms": "$count = 1"}

    def test_interval_with_duration(self):
        node = on_interval("$count++", Modifier.DURATION, duration(0))
        assert node.name == "data-on-interval__duration.0ms"

    def test_intersect_modifiers(self):
        assert on_intersect("$x", Modifier.ONCE, Modifier.FULL).name == "data-on-intersect__once__full"
        assert on_intersect("$x", Modifier.HALF).name == "data-on-intersect__half"
        assert on_intersect("$x", Modifier.EXIT).name == "data-on-intersect__exit"
        assert (
            on_intersect("$x", Modifier.THRESHOLD, threshold(0.25)).name
            == "data-on-intersect__threshold.25"
        )
        assert (
            on_intersect("$x", Modifier.THRESHOLD, threshold(1)).name
            == "data-on-intersect__threshold.100"
        )

    def test_signal_patch_debounce(self):
        assert on_signal_patch("doSomething()", Modifier.DEBOUNCE, MS_500).name == (
            "data-on-signal-patch__debounce.500ms"
        )


class TestOn:
    """Test the data-on event listener"""

    def test_event(self):
        assert dict(on("click", "$foo = ''")) == {"data-on:click": "$foo = ''"}

    def test_modifiers_in_call_order(self):
        node = on("click", "$foo = ''", Modifier.WINDOW, Modifier.DEBOUNCE, MS_500, Modifier.LEADING)
        assert dict(node) == {"data-on:click__window__debounce.500ms.leading": "$foo = ''"}

    def test_order_is_not_normalized(self):
        node = on("click", "$x", Modifier.LEADING, MS_500, Modifier.DEBOUNCE, Modifier.WINDOW)
        assert node.name == "data-on:click.leading.500ms__debounce__window"

    def test_custom_event(self):
        assert on("my-event", "$foo = evt.detail").name == "data-on:my-event"

    def test_missing_expression(self):
        with pytest.raises(TypeError):
            on("click")


class TestBareBuilders:
    """Builders that may emit an attribute without a value"""

    def test_ignore(self):
        assert dict(ignore()) == {"data-ignore": True}
        assert dict(ignore(Modifier.SELF)) == {"data-ignore__self": True}

    def test_ignore_morph(self):
        assert dict(ignore_morph()) == {"data-ignore-morph": True}

    def test_json_signals_without_filter(self):
        assert dict(json_signals()) == {"data-json-signals": True}
        assert dict(json_signals(Filter())) == {"data-json-signals": True}

    def test_json_signals_with_modifier(self):
        assert dict(json_signals(Filter(), Modifier.TERSE)) == {"data-json-signals__terse": True}

    @pytest.mark.parametrize("node", [ignore(), ignore_morph(), json_signals(), json_signals(None, Modifier.TERSE)])
    def test_no_value_token(self, node):
        assert node.is_bare
        assert node.value is True


class TestFilterBuilders:
    """json_signals and on_signal_patch_filter with a filter"""

    def test_json_signals_include(self):
        assert dict(json_signals(Filter(include="/user/"))) == {"data-json-signals": "{include: /user/}"}

    def test_json_signals_exclude(self):
        assert json_signals(Filter(exclude="/temp$/")).value == "{exclude: /temp$/}"

    def test_json_signals_both(self):
        node = json_signals(Filter(include="/^app/", exclude="/password/"))
        assert node.value == "{include: /^app/, exclude: /password/}"

    def test_json_signals_filter_and_modifier(self):
        node = json_signals(Filter(include="/counter/"), Modifier.TERSE)
        assert dict(node) == {"data-json-signals__terse": "{include: /counter/}"}

    def test_on_signal_patch_filter(self):
        assert dict(on_signal_patch_filter(Filter(include="/^counter$/"))) == {
            "data-on-signal-patch-filter": "{include: /^counter$/}"
        }
        assert on_signal_patch_filter(Filter(exclude="/changes$/")).value == "{exclude: /changes$/}"
        assert (
            on_signal_patch_filter(Filter(include="/user/", exclude="/password/")).value
            == "{include: /user/, exclude: /password/}"
        )


class TestListAndJsonBuilders:
    """preserve_attr and signals"""

    def test_preserve_attr(self):
        assert dict(preserve_attr("open")) == {"data-preserve-attr": "open"}
        assert dict(preserve_attr("open", "class")) == {"data-preserve-attr": "open class"}

    def test_signals(self):
        assert dict(signals({"foo": 1})) == {"data-signals": '{"foo":1}'}
        assert signals({"foo": 1, "bar": 2}).value == '{"bar":2,"foo":1}'
        assert signals({"foo": {"bar": 1, "baz": 2}}).value == '{"foo":{"bar":1,"baz":2}}'

    def test_signals_modifiers(self):
        assert signals({"foo": 1}, Modifier.IF_MISSING).name == "data-signals__ifmissing"
        assert signals({"foo": 1}, Modifier.CASE, Modifier.KEBAB).name == "data-signals__case.kebab"

    def test_signals_unsupported_value(self):
        with pytest.raises(SignalsEncodingError):
            signals({"callback": print})
