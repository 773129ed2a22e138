"""
Demo page template.

One section per Datastar attribute, each wired to a shared set of signals.
"""

from datetime import timedelta

from pydom import Component, render
from pydom import html as d
from pydom.types import Renderable

from pydom_datastar import (
    Filter,
    Modifier,
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
)
from pydom_datastar.context import DatastarContext
from pydom_datastar.core.config import get_settings

INITIAL_SIGNALS = {
    "counter": 0,
    "name": "World",
    "show": True,
    "isHighlit": False,
    "price": 100,
    "quantity": 2,
    "inputValue": "Hello",
    "selected": "option1",
    "message": "",
    "count": 0,
    "intersected": False,
}

BUTTON = "px-4 py-2 m-1 bg-indigo-600 text-white rounded-md font-medium hover:bg-indigo-700 disabled:bg-gray-300"
INPUT = "px-3 py-2 m-1 border border-gray-300 rounded-md"
BOX = "border border-gray-200 rounded-lg p-4 my-3 bg-gray-50"


class DemoSection(Component):
    """A titled card holding one attribute demo."""

    def __init__(self, *, title: str, description: str, content: Renderable, **props) -> None:
        self.title = title
        self.description = description
        self.content = content
        self.props = props

    def render(self):
        return d.Section(classes="bg-white rounded-xl shadow p-6 mb-6", **self.props)(
            d.H2(classes="text-2xl font-bold text-indigo-700 mb-2")(self.title),
            d.P(classes="text-gray-600 mb-4")(self.description),
            self.content,
        )


class SignalsDemo(Component):
    def render(self):
        return DemoSection(
            title="Signals",
            description="Signals are reactive state variables. Click the buttons to modify them.",
            content=d.Div()(
                d.Div(classes=BOX)(
                    d.H3(classes="font-semibold")("Counter Example"),
                    d.P()(d.Span(**text("$counter")), " clicks"),
                    d.Button(classes=BUTTON, **on("click", "$counter++"))("Increment"),
                    d.Button(classes=BUTTON, **on("click", "$counter--"))("Decrement"),
                    d.Button(classes=BUTTON, **on("click", "$counter = 0"))("Reset"),
                ),
                d.Div(classes=BOX)(
                    d.H3(classes="font-semibold")("All Signals (JSON)"),
                    d.Pre(**json_signals()),
                ),
                d.Div(classes=BOX)(
                    d.H3(classes="font-semibold")("Filtered Signals (counter only)"),
                    d.Pre(**json_signals(Filter(include="/counter/"), Modifier.TERSE)),
                ),
            ),
            **signals(INITIAL_SIGNALS),
        )


class BindingDemo(Component):
    def render(self):
        return DemoSection(
            title="Text and Two-Way Binding",
            description="data-text binds text content; data-bind keeps a signal and a form element in sync.",
            content=d.Div(classes="grid grid-cols-1 md:grid-cols-3 gap-4")(
                d.Div(classes=BOX)(
                    d.P()("Hello, ", d.Span(**text("$name")), "!"),
                    d.Input(type="text", classes=INPUT, placeholder="Enter your name", **bind("name")),
                ),
                d.Div(classes=BOX)(
                    d.Select(classes=INPUT, **bind("selected"))(
                        d.Option(value="option1")("Option 1"),
                        d.Option(value="option2")("Option 2"),
                        d.Option(value="option3")("Option 3"),
                    ),
                    d.P()("Selected: ", d.Span(**text("$selected"))),
                ),
                d.Div(classes=BOX)(
                    d.TextArea(classes=INPUT, placeholder="Type a message...", **bind("message")),
                    d.P()("Message length: ", d.Span(**text("$message.length"))),
                ),
            ),
        )


class ShowAndClassDemo(Component):
    def render(self):
        return DemoSection(
            title="Show, Classes and Styles",
            description="data-show toggles visibility, data-class and data-style follow expressions.",
            content=d.Div()(
                d.Div(classes=BOX)(
                    d.Button(classes=BUTTON, **on("click", "$show = !$show"))("Toggle Visibility"),
                    d.Div(classes="mt-2 p-2 bg-blue-50 rounded", **show("$show"))(
                        "This element is conditionally visible!"
                    ),
                ),
                d.Div(classes=BOX)(
                    d.Button(classes=BUTTON, **on().click("$isHighlit = !$isHighlit"))(
                        "Toggle Highlight"
                    ),
                    d.Div(
                        classes="mt-2 p-2 border rounded",
                        **class_("bg-yellow-200", "$isHighlit", "font-bold", "$isHighlit"),
                    )("This text changes style when highlighted"),
                ),
                d.Div(classes=BOX)(
                    d.Div(
                        **style(
                            ("color", "$counter % 2 === 0 ? 'blue' : 'red'"),
                            ("fontSize", "$counter > 5 ? '24px' : '16px'"),
                        )
                    )("This text changes style based on the counter"),
                ),
                d.Div(classes=BOX)(
                    d.Button(
                        classes=BUTTON,
                        **on("click", "$counter++"),
                        **attr("disabled", "$counter >= 10"),
                    )("Click me (max 10)"),
                    d.P()("Clicks: ", d.Span(**text("$counter")), "/10"),
                ),
            ),
        )


class ComputedAndEffectDemo(Component):
    def render(self):
        return DemoSection(
            title="Computed Signals and Effects",
            description="data-computed derives read-only signals; data-effect runs when signals change.",
            content=d.Div(**computed("total", "$price * $quantity"))(
                d.Div(classes=BOX, **effect("console.log('Counter changed to:', $counter)"))(
                    d.Label()("Price: $"),
                    d.Input(type="number", classes=INPUT, **bind("price")),
                    d.Label()("Quantity: "),
                    d.Input(type="number", classes=INPUT, **bind("quantity")),
                    d.P()("Total: $", d.Span(**text("$total"))),
                ),
            ),
        )


class EventsDemo(Component):
    def render(self):
        return DemoSection(
            title="Event Listeners",
            description="data-on attaches listeners; modifiers change their timing and scope.",
            content=d.Div(classes="grid grid-cols-1 md:grid-cols-3 gap-4")(
                d.Div(classes=BOX)(
                    d.Div(
                        classes="p-4 bg-blue-50 rounded cursor-pointer",
                        **on("mouseenter", "$show = true"),
                        **on("mouseleave", "$show = false"),
                    )("Hover over me"),
                    d.P()("Hovering: ", d.Span(**text("$show"))),
                ),
                d.Div(classes=BOX)(
                    d.Input(
                        type="text",
                        classes=INPUT,
                        placeholder="Type here (debounced 500ms)",
                        **on(
                            "input",
                            "$inputValue = evt.target.value",
                            Modifier.DEBOUNCE,
                            duration(timedelta(milliseconds=500)),
                        ),
                    ),
                    d.P()("Debounced value: ", d.Span(**text("$inputValue"))),
                ),
                d.Div(classes=BOX)(
                    d.Input(
                        type="text",
                        classes=INPUT,
                        placeholder="Press Escape anywhere",
                        **on().keydown.window.throttle(250)("evt.key === 'Escape' && ($message = '')"),
                    ),
                ),
            ),
        )


class TimersDemo(Component):
    def render(self):
        return DemoSection(
            title="Intervals, Init and Intersection",
            description="data-on-interval, data-init and data-on-intersect run expressions over time.",
            content=d.Div()(
                d.Div(
                    classes=BOX,
                    **on_interval("$count++", Modifier.DURATION, duration(timedelta(seconds=1))),
                    **init("console.log('This section was initialized at:', new Date())"),
                )(
                    d.P()("Seconds elapsed: ", d.Span(**text("$count"))),
                ),
                d.Div(classes="h-72"),
                d.Div(
                    classes="p-4 border-2 border-indigo-500 rounded text-center",
                    **on_intersect("$intersected = true", Modifier.ONCE),
                    **class_("bg-yellow-200", "$intersected"),
                )("I'll highlight when you scroll to me!"),
            ),
        )


class ElementsDemo(Component):
    def render(self):
        return DemoSection(
            title="References, Indicators and Morphing",
            description="data-ref, data-indicator, data-preserve-attr, data-ignore and data-ignore-morph.",
            content=d.Div()(
                d.Div(classes=BOX)(
                    d.Div(classes="p-2 bg-blue-50 rounded", **ref("myDiv"))("I am a referenced element"),
                    d.Button(classes=BUTTON, **on("click", "$myDiv.style.background = '#ffeb3b'"))(
                        "Change Background"
                    ),
                    d.Button(
                        classes=BUTTON,
                        **indicator("fetching", Modifier.CASE, Modifier.KEBAB),
                        **attr("disabled", "$fetching"),
                    )("Indicator"),
                ),
                d.Div(classes=BOX)(
                    d.Details(open=True, **preserve_attr("open"))(
                        d.Summary()("Click to expand/collapse"),
                        d.P()("The 'open' attribute is preserved during DOM updates."),
                    ),
                ),
                d.Div(classes=BOX, **ignore())(
                    "This element is ignored by Datastar. Any data-* attributes here won't work.",
                    d.Button(classes=BUTTON, **on("click", "$counter++"))("This won't work"),
                ),
                d.Div(classes=BOX, **ignore_morph())("This element will not be morphed during DOM updates."),
            ),
        )


class SignalPatchDemo(Component):
    def render(self):
        return DemoSection(
            title="Signal Patch Events",
            description="data-on-signal-patch runs expressions when signals are patched.",
            content=d.Div(
                classes=BOX,
                **on_signal_patch_filter(Filter(include="/counter/")),
                **on_signal_patch("console.log('Counter signal patched:', patch)"),
            )(
                d.Button(classes=BUTTON, **on("click", "$counter++"))("Increment (check console)"),
            ),
        )


class DemoPage(Component):
    """The full demo document."""

    def __init__(self, *, title: str = "Datastar Attributes Demo") -> None:
        self.title = title

    def render(self):
        settings = get_settings()
        return d.Html(lang="en")(
            d.Head()(
                d.Meta(charset="utf-8"),
                d.Meta(name="viewport", content="width=device-width, initial-scale=1"),
                d.Title()(self.title),
                # Tailwind CSS v4
                d.Script(src="https://cdn.jsdelivr.net/npm/@tailwindcss/browser@4"),
                d.Script(type="module", src=settings.datastar_cdn_url),
            ),
            d.Body(classes="bg-gray-100 min-h-screen")(
                d.Main(classes="max-w-5xl mx-auto px-4 py-8")(
                    d.H1(classes="text-4xl font-extrabold text-center text-gray-900 mb-8")(self.title),
                    SignalsDemo(),
                    BindingDemo(),
                    ShowAndClassDemo(),
                    ComputedAndEffectDemo(),
                    EventsDemo(),
                    TimersDemo(),
                    ElementsDemo(),
                    SignalPatchDemo(),
                ),
                d.Footer(classes="text-center text-gray-500 py-6")(
                    "Built with ",
                    d.A(href="https://github.com/xpodev/pydom", classes="underline")("pydom"),
                    " and ",
                    d.A(href="https://data-star.dev", classes="underline")("Datastar"),
                ),
            ),
        )


def render_demo_page(title: str = "Datastar Attributes Demo") -> str:
    """Render the demo page to an HTML string."""
    return render(DemoPage(title=title), context=DatastarContext.default())
