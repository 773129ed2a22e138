"""
pydom rendering context for Datastar attributes.

pydom's standard context turns every ``_`` in a property name into ``-``,
which would rewrite ``data-on:click__window`` into ``data-on:click--window``.
Render pages that carry Datastar attributes with ``DatastarContext.default()``:

    render(page, context=DatastarContext.default())
"""

from pydom.context.context import Context, PropertyTransformer
from pydom.context.standard import transformers as t

DATA_PREFIX = "data-"


class DatastarDashTransformer(t.DashTransformer):
    """Dash transformer that leaves ``data-*`` names as they are."""

    def match(self, prop_name, prop_value) -> bool:
        if prop_name.startswith(DATA_PREFIX):
            return False
        return super().match(prop_name, prop_value)


class DatastarContext(Context):
    @classmethod
    def default(cls) -> "DatastarContext":
        ctx = cls()
        transformers: list[PropertyTransformer] = [
            t.FalsyTransformer(),
            t.ClassTransformer(),
            t.SimpleTransformer(),
            t.SimpleInputTransformer(),
            t.StyleTransformer(),
            t.InnerHTMLTransformer(),
            # Order matters
            t.HTMLEventsTransformer(),
            DatastarDashTransformer(),
        ]
        for transformer in transformers:
            ctx.add_prop_transformer(transformer)
        return ctx
