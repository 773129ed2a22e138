"""
Datastar attributes for pydom.

See https://data-star.dev
"""

from pydom_datastar.attributes import (
    DataAttr,
    OnChain,
    attr,
    bind,
    class_,
    computed,
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
from pydom_datastar.exceptions import (
    DatastarError,
    ModifierValueError,
    OddPairsError,
    SignalsEncodingError,
)
from pydom_datastar.modifiers import (
    FormatModifier,
    Modifier,
    ModifierFamily,
    duration,
    threshold,
)
from pydom_datastar.values import Filter

__all__ = [
    "DataAttr",
    "DatastarContext",
    "DatastarError",
    "Filter",
    "FormatModifier",
    "Modifier",
    "ModifierFamily",
    "ModifierValueError",
    "OddPairsError",
    "OnChain",
    "SignalsEncodingError",
    "attr",
    "bind",
    "class_",
    "computed",
    "duration",
    "effect",
    "ignore",
    "ignore_morph",
    "indicator",
    "init",
    "json_signals",
    "on",
    "on_intersect",
    "on_interval",
    "on_signal_patch",
    "on_signal_patch_filter",
    "preserve_attr",
    "ref",
    "show",
    "signals",
    "style",
    "text",
    "threshold",
]
