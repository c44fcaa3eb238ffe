"""r2resize components.

- containers: split, sizeable, window and emphasis containers
- cards: expanding flex cards and elastic cards
- markdown: document-wide resize toolbar
- images: image viewer
- scripts: script dependencies
"""

from r2resize.components.cards import elasti_card, flex_card
from r2resize.components.containers import (
    emphasis_card,
    empahsis_card,
    sizeable_card,
    split_card,
    split_card2,
    window_card,
)
from r2resize.components.images import expand_image
from r2resize.components.markdown import add_resizer
from r2resize.components.scripts import add_jquery

__all__ = [
    "add_jquery",
    "add_resizer",
    "elasti_card",
    "emphasis_card",
    "empahsis_card",
    "expand_image",
    "flex_card",
    "sizeable_card",
    "split_card",
    "split_card2",
    "window_card",
]
