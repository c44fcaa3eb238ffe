"""r2resize data models.

- CardItem: One panel of a flex or elastic card
- SplitPosition / ToolbarPosition: Enumerated layout options
- Option helpers: enum matching, range checks, default filling
"""

from r2resize.models.cards import CardItem
from r2resize.models.options import (
    UNSET,
    SplitPosition,
    ToolbarPosition,
    check_non_negative,
    check_whole_number,
    match_choice,
    match_slider_position,
    resolve,
)

__all__ = [
    "UNSET",
    "CardItem",
    "SplitPosition",
    "ToolbarPosition",
    "check_non_negative",
    "check_whole_number",
    "match_choice",
    "match_slider_position",
    "resolve",
]
