"""Collections – scanning iterables of options or of plain values."""

from optionkit.collections.items import first_item_or_none, last_item_or_none
from optionkit.collections.options import (
    OptionValues,
    SelectedValues,
    all_values,
    any_values,
    count_values,
    first_or_none,
    last_or_none,
    select_values,
    values,
    where_values,
)

__all__ = [
    "OptionValues",
    "SelectedValues",
    "all_values",
    "any_values",
    "count_values",
    "first_item_or_none",
    "first_or_none",
    "last_item_or_none",
    "last_or_none",
    "select_values",
    "values",
    "where_values",
]
