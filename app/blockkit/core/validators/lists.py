"""Validators for list fields."""

from blockkit.core.validators._base import predicate_validator
from blockkit.core.value import Validator
from blockkit.errors import EmptyArray, MaxArraySize, MaxTextLength


def max_item(limit: int) -> Validator:
    def too_long(items) -> bool:
        return isinstance(items, list) and len(items) > limit

    return predicate_validator(MaxArraySize(limit), too_long, f"max_item_{limit}")


def _any_text_longer_than(limit: int):
    def check(items) -> bool:
        if not isinstance(items, list):
            return False
        for item in items:
            text = getattr(item, "text", None)
            if isinstance(text, str) and len(text) > limit:
                return True
        return False

    return check


max_item_5 = max_item(5)
max_item_10 = max_item(10)
max_item_20 = max_item(20)
max_item_25 = max_item(25)
max_item_50 = max_item(50)
max_item_100 = max_item(100)

not_empty = predicate_validator(
    EmptyArray(), lambda items: isinstance(items, list) and not items, "not_empty"
)

# One MaxTextLength for the whole list, however many items are too long.
each_text_max_2000 = predicate_validator(
    MaxTextLength(2000), _any_text_longer_than(2000), "each_text_max_2000"
)
