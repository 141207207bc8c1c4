"""Validators for text object fields (PlainText, MrkdwnText).

These measure the ``text`` of the object held by the field. A text
object without text passes; its own builder reports that.
"""

from typing import Optional

from blockkit.core.validators._base import predicate_validator
from blockkit.core.value import Validator
from blockkit.errors import MaxTextLength, MinTextLength


def _text_of(obj) -> Optional[str]:
    return getattr(obj, "text", None)


def max_length(limit: int) -> Validator:
    def exceeds(obj) -> bool:
        text = _text_of(obj)
        return isinstance(text, str) and len(text) > limit

    return predicate_validator(MaxTextLength(limit), exceeds, f"max_{limit}")


def min_length(limit: int) -> Validator:
    def too_short(obj) -> bool:
        text = _text_of(obj)
        return isinstance(text, str) and len(text) < limit

    return predicate_validator(MinTextLength(limit), too_short, f"min_{limit}")


max_30 = max_length(30)
max_75 = max_length(75)
max_100 = max_length(100)
max_150 = max_length(150)
max_200 = max_length(200)
max_300 = max_length(300)
max_2000 = max_length(2000)
max_3000 = max_length(3000)

min_1 = min_length(1)
