"""Field validators.

Each validator is a plain function taking a Value and returning a Value,
recording an error kind when its constraint is violated. Validators never
raise and never drop the inner value. Absent values pass every validator
except ``required``.
"""

from blockkit.core.validators import fields, integer, lists, text, text_object
from blockkit.core.validators.required import required

__all__ = [
    "fields",
    "integer",
    "lists",
    "required",
    "text",
    "text_object",
]
