from blockkit.core.value import Value
from blockkit.errors import Required


def required(value: Value) -> Value:
    """Record Required when the field holds no value."""
    if value.inner is None:
        return value.with_error(Required())
    return value
