"""Builder generation and the build engine.

Every entity gets a ``<Entity>Builder`` class generated when the entity
class is created. The builder holds one Value cell per field and exposes,
for a field ``x``:

- ``set_x(value)``: replace the cell, None clears it; validators run now
- ``x(value)``: the same for a present value
- ``get_x()``: current value, read-only
- ``<push_item>(item)`` for list fields: append one item; validation of
  the list waits until ``build()``

Builders have value semantics: every method returns a new builder and
leaves the receiver untouched.
"""

from typing import Any, ClassVar, Dict, List, Optional, Tuple, Type, Union, get_args, get_origin

from pydantic import ValidationError as PydanticValidationError

from blockkit.core.fields import BuilderField
from blockkit.core.result import BuildResult
from blockkit.core.value import Value, pipe
from blockkit.errors import (
    BuilderDefinitionError,
    InvalidValue,
    ValidationError,
    ValidationErrorKind,
    ValidationErrors,
)
from blockkit.logging import get_module_logger

logger = get_module_logger()

DISCRIMINATOR = "type"

_NONE_TYPE = type(None)


class Builder:
    """Base class of every generated builder."""

    _entity: ClassVar[Type[Any]]
    _fields: ClassVar[Dict[str, BuilderField]] = {}
    _list_fields: ClassVar[frozenset] = frozenset()

    def __init__(self) -> None:
        self._cells: Dict[str, Value] = {}

    def __repr__(self) -> str:
        values = ", ".join(
            f"{name}={cell.inner!r}"
            for name, cell in self._cells.items()
            if cell.inner is not None
        )
        return f"{type(self).__name__}({values})"

    def _cell(self, name: str) -> Value:
        return self._cells.get(name, Value())

    def _evolve(self, name: str, cell: Value) -> "Builder":
        builder = type(self).__new__(type(self))
        builder._cells = {**self._cells, name: cell}
        return builder

    def _convert(self, name: str, value: Any) -> Any:
        convert = self._fields[name].convert
        if name in self._list_fields:
            # Anything else is left as given for the build to report.
            if not isinstance(value, (list, tuple)):
                return value
            items = list(value)
            return [convert(item) for item in items] if convert else items
        return convert(value) if convert else value

    def _set(self, name: str, value: Any) -> "Builder":
        if value is not None:
            value = self._convert(name, value)
        cell = pipe(Value.new(value), *self._fields[name].validators)
        return self._evolve(name, cell)

    def _push(self, name: str, item: Any) -> "Builder":
        convert = self._fields[name].convert
        if convert is not None:
            item = convert(item)
        current = self._cell(name).inner
        # A value that is not a list is replaced, never split into items.
        items = list(current) if isinstance(current, list) else []
        items.append(item)
        return self._evolve(name, Value(inner=items, deferred=True))

    def _get(self, name: str) -> Any:
        inner = self._cell(name).inner
        if isinstance(inner, list):
            return list(inner)
        return inner

    def _validated_cell(self, name: str) -> Value:
        cell = self._cells.get(name)
        if cell is None or cell.deferred:
            inner = cell.inner if cell is not None else None
            cell = pipe(Value.new(inner), *self._fields[name].validators)
        return cell

    def field_errors(self) -> Dict[str, Tuple[ValidationErrorKind, ...]]:
        """Return the errors recorded by setters so far, per field.

        Deferred list validation and across-field checks are not included;
        they only run in ``build()``.
        """
        return {
            name: cell.errors
            for name, cell in self._cells.items()
            if cell.errors
        }

    def build(self) -> BuildResult:
        """Validate every field and construct the entity.

        Returns:
            BuildResult holding the entity, or the ValidationErrors report
            listing every field and across-field violation
        """
        entity_cls = self._entity
        object_name = entity_cls.__name__

        field_errors: Dict[Optional[str], List[ValidationErrorKind]] = {}
        values: Dict[str, Any] = {}
        for name in self._fields:
            cell = self._validated_cell(name)
            if cell.errors:
                field_errors[name] = list(cell.errors)
            if cell.inner is not None:
                values[name] = cell.inner

        candidate = None
        if not field_errors:
            try:
                candidate = entity_cls.model_validate(values)
            except PydanticValidationError as exc:
                for name, kind in _invalid_values(exc):
                    field_errors.setdefault(name, []).append(kind)
        if candidate is None:
            candidate = entity_cls.model_construct(**values)

        across = list(candidate.validate_across_fields())
        across.extend(field_errors.pop(None, []))

        if not field_errors and not across:
            logger.debug("build_succeeded", object=object_name)
            return BuildResult.success(candidate)

        errors = [
            ValidationError.single_field(name, kinds)
            for name, kinds in field_errors.items()
        ]
        errors.append(ValidationError.across_fields(across))
        report = ValidationErrors(object_name, [e for e in errors if e is not None])

        logger.debug(
            "build_failed",
            object=object_name,
            fields=list(field_errors),
            across_fields=len(across),
        )
        return BuildResult.invalid(report)


def _invalid_values(exc: PydanticValidationError):
    """Map pydantic errors to (field, InvalidValue) pairs.

    Errors without a location land in the across-fields bucket (None).
    """
    for error in exc.errors():
        loc = error.get("loc") or ()
        name = loc[0] if loc and isinstance(loc[0], str) else None
        yield name, InvalidValue(error["msg"])


def _is_list_annotation(annotation: Any) -> bool:
    if get_origin(annotation) is Union:
        args = [arg for arg in get_args(annotation) if arg is not _NONE_TYPE]
        if len(args) != 1:
            return False
        annotation = args[0]
    return get_origin(annotation) is list


def _builder_field(field_info: Any) -> BuilderField:
    for meta in field_info.metadata:
        if isinstance(meta, BuilderField):
            return meta
    return BuilderField()


def _make_setter(name: str):
    def setter(self, value):
        return self._set(name, value)

    setter.__doc__ = f"Set the {name} field; None clears it."
    return setter


def _make_shorthand(name: str):
    def shorthand(self, value):
        return self._set(name, value)

    shorthand.__doc__ = f"Set the {name} field."
    return shorthand


def _make_getter(name: str):
    def getter(self):
        return self._get(name)

    getter.__doc__ = f"Get the {name} field value."
    return getter


def _make_pusher(name: str):
    def pusher(self, item):
        return self._push(name, item)

    pusher.__doc__ = f"Push one item to the {name} field."
    return pusher


def make_builder(entity_cls: Type[Any], mixins: Tuple[type, ...] = ()) -> Type[Builder]:
    """Generate the builder class for an entity.

    Args:
        entity_cls: The pydantic entity class
        mixins: Extra classes whose methods the builder should carry

    Returns:
        The generated ``<Entity>Builder`` class

    Raises:
        BuilderDefinitionError: If a field declaration is inconsistent
    """
    object_name = entity_cls.__name__
    fields: Dict[str, BuilderField] = {}
    list_fields = set()
    namespace: Dict[str, Any] = {}

    def add(method_name: str, func) -> None:
        if method_name in namespace or hasattr(Builder, method_name):
            raise BuilderDefinitionError(
                f"{object_name}: builder method `{method_name}` is defined twice"
            )
        func.__name__ = method_name
        func.__qualname__ = f"{object_name}Builder.{method_name}"
        namespace[method_name] = func

    for name, field_info in entity_cls.model_fields.items():
        if name == DISCRIMINATOR:
            continue

        declaration = _builder_field(field_info)
        is_list = _is_list_annotation(field_info.annotation)
        if declaration.push_item and not is_list:
            raise BuilderDefinitionError(
                f"{object_name}.{name}: push_item requires a list field"
            )

        fields[name] = declaration
        if is_list:
            list_fields.add(name)

        prefix = "_" if declaration.private else ""
        add(f"{prefix}set_{name}", _make_setter(name))
        add(f"{prefix}{name}", _make_shorthand(name))
        add(f"get_{name}", _make_getter(name))
        if declaration.push_item:
            add(declaration.push_item, _make_pusher(name))

    namespace.update(
        _entity=entity_cls,
        _fields=fields,
        _list_fields=frozenset(list_fields),
        __module__=entity_cls.__module__,
        __qualname__=f"{object_name}Builder",
        __doc__=f"Builder for {object_name} objects.",
    )
    builder_cls = type(f"{object_name}Builder", (*mixins, Builder), namespace)

    logger.debug(
        "builder_generated",
        object=object_name,
        fields=list(fields),
    )
    return builder_cls
