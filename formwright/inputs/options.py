"""
Turning collections of any shape into uniform ``CollectionItem`` values and
evaluating the per item ``disabled``/``selected``/``checked`` conditions.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Union

from markupsafe import Markup

from formwright.errors import CollectionShapeError, FormConfigurationError
from formwright.helper import to_param
from formwright.models import CollectionItem


SCALARS = (str, bytes, int, float, Decimal, bool, Enum, type(None))

# tried in order on record-like objects which also have an ``id``
RECORD_LABEL_METHODS = ("to_label", "name", "title")


class Accessor:
    """Reads a label or value off a collection element, by name or by function."""

    def __init__(self,
                 name: Optional[str] = None,
                 function: Optional[Callable[[Any], Any]] = None):
        if (name is None) == (function is None):
            raise ValueError("an accessor needs either a name or a function")
        self.name = name
        self.function = function

    @classmethod
    def by_name(cls, name: str) -> "Accessor":
        return cls(name=name)

    @classmethod
    def by_function(cls, function: Callable[[Any], Any]) -> "Accessor":
        return cls(function=function)

    @classmethod
    def coerce(cls, spec: Union[None, str, Callable, "Accessor"]) -> Optional["Accessor"]:
        if spec is None or isinstance(spec, Accessor):
            return spec
        if isinstance(spec, str):
            return cls.by_name(spec)
        if callable(spec):
            return cls.by_function(spec)
        raise FormConfigurationError(
            f"label/value method must be a name or a callable, got {spec!r}")

    def apply(self, item: Any) -> Any:
        if self.function is not None:
            return self.function(item)
        if isinstance(item, Mapping) and self.name in item:
            return item[self.name]
        value = getattr(item, self.name)
        if callable(value):
            value = value()
        return value

    def __repr__(self) -> str:
        if self.function is not None:
            return f"Accessor(function={self.function!r})"
        return f"Accessor(name={self.name!r})"


def is_record(element: Any) -> bool:
    if isinstance(element, SCALARS):
        return False
    return hasattr(element, "id") and any(
        hasattr(element, m) for m in RECORD_LABEL_METHODS)


class OptionNormalizer:

    def materialize(self, raw: Any) -> List[Any]:
        if callable(raw) and not isinstance(raw, (Mapping, str)) \
                and not hasattr(raw, "__iter__"):
            raw = raw()
        if raw is None:
            return []
        if isinstance(raw, (str, bytes)):
            raise CollectionShapeError(raw, "a string is not a collection")
        if isinstance(raw, Mapping):
            return list(raw.items())
        try:
            return list(raw)
        except TypeError:
            raise CollectionShapeError(raw, "not iterable") from None

    def normalize(self,
                  raw: Any,
                  label_method: Any = None,
                  value_method: Any = None) -> List[CollectionItem]:
        label_accessor = Accessor.coerce(label_method)
        value_accessor = Accessor.coerce(value_method)
        return [
            self.item_for(element, label_accessor, value_accessor)
            for element in self.materialize(raw)
        ]

    def defaults_for(self, element: Any):
        """Structural label, value and attributes of one element."""
        if isinstance(element, (list, tuple)):
            if len(element) not in (2, 3):
                raise CollectionShapeError(
                    element, "expected (label, value) or (label, value, attributes)")
            attributes = {}
            if len(element) == 3:
                if not isinstance(element[2], Mapping):
                    raise CollectionShapeError(
                        element, "the third element must be a mapping of attributes")
                attributes = dict(element[2])
            return element[0], element[1], attributes
        if is_record(element):
            for name in RECORD_LABEL_METHODS:
                if hasattr(element, name):
                    label = Accessor.by_name(name).apply(element)
                    break
            return label, element.id, {}
        if isinstance(element, SCALARS):
            return element, element, {}
        return str(element), str(element), {}

    def item_for(self,
                 element: Any,
                 label_accessor: Optional[Accessor],
                 value_accessor: Optional[Accessor]) -> CollectionItem:
        label, value, attributes = self.defaults_for(element)
        if label_accessor is not None:
            label = label_accessor.apply(element)
        if value_accessor is not None:
            value = value_accessor.apply(element)
        return CollectionItem(
            label=label if isinstance(label, Markup) else to_param(label),
            value=to_param(value),
            attributes=attributes,
            raw=element)


class PredicateResolver:
    """
    Decides a per item condition. The condition is ``None`` (never), a boolean
    (always or never), a callable called with the raw element, a list of
    raw elements, or a single raw element to compare with.
    """

    @staticmethod
    def evaluate(condition: Any, item: Any) -> bool:
        if condition is None:
            return False
        if isinstance(condition, bool):
            return condition
        if callable(condition):
            return bool(condition(item))
        if isinstance(condition, (list, tuple, set, frozenset)):
            return any(item == c for c in condition)
        return item == condition
