import re
from enum import Enum
from typing import Any, Optional


_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_SPACE_RE = re.compile(r"\s")
_UNSAFE_RE = re.compile(r"[^-\w]")


def underscore(name: str) -> str:
    return _CAMEL_RE.sub("_", name).replace("-", "_").lower()


def object_name_for(obj: Any) -> Optional[str]:
    """Derive the form object name from a bound object, ``User`` -> ``user``."""
    if obj is None:
        return None
    if isinstance(obj, str):
        return obj
    return underscore(obj.__class__.__name__)


def humanize(name: str) -> str:
    text = str(name)
    if text.endswith("_id"):
        text = text[:-3]
    text = text.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


def to_param(value: Any) -> str:
    """String form of a value as it is written into markup."""
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, Enum):
        return to_param(value.value)
    return str(value)


def sanitize(value: Any) -> str:
    """Turn a value into something usable as part of an element id."""
    text = _SPACE_RE.sub("_", to_param(value))
    return _UNSAFE_RE.sub("", text).lower()
