from typing import Any, Dict, Iterable, List, Mapping, Optional

from markupsafe import Markup, escape


VOID_ELEMENTS = frozenset(
    ("area", "base", "br", "col", "embed", "hr", "img", "input", "link",
     "meta", "source", "track", "wbr"))

BOOLEAN_ATTRIBUTES = frozenset(
    ("checked", "disabled", "multiple", "readonly", "required", "selected",
     "autofocus", "hidden"))


def class_names(*values: Any) -> List[str]:
    """Flatten strings and lists of css classes, keeping first occurrences."""
    ret: List[str] = []
    for value in values:
        if not value:
            continue
        if isinstance(value, str):
            parts = value.split()
        else:
            parts = class_names(*value)
        for part in parts:
            if part not in ret:
                ret.append(part)
    return ret


def merge_attributes(
        base: Optional[Mapping[str, Any]],
        extra: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Merge two attribute mappings; ``class`` values are concatenated."""
    ret = dict(base or {})
    for key, value in (extra or {}).items():
        if key in ("class", "class_"):
            ret["class"] = class_names(ret.get("class"), ret.pop("class_", None), value)
        else:
            ret[key] = value
    return ret


def _attribute(name: str, value: Any) -> Optional[str]:
    if value is None or value is False:
        return None
    if value is True:
        if name in BOOLEAN_ATTRIBUTES:
            value = name
        else:
            value = "true"
    elif isinstance(value, (list, tuple)):
        value = " ".join(str(v) for v in value if v)
    return f'{name}="{escape(value)}"'


def attributes(attrs: Optional[Mapping[str, Any]]) -> Markup:
    parts = []
    for key, value in (attrs or {}).items():
        name = key.rstrip("_")
        if name in ("data", "aria") and isinstance(value, Mapping):
            for sub, subvalue in value.items():
                part = _attribute(f"{name}-{sub}", subvalue)
                if part:
                    parts.append(part)
            continue
        if name == "class" and not value:
            continue
        part = _attribute(name, value)
        if part:
            parts.append(part)
    return Markup(" ".join(parts))


def tag(name: str, attrs: Optional[Mapping[str, Any]] = None) -> Markup:
    attrs_str = attributes(attrs)
    if attrs_str:
        return Markup(f"<{name} {attrs_str}>")
    return Markup(f"<{name}>")


def content_tag(
        name: str,
        content: Any = "",
        attrs: Optional[Mapping[str, Any]] = None) -> Markup:
    """Render ``<name attrs>content</name>``; plain text content is escaped."""
    if name in VOID_ELEMENTS:
        return tag(name, attrs)
    if content is None:
        content = ""
    return Markup(f"{tag(name, attrs)}{escape(content)}</{name}>")


def join(parts: Iterable[Any]) -> Markup:
    return Markup("").join(escape(p) for p in parts)
