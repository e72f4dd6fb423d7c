from typing import Any, Iterable, Mapping, Optional

from markupsafe import Markup, escape

from formwright.config import Settings
from formwright.html import class_names, content_tag, join
from formwright.models import WrapperSpec


UNSET: Any = object()

LEVELS = ("wrapper", "collection_wrapper", "item_wrapper")


class WrapperComposer:
    """
    Resolves and applies the wrapping levels of an input.

    The tag of a level comes from the per call option (``wrapper_tag``,
    ``collection_wrapper_tag``, ``item_wrapper_tag``) when the key is given
    at all, then from the structural default of the control, then from the
    settings. Classes of all layers add up: structural class first, then
    the configured one, then the per call one. A falsy tag renders the
    content without an element at that level.
    """

    def __init__(self, options: Mapping[str, Any], settings: Settings):
        self.options = options
        self.settings = settings

    def resolve(self,
                level: str,
                structural_tag: Any = UNSET,
                structural_class: Any = None,
                extra_classes: Any = None) -> WrapperSpec:
        if level not in LEVELS:
            raise ValueError(f"unknown wrapper level '{level}'")
        configured_tag = getattr(self.settings, f"{level.upper()}_TAG")
        configured_class = getattr(self.settings, f"{level.upper()}_CLASS")

        tag_key = f"{level}_tag"
        if tag_key in self.options:
            tag = self.options[tag_key]
        elif structural_tag is not UNSET:
            tag = structural_tag
        else:
            tag = configured_tag

        html_options = dict(self.options.get(f"{level}_html") or {})
        html_class = html_options.pop("class", html_options.pop("class_", None))
        classes = class_names(
            structural_class,
            configured_class,
            extra_classes,
            self.options.get(f"{level}_class"),
            html_class)
        return WrapperSpec(
            tag=str(tag) if tag else None,
            classes=classes,
            attributes=html_options)

    @staticmethod
    def wrap(content: Any, spec: Optional[WrapperSpec]) -> Markup:
        if spec is None or not spec.tag:
            return escape(content)
        attrs = {"class": spec.classes}
        attrs.update(spec.attributes)
        return content_tag(spec.tag, content, attrs)

    @classmethod
    def wrap_collection(cls, items: Iterable[Any], spec: Optional[WrapperSpec]) -> Markup:
        return cls.wrap(join(items), spec)

    @classmethod
    def wrap_item(cls, content: Any, spec: Optional[WrapperSpec]) -> Markup:
        return cls.wrap(content, spec)
