from enum import Enum
from typing import Any, Dict, List, Optional, Union

from markupsafe import Markup

from formwright.helper import sanitize
from formwright.html import content_tag, join, merge_attributes, tag
from formwright.i18n import I18nCache
from formwright.inputs.base import Input
from formwright.inputs.options import OptionNormalizer, PredicateResolver
from formwright.inputs.wrapper import WrapperComposer
from formwright.log import logger
from formwright.models import CollectionItem


class CollectionInput(Input, I18nCache):
    """Base of all inputs choosing from a collection."""

    # option holding the selection condition
    selection_key = "selected"

    def collection_items(self) -> List[CollectionItem]:
        raw = self.options.get("collection")
        if raw is None and self.column_type() == "boolean":
            items = self.boolean_collection()
        else:
            items = OptionNormalizer().normalize(
                raw,
                self.options.get("label_method"),
                self.options.get("value_method"))
        return [self.translate_option(item) for item in items]

    def boolean_collection(self) -> List[CollectionItem]:
        def build() -> List[CollectionItem]:
            return [
                CollectionItem(label=self.resolver.t("yes", "Yes"), value="true", raw=True),
                CollectionItem(label=self.resolver.t("no", "No"), value="false", raw=False),
            ]
        return self.i18n_cache("boolean_collection", self.resolver.locale, build)

    def translate_option(self, item: CollectionItem) -> CollectionItem:
        # enum members and booleans get their labels from
        # simple_form.options.{object}.{attribute}.{value}
        if not isinstance(item.raw, (bool, Enum)):
            return item
        attribute = self.reflection_or_attribute_name()
        base = f"{self.resolver.scope}.options"
        keys = []
        if self.object_name:
            keys.append(f"{base}.{self.object_name}.{attribute}.{item.value}")
        keys.append(f"{base}.defaults.{attribute}.{item.value}")
        found = self.resolver.first(keys)
        if found is None:
            return item
        return item.model_copy(update={"label": found.render()})

    def multiple(self) -> bool:
        input_html = self.options.get("input_html") or {}
        return bool(input_html.get("multiple") or self.options.get("multiple"))

    def item_selected(self, item: CollectionItem) -> bool:
        if self.selection_key in self.options:
            return PredicateResolver.evaluate(
                self.options[self.selection_key], item.raw)
        return item.value in self.current_values()

    def item_disabled(self, item: CollectionItem) -> bool:
        return PredicateResolver.evaluate(self.options.get("disabled"), item.raw)


class CollectionSelectInput(CollectionInput):
    """
    ``<select>`` with one ``<option>`` per collection item. A ``None`` element
    is the blank option itself; an ``include_blank`` string becomes its text.
    """

    supports_required = False

    def include_blank(self, items: List[CollectionItem]) -> Union[bool, str]:
        given = self.options.get("include_blank")
        if any(item.raw is None for item in items):
            # the collection carries a blank choice of its own
            return given if isinstance(given, str) else True
        if "include_blank" in self.options:
            return given
        return not self.skip_include_blank()

    def skip_include_blank(self) -> bool:
        keys = ("prompt", "selected")
        return any(k in self.options for k in keys) or self.multiple()

    def item_disabled(self, item: CollectionItem) -> bool:
        # disabled=True disables the select itself
        if self.disabled():
            return False
        return super().item_disabled(item)

    def prompt_tag(self) -> Optional[Markup]:
        prompt = self.options.get("prompt")
        if not prompt:
            return None
        if prompt is True:
            prompt = self.resolver.t("prompt", "Please select")
        return content_tag("option", prompt, {"value": ""})

    def option_tag(self, item: CollectionItem) -> Markup:
        attrs: Dict[str, Any] = {"value": item.value}
        if self.item_selected(item):
            attrs["selected"] = True
        if self.item_disabled(item):
            attrs["disabled"] = True
        attrs = merge_attributes(attrs, item.attributes)
        return content_tag("option", item.label, attrs)

    def input_html_options(self) -> Dict[str, Any]:
        html_options = super().input_html_options()
        html_options.pop("multiple", None)
        if self.multiple():
            html_options["name"] = f"{html_options['name']}[]"
            html_options["multiple"] = True
        return html_options

    def input(self) -> Markup:
        items = self.collection_items()
        option_tags = []
        prompt = self.prompt_tag()
        if prompt is not None:
            option_tags.append(prompt)
        else:
            blank = self.include_blank(items)
            text = blank if isinstance(blank, str) else ""
            if any(item.raw is None for item in items):
                # a None in the collection renders as the blank option
                items = [
                    item.model_copy(update={"label": text})
                    if item.raw is None and text and not item.label else item
                    for item in items
                ]
            elif blank and not any(item.value == "" for item in items):
                option_tags.append(content_tag("option", text, {"value": ""}))
        option_tags.extend(self.option_tag(item) for item in items)
        logger.debug(
            f"select {self.input_id()} with {len(items)} options")
        return content_tag("select", join(option_tags), self.input_html_options())


class CollectionRadioButtonsInput(CollectionInput):
    """One radio button per item, each followed or wrapped by its label."""

    control_type = "radio"
    item_wrapper_class = "radio"
    item_label_class = "collection_radio_buttons"
    selection_key = "checked"

    def label_target(self) -> Optional[str]:
        # the group label has nothing to point at
        return None

    def item_id(self, item: CollectionItem) -> str:
        return f"{self.input_id()}_{sanitize(item.value)}"

    def item_name(self) -> str:
        return self.input_name()

    def item_html_options(self, item: CollectionItem) -> Dict[str, Any]:
        html_options = self.input_html_options()
        html_options.update({
            "type": self.control_type,
            "value": item.value,
            "id": self.item_id(item),
            "name": self.item_name(),
        })
        if self.supports_required and self.settings.HTML5 \
                and self.attribute_required():
            html_options["aria-required"] = True
        if self.item_selected(item):
            html_options["checked"] = True
        if self.item_disabled(item):
            html_options["disabled"] = True
        return merge_attributes(html_options, item.attributes)

    def render_item(self, item: CollectionItem) -> Markup:
        item_id = self.item_id(item)
        control = tag("input", self.item_html_options(item))
        if self.settings.BOOLEAN_STYLE == "nested":
            return content_tag("label", join([control, item.label]), {"for": item_id})
        label = content_tag(
            "label", item.label, {"class": [self.item_label_class], "for": item_id})
        return join([control, label])

    def input(self) -> Markup:
        items = self.collection_items()
        composer = WrapperComposer(self.options, self.settings)
        structural_class = None
        if self.settings.INCLUDE_DEFAULT_INPUT_WRAPPER_CLASS:
            structural_class = self.item_wrapper_class
        item_spec = composer.resolve("item_wrapper", structural_class=structural_class)
        collection_spec = composer.resolve("collection_wrapper")
        rendered = [
            composer.wrap_item(self.render_item(item), item_spec)
            for item in items
        ]
        return composer.wrap_collection(rendered, collection_spec)


class CollectionCheckBoxesInput(CollectionRadioButtonsInput):
    """Check box group; several items may be checked at once."""

    supports_required = False
    control_type = "checkbox"
    item_wrapper_class = "checkbox"
    item_label_class = "collection_check_boxes"

    def multiple(self) -> bool:
        return True

    def item_name(self) -> str:
        return f"{self.input_name()}[]"

    def input(self) -> Markup:
        content = super().input()
        if self.options.get("include_hidden", True) is False:
            return content
        hidden = tag("input", {"type": "hidden", "name": self.item_name(), "value": ""})
        return join([content, hidden])


__all__ = [
    "CollectionInput", "CollectionSelectInput", "CollectionRadioButtonsInput",
    "CollectionCheckBoxesInput",
]
