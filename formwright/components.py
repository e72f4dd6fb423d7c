"""
The stages an input is assembled from. Each stage renders one piece of the
decoration around the control and returns markup; the input decides the
order and which stages run.
"""

from typing import TYPE_CHECKING, Dict

from markupsafe import Markup

from formwright.html import content_tag, join, merge_attributes

if TYPE_CHECKING:
    from formwright.inputs.base import Input


class Component:

    name: str = ""

    def render(self, input: "Input") -> Markup:
        raise NotImplementedError()


class Errors(Component):
    name = "errors"

    def render(self, input: "Input") -> Markup:
        messages = input.error_messages()
        if not messages:
            return Markup("")
        settings = input.settings
        attrs = merge_attributes(
            {"class": [settings.ERROR_CLASS]},
            input.options.get("error_html"))
        tag = input.options.get("error_tag") or settings.ERROR_TAG
        return content_tag(tag, Markup(", ").join(messages), attrs)


class Hint(Component):
    name = "hint"

    def render(self, input: "Input") -> Markup:
        text = input.hint_text()
        if not text:
            return Markup("")
        settings = input.settings
        attrs = merge_attributes(
            {"class": [settings.HINT_CLASS]},
            input.options.get("hint_html"))
        tag = input.options.get("hint_tag") or settings.HINT_TAG
        return content_tag(tag, text, attrs)


class Label(Component):
    name = "label"

    def render(self, input: "Input") -> Markup:
        attrs = {"class": input.label_html_classes()}
        target = input.label_target()
        if target:
            attrs["for"] = target
        attrs = merge_attributes(attrs, input.options.get("label_html"))
        return content_tag("label", input.label_text(), attrs)


class LabelInput(Component):
    name = "label_input"

    def render(self, input: "Input") -> Markup:
        if input.options.get("label") is False:
            return input.input()
        return join([COMPONENTS["label"].render(input), input.input()])


COMPONENTS: Dict[str, Component] = {
    c.name: c() for c in (Errors, Hint, Label, LabelInput)
}
