from typing import Any, Dict, List, Mapping, Optional, Set, Union

from markupsafe import Markup, escape

from formwright.components import COMPONENTS
from formwright.config import Settings
from formwright.errors import FormConfigurationError
from formwright.helper import humanize, to_param
from formwright.html import class_names, content_tag, merge_attributes
from formwright.i18n import TranslationResolver, lookup_action
from formwright.inputs.wrapper import WrapperComposer
from formwright.models import InputRequest


class Input:
    """
    Renders one control with its decoration. The stages listed in the
    ``components`` option (or ``Settings.COMPONENTS``) run in order, each
    skipped when its option is ``False``, and the result is wrapped.
    Subclasses implement ``input()``.
    """

    # the control accepts the html5 required attribute
    supports_required: bool = True

    def __init__(self, request: InputRequest):
        self.request = request
        self.resolver = TranslationResolver(
            request.context.catalog,
            request.context.locale,
            request.settings.I18N_SCOPE)

    @property
    def options(self) -> Mapping[str, Any]:
        return self.request.options

    @property
    def settings(self) -> Settings:
        return self.request.settings

    @property
    def object(self) -> Any:
        return self.request.object

    @property
    def object_name(self) -> Optional[str]:
        return self.request.object_name

    @property
    def attribute_name(self) -> str:
        return self.request.attribute_name

    @property
    def input_type(self) -> str:
        return self.request.input_type

    @property
    def reflection(self):
        return self.request.reflection

    def input(self) -> Markup:
        raise NotImplementedError(
            f"{self.__class__.__name__} does not render a control")

    def render(self) -> Markup:
        content = Markup("")
        for name in self.components_list():
            if self.options.get(name) is False:
                continue
            component = COMPONENTS.get(name)
            if component is None:
                raise FormConfigurationError(f"unknown component '{name}'")
            content += component.render(self)
        return self.wrap(content)

    def wrap(self, content: Markup) -> Markup:
        if self.options.get("wrapper") is False:
            return content
        composer = WrapperComposer(self.options, self.settings)
        spec = composer.resolve("wrapper", extra_classes=self.wrapper_html_classes())
        return composer.wrap(content, spec)

    def components_list(self) -> List[str]:
        if "components" in self.options:
            return list(self.options["components"] or [])
        return list(self.settings.COMPONENTS)

    # values

    def value(self) -> Any:
        if self.object is None or isinstance(self.object, str):
            return None
        return getattr(self.object, self.attribute_name, None)

    def current_values(self) -> Set[str]:
        value = self.value()
        if value is None:
            return set()
        if isinstance(value, (list, tuple, set, frozenset)):
            return {to_param(v) for v in value}
        return {to_param(value)}

    def column_type(self) -> Optional[str]:
        column = self.request.column
        if column is None and self.object is not None:
            finder = getattr(self.object.__class__, "column_for_attribute", None)
            if callable(finder):
                column = finder(self.attribute_name)
        if column is not None:
            return getattr(column, "type", None)
        if isinstance(self.value(), bool):
            return "boolean"
        return None

    # requiredness

    def attribute_required(self) -> bool:
        if "required" in self.options:
            return bool(self.options["required"])
        if self.has_validators():
            validators = self.attribute_validators() + self.reflection_validators()
            return any(getattr(v, "kind", None) == "presence" for v in validators)
        return self.attribute_required_by_default()

    def has_validators(self) -> bool:
        if self.object is None or isinstance(self.object, str):
            return False
        return callable(getattr(self.object.__class__, "validators_on", None))

    def attribute_validators(self) -> List[Any]:
        return list(self.object.__class__.validators_on(self.attribute_name) or [])

    def reflection_validators(self) -> List[Any]:
        if not self.reflection:
            return []
        return list(self.object.__class__.validators_on(self.reflection.name) or [])

    def attribute_required_by_default(self) -> bool:
        return self.settings.REQUIRED_BY_DEFAULT

    def required_class(self) -> str:
        return "required" if self.attribute_required() else "optional"

    def html5_required(self) -> bool:
        return (self.supports_required
                and self.settings.HTML5
                and self.settings.BROWSER_VALIDATIONS
                and self.attribute_required())

    # html options

    def input_id(self) -> str:
        if self.object_name:
            return f"{self.object_name}_{self.attribute_name}"
        return self.attribute_name

    def input_name(self) -> str:
        if self.object_name:
            return f"{self.object_name}[{self.attribute_name}]"
        return self.attribute_name

    def disabled(self) -> bool:
        return self.options.get("disabled") is True

    def input_html_classes(self) -> List[str]:
        return [self.input_type, self.required_class()]

    def input_html_options(self) -> Dict[str, Any]:
        html_options = {"id": self.input_id(), "name": self.input_name()}
        html_options = merge_attributes(
            html_options, self.html_options_for("input", self.input_html_classes()))
        if self.html5_required():
            html_options["required"] = True
        if self.disabled():
            html_options["disabled"] = True
        return html_options

    def html_options_for(self, namespace: str, extra: List[str]) -> Dict[str, Any]:
        html_options = dict(self.options.get(f"{namespace}_html") or {})
        given = html_options.pop("class", html_options.pop("class_", None))
        classes = class_names(extra, given)
        if classes:
            html_options["class"] = classes
        return html_options

    def wrapper_html_classes(self) -> List[str]:
        classes = [self.input_type, self.required_class()]
        if self.error_messages():
            classes.append(self.settings.WRAPPER_ERROR_CLASS)
        if self.disabled():
            classes.append("disabled")
        return classes

    # errors, hints and labels

    def error_messages(self) -> List[Union[str, Markup]]:
        error = self.options.get("error")
        if isinstance(error, str):
            return [error]
        if isinstance(error, (list, tuple)):
            return [e if isinstance(e, Markup) else str(e) for e in error if e]
        errors = getattr(self.object, "errors", None)
        if not isinstance(errors, Mapping):
            return []
        messages = list(errors.get(self.attribute_name) or [])
        if self.reflection:
            messages += list(errors.get(self.reflection.name) or [])
        return messages

    def hint_text(self) -> Union[str, Markup]:
        hint = self.options.get("hint")
        if isinstance(hint, str):
            return hint
        if hint is False or not self.attribute_name:
            return ""
        return self.translate("hints")

    def label_html_classes(self) -> List[str]:
        return [self.input_type, self.required_class()]

    def label_target(self) -> Optional[str]:
        return self.input_id()

    def label_text(self) -> Markup:
        label = self.options.get("label")
        if not isinstance(label, str):
            label = self.translate(
                "labels", humanize(self.reflection_or_attribute_name()))
        if not self.attribute_required():
            return escape(label)
        return Markup("{} {}").format(self.required_marker(), label)

    def required_marker(self) -> Markup:
        text = self.resolver.t("required.text", "required")
        mark = self.resolver.t("required.mark", "*")
        return content_tag("abbr", mark, {"title": text})

    # translations

    def reflection_or_attribute_name(self) -> str:
        if self.reflection:
            return self.reflection.name
        return self.attribute_name

    def lookup_action(self) -> Optional[str]:
        return lookup_action(self.request.context.action_name)

    def translate(self, namespace: str, default: Union[str, Markup] = "") -> Union[str, Markup]:
        return self.resolver.resolve(
            namespace,
            self.object_name,
            self.lookup_action(),
            self.reflection_or_attribute_name(),
            default)
