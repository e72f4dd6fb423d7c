from typing import Any, Optional

from markupsafe import Markup

from formwright.components import COMPONENTS
from formwright.config import Settings
from formwright.helper import object_name_for
from formwright.html import merge_attributes
from formwright.inputs import Input, render
from formwright.log import logger
from formwright.models import Association, Column, InputRequest, ViewContext


_COMMON_OPTIONS = frozenset(("required", "disabled", "reflection", "column"))

# stage -> (html options namespace, options the stage reads)
STAGE_OPTIONS = {
    "hint": ("hint", _COMMON_OPTIONS | {"hint", "hint_tag"}),
    "label": ("label", _COMMON_OPTIONS | {"label"}),
    "errors": ("error", _COMMON_OPTIONS | {"error", "error_tag"}),
}


def as_association(found: Any, name: str) -> Optional[Association]:
    if found is None or isinstance(found, Association):
        return found
    return Association(name=getattr(found, "name", name),
                       klass=getattr(found, "klass", None))


class FormBuilder:
    """
    Renders inputs for one bound object.

    ``obj`` may be the object itself or just an object name like ``"user"``
    when there is no object. Every call copies the options it receives.
    """

    def __init__(self,
                 obj: Any = None,
                 object_name: Optional[str] = None,
                 context: Optional[ViewContext] = None,
                 settings: Optional[Settings] = None):
        if isinstance(obj, str):
            object_name = object_name or obj
            obj = None
        self.object = obj
        self.object_name = object_name or object_name_for(obj)
        self.settings = settings if settings is not None else Settings()
        if context is None:
            context = ViewContext(locale=self.settings.DEFAULT_LOCALE)
        self.context = context

    def reflection_for(self, attribute_name: str) -> Optional[Association]:
        if self.object is None:
            return None
        finder = getattr(self.object.__class__, "reflect_on_association", None)
        if not callable(finder):
            return None
        name = attribute_name[:-3] if attribute_name.endswith("_id") else attribute_name
        return as_association(finder(name), name)

    def request_for(self,
                    attribute_name: str,
                    input_type: str,
                    options: dict) -> InputRequest:
        reflection = as_association(options.pop("reflection", None), attribute_name)
        if reflection is None:
            reflection = self.reflection_for(attribute_name)
        column = options.pop("column", None)
        if isinstance(column, str):
            column = Column(name=attribute_name, type=column)
        return InputRequest(
            object=self.object,
            object_name=self.object_name,
            attribute_name=attribute_name,
            input_type=input_type,
            options=options,
            reflection=reflection,
            column=column,
            context=self.context,
            settings=self.settings)

    def input(self, attribute_name: str, as_: Optional[str] = None, **options: Any) -> Markup:
        options = dict(options)
        input_type = as_ or options.pop("as", None) or "select"
        request = self.request_for(attribute_name, input_type, options)
        logger.debug(f"render {self.object_name}.{attribute_name} as {input_type}")
        return render(request)

    def _stage(self, name: str, attribute_name: str, options: dict) -> Markup:
        # keywords the stage does not know become attributes of its element,
        # form.hint("name", "Yay!", id="hint", class_="yay")
        namespace, known = STAGE_OPTIONS[name]
        html_options = dict(options.pop(f"{namespace}_html", None) or {})
        for key in [k for k in options if k not in known]:
            html_options = merge_attributes(html_options, {key: options.pop(key)})
        if html_options:
            options[f"{namespace}_html"] = html_options
        request = self.request_for(attribute_name, "string", options)
        return COMPONENTS[name].render(Input(request))

    def hint(self,
             attribute_name: Optional[str] = None,
             text: Optional[str] = None,
             **options: Any) -> Markup:
        """Render a hint for an attribute, or a free text hint."""
        options = dict(options)
        if text is not None:
            options["hint"] = text
        return self._stage("hint", attribute_name or "", options)

    def label(self, attribute_name: str, text: Optional[str] = None, **options: Any) -> Markup:
        options = dict(options)
        if text is not None:
            options["label"] = text
        return self._stage("label", attribute_name, options)

    def error(self, attribute_name: str, **options: Any) -> Markup:
        return self._stage("errors", attribute_name, dict(options))
