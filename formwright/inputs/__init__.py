from typing import Dict, Type

from markupsafe import Markup

from formwright.errors import UnknownInputError
from formwright.inputs.base import Input
from formwright.inputs.collection import (CollectionCheckBoxesInput,
                                          CollectionInput,
                                          CollectionRadioButtonsInput,
                                          CollectionSelectInput)
from formwright.log import logger
from formwright.models import InputRequest


INPUTS: Dict[str, Type[Input]] = {
    "select": CollectionSelectInput,
    "radio": CollectionRadioButtonsInput,
    "radio_buttons": CollectionRadioButtonsInput,
    "check_boxes": CollectionCheckBoxesInput,
}


def input_class_for(input_type: str) -> Type[Input]:
    try:
        return INPUTS[input_type]
    except KeyError:
        logger.error(f"Unknown input type: {input_type}")
        raise UnknownInputError(input_type) from None


def render(request: InputRequest) -> Markup:
    return input_class_for(request.input_type)(request).render()


__all__ = [
    "INPUTS", "Input", "CollectionInput", "CollectionSelectInput",
    "CollectionRadioButtonsInput", "CollectionCheckBoxesInput",
    "input_class_for", "render",
]
