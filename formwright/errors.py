class FormConfigurationError(Exception):
    """Raised for programming mistakes in how an input is configured."""


class UnknownInputError(FormConfigurationError, NotImplementedError):
    """No input class is registered for the requested control type."""

    def __init__(self, input_type: str):
        self.input_type = input_type
        super().__init__(f"no input registered for type '{input_type}'")


class CollectionShapeError(FormConfigurationError, ValueError):
    """A collection element cannot be resolved to a label and a value."""

    def __init__(self, element, reason: str):
        self.element = element
        super().__init__(f"cannot normalize collection element {element!r}: {reason}")
