__version__ = "0.3.0"

from formwright.builder import FormBuilder
from formwright.config import Settings
from formwright.i18n import Catalog, I18nCache, TranslationResolver
from formwright.inputs import render
from formwright.models import (Association, CollectionItem, Column,
                               InputRequest, ViewContext, WrapperSpec)

__all__ = [
    "FormBuilder", "Settings", "Catalog", "I18nCache", "TranslationResolver",
    "render", "Association", "CollectionItem", "Column", "InputRequest",
    "ViewContext", "WrapperSpec",
]
