"""
Pytest fixtures for formwright tests.

Provides bound test objects, a fresh translation catalog per test and a
helper to parse rendered markup with BeautifulSoup.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest
from bs4 import BeautifulSoup

from formwright.builder import FormBuilder
from formwright.config import Settings
from formwright.i18n import Catalog, I18nCache
from formwright.models import Association, Column, ViewContext


@dataclass
class Validator:
    kind: str
    attributes: List[str] = field(default_factory=list)


@dataclass
class Company:
    id: int
    name: str


@dataclass
class User:
    id: int = 1
    name: str = "New in formwright"
    description: Optional[str] = None
    age: Optional[int] = None
    active: bool = False
    gender: Optional[str] = None
    company_id: Optional[int] = None
    tag_ids: List[int] = field(default_factory=list)
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def column_for_attribute(cls, attribute: str) -> Optional[Column]:
        types = {"active": "boolean", "age": "integer", "name": "string"}
        if attribute in types:
            return Column(name=attribute, type=types[attribute])
        return None

    @classmethod
    def reflect_on_association(cls, name: str) -> Optional[Association]:
        if name == "company":
            return Association(klass=Company, name="company")
        return None


@dataclass
class ValidatingUser(User):

    @classmethod
    def validators_on(cls, attribute: str) -> List[Validator]:
        validators = {
            "name": [Validator("presence", ["name"])],
            "age": [Validator("numericality", ["age"])],
            "company": [Validator("presence", ["company"])],
        }
        return validators.get(attribute, [])


@pytest.fixture(autouse=True)
def reset_boolean_collection():
    """Cached Yes/No labels must not leak between tests."""
    I18nCache.reset_i18n_cache("boolean_collection")
    yield
    I18nCache.reset_i18n_cache("boolean_collection")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for key in ("FORM_COMPONENTS", "FORM_REQUIRED_BY_DEFAULT", "FORM_BOOLEAN_STYLE",
                "FORM_WRAPPER_TAG", "FORM_ITEM_WRAPPER_TAG", "FORM_HTML5"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def user():
    return User()


@pytest.fixture
def validating_user():
    return ValidatingUser()


@pytest.fixture
def form_for(catalog, settings):
    """Build a FormBuilder, ``form_for(obj, action_name=..., **settings)``."""

    def _form_for(obj: Any, action_name: Optional[str] = "edit",
                  locale: str = "en", **swap: Any) -> FormBuilder:
        context = ViewContext(action_name=action_name, locale=locale, catalog=catalog)
        return FormBuilder(obj, context=context,
                           settings=settings.swap(**swap) if swap else settings)

    return _form_for


def parse(markup) -> BeautifulSoup:
    return BeautifulSoup(str(markup), "html.parser")
