"""
Value types passed between the rendering components.
"""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from formwright.config import Settings
from formwright.i18n import Catalog


class ViewContext(BaseModel):
    """What the host view knows about the current request."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    action_name: Optional[str] = None
    locale: str = "en"
    catalog: Catalog = Field(default_factory=Catalog)


class Association(BaseModel):
    """Reflection metadata: the attribute points at another bound object."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    klass: Any = None
    name: str
    options: Dict[str, Any] = Field(default_factory=dict)


class Column(BaseModel):
    """Semantic type of an attribute, e.g. ``boolean`` or ``string``."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    type: str


class InputRequest(BaseModel):
    """Everything one render call needs; built once and never changed."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    object: Any = None
    object_name: Optional[str] = None
    attribute_name: str
    input_type: str
    options: Mapping[str, Any] = Field(default_factory=dict)
    reflection: Optional[Association] = None
    column: Optional[Column] = None
    context: ViewContext = Field(default_factory=ViewContext)
    settings: Settings = Field(default_factory=Settings)


class CollectionItem(BaseModel):
    """One normalized choice of a collection."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    label: Any  # str, or Markup for translated rich text
    value: str
    attributes: Dict[str, Any] = Field(default_factory=dict)
    raw: Any = None  # the collection element before normalization


class WrapperSpec(BaseModel):
    """One wrapping level; ``tag=None`` means no element, content only."""

    model_config = ConfigDict(frozen=True)

    tag: Optional[str] = None
    classes: List[str] = Field(default_factory=list)
    attributes: Dict[str, Any] = Field(default_factory=dict)
