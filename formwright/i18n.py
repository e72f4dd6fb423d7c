"""
Translation catalog and the ordered-key lookup used for labels, hints and
collection option texts.

Lookup priority for a namespace (``labels``, ``hints``, ...) is::

    simple_form.{namespace}.{object}.{action}.{attribute}
    simple_form.{namespace}.{object}.{attribute}
    simple_form.{namespace}.defaults.{attribute}
    simple_form.{namespace}.{attribute}
    <literal default>

Example catalog (YAML)::

    en:
      simple_form:
        labels:
          user:
            new:
              email: 'E-mail to sign in.'
            edit:
              email: 'E-mail.'

Keys ending with ``_html`` hold markup which is emitted as is.
"""

import copy
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

import yaml
from markupsafe import Markup

from formwright.helper import to_param
from formwright.log import logger


# create and update still look up the translations of new and edit
ACTIONS = {
    "create": "new",
    "update": "edit",
}

DEFAULT_TRANSLATIONS: Dict[str, Any] = {
    "simple_form": {
        "yes": "Yes",
        "no": "No",
        "required": {
            "text": "required",
            "mark": "*",
        },
    }
}


def lookup_action(action_name: Optional[str]) -> Optional[str]:
    if not action_name:
        return None
    action = str(action_name)
    return ACTIONS.get(action, action)


@dataclass(frozen=True)
class Translation:
    text: str
    markup: bool = False

    def render(self) -> Union[str, Markup]:
        if self.markup:
            return Markup(self.text)
        return self.text


def _normalize(tree: Mapping[str, Any]) -> Dict[str, Any]:
    # YAML turns bare true/false keys into booleans
    ret: Dict[str, Any] = {}
    for key, value in tree.items():
        if isinstance(value, Mapping):
            value = _normalize(value)
        ret[to_param(key)] = value
    return ret


def _deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        elif isinstance(value, Mapping):
            target[key] = copy.deepcopy(dict(value))
        else:
            target[key] = value


class Catalog:
    """Nested translations per locale with dotted key lookup."""

    def __init__(self,
                 translations: Optional[Mapping[str, Mapping[str, Any]]] = None,
                 defaults: bool = True):
        self._data: Dict[str, Dict[str, Any]] = {}
        if defaults:
            self.store("en", DEFAULT_TRANSLATIONS)
        for locale, tree in (translations or {}).items():
            self.store(locale, tree)

    @classmethod
    def from_yaml(cls,
                  source: Union[str, Path, IO[str]],
                  defaults: bool = True) -> "Catalog":
        if isinstance(source, (str, Path)):
            with open(source, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        else:
            data = yaml.safe_load(source)
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ValueError(
                f"translation file must map locales to trees, got {type(data).__name__}")
        return cls(data, defaults=defaults)

    @property
    def locales(self) -> List[str]:
        return list(self._data.keys())

    def store(self, locale: str, tree: Mapping[str, Any]) -> None:
        target = self._data.setdefault(locale, {})
        _deep_merge(target, _normalize(tree))

    @contextmanager
    def stored(self, locale: str, tree: Mapping[str, Any]) -> Iterator["Catalog"]:
        """Temporarily add translations, restoring the previous state on exit."""
        backup = copy.deepcopy(self._data)
        self.store(locale, tree)
        try:
            yield self
        finally:
            self._data = backup

    def lookup(self, locale: str, key: str) -> Optional[Translation]:
        node: Any = self._data.get(locale)
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        if node is None or isinstance(node, Mapping):
            return None
        markup = key.endswith("_html") or isinstance(node, Markup)
        return Translation(str(node), markup)


class TranslationResolver:

    def __init__(self, catalog: Catalog, locale: str, scope: str = "simple_form"):
        self.catalog = catalog
        self.locale = locale
        self.scope = scope

    def lookup_keys(self,
                    namespace: str,
                    object_name: Optional[str],
                    action_name: Optional[str],
                    attribute: str) -> List[str]:
        base = f"{self.scope}.{namespace}"
        keys = []
        if object_name and action_name:
            keys.append(f"{base}.{object_name}.{action_name}.{attribute}")
        if object_name:
            keys.append(f"{base}.{object_name}.{attribute}")
        keys.append(f"{base}.defaults.{attribute}")
        keys.append(f"{base}.{attribute}")
        return keys

    def first(self, keys: List[str]) -> Optional[Translation]:
        for key in keys:
            for candidate in (f"{key}_html", key):
                found = self.catalog.lookup(self.locale, candidate)
                if found is not None:
                    return found
        return None

    def resolve(self,
                namespace: str,
                object_name: Optional[str],
                action_name: Optional[str],
                attribute: str,
                default: Union[str, Markup] = "") -> Union[str, Markup]:
        keys = self.lookup_keys(namespace, object_name, action_name, attribute)
        found = self.first(keys)
        if found is None:
            logger.debug(f"no translation for {keys[0]}, using default")
            return default
        return found.render()

    def t(self, key: str, default: Union[str, Markup] = "") -> Union[str, Markup]:
        """Look up a single key below the scope, e.g. ``yes``."""
        found = self.first([f"{self.scope}.{key}"])
        if found is None:
            return default
        return found.render()


class I18nCache:
    """
    Process wide memoization of locale dependent but attribute independent
    values. Entries are keyed by cache name and locale and never change once
    computed; ``reset_i18n_cache`` drops them after a locale or catalog
    change.
    """

    _i18n_caches: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def get_i18n_cache(cls, name: str) -> Dict[str, Any]:
        return cls._i18n_caches.setdefault(name, {})

    @classmethod
    def i18n_cache(cls, name: str, locale: str, factory: Callable[[], Any]) -> Any:
        cache = cls.get_i18n_cache(name)
        if locale not in cache:
            cache[locale] = factory()
            logger.debug(f"filled i18n cache {name} for locale {locale}")
        return cache[locale]

    @classmethod
    def reset_i18n_cache(cls, name: str) -> None:
        cls._i18n_caches[name] = {}
