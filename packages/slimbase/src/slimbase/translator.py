import logging
from typing import Any, Dict, Mapping, Optional

from .config import SlimBaseConfig
from .loaders import FileSystemLoader
from .protocols import FileLoaderProtocol, TranslatorProtocol

log = logging.getLogger(__name__)


class Translator(TranslatorProtocol):
    """
    Resolves translation keys against a primary locale and a fallback locale.

    Both locales are loaded once, at construction, from the `language`
    namespace of the given loader.
    """

    namespace = "language"

    def __init__(
        self,
        loader: FileLoaderProtocol,
        file: str,
        locale: str,
        fallback: str = "en",
    ):
        self._translations: Dict[str, Dict[str, str]] = {}
        self._translations[locale] = loader.load(locale, file, self.namespace)
        self._translations[fallback] = loader.load(fallback, file, self.namespace)
        self._locale = locale
        self._fallback = fallback

    @classmethod
    def from_config(
        cls,
        config: SlimBaseConfig,
        loader: Optional[FileLoaderProtocol] = None,
    ) -> "Translator":
        if loader is None:
            loader = FileSystemLoader(roots=config.translation_roots or None)
        return cls(loader, config.file, config.locale, config.fallback)

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def fallback(self) -> str:
        return self._fallback

    def get(
        self,
        key: str,
        replace: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str:
        """
        Returns the translated line for `key`.

        Lookup order:
        1. The requested locale (the primary locale when omitted)
        2. The fallback locale
        3. An empty string

        `:name` placeholders are then replaced with the matching values from
        `replace`. Placeholders without a value are left untouched.
        """
        locale = locale or self._locale

        line = self._get_line(key, locale)
        if line is None:
            log.debug(f"'{key}' missing for '{locale}', using '{self._fallback}'")
            line = self._get_line(key, self._fallback)

        return self._make_replacements(line, replace or {})

    def translate(
        self,
        key: str,
        replace: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str:
        return self.get(key, replace, locale)

    def set_translations(self, locale: str, translations: Mapping[str, str]) -> None:
        self._translations[locale] = dict(translations)

    def _get_line(self, key: str, locale: str) -> Optional[str]:
        return self._translations.get(locale, {}).get(key)

    def _make_replacements(
        self, line: Optional[str], replace: Mapping[str, Any]
    ) -> str:
        line = line or ""
        for key, value in replace.items():
            line = line.replace(f":{key}", str(value))
        return line
