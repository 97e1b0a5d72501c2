"""Translation service for resolving keys into formatted strings.

Resolution pipeline for ``translate("messages.user_not_found", args)``:

1. look up ``<current_lang>.messages.user_not_found`` in the ResourceStore
2. expand ``#{key}`` / ``#lang{key}`` placeholders (PlaceholderParser)
3. substitute ``{0}`` / ``{name}`` arguments (ArgumentFormatter)
4. fall back to the key itself when the result is empty
"""

from typing import Any, List, Optional

from infrastructure.i18n.formatter import ArgumentFormatter
from infrastructure.i18n.models import (
    Arguments,
    NamedArgs,
    PositionalArgs,
    ResourceValue,
)
from infrastructure.i18n.parser import PlaceholderParser
from infrastructure.i18n.store import ResourceStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for translating keys with placeholder expansion and arguments.

    Not thread-safe: callers sharing a translator across threads must
    serialize calls that add resources or change ``current_lang``.

    Attributes:
        current_lang: Language used to resolve keys. Can be changed at any
            time; it is read on every call.
        store: ResourceStore holding every loaded language.
        parser: PlaceholderParser bound to ``store``.
        formatter: ArgumentFormatter used for argument substitution.
    """

    def __init__(
        self,
        current_lang: str,
        store: Optional[ResourceStore] = None,
    ):
        """Initialize Translator.

        Args:
            current_lang: Language to start with (e.g. "en").
            store: Optional pre-populated ResourceStore.
        """
        self.current_lang = current_lang
        self.store = store if store is not None else ResourceStore()
        self.parser = PlaceholderParser(self.store)
        self.formatter = ArgumentFormatter()
        logger.info("initialized_translator", current_lang=current_lang)

    def add_resource(
        self,
        resource: Any,
        lang: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        """Merge a resource into the store.

        Args:
            resource: Mapping shaped as ``{lang: {...}}`` when ``lang`` is
                omitted, or the content to place under ``lang[.path]``.
            lang: Optional language to nest the resource under.
            path: Optional dotted path below ``lang``.

        Raises:
            InvalidResourceError: If ``resource`` is not a valid tree.
        """
        self.store.add_resource(resource, lang, path)

    def add_resources(
        self,
        *resources: Any,
        lang: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        """Merge several resources, skipping entries that are not mappings."""
        for resource in resources:
            if isinstance(resource, dict) and resource:
                self.store.add_resource(resource, lang, path)

    def remove_resource(self, lang: str) -> None:
        self.store.remove_resource(lang)

    def get_resource(self, lang: str) -> Optional[ResourceValue]:
        return self.store.get_resource(lang)

    def lookup(self, full_path: str) -> Optional[ResourceValue]:
        return self.store.lookup(full_path)

    def get_available_languages(self) -> List[str]:
        """Get list of languages with at least one resource."""
        return self.store.languages

    def translate(self, key: Optional[str], args: Optional[Arguments] = None) -> Any:
        """Resolve ``key`` in the current language.

        Args:
            key: Dotted key relative to the language (e.g. "menu.home").
            args: Optional PositionalArgs or NamedArgs.

        Returns:
            The formatted string, or ``key`` unchanged when nothing resolved.
        """
        raw = self.store.lookup(f"{self.current_lang}.{key}") if key else ""
        if not isinstance(raw, str):
            # Missing key, or a key that addresses a node instead of a leaf
            raw = ""

        expanded = self.parser.expand(raw, self.current_lang)
        formatted = self.formatter.format(expanded, args)

        return formatted if formatted else key

    def t(self, key: Optional[str], *values: Any, **named: Any) -> Any:
        """Shorthand for translate().

        ``t("msg", "user1")`` formats positionally, ``t("msg", min=5)``
        formats by name.

        Raises:
            TypeError: If both positional and named arguments are given.
        """
        if values and named:
            raise TypeError("t() accepts positional or named arguments, not both")

        args: Optional[Arguments] = None
        if values:
            args = PositionalArgs(*values)
        elif named:
            args = NamedArgs(named)

        return self.translate(key, args)
