"""Expansion of ``#{key}`` and ``#lang{key}`` placeholders.

A template may reference other resources::

    "home": "#{menu.home}"          -> value of <current language>.menu.home
    "aboutEn": "#en{menu.about}"    -> value of en.menu.about

Expansion is a single left-to-right scan. Substituted values are inserted
verbatim and never expanded again. Sequences that do not form a complete
placeholder are kept as literal text, including the character that broke
them off.
"""

from typing import List

from infrastructure.i18n.store import ResourceStore

# Scanner states
SCANNING = 0
AFTER_HASH = 1
IN_TAG = 2
KEY_START = 3
IN_KEY = 4


def _is_word(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _is_tag_char(ch: str) -> bool:
    return _is_word(ch) or ch == "-"


def _is_key_char(ch: str) -> bool:
    return _is_word(ch) or ch == "."


class PlaceholderParser:
    """Expands placeholders against a ResourceStore."""

    def __init__(self, store: ResourceStore):
        self.store = store

    def resolve(self, lang: str, key: str) -> str:
        value = self.store.lookup(f"{lang}.{key}")
        return value if isinstance(value, str) else ""

    def expand(self, template: str, current_lang: str) -> str:
        """Replace every placeholder in ``template``.

        Args:
            template: Raw template string.
            current_lang: Language used by placeholders without a tag.

        Returns:
            The expanded string. Unresolved placeholders become empty strings.
        """
        if not template:
            return ""

        output: List[str] = []
        state = SCANNING
        start = 0  # start of the pending literal run
        tag = ""
        key_start = 0
        i = 0
        length = len(template)

        while i < length:
            ch = template[i]

            if state == SCANNING:
                if ch == "#":
                    if i > start:
                        output.append(template[start:i])
                    start = i
                    tag = ""
                    state = AFTER_HASH

            elif state == AFTER_HASH:
                if _is_tag_char(ch):
                    state = IN_TAG
                elif ch == "{":
                    state = KEY_START
                else:
                    state = SCANNING

            elif state == IN_TAG:
                if ch == "{":
                    tag = template[start + 1 : i]
                    state = KEY_START
                elif not _is_tag_char(ch):
                    state = SCANNING

            elif state == KEY_START:
                if _is_key_char(ch):
                    key_start = i
                    state = IN_KEY
                else:
                    state = SCANNING

            elif state == IN_KEY:
                if ch == "}":
                    key = template[key_start:i]
                    output.append(self.resolve(tag or current_lang, key))
                    start = i + 1
                    state = SCANNING
                elif not _is_key_char(ch):
                    state = SCANNING

            i += 1

        if start < length:
            output.append(template[start:])

        return "".join(output)
