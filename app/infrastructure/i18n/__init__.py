"""i18n system - resolution of localization keys into formatted strings.

Main components:
- models: ResourceTree types, PositionalArgs, NamedArgs, InvalidResourceError
- store: ResourceStore holding the language -> path -> template tree
- parser: PlaceholderParser expanding #{key} and #lang{key} references
- formatter: ArgumentFormatter substituting {0} and {name} tokens
- translator: Translator facade running the resolution pipeline
- loader: ResourceLoader, RemoteResourceLoader and FileResourceLoader
- factory: create_translator() configured from settings
"""

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.formatter import ArgumentFormatter
from infrastructure.i18n.loader import (
    FileResourceLoader,
    RemoteResourceLoader,
    ResourceLoader,
)
from infrastructure.i18n.models import (
    Arguments,
    InvalidResourceError,
    NamedArgs,
    PositionalArgs,
    ResourceTree,
    ResourceValue,
)
from infrastructure.i18n.parser import PlaceholderParser
from infrastructure.i18n.store import ResourceStore, merge
from infrastructure.i18n.translator import Translator

__all__ = [
    "Arguments",
    "ArgumentFormatter",
    "FileResourceLoader",
    "InvalidResourceError",
    "NamedArgs",
    "PlaceholderParser",
    "PositionalArgs",
    "RemoteResourceLoader",
    "ResourceLoader",
    "ResourceStore",
    "ResourceTree",
    "ResourceValue",
    "Translator",
    "create_translator",
    "merge",
]
