"""Hierarchical storage of translation resources.

Resources are kept as a single nested dict keyed by language code. Fragments
are deep-merged in, so resources for one language may be assembled from many
files or URLs.
"""

from typing import Any, List, Optional

from infrastructure.i18n.models import (
    ResourceTree,
    ResourceValue,
    is_node,
    normalize_tree,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PATH_SEPARATOR = "."


def merge(tree: ResourceTree, fragment: ResourceTree) -> ResourceTree:
    """Deep-merge ``fragment`` into ``tree``.

    Nodes present on both sides are merged recursively; in every other case
    the fragment's value replaces the tree's value. ``tree`` is mutated and
    returned.

    Args:
        tree: Tree to merge into.
        fragment: Tree whose values win on conflict.

    Returns:
        The mutated ``tree``.
    """
    for key, value in fragment.items():
        existing = tree.get(key)
        if is_node(existing) and is_node(value):
            merge(existing, value)  # type: ignore[arg-type]
        elif is_node(value):
            # Copy so later merges never write into the caller's fragment
            tree[key] = merge({}, value)  # type: ignore[arg-type]
        else:
            tree[key] = value
    return tree


def wrap(resource: ResourceValue, path: str) -> ResourceTree:
    """Nest ``resource`` under a dotted ``path``.

    ``wrap(r, "en.seasons")`` returns ``{"en": {"seasons": r}}``.
    """
    segments = path.split(PATH_SEPARATOR)
    wrapped: ResourceValue = resource
    for segment in reversed(segments):
        wrapped = {segment: wrapped}
    return wrapped  # type: ignore[return-value]


class ResourceStore:
    """Owns the language -> path -> template mapping.

    Attributes:
        resources: The resource tree. Leaves are always strings.
    """

    def __init__(self, resources: Optional[ResourceTree] = None):
        self.resources: ResourceTree = {}
        if resources:
            self.add_resource(resources)

    def add_resource(
        self,
        resource: Any,
        lang: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        """Merge a resource fragment into the store.

        Without ``lang`` the resource must already be shaped as
        ``{lang: {...}}``. With ``lang`` it is nested under ``lang`` (or under
        ``lang.path`` when ``path`` is also given) before merging.

        Args:
            resource: JSON-shaped mapping of nested mappings and strings.
            lang: Optional language code to nest the resource under.
            path: Optional dotted path, below ``lang``, to nest under.

        Raises:
            InvalidResourceError: If ``resource`` is not a valid tree.
        """
        fragment = normalize_tree(resource)

        if lang:
            target = f"{lang}{PATH_SEPARATOR}{path}" if path else lang
            fragment = wrap(fragment, target)

        merge(self.resources, fragment)
        logger.debug(
            "resource_added",
            lang=lang,
            path=path,
            languages=list(self.resources.keys()),
        )

    def remove_resource(self, lang: str) -> None:
        """Delete every resource of a language."""
        if self.resources.pop(lang, None) is not None:
            logger.debug("resource_removed", lang=lang)

    def get_resource(self, lang: str) -> Optional[ResourceValue]:
        """Return the subtree of a language.

        The subtree is not copied; mutating it mutates the store.
        """
        return self.resources.get(lang)

    def lookup(self, full_path: str) -> Optional[ResourceValue]:
        """Resolve a dotted path such as ``"en.menu.home"``.

        Returns:
            The leaf or node at ``full_path``, or None when any segment is
            missing. Never raises.
        """
        current: Any = self.resources
        for segment in full_path.split(PATH_SEPARATOR):
            if not is_node(current) or segment not in current:
                return None
            current = current[segment]
        return current

    @property
    def languages(self) -> List[str]:
        """Language codes currently in the store, in insertion order."""
        return list(self.resources.keys())

    def clear(self) -> None:
        self.resources.clear()
