"""Translation models for the i18n system.

Defines the resource tree shape and the explicit argument types accepted by
the formatter.

A resource tree is a mapping from language code to nested mappings whose
leaves are template strings::

    {"en": {"menu": {"home": "Home"}, "home": "#{menu.home}"}}
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

# A node is a mapping of segment -> value, a leaf is a template string
ResourceValue = Union[str, Dict[str, "ResourceValue"]]
ResourceTree = Dict[str, ResourceValue]


class InvalidResourceError(ValueError):
    """Raised when a fragment cannot be normalized into a resource tree."""


def is_node(value: Any) -> bool:
    """Check whether a resource value is an intermediate node."""
    return isinstance(value, dict)


def normalize_resource(resource: Any, path: str = "") -> ResourceValue:
    """Coerce a JSON-shaped value into a ResourceValue.

    Mappings are normalized recursively, strings are kept, numbers and
    booleans become strings and ``None`` entries are dropped so that every
    leaf of the result is a string.

    Args:
        resource: Decoded JSON/YAML value.
        path: Dotted location of ``resource``, used in error messages.

    Returns:
        A string leaf or a node dict.

    Raises:
        InvalidResourceError: If a value is neither a mapping nor a scalar,
            or a mapping key is not a string.
    """
    if isinstance(resource, str):
        return resource

    if isinstance(resource, bool):
        return "true" if resource else "false"

    if isinstance(resource, (int, float)):
        return str(resource)

    if isinstance(resource, Mapping):
        node: Dict[str, ResourceValue] = {}
        for key, value in resource.items():
            if not isinstance(key, str):
                raise InvalidResourceError(
                    f"Resource keys must be strings, got {key!r} at '{path}'"
                )
            if value is None:
                continue
            child_path = f"{path}.{key}" if path else key
            node[key] = normalize_resource(value, child_path)
        return node

    raise InvalidResourceError(
        f"Unsupported resource value of type {type(resource).__name__} at '{path}'"
    )


def normalize_tree(resource: Any) -> ResourceTree:
    """Normalize a fragment that must be a node at its root.

    Raises:
        InvalidResourceError: If ``resource`` is not a mapping.
    """
    if not isinstance(resource, Mapping):
        raise InvalidResourceError(
            f"Resource must be a mapping, got {type(resource).__name__}"
        )
    return normalize_resource(resource)  # type: ignore[return-value]


@dataclass(frozen=True)
class PositionalArgs:
    """Arguments substituted into ``{0}``, ``{1}``, ... tokens.

    Attributes:
        values: Values addressed by zero-based index.
    """

    values: Tuple[Any, ...] = ()

    def __init__(self, *values: Any):
        object.__setattr__(self, "values", tuple(values))

    def get(self, token: str) -> Optional[str]:
        if not token.isdigit():
            return None
        index = int(token)
        if index >= len(self.values):
            return None
        return str(self.values[index])


@dataclass(frozen=True)
class NamedArgs:
    """Arguments substituted into ``{name}`` tokens.

    Attributes:
        values: Values addressed by name.
    """

    values: Mapping[str, Any] = field(default_factory=dict)

    def get(self, token: str) -> Optional[str]:
        if token not in self.values:
            return None
        return str(self.values[token])


Arguments = Union[PositionalArgs, NamedArgs]
