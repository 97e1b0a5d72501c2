"""Argument substitution for translated templates.

Replaces ``{0}``, ``{1}``, ... with positional arguments, or ``{name}`` with
named arguments. Tokens without a matching argument are left as they are, so
partial formatting is allowed. A token wrapped in doubled braces, such as
``{{0}}``, is escaped and renders as the literal ``{0}``. Stray ``{{`` or
``}}`` without a token are kept as they are.
"""

import re
from typing import Optional

from infrastructure.i18n.models import Arguments

TOKEN_PATTERN = re.compile(r"\{\{([^{}]+)\}\}|\{([^{}]+)\}")


class ArgumentFormatter:
    """Substitutes argument tokens in a string."""

    def format(self, template: str, args: Optional[Arguments] = None) -> str:
        """Format ``template`` with ``args``.

        Args:
            template: String containing argument tokens.
            args: PositionalArgs, NamedArgs, or None.

        Returns:
            The formatted string. Never raises for unmatched tokens.
        """
        if not template:
            return ""

        def _replace(match: "re.Match[str]") -> str:
            escaped = match.group(1)
            if escaped is not None:
                return "{" + escaped + "}"
            token = match.group(2)
            if args is None:
                return match.group(0)
            value = args.get(token)
            return match.group(0) if value is None else value

        return TOKEN_PATTERN.sub(_replace, template)
