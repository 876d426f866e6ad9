"""
Path Template Expansion

Expands request path templates such as ``{index}/_search/template`` by
substituting each ``{name}`` token with its percent-encoded binding.
Bindings are encoded as single path segments: everything outside the
unreserved set (letters, digits, ``-._~``) is escaped, including ``/``.
"""

import logging
import re
from typing import Mapping
from urllib.parse import quote

from elastic_ops_exceptions import PathResolutionError

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"\{([^{}]*)\}")


def escape_segment(value: str) -> str:
    """
    Percent-encode a value for use as one path segment.

    Raises:
        PathResolutionError: If the value cannot be encoded as UTF-8
    """
    try:
        return quote(value, safe="")
    except UnicodeEncodeError as e:
        raise PathResolutionError(f"Cannot escape path segment {value!r}: {e}") from e


def expand(template: str, bindings: Mapping[str, str]) -> str:
    """
    Expand a path template using the given bindings.

    Args:
        template: Path template containing ``{name}`` tokens
        bindings: Mapping of token name to its unescaped value

    Returns:
        Expanded path

    Raises:
        PathResolutionError: If a token is empty or unbound, a binding is
            not a string, a value cannot be escaped, or the template has
            unbalanced braces
    """
    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1).strip()
        if not name:
            raise PathResolutionError(f"Empty variable in path template {template!r}")
        if name not in bindings:
            raise PathResolutionError(f"No binding for {{{name}}} in path template {template!r}")
        value = bindings[name]
        if not isinstance(value, str):
            raise PathResolutionError(
                f"Binding for {{{name}}} must be a string, got {type(value).__name__}"
            )
        return escape_segment(value)

    # Anything left over is a brace that never formed a token
    leftover = _TOKEN.sub("", template)
    if "{" in leftover or "}" in leftover:
        raise PathResolutionError(f"Unbalanced braces in path template {template!r}")

    path = _TOKEN.sub(substitute, template)
    logger.debug(f"Expanded path template {template!r} to {path!r}")
    return path
