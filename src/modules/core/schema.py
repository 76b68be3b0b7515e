"""drf-spectacular hooks."""

from __future__ import annotations


def strip_optional_trailing_slash(endpoints, **kwargs):
    """Publish routes registered with an optional trailing slash without it.

    The optional ``/?`` in the route regex is simplified to a literal ``/``
    when the schema path is derived, so ``/api/products/`` would otherwise
    appear in the document.
    """
    return [
        (path.rstrip("/") or "/", path_regex, method, callback)
        for path, path_regex, method, callback in endpoints
    ]
