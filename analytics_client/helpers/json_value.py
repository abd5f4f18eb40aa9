"""JSON value-type checks for analytics query bodies.

Query bodies are plain dicts that end up serialized as JSON by whatever
transport sends them. Values entering a body must already be JSON types:

- Primitives: str, int, float, bool, None
- Objects: dict with str keys and JSON values (recursed)
- Arrays: list or tuple of JSON values (recursed)

Nothing is converted here. Wrapper types, dataclasses, sets, bytes and
other objects are rejected and call sites must convert them explicitly.
decimal.Decimal is rejected too: the stdlib json encoder cannot write it.
Self-containing lists and dicts are rejected since they have no JSON form.
"""

from __future__ import annotations

from typing import Any

_JSON_PRIMITIVES = (str, int, float, bool, type(None))


def find_invalid_path(value: Any, path: str = "$", _ancestors: frozenset[int] = frozenset()) -> str | None:
    """Locate the first element of value that is not a JSON type.

    Args:
        value: Candidate JSON value
        path: Path prefix used in the returned location (e.g. "$.opts[2]")

    Returns:
        Path of the first offending element, or None if value is valid JSON
    """
    if isinstance(value, _JSON_PRIMITIVES):
        return None

    if isinstance(value, dict | list | tuple):
        # Containers already on the current path mean a cycle
        if id(value) in _ancestors:
            return path
        ancestors = _ancestors | {id(value)}

        if isinstance(value, dict):
            for k, v in value.items():
                if not isinstance(k, str):
                    return f"{path}.<key {k!r}>"
                bad = find_invalid_path(v, f"{path}.{k}", ancestors)
                if bad is not None:
                    return bad
            return None

        for i, v in enumerate(value):
            bad = find_invalid_path(v, f"{path}[{i}]", ancestors)
            if bad is not None:
                return bad
        return None

    return path


def check_type(value: Any) -> bool:
    """Return True if value is a supported JSON value type."""
    return find_invalid_path(value) is None
