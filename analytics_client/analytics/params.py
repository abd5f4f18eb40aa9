"""Parameters for analytics queries.

AnalyticsParams collects the optional settings of an analytics request and
projects them onto the query body right before it is sent:

- client_context_id: echoed back by the server so callers can correlate
  requests and responses
- pretty: always false for analytics requests
- raw params: escape hatch for server options with no dedicated setter,
  written last so they override everything above
"""

from __future__ import annotations

import copy
from collections.abc import MutableMapping
from typing import Any

from analytics_client.helpers.exceptions import InvalidArgumentError
from analytics_client.helpers.json_value import find_invalid_path


class AnalyticsParams:
    """Mutable, chainable builder for analytics query parameters.

    One instance can be configured once and injected into any number of
    query bodies. Instances are not thread-safe.

    Example:
        >>> params = AnalyticsParams.build().with_context_id("req-42").raw_param("timeout", "10s")
        >>> body = {"statement": "SELECT 1;"}
        >>> params.inject_params(body)
        >>> body
        {'statement': 'SELECT 1;', 'client_context_id': 'req-42', 'pretty': False, 'timeout': '10s'}
    """

    def __init__(self) -> None:
        self._client_context_id: str | None = None
        self._raw_params: dict[str, Any] = {}

    @classmethod
    def build(cls) -> AnalyticsParams:
        """Start building an AnalyticsParams with nothing set."""
        return cls()

    @property
    def client_context_id(self) -> str | None:
        return self._client_context_id

    @property
    def raw_params(self) -> dict[str, Any]:
        """Deep copy of the raw params in insertion order."""
        return copy.deepcopy(self._raw_params)

    def with_context_id(self, client_context_id: str | None) -> AnalyticsParams:
        """Set the client context ID sent with the request.

        Args:
            client_context_id: Opaque ID echoed back in the response (None to send none)

        Returns:
            self, for chaining
        """
        self._client_context_id = client_context_id
        return self

    def raw_param(self, name: str, value: Any) -> AnalyticsParams:
        """Set an arbitrary, raw analytics parameter.

        Use with care and only for options the server supports that have no
        dedicated setter. Setting the same name twice keeps the last value.

        Args:
            name: Parameter name as the server expects it
            value: JSON value (str, int, float, bool, None, dict, list/tuple)

        Returns:
            self, for chaining

        Raises:
            InvalidArgumentError: If name is not a str or value is not a JSON type.
                Nothing is stored.
        """
        if not isinstance(name, str):
            raise InvalidArgumentError(f"Raw param names must be strings, got {type(name).__name__}")
        try:
            bad_path = find_invalid_path(value)
        except RecursionError as e:
            raise InvalidArgumentError(f"Raw param {name!r} is nested too deeply to be a JSON value") from e
        if bad_path is not None:
            raise InvalidArgumentError(
                f"Only JSON types are supported for raw param {name!r}: "
                f"unsupported value at {bad_path}"
            )
        self._raw_params[name] = value
        return self

    def inject_params(self, query_json: MutableMapping[str, Any]) -> None:
        """Write these params into the given analytics query body (mutated in place)."""
        if self._client_context_id is not None:
            query_json["client_context_id"] = self._client_context_id

        query_json["pretty"] = False

        for name, value in self._raw_params.items():
            query_json[name] = value

    def __repr__(self) -> str:
        return f"AnalyticsParams(client_context_id={self._client_context_id!r}, raw_params={self._raw_params!r})"
