"""Analytics query body construction."""

from __future__ import annotations

import logging
from typing import Any

from analytics_client.analytics.params import AnalyticsParams
from analytics_client.helpers.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class AnalyticsQuery:
    """A statement plus the AnalyticsParams to send with it.

    Building the body is the only thing this class does; sending it is up
    to the caller's transport.
    """

    def __init__(self, statement: str, params: AnalyticsParams) -> None:
        self._statement = statement
        self._params = params

    @classmethod
    def simple(cls, statement: str, params: AnalyticsParams | None = None) -> AnalyticsQuery:
        """Create a query from a statement and optional params.

        Args:
            statement: Analytics statement text
            params: Params to inject; defaults to an empty AnalyticsParams

        Raises:
            InvalidArgumentError: If statement is empty
        """
        if not statement:
            raise InvalidArgumentError("Analytics statement must not be empty")
        return cls(statement, params if params is not None else AnalyticsParams.build())

    @property
    def statement(self) -> str:
        return self._statement

    @property
    def params(self) -> AnalyticsParams:
        return self._params

    def query(self) -> dict[str, Any]:
        """Return a fresh query body with the statement and injected params."""
        body: dict[str, Any] = {"statement": self._statement}
        self._params.inject_params(body)
        logger.debug("[analytics] Built query body with keys: %s", list(body.keys()))
        return body

    def __repr__(self) -> str:
        return f"AnalyticsQuery(statement={self._statement!r}, params={self._params!r})"
