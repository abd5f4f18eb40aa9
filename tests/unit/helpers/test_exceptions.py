"""Unit tests for analytics_client.helpers.exceptions module."""

import pytest

from analytics_client.helpers.exceptions import InvalidArgumentError


class TestInvalidArgumentError:
    """Tests for InvalidArgumentError exception."""

    @pytest.mark.unit
    def test_is_value_error(self) -> None:
        """InvalidArgumentError should be a ValueError subclass."""
        assert issubclass(InvalidArgumentError, ValueError)

    @pytest.mark.unit
    def test_stores_message(self) -> None:
        assert str(InvalidArgumentError("bad value")) == "bad value"

    @pytest.mark.unit
    def test_can_be_raised_and_matched(self) -> None:
        with pytest.raises(InvalidArgumentError, match="bad"):
            raise InvalidArgumentError("bad")
