"""Unit tests for StarRealmsHTTPClient.

Tests cover:
- Successful API calls with mocked responses
- Error classification: transport, API rejection, data shape
- Context manager behavior
"""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ConnectError

from starrealms.client import StarRealmsHTTPClient
from starrealms.exceptions import (
    InvalidAPIResponseError,
    ResponseValidationError,
    StarRealmsConnectionError,
    UnknownStarRealmsError,
)
from starrealms.models import Activity, Token

ResponseFactory = Callable[..., MagicMock]


class TestStarRealmsHTTPClientInit:
    """Tests for StarRealmsHTTPClient initialization."""

    def test_default_configuration(self) -> None:
        """Test client initializes with default configuration."""
        client = StarRealmsHTTPClient()
        assert client.base_url == "https://srprodv2.whitewizardgames.com"
        assert client.timeout is None
        assert client._client is None

    def test_custom_configuration(self) -> None:
        """Test client accepts custom configuration."""
        client = StarRealmsHTTPClient(base_url="http://example.com:8080/", timeout=5.0)
        assert client.base_url == "http://example.com:8080"  # trailing slash stripped
        assert client.timeout == 5.0


class TestStarRealmsHTTPClientContextManager:
    """Tests for async context manager behavior."""

    @pytest.mark.asyncio
    async def test_context_manager_connects_and_closes(self) -> None:
        """Test context manager properly connects and closes client."""
        client = StarRealmsHTTPClient()

        async with client:
            assert client._client is not None

        assert client._client is None

    @pytest.mark.asyncio
    async def test_connect_is_idempotent(self) -> None:
        """Test calling connect() multiple times is safe."""
        client = StarRealmsHTTPClient()
        await client.connect()
        first_client = client._client

        await client.connect()
        assert client._client is first_client

        await client.close()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self) -> None:
        """Test calling close() multiple times is safe."""
        client = StarRealmsHTTPClient()
        await client.connect()
        await client.close()
        await client.close()
        assert client._client is None

    @pytest.mark.asyncio
    async def test_request_without_connect_fails(self) -> None:
        """Test requests fail cleanly before connect()."""
        client = StarRealmsHTTPClient()
        with pytest.raises(StarRealmsConnectionError, match="not connected"):
            await client.probe_activity("bearer", 45)


class TestLogin:
    """Tests for login() method."""

    @pytest.mark.asyncio
    async def test_login_success(
        self, make_response: ResponseFactory, token_json: dict[str, Any]
    ) -> None:
        """Test successful login posts a form and parses the token."""
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, token_json)

            token = await client.login("Alice", "hunter2")

            assert isinstance(token, Token)
            assert token.token2 == "bearer-value"

            mock_request.assert_called_once()
            call_args = mock_request.call_args
            assert call_args[0][0] == "POST"
            assert call_args[0][1] == "/Account/Login"
            assert call_args[1]["data"] == {"username": "Alice", "password": "hunter2"}
            assert "json" not in call_args[1]

        await client.close()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 401, 403, 500])
    async def test_login_rejected(
        self, make_response: ResponseFactory, status_code: int
    ) -> None:
        """Test non-200 login carries the exact status code."""
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(status_code, {"error": "no"})

            with pytest.raises(InvalidAPIResponseError) as exc_info:
                await client.login("Alice", "wrong")

            assert exc_info.value.status_code == status_code

        await client.close()

    @pytest.mark.asyncio
    async def test_login_malformed_body(self, make_response: ResponseFactory) -> None:
        """Test a 200 body that is not a token is a data-shape error."""
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, {"id": "not-a-number"})

            with pytest.raises(ResponseValidationError):
                await client.login("Alice", "hunter2")

        await client.close()

    @pytest.mark.asyncio
    async def test_login_non_json_body(self, make_response: ResponseFactory) -> None:
        """Test a 200 body that is not JSON is a data-shape error."""
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            response = make_response(200)
            response.json.side_effect = ValueError("Expecting value")
            mock_request.return_value = response

            with pytest.raises(ResponseValidationError, match="not valid JSON"):
                await client.login("Alice", "hunter2")

        await client.close()


class TestListActivity:
    """Tests for list_activity() method."""

    @pytest.mark.asyncio
    async def test_list_activity_success(
        self, make_response: ResponseFactory, activity_json: dict[str, Any]
    ) -> None:
        """Test activity fetch sends auth headers and parses the body."""
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, activity_json)

            activity = await client.list_activity("bearer-value", 47)

            assert isinstance(activity, Activity)
            assert activity.result == "Success"

            call_args = mock_request.call_args
            assert call_args[0][0] == "GET"
            assert call_args[0][1] == "/NewGame/ListActivitySortable"
            assert call_args[1]["headers"] == {
                "Auth": "bearer-value",
                "coreversion": "47",
            }

        await client.close()

    @pytest.mark.asyncio
    async def test_list_activity_rejected(self, make_response: ResponseFactory) -> None:
        """Test non-200 activity fetch raises with status code."""
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(404)

            with pytest.raises(InvalidAPIResponseError) as exc_info:
                await client.list_activity("bearer-value", 47)

            assert exc_info.value.status_code == 404

        await client.close()

    @pytest.mark.asyncio
    async def test_list_activity_shape_mismatch(
        self, make_response: ResponseFactory, activity_json: dict[str, Any]
    ) -> None:
        """Test a missing field is a data-shape error."""
        del activity_json["activegames"]
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, activity_json)

            with pytest.raises(ResponseValidationError, match="activegames"):
                await client.list_activity("bearer-value", 47)

        await client.close()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("field", "value"),
        [("rankstars", 3.0), ("acceptedterms", "true"), ("level", "17")],
    )
    async def test_list_activity_wrong_type(
        self,
        make_response: ResponseFactory,
        activity_json: dict[str, Any],
        field: str,
        value: Any,
    ) -> None:
        """Test a coercible but mistyped value is a data-shape error."""
        activity_json[field] = value
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, activity_json)

            with pytest.raises(ResponseValidationError, match=field):
                await client.list_activity("bearer-value", 47)

        await client.close()

    @pytest.mark.asyncio
    async def test_list_activity_game_id_as_string(
        self, make_response: ResponseFactory, activity_json: dict[str, Any]
    ) -> None:
        activity_json["activegames"][0]["gameid"] = "987654"
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, activity_json)

            with pytest.raises(ResponseValidationError, match="gameid"):
                await client.list_activity("bearer-value", 47)

        await client.close()


class TestProbeActivity:
    """Tests for probe_activity() method."""

    @pytest.mark.asyncio
    async def test_probe_accepted(self, make_response: ResponseFactory) -> None:
        """Test a 200 probe reports acceptance without parsing the body."""
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            response = make_response(200)
            mock_request.return_value = response

            assert await client.probe_activity("bearer-value", 45) is True
            response.json.assert_not_called()

        await client.close()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 426, 500])
    async def test_probe_rejected(
        self, make_response: ResponseFactory, status_code: int
    ) -> None:
        """Test non-200 probes report rejection instead of raising."""
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(status_code)

            assert await client.probe_activity("bearer-value", 45) is False

        await client.close()


class TestTransportErrors:
    """Tests for transport-level error classification."""

    @pytest.mark.asyncio
    async def test_connection_error_is_wrapped(self) -> None:
        """Test httpx errors become StarRealmsConnectionError."""
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.side_effect = ConnectError("Connection refused")

            with pytest.raises(StarRealmsConnectionError) as exc_info:
                await client.probe_activity("bearer-value", 45)

            assert isinstance(exc_info.value.__cause__, ConnectError)
            mock_request.assert_called_once()  # not retried

        await client.close()

    @pytest.mark.asyncio
    async def test_unexpected_error_is_unknown(self) -> None:
        """Test non-httpx failures fall into the unknown category."""
        client = StarRealmsHTTPClient()
        await client.connect()

        with patch.object(
            client._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.side_effect = RuntimeError("boom")

            with pytest.raises(UnknownStarRealmsError):
                await client.list_activity("bearer-value", 45)

        await client.close()
