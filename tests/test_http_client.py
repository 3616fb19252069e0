# -*- coding: utf-8 -*-
"""
Tests for the signed HTTP transport.
"""

import asyncio
import pytest
import aiohttp
from decimal import Decimal
from unittest.mock import AsyncMock, Mock, patch

from bitflyer_client.auth import compute_signature
from bitflyer_client.http_client import (
    BitflyerError,
    DecodeError,
    ExchangeError,
    HttpClient,
    RequestError,
)


@pytest.fixture
def http_client(connection_config):
    return HttpClient(connection_config)


class TestRequestExecution:
    """Test how requests are built and sent."""

    @pytest.mark.asyncio
    async def test_get_request_headers_and_url(self, http_client, mock_client_session, respond):
        respond({"ok": True})

        with patch("bitflyer_client.auth.time") as mock_time:
            mock_time.time.return_value = 1234567890
            result = await http_client.request(mock_client_session, "GET", "/v1/getboard")

        assert result == {"ok": True}
        kwargs = mock_client_session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "https://api.bitflyer.jp/v1/getboard"
        assert "data" not in kwargs
        assert "timeout" not in kwargs
        assert kwargs["headers"] == {
            "Content-Type": "application/json",
            "ACCESS-KEY": "test_key",
            "ACCESS-TIMESTAMP": "1234567890",
            "ACCESS-SIGN": compute_signature(
                "1234567890", "GET", "/v1/getboard", "", "test_secret"
            ),
        }

    @pytest.mark.asyncio
    async def test_post_body_is_signed_as_sent(self, http_client, mock_client_session, respond):
        respond({"child_order_acceptance_id": "abc"})
        body = b'{"product_code":"BTC_JPY"}'

        await http_client.request(mock_client_session, "post", "/v1/me/sendchildorder", body=body)

        kwargs = mock_client_session.request.call_args.kwargs
        headers = kwargs["headers"]
        assert kwargs["method"] == "POST"
        assert kwargs["data"] == body
        assert headers["ACCESS-SIGN"] == compute_signature(
            headers["ACCESS-TIMESTAMP"], "POST", "/v1/me/sendchildorder", body, "test_secret"
        )

    @pytest.mark.asyncio
    async def test_additional_headers_cannot_override_auth(
        self, http_client, mock_client_session, respond
    ):
        respond({})

        await http_client.request(
            mock_client_session,
            "GET",
            "/v1/getticker",
            headers={"X-Trace": "1", "ACCESS-KEY": "spoofed"},
        )

        headers = mock_client_session.request.call_args.kwargs["headers"]
        assert headers["X-Trace"] == "1"
        assert headers["ACCESS-KEY"] == "test_key"

    @pytest.mark.asyncio
    async def test_per_request_timeout(self, http_client, mock_client_session, respond):
        respond({})

        await http_client.request(mock_client_session, "GET", "/v1/getticker", timeout=2.5)

        timeout = mock_client_session.request.call_args.kwargs["timeout"]
        assert isinstance(timeout, aiohttp.ClientTimeout)
        assert timeout.total == 2.5

    @pytest.mark.asyncio
    async def test_signs_at_send_time(self, http_client, mock_client_session, respond):
        """Each request gets a fresh timestamp."""
        respond({})

        with patch("bitflyer_client.auth.time") as mock_time:
            mock_time.time.side_effect = [100.0, 200.0]
            await http_client.request(mock_client_session, "GET", "/v1/getboard")
            first = mock_client_session.request.call_args.kwargs["headers"]
            await http_client.request(mock_client_session, "GET", "/v1/getboard")
            second = mock_client_session.request.call_args.kwargs["headers"]

        assert first["ACCESS-TIMESTAMP"] == "100"
        assert second["ACCESS-TIMESTAMP"] == "200"


class TestTransportFailures:
    """Test transport-level failures surface as RequestError without retry."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        aiohttp.ClientConnectionError("Connection refused"),
        aiohttp.ClientConnectorError(Mock(), OSError(111, "Connection refused")),
        asyncio.TimeoutError(),
    ])
    async def test_send_failure(self, http_client, mock_client_session, error):
        mock_client_session.request.side_effect = error

        with pytest.raises(RequestError) as exc_info:
            await http_client.request(mock_client_session, "GET", "/v1/getboard")

        assert exc_info.value.__cause__ is error
        assert mock_client_session.request.call_count == 1

    @pytest.mark.asyncio
    async def test_read_failure(self, http_client, mock_client_session, respond):
        response = respond({})
        response.read = AsyncMock(side_effect=aiohttp.ClientPayloadError("truncated"))

        with pytest.raises(RequestError):
            await http_client.request(mock_client_session, "GET", "/v1/getboard")

        assert mock_client_session.request.call_count == 1


class TestResponseProcessing:
    """Test decoding and error mapping of responses."""

    @pytest.mark.asyncio
    async def test_list_payload(self, http_client, mock_client_session, respond):
        respond([{"currency_code": "JPY"}])
        result = await http_client.request(mock_client_session, "GET", "/v1/me/getbalance")
        assert result == [{"currency_code": "JPY"}]

    @pytest.mark.asyncio
    async def test_malformed_json(self, http_client, mock_client_session, respond):
        respond(raw=b"<html>Service Unavailable</html>")

        with pytest.raises(DecodeError):
            await http_client.request(mock_client_session, "GET", "/v1/getboard")

    @pytest.mark.asyncio
    async def test_empty_body(self, http_client, mock_client_session, respond):
        respond(raw=b"")

        with pytest.raises(DecodeError):
            await http_client.request(mock_client_session, "GET", "/v1/getboard")

    @pytest.mark.asyncio
    async def test_error_message_in_200_body(self, http_client, mock_client_session, respond):
        payload = {"status": -200, "error_message": "Insufficient funds", "data": None}
        respond(payload, status=200)

        with pytest.raises(ExchangeError) as exc_info:
            await http_client.request(mock_client_session, "POST", "/v1/me/sendchildorder", body=b"{}")

        assert str(exc_info.value) == "Insufficient funds"
        assert exc_info.value.status_code == 200
        assert exc_info.value.response_data == payload

    @pytest.mark.asyncio
    async def test_error_status_with_error_message(self, http_client, mock_client_session, respond):
        respond({"status": -500, "error_message": "Invalid signature", "data": None}, status=401)

        with pytest.raises(ExchangeError, match="Invalid signature") as exc_info:
            await http_client.request(mock_client_session, "GET", "/v1/me/getbalance")

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_error_status_without_message(self, http_client, mock_client_session, respond):
        respond({"unexpected": True}, status=503)

        with pytest.raises(ExchangeError, match="HTTP 503"):
            await http_client.request(mock_client_session, "GET", "/v1/getboard")

    @pytest.mark.asyncio
    async def test_empty_error_message_is_success(self, http_client, mock_client_session, respond):
        respond({"child_order_acceptance_id": "abc", "error_message": ""})

        result = await http_client.request(mock_client_session, "POST", "/v1/me/sendchildorder", body=b"{}")

        assert result["child_order_acceptance_id"] == "abc"

    @pytest.mark.asyncio
    async def test_floats_decoded_as_decimal(self, http_client, mock_client_session, respond):
        respond(raw=b'{"ltp":1234567.123456789012,"tick_id":7}')

        result = await http_client.request(mock_client_session, "GET", "/v1/getticker")

        assert result == {"ltp": Decimal("1234567.123456789012"), "tick_id": 7}

    def test_error_hierarchy(self):
        for error_cls in (RequestError, DecodeError, ExchangeError):
            assert issubclass(error_cls, BitflyerError)
