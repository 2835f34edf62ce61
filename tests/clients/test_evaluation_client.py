"""Tests for the evaluation service client."""

import json

import httpx
import pytest

from shorturls.clients.evaluation import EvaluationServiceClient
from shorturls.core.config import Settings
from shorturls.services.exceptions import AccessTokenError, LogSubmissionError


@pytest.fixture
def evaluation_settings() -> Settings:
    return Settings(
        EVALUATION_AUTH_URL="http://eval.test/auth",
        EVALUATION_LOGS_URL="http://eval.test/logs",
        EVALUATION_EMAIL="dev@example.com",
        EVALUATION_NAME="Dev",
        EVALUATION_ROLL_NO="42",
        EVALUATION_ACCESS_CODE="code",
        EVALUATION_CLIENT_ID="client-id",
        EVALUATION_CLIENT_SECRET="client-secret",
        RELAY_TOKEN_URL="http://shortener.test/auth/accessToken",
    )


def make_client(settings: Settings, handler) -> EvaluationServiceClient:
    return EvaluationServiceClient(settings=settings, transport=httpx.MockTransport(handler))


@pytest.mark.client
class TestAccessToken:

    @pytest.mark.asyncio
    async def test_fetch_access_token(self, evaluation_settings):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"token_type": "Bearer", "access_token": "tok-123"})

        token = await make_client(evaluation_settings, handler).fetch_access_token()

        assert token == "tok-123"
        assert seen["url"] == "http://eval.test/auth"
        assert seen["body"] == {
            "email": "dev@example.com",
            "name": "Dev",
            "rollNo": "42",
            "accessCode": "code",
            "clientID": "client-id",
            "clientSecret": "client-secret",
        }

    @pytest.mark.asyncio
    async def test_rejected_credentials(self, evaluation_settings):
        client = make_client(evaluation_settings, lambda request: httpx.Response(401, json={"message": "no"}))
        with pytest.raises(AccessTokenError):
            await client.fetch_access_token()

    @pytest.mark.asyncio
    async def test_missing_token(self, evaluation_settings):
        client = make_client(evaluation_settings, lambda request: httpx.Response(200, json={"other": 1}))
        with pytest.raises(AccessTokenError):
            await client.fetch_access_token()

    @pytest.mark.asyncio
    async def test_transport_failure(self, evaluation_settings):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(AccessTokenError):
            await make_client(evaluation_settings, handler).fetch_access_token()


@pytest.mark.client
class TestSendLog:

    @pytest.mark.asyncio
    async def test_send_log(self, evaluation_settings):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"logID": "abc", "message": "log created successfully"})

        result = await make_client(evaluation_settings, handler).send_log(
            "tok-123", stack="backend", level="info", package="handler", message="created"
        )

        assert result["logID"] == "abc"
        assert seen["auth"] == "Bearer tok-123"
        assert seen["body"] == {"stack": "backend", "level": "info", "package": "handler", "message": "created"}

    @pytest.mark.asyncio
    async def test_send_log_failure(self, evaluation_settings):
        client = make_client(evaluation_settings, lambda request: httpx.Response(500))
        with pytest.raises(LogSubmissionError):
            await client.send_log("tok", stack="backend", level="info", package="x", message="y")


@pytest.mark.client
class TestRelayedToken:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"accessToken": "tok"}, {"token": "tok"}, "tok"])
    async def test_token_shapes(self, evaluation_settings, body):
        client = make_client(evaluation_settings, lambda request: httpx.Response(200, json=body))
        assert await client.fetch_relayed_token() == "tok"

    @pytest.mark.asyncio
    async def test_relay_error_status(self, evaluation_settings):
        client = make_client(evaluation_settings, lambda request: httpx.Response(502, json={"detail": "x"}))
        with pytest.raises(AccessTokenError):
            await client.fetch_relayed_token()
