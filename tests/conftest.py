"""
Shared fixtures for the WordPress tool tests.

HTTP traffic is faked by handing WordPressHttpClient a MagicMock session whose
request() returns real requests.Response objects.
"""

import json
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from tools.base import ProviderContext
from tools.http_client import WordPressHttpClient

CREDENTIALS = {
    "wordpress_url": "https://blog.example.com/",
    "username": "editor",
    "application_password": "abcd EFGH ijkl MNOP qrst UVWX",
}


def make_response(
    status_code: int = 200,
    json_body: Any = None,
    text: str | None = None,
    reason: str = "OK",
    content_type: str = "application/json; charset=UTF-8",
    url: str = "https://blog.example.com/wp-json/wp/v2/posts",
) -> requests.Response:
    """Build a real Response the client can parse."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response.headers["Content-Type"] = content_type
    if text is None:
        text = "" if json_body is None else json.dumps(json_body)
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def session() -> MagicMock:
    """A fake requests.Session; set session.request.return_value / side_effect per test."""
    fake = MagicMock(spec=requests.Session)
    fake.request.return_value = make_response(json_body={})
    return fake


@pytest.fixture
def context() -> ProviderContext:
    return ProviderContext.from_credentials(CREDENTIALS)


@pytest.fixture
def client(context: ProviderContext, session: MagicMock) -> WordPressHttpClient:
    return WordPressHttpClient.from_context(context, session=session)


@pytest.fixture
def make_tool(session: MagicMock):
    """Instantiate a tool class wired to the fake session."""

    def _make(tool_cls, credentials: dict[str, Any] | None = None):
        tool = tool_cls(
            runtime=SimpleNamespace(credentials=dict(CREDENTIALS if credentials is None else credentials)),
            session=MagicMock(),
        )
        tool._create_http_client = lambda ctx: WordPressHttpClient.from_context(ctx, session=session)
        return tool

    return _make


def message_text(message) -> str:
    return message.message.text


def message_json(message) -> dict[str, Any]:
    return message.message.json_object
