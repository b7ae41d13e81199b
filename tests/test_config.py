"""
Tests for provider settings: credential loading and console validation.
"""

import pytest
from dify_plugin.errors.tool import ToolProviderCredentialValidationError

from conftest import CREDENTIALS
from provider.provider import WordPressProvider
from tools.base import DEFAULT_CATEGORY_IDS, DEFAULT_TAG_IDS, ProviderContext
from tools.errors import WordPressConfigurationError


def test_context_strips_password_whitespace_once():
    context = ProviderContext.from_credentials(CREDENTIALS)

    assert context.application_password == "abcdEFGHijklMNOPqrstUVWX"
    assert context.wordpress_url == "https://blog.example.com/"


def test_context_defaults_taxonomy():
    context = ProviderContext.from_credentials(CREDENTIALS)

    assert context.default_category_ids == DEFAULT_CATEGORY_IDS == (292,)
    assert context.default_tag_ids == DEFAULT_TAG_IDS == (294, 295)


def test_context_reads_configured_taxonomy():
    context = ProviderContext.from_credentials(dict(CREDENTIALS, default_category_ids="5, 6", default_tag_ids=""))

    assert context.default_category_ids == (5, 6)
    assert context.default_tag_ids == (294, 295)


def test_context_is_immutable():
    context = ProviderContext.from_credentials(CREDENTIALS)

    with pytest.raises(AttributeError):
        context.username = "someone"


@pytest.mark.parametrize(
    "overrides",
    [
        {"wordpress_url": ""},
        {"wordpress_url": "blog.example.com"},
        {"username": " "},
        {"application_password": "   "},
        {"default_tag_ids": "a,b"},
    ],
)
def test_context_rejects_bad_settings(overrides):
    with pytest.raises(WordPressConfigurationError):
        ProviderContext.from_credentials(dict(CREDENTIALS, **overrides))


def test_provider_accepts_valid_credentials():
    WordPressProvider()._validate_credentials(dict(CREDENTIALS, default_tag_ids="1,2"))


@pytest.mark.parametrize(
    "overrides",
    [
        {"wordpress_url": "ftp://blog.example.com"},
        {"username": ""},
        {"application_password": "short pass"},
        {"default_category_ids": "news"},
    ],
)
def test_provider_rejects_invalid_credentials(overrides):
    with pytest.raises(ToolProviderCredentialValidationError):
        WordPressProvider()._validate_credentials(dict(CREDENTIALS, **overrides))
