# where: wordpress/tools/base.py
# what: Shared helper utilities for WordPress tools (credentials, messaging, error boundary).
# why: Avoid duplicated logic across WordPress REST API tool implementations.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

from dify_plugin import Tool
from dify_plugin.entities.tool import ToolInvokeMessage

from . import validators
from .errors import WordPressConfigurationError, WordPressHttpError
from .http_client import WordPressHttpClient

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY_IDS: tuple[int, ...] = (292,)  # Artificial Intelligence
DEFAULT_TAG_IDS: tuple[int, ...] = (294, 295)  # AI, Future of Work


@dataclass(frozen=True, slots=True)
class ProviderContext:
    wordpress_url: str
    username: str
    application_password: str
    default_category_ids: tuple[int, ...] = DEFAULT_CATEGORY_IDS
    default_tag_ids: tuple[int, ...] = DEFAULT_TAG_IDS

    @classmethod
    def from_credentials(cls, credentials: dict[str, Any]) -> "ProviderContext":
        wordpress_url = (credentials.get("wordpress_url") or "").strip()
        username = (credentials.get("username") or "").strip()
        # アプリケーションパスワードは表示用に空白を含むため、すべての空白を除去する
        application_password = "".join((credentials.get("application_password") or "").split())

        logger.debug(
            "Loading provider context: wordpress_url=%s, username=%s, application_password=%s",
            wordpress_url or "(empty)",
            username or "(empty)",
            "***" if application_password else "(empty)",
        )

        if not wordpress_url:
            raise WordPressConfigurationError("WordPressサイトURLを設定してください。Difyのプロバイダー設定でWordPressサイトURLを確認してください。")
        if not username or not application_password:
            raise WordPressConfigurationError(
                "WordPressの認証情報が設定されていません。Difyのプロバイダー設定でユーザー名とアプリケーションパスワードを設定してください。"
            )
        if not wordpress_url.startswith(("http://", "https://")):
            raise WordPressConfigurationError(f"WordPressサイトURLはhttp://またはhttps://で始まる必要があります。現在の値: {wordpress_url}")

        return cls(
            wordpress_url=wordpress_url,
            username=username,
            application_password=application_password,
            default_category_ids=parse_default_ids(credentials.get("default_category_ids"), DEFAULT_CATEGORY_IDS),
            default_tag_ids=parse_default_ids(credentials.get("default_tag_ids"), DEFAULT_TAG_IDS),
        )


def parse_default_ids(value: Any, fallback: tuple[int, ...]) -> tuple[int, ...]:
    """Parse a comma-separated ID list from the provider settings."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return fallback
    try:
        return tuple(validators.normalize_id_list(value, "default IDs"))
    except ValueError as exc:
        raise WordPressConfigurationError(f"デフォルトのカテゴリー/タグIDの形式が不正です: {value}") from exc


class BaseWordPressTool(Tool):
    """Base class that takes care of credential loading, HTTP client creation and error wrapping.

    Subclasses set ``operation`` and ``action`` and implement ``_run``, which
    returns the text summary and the JSON result for a successful call.
    """

    operation: ClassVar[str] = ""
    action: ClassVar[str] = "WordPress操作"

    def _invoke(self, tool_parameters: dict[str, Any]) -> list[ToolInvokeMessage]:
        try:
            context = self._load_provider_context()
            client = self._create_http_client(context)
            text, payload = self._run(client, context, tool_parameters)
            return [
                self._create_text_message(text),
                self._create_json_message(payload),
            ]
        except Exception as exc:  # noqa: BLE001
            return self._handle_error(exc, self.action)

    def _run(
        self,
        client: WordPressHttpClient,
        context: ProviderContext,
        tool_parameters: dict[str, Any],
    ) -> tuple[str, dict[str, Any]]:
        raise NotImplementedError

    def _load_provider_context(self) -> ProviderContext:
        credentials: dict[str, Any] = getattr(self.runtime, "credentials", {}) or {}
        return ProviderContext.from_credentials(credentials)

    def _create_http_client(self, context: ProviderContext) -> WordPressHttpClient:
        """Create a WordPress HTTP client from the provider context."""
        logger.debug("Creating WordPress HTTP client for %s", self.operation)
        return WordPressHttpClient.from_context(context)

    # ---- Messaging helpers -------------------------------------------------

    def _create_text_message(self, text: str) -> ToolInvokeMessage:
        return self.create_text_message(text)

    def _create_json_message(self, payload: dict[str, Any]) -> ToolInvokeMessage:
        return self.create_json_message(payload)

    def _handle_error(self, error: Exception, action: str) -> list[ToolInvokeMessage]:
        logger.exception("Failed to %s: %s", self.operation or action, error)
        message = str(error)
        status_code = error.status_code if isinstance(error, WordPressHttpError) else None

        hints: list[str] = []
        lowered = message.lower()
        if isinstance(error, WordPressConfigurationError):
            hints.append("Difyのプロバイダー設定（サイトURL、ユーザー名、アプリケーションパスワード）を確認してください。")
        if status_code == 401:
            hints.append("WordPressの認証情報（ユーザー名またはアプリケーションパスワード）が無効です。")
            hints.append("WordPress管理画面でアプリケーションパスワードが正しく生成されているか確認してください。")
        if status_code == 403:
            hints.append("WordPressユーザーに必要な権限がありません。")
        if status_code == 404:
            hints.append("指定されたリソース（投稿IDなど）が見つかりません。正しいIDを指定しているか確認してください。")
        if status_code == 429 or "rate" in lowered:
            hints.append("短時間にリクエストしすぎている可能性があります。数秒待って再実行してください")
        if status_code == 400:
            hints.append("リクエストパラメータの形式を確認してください（タイトル、本文、カテゴリーIDなど）")
        if status_code is not None and status_code >= 500:
            hints.append("WordPressサーバーでエラーが発生しました。WordPressサイトのログを確認してください。")

        text = f"{action} に失敗しました: {message}"
        if hints:
            text += "\n\n" + "\n".join(f"ヒント: {hint}" for hint in hints)

        return [
            self._create_text_message(text),
            self._create_json_message({"is_error": True, "error": message, "status_code": status_code}),
        ]
