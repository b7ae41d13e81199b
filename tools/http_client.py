# where: wordpress/tools/http_client.py
# what: Minimal WordPress REST API HTTP client.
# why: Some Dify environments cannot install the WordPress SDK, so we reimplement the needed REST flows.

from __future__ import annotations

import base64
import json
import logging
import re
from dataclasses import dataclass
from typing import Any

import requests
from requests import Response, Session

from .errors import WordPressConfigurationError, WordPressHttpError

logger = logging.getLogger(__name__)

API_ROOT = "/wp-json/wp/v2"
_DEFAULT_TIMEOUT = 30
_MAX_LOG_BODY_LENGTH = 200  # Maximum length of response body to log


def _sanitize_for_log(text: str) -> str:
    """Sanitize sensitive information from log messages."""
    if not text:
        return text

    # Mask Basic auth credentials
    text = re.sub(r'Basic\s+[A-Za-z0-9+/=]{8,}', 'Basic ***', text, flags=re.IGNORECASE)

    # Mask long alphanumeric strings that might be passwords
    text = re.sub(r'[A-Za-z0-9]{32,}', '***', text)

    if len(text) > _MAX_LOG_BODY_LENGTH:
        text = text[:_MAX_LOG_BODY_LENGTH] + "... (truncated)"

    return text


def build_basic_auth_header(username: str, application_password: str) -> str:
    """Build the Basic Authorization header value.

    Application passwords are displayed with spaces for readability; WordPress
    expects them without.
    """
    if not username or not application_password:
        raise WordPressConfigurationError(
            "WordPressの認証情報が設定されていません。ユーザー名とアプリケーションパスワードを設定してください。"
        )
    password = re.sub(r"\s", "", application_password)
    credentials = f"{username}:{password}"
    return f"Basic {base64.b64encode(credentials.encode('utf-8')).decode('utf-8')}"


@dataclass
class WordPressHttpClient:
    wordpress_url: str
    username: str
    application_password: str
    timeout: int = _DEFAULT_TIMEOUT
    session: Session | None = None

    def __post_init__(self) -> None:
        self._session = self.session or requests.Session()

        if not self.wordpress_url or not self.wordpress_url.strip():
            raise WordPressConfigurationError("WordPressサイトURLが空です。Difyのプロバイダー設定でWordPressサイトURLを確認してください。")

        # 認証ヘッダーはクライアント生成時に一度だけ組み立てる
        self._auth_header = build_basic_auth_header(self.username, self.application_password)

        self.base_url = self.wordpress_url.strip().rstrip("/")
        if not self.base_url.endswith(API_ROOT):
            self.base_url = f"{self.base_url}{API_ROOT}"

        logger.debug("WordPressHttpClient initialized with base_url: %s", self.base_url)

    @classmethod
    def from_context(cls, context: Any, session: Session | None = None) -> "WordPressHttpClient":
        return cls(
            wordpress_url=getattr(context, "wordpress_url", "") or "",
            username=getattr(context, "username", "") or "",
            application_password=getattr(context, "application_password", "") or "",
            session=session,
        )

    # ---- Posts ---------------------------------------------------------------

    def get_posts(self, params: dict[str, Any] | None = None) -> Any:
        """Get posts from WordPress."""
        response = self._request(method="GET", path="/posts", params=params or {})
        return self._parse_json_response(response)

    def get_post(self, post_id: int) -> dict[str, Any]:
        """Get a single post by ID from WordPress."""
        response = self._request(method="GET", path=f"/posts/{post_id}")
        return self._parse_json_response(response)

    def create_post(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create a new post in WordPress."""
        response = self._request(method="POST", path="/posts", json=data)
        return self._parse_json_response(response)

    def update_post(self, post_id: int, data: dict[str, Any]) -> dict[str, Any]:
        """Update an existing post in WordPress."""
        response = self._request(
            method="POST",  # WordPress REST API uses POST for updates
            path=f"/posts/{post_id}",
            json=data,
        )
        return self._parse_json_response(response)

    def delete_post(self, post_id: int, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Trash a post, or delete it permanently when params carries force=true."""
        response = self._request(method="DELETE", path=f"/posts/{post_id}", params=params or {})
        return self._parse_json_response(response, empty_ok=True)

    # ---- Taxonomies ----------------------------------------------------------

    def get_categories(self, params: dict[str, Any] | None = None) -> Any:
        """Get categories from WordPress."""
        response = self._request(method="GET", path="/categories", params=params or {})
        return self._parse_json_response(response)

    def get_tags(self, params: dict[str, Any] | None = None) -> Any:
        """Get tags from WordPress."""
        response = self._request(method="GET", path="/tags", params=params or {})
        return self._parse_json_response(response)

    # ---- Media ---------------------------------------------------------------

    def upload_media(self, content: bytes, headers: dict[str, str]) -> dict[str, Any]:
        """Upload raw file bytes; headers carry Content-Type and Content-Disposition."""
        response = self._request(method="POST", path="/media", data=content, headers=dict(headers))
        return self._parse_json_response(response)

    def update_media(self, media_id: int, data: dict[str, Any]) -> dict[str, Any]:
        """Update an existing media in WordPress."""
        response = self._request(
            method="POST",  # WordPress REST API uses POST for updates
            path=f"/media/{media_id}",
            json=data,
        )
        return self._parse_json_response(response)

    # ---- Low-level helpers -------------------------------------------------

    def _request(self, method: str, path: str, **kwargs: Any) -> Response:
        url = f"{self.base_url}{path}"
        headers = kwargs.pop("headers", {}) or {}
        headers.setdefault("Authorization", self._auth_header)

        if "json" in kwargs:
            headers.setdefault("Content-Type", "application/json")

        logger.info("Request: %s %s", method, url)
        logger.debug(
            "Request headers: %s",
            {key: _sanitize_for_log(value) if key.lower() == "authorization" else value for key, value in headers.items()},
        )

        try:
            response = self._session.request(
                method=method,
                url=url,
                headers=headers,
                timeout=self.timeout,
                **kwargs,
            )
        except (requests.RequestException, UnicodeError) as exc:
            # UnicodeError: ヘッダー値が latin-1 で表せない場合
            sanitized_exc = _sanitize_for_log(str(exc))
            raise WordPressHttpError(None, f"WordPress APIリクエストに失敗しました: {sanitized_exc}") from exc

        if not 200 <= response.status_code < 300:
            message = self._extract_error_message(response)
            sanitized_body = _sanitize_for_log(response.text)
            logger.error(
                "WordPress API error (status=%s): %s, body=%s",
                response.status_code,
                message,
                sanitized_body,
            )
            raise WordPressHttpError(response.status_code, message, body=response.text)

        return response

    def _parse_json_response(self, response: Response, empty_ok: bool = False) -> Any:
        """Parse JSON response with better error handling."""
        content_type = response.headers.get("Content-Type", "").lower()
        response_text = response.text or ""

        if not response_text.strip():
            # 削除APIは空のボディで成功を返すことがある
            if empty_ok:
                return {"deleted": True}
            logger.error("Empty response body: status=%s, content_type=%s", response.status_code, content_type)
            raise WordPressHttpError(response.status_code, "WordPress APIが空のレスポンスを返しました。", body="")

        # HTMLレスポンスの場合（REST API無効化・ログインページへのリダイレクトなど）
        if "text/html" in content_type:
            lowered = response_text.lower()
            error_hint = "WordPress APIがHTMLレスポンスを返しました。"
            if "login" in lowered:
                error_hint += " 認証エラーの可能性があります。ユーザー名とアプリケーションパスワードを確認してください。"
            else:
                error_hint += " REST APIが有効でない可能性があります。WordPressサイトURLと設定を確認してください。"

            logger.error(
                "Unexpected HTML response: status=%s, url=%s, response_preview=%s",
                response.status_code,
                response.url,
                _sanitize_for_log(response_text[:500]),
            )
            raise WordPressHttpError(
                response.status_code,
                f"{error_hint} リクエストURL: {response.url}",
                body=response_text,
            )

        try:
            return response.json()
        except ValueError as exc:
            response_preview = response_text[:500]
            logger.error(
                "Invalid JSON response: status=%s, content_type=%s, response_preview=%s",
                response.status_code,
                content_type,
                _sanitize_for_log(response_preview),
            )
            raise WordPressHttpError(
                response.status_code,
                f"WordPress APIのレスポンスをJSONとして解析できませんでした。レスポンス: {_sanitize_for_log(response_preview)}",
                body=response_text,
            ) from exc

    @staticmethod
    def _extract_error_message(response: Response) -> str:
        """Build "WordPress APIエラー: <status> <reason> - <detail>" from an error response."""
        prefix = f"WordPress APIエラー: {response.status_code} {response.reason or ''}".rstrip()
        text = response.text or ""

        try:
            data = json.loads(text)
        except ValueError:
            data = None

        if isinstance(data, dict):
            message = data.get("message")
            if isinstance(message, str) and message:
                code = data.get("code")
                if code:
                    return f"{prefix} - [{code}] {message}"
                return f"{prefix} - {message}"

        # JSONでない、あるいはmessageが無い場合はレスポンス本文をそのまま使う
        return f"{prefix} - {text}"
