# where: wordpress/provider/provider.py
# what: Validates WordPress credentials and default taxonomy settings entered in the Dify console.
# why: Prevents misconfigured plugins from attempting to call WordPress REST API with bad credentials.

from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import urlparse

from dify_plugin import ToolProvider
from dify_plugin.errors.tool import ToolProviderCredentialValidationError

from tools.base import DEFAULT_CATEGORY_IDS, DEFAULT_TAG_IDS, parse_default_ids
from tools.errors import WordPressConfigurationError

logger = logging.getLogger(__name__)

# WordPressのアプリケーションパスワードは空白を除いて24文字
_MIN_APPLICATION_PASSWORD_LENGTH = 20


class WordPressProvider(ToolProvider):
    def _validate_credentials(self, credentials: dict[str, Any]) -> None:
        """Validate WordPress credentials supplied from the Dify console."""

        wordpress_url = (credentials.get("wordpress_url") or "").strip()
        username = (credentials.get("username") or "").strip()
        application_password = "".join((credentials.get("application_password") or "").split())

        if not wordpress_url:
            raise ToolProviderCredentialValidationError("WordPressサイトURLを入力してください")

        parsed = urlparse(wordpress_url)
        if parsed.scheme not in ("http", "https"):
            raise ToolProviderCredentialValidationError("WordPressサイトURLはhttp://またはhttps://で始まる必要があります")
        if not parsed.netloc:
            raise ToolProviderCredentialValidationError("WordPressサイトURLが不正です")

        if parsed.scheme == "http":
            logger.warning("WordPress site URL uses plain HTTP; Basic credentials will be sent unencrypted")

        if not username:
            raise ToolProviderCredentialValidationError("WordPressユーザー名を入力してください")
        if not re.match(r'^[a-zA-Z0-9._@-]+$', username):
            logger.warning("WordPress username contains unusual characters")

        if not application_password:
            raise ToolProviderCredentialValidationError("アプリケーションパスワードを入力してください")
        if len(application_password) < _MIN_APPLICATION_PASSWORD_LENGTH:
            raise ToolProviderCredentialValidationError("アプリケーションパスワードが短すぎます。WordPress管理画面から正しい値をコピーしてください")

        try:
            parse_default_ids(credentials.get("default_category_ids"), DEFAULT_CATEGORY_IDS)
            parse_default_ids(credentials.get("default_tag_ids"), DEFAULT_TAG_IDS)
        except WordPressConfigurationError as exc:
            raise ToolProviderCredentialValidationError(str(exc)) from exc

        logger.info("WordPress credentials passed basic validation checks")
