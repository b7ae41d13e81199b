# where: wordpress/tools/list_posts.py
# what: Implements the list posts tool via WordPress REST API.
# why: Allow Dify agents to browse WordPress posts with optional filters.

from __future__ import annotations

import logging
from typing import Any

from . import base
from . import normalizers
from . import payloads
from .operations import WordPressOperation

logger = logging.getLogger(__name__)


class ListPostsTool(base.BaseWordPressTool):
    operation = WordPressOperation.LIST_POSTS.value
    action = "WordPress投稿一覧取得"

    def _run(self, client, context, tool_parameters: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        params = payloads.build_post_list_params(tool_parameters)

        # 検索語はログに残さない
        logger.debug("Fetching posts with params: %s", {k: v for k, v in params.items() if k != "search"})
        posts = [normalizers.summarize_post(post) for post in normalizers.as_list(client.get_posts(params=params))]

        logger.info("Retrieved %d posts from WordPress", len(posts))

        result_text = f"WordPressから{len(posts)}件の投稿を取得しました"
        if not posts:
            result_text = "WordPressから投稿が見つかりませんでした"

        return result_text, {"total": len(posts), "posts": posts}
