# where: wordpress/tools/get_post.py
# what: Implements the get post tool via WordPress REST API.
# why: Allow Dify agents to read one post with its rendered content.

from __future__ import annotations

import logging
from typing import Any

from . import base
from . import normalizers
from . import validators
from .operations import WordPressOperation

logger = logging.getLogger(__name__)


class GetPostTool(base.BaseWordPressTool):
    operation = WordPressOperation.GET_POST.value
    action = "WordPress投稿取得"

    def _run(self, client, context, tool_parameters: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        post_id = validators.validate_post_id(tool_parameters.get("post_id"))

        logger.debug("Fetching post details for post_id: %d", post_id)
        post = normalizers.post_details(client.get_post(post_id))
        logger.info("Retrieved post details for post_id: %d", post_id)

        return f"WordPressから投稿の詳細を取得しました: {post['title'] or 'タイトルなし'}", post
