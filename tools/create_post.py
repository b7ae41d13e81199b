# where: wordpress/tools/create_post.py
# what: Implements the create post tool via WordPress REST API.
# why: Allow Dify agents to draft WordPress posts with the site's default taxonomy.

from __future__ import annotations

import logging
from typing import Any

from . import base
from . import normalizers
from . import payloads
from .operations import WordPressOperation

logger = logging.getLogger(__name__)


class CreatePostTool(base.BaseWordPressTool):
    operation = WordPressOperation.CREATE_POST.value
    action = "WordPress投稿作成"

    def _run(self, client, context, tool_parameters: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        data = payloads.build_create_post_body(
            tool_parameters,
            default_category_ids=context.default_category_ids,
            default_tag_ids=context.default_tag_ids,
        )

        logger.debug("Creating post with data keys: %s", list(data.keys()))
        result = normalizers.post_write_result(client.create_post(data), normalizers.POST_CREATED_MESSAGE)

        logger.info("Created WordPress post (ID: %s, status: %s)", result["id"], result["status"])

        result_text = f"WordPressに投稿を作成しました (ID: {result['id']}, ステータス: {result['status']})"
        if result["link"]:
            result_text += f"\nURL: {result['link']}"
        return result_text, result
