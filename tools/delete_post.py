# where: wordpress/tools/delete_post.py
# what: Implements the delete post tool via WordPress REST API.
# why: Allow Dify agents to trash or permanently delete WordPress posts.

from __future__ import annotations

import logging
from typing import Any

from . import base
from . import normalizers
from . import payloads
from . import validators
from .operations import WordPressOperation

logger = logging.getLogger(__name__)


class DeletePostTool(base.BaseWordPressTool):
    operation = WordPressOperation.DELETE_POST.value
    action = "WordPress投稿削除"

    def _run(self, client, context, tool_parameters: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        post_id = validators.validate_post_id(tool_parameters.get("post_id"))
        params = payloads.build_delete_params(tool_parameters.get("force", False))
        force = bool(params)

        logger.debug("Deleting post ID: %s (force: %s)", post_id, force)
        client.delete_post(post_id=post_id, params=params)

        if force:
            logger.info("Deleted WordPress post (ID: %s)", post_id)
            result_text = f"WordPressの投稿を完全に削除しました (ID: {post_id})"
        else:
            logger.info("Moved WordPress post to trash (ID: %s)", post_id)
            result_text = f"WordPressの投稿をゴミ箱に移動しました (ID: {post_id})"

        return result_text, normalizers.deletion_result(post_id, force)
