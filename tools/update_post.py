# where: wordpress/tools/update_post.py
# what: Implements the update post tool via WordPress REST API.
# why: Allow Dify agents to change only the fields they name on an existing post.

from __future__ import annotations

import logging
from typing import Any

from . import base
from . import normalizers
from . import payloads
from . import validators
from .operations import WordPressOperation

logger = logging.getLogger(__name__)


class UpdatePostTool(base.BaseWordPressTool):
    operation = WordPressOperation.UPDATE_POST.value
    action = "WordPress投稿更新"

    def _run(self, client, context, tool_parameters: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        post_id = validators.validate_post_id(tool_parameters.get("post_id"))
        data = payloads.build_update_post_body(tool_parameters)

        if not data:
            logger.warning("Updating post ID %s with no fields; WordPress will return it unchanged", post_id)

        logger.debug("Updating post ID: %s with data keys: %s", post_id, list(data.keys()))
        result = normalizers.post_write_result(client.update_post(post_id=post_id, data=data), normalizers.POST_UPDATED_MESSAGE)

        logger.info("Updated WordPress post (ID: %s)", result["id"])

        result_text = f"WordPressの投稿を更新しました (ID: {result['id']})"
        if result["link"]:
            result_text += f"\nURL: {result['link']}"
        return result_text, result
