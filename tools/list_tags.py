# where: wordpress/tools/list_tags.py
# what: Implements the list tags tool via WordPress REST API.
# why: Agents need tag IDs before creating or filtering posts.

from __future__ import annotations

import logging
from typing import Any

from . import base
from . import normalizers
from . import payloads
from .operations import WordPressOperation

logger = logging.getLogger(__name__)


class ListTagsTool(base.BaseWordPressTool):
    operation = WordPressOperation.LIST_TAGS.value
    action = "WordPressタグ取得"

    def _run(self, client, context, tool_parameters: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        params = payloads.build_term_list_params(tool_parameters)

        logger.debug("Fetching tags with params: %s", {k: v for k, v in params.items() if k != "search"})
        tags = [normalizers.summarize_tag(tag) for tag in normalizers.as_list(client.get_tags(params=params))]

        logger.info("Retrieved %d tags from WordPress", len(tags))

        result_text = f"WordPressから{len(tags)}件のタグを取得しました"
        if not tags:
            result_text = "WordPressからタグが見つかりませんでした"

        return result_text, {"total": len(tags), "tags": tags}
