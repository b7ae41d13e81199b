# where: wordpress/tools/list_categories.py
# what: Implements the list categories tool via WordPress REST API.
# why: Agents need category IDs before creating or filtering posts.

from __future__ import annotations

import logging
from typing import Any

from . import base
from . import normalizers
from . import payloads
from .operations import WordPressOperation

logger = logging.getLogger(__name__)


class ListCategoriesTool(base.BaseWordPressTool):
    operation = WordPressOperation.LIST_CATEGORIES.value
    action = "WordPressカテゴリー取得"

    def _run(self, client, context, tool_parameters: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        params = payloads.build_term_list_params(tool_parameters)

        logger.debug("Fetching categories with params: %s", {k: v for k, v in params.items() if k != "search"})
        response = client.get_categories(params=params)
        categories = [normalizers.summarize_category(category) for category in normalizers.as_list(response)]

        logger.info("Retrieved %d categories from WordPress", len(categories))

        result_text = f"WordPressから{len(categories)}件のカテゴリーを取得しました"
        if not categories:
            result_text = "WordPressからカテゴリーが見つかりませんでした"

        return result_text, {"total": len(categories), "categories": categories}
