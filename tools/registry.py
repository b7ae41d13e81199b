# where: wordpress/tools/registry.py
# what: Maps every supported tool name to its tool class.
# why: One closed table of operations; anything outside it is rejected rather than guessed.

"""
Dify dispatches each tool through the `extra.python.source` entry of its YAML
declaration, so nothing at runtime looks names up here. This table is the
Python-side list of the same tools; tests/test_registry.py checks that it and
the YAML declarations under provider/ and tools/ stay in step.
"""

from __future__ import annotations

from .base import BaseWordPressTool
from .create_post import CreatePostTool
from .delete_post import DeletePostTool
from .get_post import GetPostTool
from .list_categories import ListCategoriesTool
from .list_posts import ListPostsTool
from .list_tags import ListTagsTool
from .operations import WordPressOperation
from .update_post import UpdatePostTool
from .upload_media import UploadMediaTool

TOOL_CLASSES: dict[WordPressOperation, type[BaseWordPressTool]] = {
    WordPressOperation.LIST_POSTS: ListPostsTool,
    WordPressOperation.GET_POST: GetPostTool,
    WordPressOperation.CREATE_POST: CreatePostTool,
    WordPressOperation.UPDATE_POST: UpdatePostTool,
    WordPressOperation.DELETE_POST: DeletePostTool,
    WordPressOperation.LIST_CATEGORIES: ListCategoriesTool,
    WordPressOperation.LIST_TAGS: ListTagsTool,
    WordPressOperation.UPLOAD_MEDIA: UploadMediaTool,
}


def resolve_tool_class(name: str) -> type[BaseWordPressTool]:
    """Return the tool class for ``name`` or raise UnknownOperationError."""
    return TOOL_CLASSES[WordPressOperation.from_name(name)]
