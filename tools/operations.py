# where: wordpress/tools/operations.py
# what: The closed set of WordPress tool names exposed by this plugin.
# why: Tool classes, YAML declarations and the registry must agree on one spelling.

from __future__ import annotations

from enum import Enum

from .errors import UnknownOperationError


class WordPressOperation(str, Enum):
    LIST_POSTS = "wordpress_list_posts"
    GET_POST = "wordpress_get_post"
    CREATE_POST = "wordpress_create_post"
    UPDATE_POST = "wordpress_update_post"
    DELETE_POST = "wordpress_delete_post"
    LIST_CATEGORIES = "wordpress_list_categories"
    LIST_TAGS = "wordpress_list_tags"
    UPLOAD_MEDIA = "wordpress_upload_media"

    @classmethod
    def from_name(cls, name: str) -> "WordPressOperation":
        try:
            return cls(name)
        except ValueError as exc:
            raise UnknownOperationError(name) from exc
