# where: wordpress/tools/normalizers.py
# what: Projects WordPress REST API payloads onto the small result objects the tools return.
# why: Raw WordPress objects are large and nest plain text inside "rendered" wrappers.

from __future__ import annotations

from typing import Any

POST_CREATED_MESSAGE = "Post created successfully"
POST_UPDATED_MESSAGE = "Post updated successfully"
POST_TRASHED_MESSAGE = "Post moved to trash"
POST_DELETED_MESSAGE = "Post permanently deleted"
MEDIA_UPLOADED_MESSAGE = "Media uploaded successfully. Use this ID as featured_media when creating/updating posts."


def rendered_text(value: Any) -> Any:
    """Return the "rendered" form of a WordPress field, or the value itself."""
    if isinstance(value, dict) and "rendered" in value:
        return value["rendered"]
    return value


def summarize_post(post: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": post.get("id"),
        "title": rendered_text(post.get("title")),
        "slug": post.get("slug"),
        "status": post.get("status"),
        "date": post.get("date"),
        "modified": post.get("modified"),
        "categories": post.get("categories"),
        "tags": post.get("tags"),
        "link": post.get("link"),
        "featured_media": post.get("featured_media"),
    }


def post_details(post: dict[str, Any]) -> dict[str, Any]:
    details = summarize_post(post)
    details["content"] = rendered_text(post.get("content"))
    details["excerpt"] = rendered_text(post.get("excerpt"))
    details["meta"] = post.get("meta")
    return details


def post_write_result(post: dict[str, Any], message: str) -> dict[str, Any]:
    """Result for create and update: the post summary plus a confirmation."""
    return {
        "id": post.get("id"),
        "title": rendered_text(post.get("title")),
        "slug": post.get("slug"),
        "status": post.get("status"),
        "link": post.get("link"),
        "categories": post.get("categories"),
        "tags": post.get("tags"),
        "message": message,
    }


def deletion_result(post_id: int, force: bool) -> dict[str, Any]:
    return {
        "post_id": post_id,
        "deleted": True,
        "message": POST_DELETED_MESSAGE if force else POST_TRASHED_MESSAGE,
    }


def summarize_category(category: dict[str, Any]) -> dict[str, Any]:
    summary = summarize_tag(category)
    summary["parent"] = category.get("parent")
    return summary


def summarize_tag(tag: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": tag.get("id"),
        "name": tag.get("name"),
        "slug": tag.get("slug"),
        "description": tag.get("description"),
        "count": tag.get("count"),
    }


def media_result(media: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": media.get("id"),
        "title": rendered_text(media.get("title")),
        "source_url": media.get("source_url"),
        "mime_type": media.get("mime_type"),
        "message": MEDIA_UPLOADED_MESSAGE,
    }


def as_list(payload: Any) -> list[dict[str, Any]]:
    """Collection endpoints return arrays; anything else is treated as empty."""
    if isinstance(payload, list):
        return [item for item in payload if isinstance(item, dict)]
    return []
