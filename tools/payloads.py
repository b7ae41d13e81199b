# where: wordpress/tools/payloads.py
# what: Builds query parameters, JSON bodies and upload headers for WordPress REST API calls.
# why: Keeps defaulting and include-only-if-present rules in one place, away from the HTTP plumbing.

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping
from urllib.parse import quote

from . import validators

DEFAULT_POSTS_PER_PAGE = 10
DEFAULT_TERMS_PER_PAGE = 100
DEFAULT_POST_STATUS = "draft"

MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
    ".pdf": "application/pdf",
    ".mp4": "video/mp4",
    ".webm": "video/webm",
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
}
FALLBACK_MIME_TYPE = "application/octet-stream"


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def is_present(parameters: Mapping[str, Any], key: str) -> bool:
    """A parameter counts as supplied when its key exists and it is not None."""
    return parameters.get(key) is not None


def is_filled(parameters: Mapping[str, Any], key: str) -> bool:
    """Like is_present, but a blank string from an empty form field also counts as absent."""
    value = parameters.get(key)
    if isinstance(value, str):
        return bool(value.strip())
    return value is not None


# ---- Posts -------------------------------------------------------------------


def build_post_list_params(parameters: Mapping[str, Any]) -> dict[str, Any]:
    params: dict[str, Any] = {}

    if is_filled(parameters, "status"):
        params["status"] = parameters["status"]
    if is_filled(parameters, "categories"):
        params["categories"] = _join_ids(parameters["categories"], "categories")
    if is_filled(parameters, "tags"):
        params["tags"] = _join_ids(parameters["tags"], "tags")

    params["per_page"] = _per_page(parameters, DEFAULT_POSTS_PER_PAGE)

    if is_filled(parameters, "page"):
        params["page"] = validators.to_int(parameters["page"], "page")
    for key in ("search", "orderby", "order"):
        if is_filled(parameters, key):
            params[key] = parameters[key]

    return params


@dataclass(frozen=True)
class PostFields:
    """Writable post fields; MISSING means the caller did not supply the field."""

    title: Any = MISSING
    content: Any = MISSING
    status: Any = MISSING
    categories: Any = MISSING
    tags: Any = MISSING
    slug: Any = MISSING
    excerpt: Any = MISSING
    featured_media: Any = MISSING
    meta: Any = MISSING

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, Any], *, blank_is_missing: bool = False) -> "PostFields":
        supplied = is_filled if blank_is_missing else is_present
        values: dict[str, Any] = {}
        for field in fields(cls):
            if not supplied(parameters, field.name):
                continue
            value = parameters[field.name]
            if field.name in ("categories", "tags"):
                value = validators.normalize_id_list(value, field.name)
            elif field.name == "featured_media":
                value = validators.to_int(value, field.name)
            elif field.name == "meta":
                value = validators.parse_meta(value)
            values[field.name] = value
        return cls(**values)

    def to_body(self) -> dict[str, Any]:
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not MISSING
        }


def build_create_post_body(
    parameters: Mapping[str, Any],
    default_category_ids: tuple[int, ...],
    default_tag_ids: tuple[int, ...],
) -> dict[str, Any]:
    validators.require_text(parameters.get("title"), "title")
    validators.require_text(parameters.get("content"), "content")

    # 新規作成では空欄のフォーム項目を未指定として扱い、既定値を使う
    post = PostFields.from_parameters(parameters, blank_is_missing=True)
    body: dict[str, Any] = {
        "title": post.title,
        "content": post.content,
        "status": post.status if post.status is not MISSING else DEFAULT_POST_STATUS,
        "categories": post.categories if post.categories is not MISSING else list(default_category_ids),
        "tags": post.tags if post.tags is not MISSING else list(default_tag_ids),
    }

    # それ以外の項目は指定されたものだけ送る（WordPress側のデフォルトに任せる）
    for key, value in post.to_body().items():
        body.setdefault(key, value)
    return body


def build_update_post_body(parameters: Mapping[str, Any]) -> dict[str, Any]:
    return PostFields.from_parameters(parameters).to_body()


def build_delete_params(force: Any) -> dict[str, str]:
    return {"force": "true"} if validators.to_bool(force) else {}


# ---- Categories / Tags -------------------------------------------------------


def build_term_list_params(parameters: Mapping[str, Any]) -> dict[str, Any]:
    params: dict[str, Any] = {"per_page": _per_page(parameters, DEFAULT_TERMS_PER_PAGE)}

    if is_filled(parameters, "page"):
        params["page"] = validators.to_int(parameters["page"], "page")
    if is_filled(parameters, "search"):
        params["search"] = parameters["search"]
    if is_filled(parameters, "hide_empty"):
        params["hide_empty"] = "true" if validators.to_bool(parameters["hide_empty"]) else "false"

    return params


# ---- Media -------------------------------------------------------------------


def guess_mime_type(filename: str) -> str:
    return MIME_TYPES.get(Path(filename).suffix.lower(), FALLBACK_MIME_TYPE)


def build_upload_headers(filename: str) -> dict[str, str]:
    return {
        "Content-Type": guess_mime_type(filename),
        "Content-Disposition": content_disposition(filename),
    }


def content_disposition(filename: str) -> str:
    """Header value that stays latin-1 encodable whatever the file name is (RFC 6266 / RFC 5987)."""
    if filename.isascii() and not any(char in filename for char in '"\\'):
        return f'attachment; filename="{filename}"'

    # 非ASCII名は ASCII 代替名と UTF-8 の filename* を併記する
    path = Path(filename)
    stem, suffix = _ascii_only(path.stem), _ascii_only(path.suffix)
    if not stem.strip(" ._"):
        stem = "upload"
    fallback = (stem + suffix).replace("\\", "_").replace('"', '\\"')
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def _ascii_only(text: str) -> str:
    return unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")


def build_media_update_body(parameters: Mapping[str, Any]) -> dict[str, Any]:
    """Metadata applied after upload; empty strings are treated as not supplied."""
    return {key: parameters[key] for key in ("title", "alt_text", "caption") if parameters.get(key)}


def _per_page(parameters: Mapping[str, Any], default: int) -> int:
    if not is_filled(parameters, "per_page"):
        return default
    return validators.to_int(parameters["per_page"], "per_page")


def _join_ids(value: Any, field: str) -> str:
    return ",".join(str(item) for item in validators.normalize_id_list(value, field))
