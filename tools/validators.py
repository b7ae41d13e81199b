# where: wordpress/tools/validators.py
# what: Coercion helpers for WordPress tool parameters.
# why: Dify tool forms deliver strings, the REST API expects ints, bools and lists.

from __future__ import annotations

import json
from typing import Any

_TRUE_STRINGS = {"true", "1", "yes"}


def require_text(value: Any, field: str) -> str:
    """Return a non-empty string parameter or raise ValueError."""
    if value is None:
        raise ValueError(f"{field} を指定してください")
    if not isinstance(value, str):
        raise ValueError(f"{field} は文字列である必要があります")
    if not value.strip():
        raise ValueError(f"{field} が空です")
    return value


def validate_post_id(post_id: Any) -> int:
    """Validate and convert post ID to integer."""
    return _require_int(post_id, "投稿ID")


def _require_int(value: Any, label: str) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{label}を指定してください")
    return to_int(value, label)


def to_int(value: Any, field: str) -> int:
    """Coerce an optional numeric parameter that is known to be present."""
    # bool は int のサブクラス、小数は int() で黙って切り捨てられるので拒否する
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"{field} は整数である必要があります: {value}")
    try:
        return int(value)
    except (ValueError, TypeError) as exc:
        raise ValueError(f"{field} は整数である必要があります: {value}") from exc


def to_bool(value: Any) -> bool:
    """Normalize boolean-ish tool parameters."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def normalize_id_list(value: Any, field: str) -> list[int]:
    """Normalize taxonomy IDs given as a list, a single int, or "1, 2, 3".

    Order is preserved and nothing is dropped; the REST API decides whether an
    ID is acceptable.
    """
    if isinstance(value, bool):
        raise ValueError(f"{field} の形式が不正です: {value}")

    if isinstance(value, int):
        return [value]

    if isinstance(value, str):
        items: list[Any] = [part.strip() for part in value.split(",") if part.strip()]
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        raise ValueError(f"{field} の形式が不正です: {value}")

    ids: list[int] = []
    for item in items:
        ids.append(to_int(item, field))
    return ids


def parse_meta(value: Any) -> dict[str, Any]:
    """Accept post meta as a mapping or as a JSON object string."""
    if isinstance(value, dict):
        return value

    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as exc:
            raise ValueError(f"meta はJSONオブジェクトである必要があります: {exc}") from exc
        if isinstance(parsed, dict):
            return parsed

    raise ValueError("meta はJSONオブジェクトである必要があります")
