# where: wordpress/tools/file_utils.py
# what: Turns a local path or a Dify file input into a readable local file for media uploads.
# why: The upload tool sends raw bytes, so every input has to end up as a file on disk.

from __future__ import annotations

import base64
import binascii
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import requests

logger = logging.getLogger(__name__)

_DOWNLOAD_TIMEOUT = 30
_CHUNK_SIZE = 512 * 1024
_MAX_DOWNLOAD_SIZE = 50 * 1024 * 1024  # WordPressの一般的なアップロード上限に合わせる


class ResolvedFile:
    __slots__ = ("path", "filename", "cleanup")

    def __init__(self, path: str, filename: str, cleanup: bool) -> None:
        self.path = path
        self.filename = filename
        self.cleanup = cleanup

    def read_bytes(self) -> bytes:
        with open(self.path, "rb") as fp:
            return fp.read()


def resolve_upload_source(file_path: Any = None, file_param: Any = None) -> ResolvedFile:
    """Resolve ``file_path`` (preferred) or a Dify ``file`` parameter."""
    if isinstance(file_path, str) and file_path.strip():
        return _resolve_local(file_path)
    if file_param:
        return _resolve_file_param(file_param)
    raise ValueError("file_path を指定してください")


def cleanup_file(file: ResolvedFile | None) -> None:
    if file is None or not file.cleanup:
        return
    try:
        Path(file.path).unlink(missing_ok=True)
    except OSError:  # pragma: no cover - best effort cleanup
        logger.warning("Failed to remove temporary upload file: %s", file.path)


def _resolve_local(value: str) -> ResolvedFile:
    expanded = os.path.expanduser(value.strip())
    if not os.path.isfile(expanded):
        raise FileNotFoundError(f"File not found: {value}")
    return ResolvedFile(expanded, os.path.basename(expanded), cleanup=False)


def _resolve_file_param(file_info: Any) -> ResolvedFile:
    if isinstance(file_info, (str, os.PathLike)):
        return _resolve_local(os.fspath(file_info))

    meta = _serialize_file_info(file_info)
    filename = str(meta.get("filename") or meta.get("name") or "upload")

    explicit_path = meta.get("path")
    if explicit_path:
        resolved = _resolve_local(str(explicit_path))
        return ResolvedFile(resolved.path, filename if meta.get("filename") else resolved.filename, cleanup=False)

    content = meta.get("content") or meta.get("data")
    if content:
        return _write_temp(_coerce_bytes(content), filename)

    url = meta.get("url")
    if url:
        return _download(str(url), filename)

    raise ValueError("ファイル情報に path/url/content のいずれも含まれていません")


def _serialize_file_info(file_info: Any) -> dict[str, Any]:
    if isinstance(file_info, dict):
        return dict(file_info)

    exportable: dict[str, Any] = {}
    for attr in ("path", "url", "content", "data", "filename", "name"):
        value = getattr(file_info, attr, None)
        if value is not None:
            exportable[attr] = value

    if not exportable:
        raise ValueError("ファイルパラメータの構造を解釈できません")
    return exportable


def _coerce_bytes(value: Any) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        try:
            return base64.b64decode(stripped, validate=True)
        except (binascii.Error, ValueError):
            return stripped.encode("utf-8")
    raise ValueError("content/data には bytes か base64文字列を指定してください")


def _write_temp(payload: bytes, filename: str) -> ResolvedFile:
    handle, temp_path = tempfile.mkstemp(suffix=Path(filename).suffix)
    with os.fdopen(handle, "wb") as fp:
        fp.write(payload)
    return ResolvedFile(temp_path, filename, cleanup=True)


def _download(url: str, filename: str) -> ResolvedFile:
    normalized = url.strip()
    if not normalized.startswith(("http://", "https://")):
        raise ValueError(f"ファイルURLが不正です: {url}")

    response = requests.get(normalized, stream=True, timeout=_DOWNLOAD_TIMEOUT)
    response.raise_for_status()

    handle, temp_path = tempfile.mkstemp(suffix=Path(filename).suffix)
    downloaded_size = 0
    try:
        with os.fdopen(handle, "wb") as fp:
            for chunk in response.iter_content(_CHUNK_SIZE):
                if not chunk:
                    continue
                downloaded_size += len(chunk)
                if downloaded_size > _MAX_DOWNLOAD_SIZE:
                    raise ValueError(f"ファイルサイズが大きすぎます。最大 {_MAX_DOWNLOAD_SIZE // (1024 * 1024)}MB まで対応しています")
                fp.write(chunk)
    except Exception:
        Path(temp_path).unlink(missing_ok=True)
        raise

    return ResolvedFile(temp_path, filename, cleanup=True)
