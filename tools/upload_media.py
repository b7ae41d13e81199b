# where: wordpress/tools/upload_media.py
# what: Implements the upload media tool via WordPress REST API.
# why: Allow Dify agents to upload images and files, e.g. for use as featured_media.

from __future__ import annotations

import logging
from typing import Any

from . import base
from . import normalizers
from . import payloads
from .errors import WordPressHttpError
from .file_utils import ResolvedFile, cleanup_file, resolve_upload_source
from .operations import WordPressOperation

logger = logging.getLogger(__name__)


class UploadMediaTool(base.BaseWordPressTool):
    operation = WordPressOperation.UPLOAD_MEDIA.value
    action = "WordPressメディアアップロード"

    def _run(self, client, context, tool_parameters: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        resolved_file: ResolvedFile | None = None
        try:
            resolved_file = resolve_upload_source(tool_parameters.get("file_path"), tool_parameters.get("file"))
            headers = payloads.build_upload_headers(resolved_file.filename)

            # ファイルはメモリに全て読み込んでから送信する
            content = resolved_file.read_bytes()
            logger.debug("Uploading media file: %s (%s, %d bytes)", resolved_file.filename, headers["Content-Type"], len(content))
            media = client.upload_media(content=content, headers=headers)
        finally:
            cleanup_file(resolved_file)

        media_id = media.get("id")
        logger.info("Uploaded WordPress media (ID: %s, URL: %s)", media_id, media.get("source_url"))

        # メタデータの設定はアップロードとは別リクエスト。失敗してもアップロード済みのメディアは残る
        metadata = payloads.build_media_update_body(tool_parameters)
        if metadata:
            logger.debug("Updating media ID: %s with data keys: %s", media_id, list(metadata.keys()))
            try:
                media = client.update_media(media_id=media_id, data=metadata)
            except WordPressHttpError as exc:
                raise WordPressHttpError(
                    exc.status_code,
                    f"メディアはアップロードされました (ID: {media_id}) が、メタデータの更新に失敗しました: {exc}",
                    body=exc.body,
                ) from exc

        result = normalizers.media_result(media)

        result_text = f"WordPressにメディアをアップロードしました (ID: {result['id']})"
        if result["source_url"]:
            result_text += f"\nURL: {result['source_url']}"
        return result_text, result
