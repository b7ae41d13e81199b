"""
Tests for response normalization.
"""

from tools import normalizers

RAW_POST = {
    "id": 17,
    "date": "2026-01-02T10:00:00",
    "modified": "2026-01-03T11:00:00",
    "slug": "hello",
    "status": "publish",
    "link": "https://blog.example.com/hello/",
    "title": {"rendered": "Hello &amp; welcome"},
    "content": {"rendered": "<p>Body</p>", "protected": False},
    "excerpt": {"rendered": "<p>Short</p>", "protected": False},
    "author": 1,
    "featured_media": 0,
    "categories": [292],
    "tags": [294, 295],
    "meta": {"footnotes": ""},
    "_links": {"self": []},
}


def test_rendered_text_flattens_wrapper():
    assert normalizers.rendered_text({"rendered": "Hi", "raw": "Hi"}) == "Hi"


def test_rendered_text_passes_plain_values_through():
    assert normalizers.rendered_text("plain") == "plain"
    assert normalizers.rendered_text(None) is None
    assert normalizers.rendered_text({"raw": "x"}) == {"raw": "x"}


def test_summarize_post_selects_summary_fields():
    summary = normalizers.summarize_post(RAW_POST)

    assert summary == {
        "id": 17,
        "title": "Hello &amp; welcome",
        "slug": "hello",
        "status": "publish",
        "date": "2026-01-02T10:00:00",
        "modified": "2026-01-03T11:00:00",
        "categories": [292],
        "tags": [294, 295],
        "link": "https://blog.example.com/hello/",
        "featured_media": 0,
    }


def test_post_details_flattens_content_and_excerpt():
    details = normalizers.post_details(RAW_POST)

    assert details["content"] == "<p>Body</p>"
    assert details["excerpt"] == "<p>Short</p>"
    assert details["meta"] == {"footnotes": ""}
    assert "_links" not in details


def test_post_details_keeps_plain_string_fields():
    details = normalizers.post_details(dict(RAW_POST, title="Plain", content="raw body"))

    assert details["title"] == "Plain"
    assert details["content"] == "raw body"


def test_post_write_result_carries_message():
    result = normalizers.post_write_result(RAW_POST, normalizers.POST_CREATED_MESSAGE)

    assert result["message"] == "Post created successfully"
    assert result["title"] == "Hello &amp; welcome"
    assert set(result) == {"id", "title", "slug", "status", "link", "categories", "tags", "message"}


def test_deletion_result_messages():
    assert normalizers.deletion_result(5, False) == {"post_id": 5, "deleted": True, "message": "Post moved to trash"}
    assert normalizers.deletion_result(5, True)["message"] == "Post permanently deleted"


def test_category_and_tag_summaries():
    term = {"id": 3, "name": "News", "slug": "news", "description": "", "count": 4, "parent": 1, "taxonomy": "category"}

    assert normalizers.summarize_category(term) == {
        "id": 3,
        "name": "News",
        "slug": "news",
        "description": "",
        "count": 4,
        "parent": 1,
    }
    assert "parent" not in normalizers.summarize_tag(term)


def test_media_result():
    media = {"id": 88, "title": {"rendered": "photo"}, "source_url": "https://x/photo.png", "mime_type": "image/png"}

    result = normalizers.media_result(media)

    assert result["id"] == 88
    assert result["title"] == "photo"
    assert result["message"].startswith("Media uploaded successfully")


def test_as_list_ignores_non_collections():
    assert normalizers.as_list({"code": "oops"}) == []
    assert normalizers.as_list([{"id": 1}, "junk"]) == [{"id": 1}]
