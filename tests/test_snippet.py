"""Unit tests for snippet file generation."""
import json
import uuid

import pytest

from alfredmoji.emoji import Emoji
from alfredmoji.snippet import (
    INFO_PLIST,
    generate_uid,
    render_snippet,
    snippet_filename,
    write_info_plist,
    write_snippet,
)


@pytest.fixture
def grinning():
    return Emoji(description="grinning-face", subgroup="face-smiling", glyph="😀")


class TestGenerateUid:
    """Tests for snippet UIDs."""

    def test_uppercase_uuid(self):
        uid = generate_uid()
        assert uid == uid.upper()
        assert str(uuid.UUID(uid)).upper() == uid

    def test_unique(self):
        assert len({generate_uid() for _ in range(100)}) == 100


class TestRenderSnippet:
    """Tests for the snippet JSON document."""

    def test_fields(self, grinning):
        data = json.loads(render_snippet(grinning, "😀", "ABC-123"))
        assert data == {
            "alfredsnippet": {
                "snippet": "😀",
                "uid": "ABC-123",
                "name": "(face-smiling) grinning-face",
                "keyword": "grinning-face",
            }
        }

    def test_name_without_subgroup(self):
        emoji = Emoji(description="grinning face", code_points="1F600")
        data = json.loads(render_snippet(emoji, "😀", "UID"))
        assert data["alfredsnippet"]["name"] == "grinning face"
        assert data["alfredsnippet"]["keyword"] == "grinning face"

    def test_emoji_written_unescaped(self, grinning):
        assert "😀".encode("utf-8") in render_snippet(grinning, "😀", "UID")


class TestWriteSnippet:
    """Tests for writing snippet files."""

    def test_writes_file(self, tmp_path, grinning):
        path = write_snippet(grinning, "😀", "UID-1", tmp_path)
        assert path == tmp_path / "grinning-face [UID-1].json"
        assert path.read_bytes() == render_snippet(grinning, "😀", "UID-1")

    def test_filename(self, grinning):
        assert snippet_filename(grinning, "X") == "grinning-face [X].json"

    def test_overwrites_same_name(self, tmp_path, grinning):
        write_snippet(grinning, "old", "UID", tmp_path)
        path = write_snippet(grinning, "😀", "UID", tmp_path)
        assert json.loads(path.read_bytes())["alfredsnippet"]["snippet"] == "😀"

    def test_missing_directory(self, tmp_path, grinning):
        with pytest.raises(OSError):
            write_snippet(grinning, "😀", "UID", tmp_path / "missing")

    def test_unsafe_description_fails(self, tmp_path):
        emoji = Emoji(description="a/b", glyph="😀")
        with pytest.raises(OSError):
            write_snippet(emoji, "😀", "UID", tmp_path)


class TestWriteInfoPlist:
    """Tests for the pack manifest."""

    def test_content(self, tmp_path):
        path = write_info_plist(tmp_path)
        assert path.name == "info.plist"
        assert path.read_text(encoding="utf-8") == INFO_PLIST
        assert "<key>snippetkeywordprefix</key>" in INFO_PLIST
        assert "<key>snippetkeywordsuffix</key>" in INFO_PLIST
