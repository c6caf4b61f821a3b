# SPDX-License-Identifier: MIT
"""Alfred snippet files."""

from .emoji import Emoji

from os import PathLike
from pathlib import Path
from typing import Union
import json
import uuid

INFO_PLIST = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
    <key>snippetkeywordprefix</key>
    <string>:</string>
    <key>snippetkeywordsuffix</key>
    <string>:</string>
</dict>
</plist>"""


def generate_uid() -> str:
    """Generate an uppercase random UUID for a snippet."""
    return str(uuid.uuid4()).upper()


def snippet_filename(emoji: Emoji, uid: str) -> str:
    return f"{emoji.description} [{uid}].json"


def render_snippet(emoji: Emoji, snippet: str, uid: str) -> bytes:
    """Render the JSON document Alfred expects for a single snippet."""
    data = {
        "alfredsnippet": {
            "snippet": snippet,
            "uid": uid,
            "name": emoji.display_name,
            "keyword": emoji.description,
        }
    }
    return json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode(
        "utf-8"
    )


def write_snippet(
    emoji: Emoji, snippet: str, uid: str, target_dir: Union[str, PathLike]
) -> Path:
    """
    Write the snippet file for an emoji into target_dir.

    The description is used as-is in the file name, so it must already be
    free of characters the filesystem does not accept. An existing file with
    the same name is overwritten.

    :returns: path of the written file.
    """
    path = Path(target_dir) / snippet_filename(emoji, uid)
    data = render_snippet(emoji, snippet, uid)
    with open(path, "wb") as f:
        f.write(data)
    return path


def write_info_plist(target_dir: Union[str, PathLike]) -> Path:
    """Write the info.plist file declaring the keyword prefix and suffix."""
    path = Path(target_dir) / "info.plist"
    path.write_text(INFO_PLIST, encoding="utf-8")
    return path
