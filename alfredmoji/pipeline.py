# SPDX-License-Identifier: MIT
"""
Conversion of a Unicode emoji data file into an Alfred snippet pack.
"""

from . import logger
from .archive import zip_files, ArchiveError
from .emoji import Emoji
from .parser import parse_test_lines, parse_sequence_lines, resolve_code_points
from .request import fetch_lines, RequestError
from .snippet import generate_uid, write_snippet, write_info_plist
from .utils import bold

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

DEFAULT_VERSION = "15.1"
DEFAULT_ICON = Path(__file__).parent / "assets" / "icon.png"


@dataclass(frozen=True)
class Source:
    """A Unicode emoji data file and the parser for it."""

    #: URL of the file; ``{version}`` is replaced with the selected version.
    url: str

    #: Turns the lines of the file into emoji.
    parse: Callable[[Iterable[str]], Iterator[Emoji]]

    #: Whether the version can be selected; otherwise the file of
    #: DEFAULT_VERSION is always used.
    versioned: bool = True

    #: Name of the generated pack, formatted like url.
    pack_name: str = "alfredmoji-{version}.alfredsnippets"


SOURCES = {
    "test": Source(
        url="https://unicode.org/Public/emoji/{version}/emoji-test.txt",
        parse=parse_test_lines,
    ),
    "sequences": Source(
        url="https://unicode.org/Public/emoji/{version}/emoji-sequences.txt",
        parse=parse_sequence_lines,
        versioned=False,
        pack_name="alfredmoji-sequences-{version}.alfredsnippets",
    ),
}


@dataclass
class Config:
    """Settings for a single run."""

    #: Print the emoji instead of building a snippet pack.
    preview: bool = False

    #: Unicode emoji version to download.
    version: str = DEFAULT_VERSION

    #: Which data file to use, a key of SOURCES.
    source: str = "test"

    #: Directory the snippet files are written to before packing.
    build_dir: Path = Path("build")

    #: Directory the finished pack is written to.
    dist_dir: Path = Path("dist")

    #: Directory the downloaded data file is kept in.
    cache_dir: Path = Path(".")

    #: Icon included in the pack.
    icon: Path = DEFAULT_ICON

    #: Keep the snippet files in build_dir after packing them.
    keep_build: bool = False


@dataclass
class PackResult:
    """Outcome of a successful run."""

    #: Path of the created pack; None in preview mode.
    archive: Optional[Path] = None

    #: Files that were put into the pack.
    files: List[Path] = field(default_factory=list)


def effective_version(config: Config) -> str:
    source = SOURCES[config.source]
    if source.versioned:
        return config.version

    if config.version != DEFAULT_VERSION:
        logger.warning(
            f"The {config.source} data file is only available as version "
            f"{DEFAULT_VERSION}, ignoring version {config.version}"
        )
    return DEFAULT_VERSION


def snippet_text(emoji: Emoji) -> str:
    """Get the text a snippet for this emoji expands to."""
    if emoji.glyph is not None:
        return emoji.glyph
    return resolve_code_points(emoji.code_points or "")


def preview(emoji_list: Iterable[Emoji]) -> int:
    """Print every emoji with its description. Returns the emoji count."""
    count = 0
    for emoji in emoji_list:
        print(f"{snippet_text(emoji)}: {emoji.description}")
        count += 1
    return count


def write_snippets(emoji_list: Iterable[Emoji], build_dir: Path) -> List[Path]:
    """
    Write a snippet file for every emoji. Emoji whose file could not be
    written are logged and left out of the returned list.
    """
    files = []
    for emoji in emoji_list:
        uid = generate_uid()
        try:
            path = write_snippet(emoji, snippet_text(emoji), uid, build_dir)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error generating JSON for {emoji.description}: {e}")
            continue
        logger.debug(f"Wrote {path}")
        files.append(path)

    return files


def clean_build_dir(build_dir: Path, files: Iterable[Path]):
    """Remove the files this run wrote, and build_dir if it is left empty."""
    for path in files:
        if path.parent == build_dir:
            path.unlink(missing_ok=True)

    try:
        build_dir.rmdir()
    except OSError:
        logger.debug(f"Not removing {build_dir}, it is not empty")


def build_pack(
    config: Config, emoji_list: Iterable[Emoji], version: str
) -> Optional[PackResult]:
    """Write the snippet files, the info.plist and the icon into a pack."""
    source = SOURCES[config.source]
    build_dir = Path(config.build_dir)
    dist_dir = Path(config.dist_dir)

    try:
        build_dir.mkdir(parents=True, exist_ok=True)
        dist_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Error creating output directories: {e}")
        return None

    generated = write_snippets(emoji_list, build_dir)
    logger.info(f"Generated {len(generated)} snippets.")

    try:
        generated.append(write_info_plist(build_dir))
    except OSError as e:
        logger.error(f"Error generating info.plist: {e}")

    files = generated + [Path(config.icon)]

    archive = dist_dir / source.pack_name.format(version=version)
    try:
        zip_files(archive, files)
    except ArchiveError as e:
        logger.error(f"Error creating .alfredsnippets file: {e}")
        return None

    logger.info(f"{bold(str(archive))} created successfully.")

    if not config.keep_build:
        clean_build_dir(build_dir, generated)

    return PackResult(archive=archive, files=files)


def run(config: Config) -> Optional[PackResult]:
    """
    Fetch the data file selected by config and either print its emoji or
    build a snippet pack from them.

    :returns: the result of the run, or None if the data file could not be
        fetched or the pack could not be created.
    """
    if config.source not in SOURCES:
        raise ValueError(f"Unknown data file: {config.source}")

    version = effective_version(config)
    url = SOURCES[config.source].url.format(version=version)

    try:
        lines = fetch_lines(url, config.cache_dir)
    except (RequestError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Error fetching emoji data: {e}")
        return None

    emoji_list = SOURCES[config.source].parse(lines)

    if config.preview:
        preview(emoji_list)
        return PackResult()

    return build_pack(config, emoji_list, version)
