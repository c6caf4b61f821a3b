# SPDX-License-Identifier: MIT

from . import VERSION, logger, set_debug
from .pipeline import Config, DEFAULT_ICON, DEFAULT_VERSION, SOURCES, run
from .utils import colors

import argparse
from pathlib import Path
import sys

parser = argparse.ArgumentParser(
    prog="alfredmoji",
    description="Generate an Alfred snippet pack from the Unicode emoji data",
)

parser.add_argument(
    "-e",
    "--emojis",
    action="store_true",
    help="display emojis instead of generating an Alfred snippet pack",
)
parser.add_argument(
    "-v",
    "--version",
    default=DEFAULT_VERSION,
    help=f"Unicode emoji version to use (default: {DEFAULT_VERSION}, only for the test data file)",
)
parser.add_argument(
    "-s",
    "--source",
    choices=sorted(SOURCES),
    default="test",
    help="data file to read: emoji-test.txt (test) or emoji-sequences.txt (sequences)",
)
parser.add_argument("--build-dir", default="build", help="directory for the snippet files")
parser.add_argument("--dist-dir", default="dist", help="directory for the finished pack")
parser.add_argument(
    "--cache-dir", default=".", help="directory the downloaded data file is kept in"
)
parser.add_argument("--icon", default=str(DEFAULT_ICON), help="icon to include in the pack")
parser.add_argument(
    "--keep-build",
    action="store_true",
    help="keep the snippet files in the build directory after packing",
)
parser.add_argument("--debug", action="store_true", help="show debug output")


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        preview=args.emojis,
        version=args.version,
        source=args.source,
        build_dir=Path(args.build_dir),
        dist_dir=Path(args.dist_dir),
        cache_dir=Path(args.cache_dir),
        icon=Path(args.icon),
        keep_build=args.keep_build,
    )


def main(argv=None) -> int:
    args = parser.parse_args(argv)
    if args.debug:
        set_debug()

    config = config_from_args(args)

    if not config.preview:
        logger.info(f"{colors['bold']}alfredmoji{colors['reset']} {VERSION}")
        logger.info("===\n")

    result = run(config)
    if result is None:
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
