# main.py
import argparse
import json
import logging
import sys
from pathlib import Path

from kwd_decoder.chunks.common import to_jsonable
from kwd_decoder.errors import KwdError
from kwd_decoder.parser.kwd_file import KwdFile
from kwd_decoder.utils.logging import setup_logging, log_exception

logger = logging.getLogger(__name__)


def decode_level(level_file: Path, base_path: Path, output_dir: Path, header_only: bool) -> Path:
    """Decode one level and write its JSON summary, returns the summary path."""
    kwd = KwdFile(base_path, level_file, load=not header_only)

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{level_file.stem}_summary.json"
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(to_jsonable(kwd.summary()), f, indent=2)

    logger.info(f"Results written to {output_path}")
    return output_path


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Decode a Dungeon Keeper II level and write a JSON summary'
    )
    parser.add_argument('level_file',
                        help='Level info file (*.kwd)')
    parser.add_argument('--base-path',
                        default='.',
                        help='Game root directory the level paths are relative to')
    parser.add_argument('--header-only',
                        action='store_true',
                        help='Only read the level info and the map dimensions')
    parser.add_argument('--output',
                        default='output',
                        help='Output directory for the summary')
    parser.add_argument('--log-dir',
                        default='logs',
                        help='Log directory')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable verbose logging')

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    level_file = Path(args.level_file)
    base_path = Path(args.base_path)

    if not level_file.is_file():
        logger.error(f"Level file not found: {level_file}")
        return 1
    if not base_path.is_dir():
        logger.error(f"Base path not found: {base_path}")
        return 1

    try:
        decode_level(level_file, base_path, Path(args.output), args.header_only)
        logger.info("Processing complete")
    except KwdError as e:
        log_exception(logger, "Processing failed", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
