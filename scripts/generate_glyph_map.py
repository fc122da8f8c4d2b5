"""
Generate display-ready Unicode character names from UnicodeData.txt and write them
for static hosting:

- {output_dir}/{block}.json - block files (e.g. v1/0.json)
- {output_dir}/{codepoint}  - plain text per codepoint (e.g. v1/0048 -> "LATIN CAPITAL LETTER H")

Run from repo root: python scripts/generate_glyph_map.py --registry scripts/UnicodeData.txt
"""

import sys
import logging
import argparse
from pathlib import Path

from glyphnames.name_table import build_name_table
from glyphnames.publish import publish
from glyphnames.registry import (
    GlyphMapConfig,
    GlyphNamesError,
    ensure_registry_file,
    log_mismatches,
    read_registry_lines,
)


def main(argv=None) -> int:
    defaults = GlyphMapConfig.create_default()
    parser = argparse.ArgumentParser(description="Generate readable Unicode display names.")
    parser.add_argument("--registry", type=Path, default=None, help="Path to UnicodeData.txt.")
    parser.add_argument(
        "--download",
        action="store_true",
        help=f"Fetch UnicodeData.txt from {defaults.base_url} into the cache if it is missing.",
    )
    parser.add_argument("--output-dir", type=Path, default=defaults.output_dir, help="Directory for published files.")
    parser.add_argument("--workers", type=int, default=defaults.workers, help="Number of decomposition processes.")
    parser.add_argument(
        "--mismatch-preview",
        type=int,
        default=defaults.mismatch_preview_limit,
        help="Number of round-trip mismatches to list.",
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(message)s")

    config = (
        defaults.with_output_dir(args.output_dir)
        .with_workers(args.workers)
        .with_mismatch_preview_limit(args.mismatch_preview)
    )
    if args.registry is not None:
        config = config.with_registry_path(args.registry)

    try:
        if args.download:
            ensure_registry_file(config)
        build = build_name_table(read_registry_lines(config.registry_path), config)
    except GlyphNamesError as e:
        logging.error(str(e))
        return 1

    log_mismatches(build.mismatches, config.mismatch_preview_limit)
    summary = publish(build.table, config.output_dir, config.progress_interval)
    logging.info(
        f"Generated {summary.names} names -> {config.output_dir} "
        f"({summary.block_files} block JSONs + {summary.codepoint_files} codepoint files)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
