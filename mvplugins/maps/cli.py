#!/usr/bin/env python3
"""
Strip shadows from map files ahead of time.

Usage:
  erase-shadows data/Map001.json data/Map002.json
  erase-shadows data/Map*.json --output-dir build/data
  erase-shadows data/Map001.json --dry-run --log-level debug

Without --output-dir the files are rewritten in place. Files that aren't
map data are skipped with a warning.
"""
import argparse
import os
import sys
from typing import List, Optional

from mvplugins.base.errors import MapDataError
from mvplugins.maps.shadows import erase_shadows, looks_like_map
from mvplugins.utils.json_utils import load_json, save_json
from mvplugins.utils.logging_config import configure_logging, get_logger

logger = get_logger("MAPS")


def parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Remove the shadow layer from map data files.")
    p.add_argument("paths", nargs="+", help="MapXXX.json files to process")
    p.add_argument("--output-dir", default=None, help="Write results here instead of in place")
    p.add_argument("--dry-run", action="store_true", help="Report what would change without writing")
    p.add_argument("--log-level", default="INFO", help="Logging level (default INFO)")
    return p.parse_args(argv)


def process_file(path: str, output_dir: Optional[str], dry_run: bool) -> bool:
    """Erase shadows in one file. Returns False if the file was skipped."""
    map_data = load_json(path)
    if not looks_like_map(map_data):
        logger.warning(f"Skipping {path}: not map data")
        return False

    cells = erase_shadows(map_data)
    target = os.path.join(output_dir, os.path.basename(path)) if output_dir else path
    if dry_run:
        logger.info(f"Would clear {cells} shadow cells in {path}")
        return True

    save_json(map_data, target)
    logger.info(f"Cleared {cells} shadow cells: {path} -> {target}")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    ns = parse_args(argv)
    configure_logging(ns.log_level, log_to_file=False)

    if ns.output_dir and not ns.dry_run:
        os.makedirs(ns.output_dir, exist_ok=True)

    failures = 0
    for path in ns.paths:
        try:
            process_file(path, ns.output_dir, ns.dry_run)
        except (OSError, ValueError, MapDataError) as e:
            logger.error(f"Failed to process {path}: {e}")
            failures += 1
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
