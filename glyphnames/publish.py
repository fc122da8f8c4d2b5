"""
Writers for the published lookup files.

- ``{block}.json``: flat JSON object of all names in one 256-codepoint block
- ``{codepoint}``: plain text file holding one display name
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from glyphnames.name_table import NameTable, block_of


@dataclass(frozen=True)
class PublishSummary:
    names: int
    block_files: int
    codepoint_files: int


def block_id(key: str) -> str:
    """High byte of a hex key, uppercase, unpadded: "1E9E" -> "1E", "0048" -> "0"."""
    return format(block_of(int(key, 16)), "X")


def partition_by_block(table: NameTable) -> Dict[str, NameTable]:
    blocks: Dict[str, NameTable] = {}
    for key, display_name in table.items():
        blocks.setdefault(block_id(key), {})[key] = display_name
    return blocks


def write_block_files(blocks: Dict[str, NameTable], output_dir: Path) -> int:
    output_dir.mkdir(parents=True, exist_ok=True)
    for block, names in blocks.items():
        out_path = output_dir / f"{block}.json"
        out_path.write_text(json.dumps(names, ensure_ascii=False, separators=(",", ":")), encoding="utf-8")
        logging.info(f"Wrote {out_path} ({len(names)} entries)")
    return len(blocks)


def write_codepoint_files(table: NameTable, output_dir: Path, progress_interval: int = 5000) -> int:
    output_dir.mkdir(parents=True, exist_ok=True)
    written = 0
    for key, display_name in table.items():
        (output_dir / key).write_text(display_name, encoding="utf-8")
        written += 1
        if progress_interval and written % progress_interval == 0:
            logging.info(f"  ... {written} codepoint files")
    return written


def publish(table: NameTable, output_dir: Path, progress_interval: int = 5000) -> PublishSummary:
    """Write block and per-codepoint files; both come from the same table."""
    blocks = partition_by_block(table)
    block_files = write_block_files(blocks, output_dir)
    codepoint_files = write_codepoint_files(table, output_dir, progress_interval)
    return PublishSummary(names=len(table), block_files=block_files, codepoint_files=codepoint_files)
