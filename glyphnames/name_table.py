"""
NameTable construction: filter every registry line, decompose accepted records and
merge the results by normalized hex key.
"""

from __future__ import annotations
import logging
from collections import defaultdict
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from glyphnames.display_names import DisplayNameDecomposer
from glyphnames.registry import (
    CharacterRecord,
    GlyphMapConfig,
    RecordFilter,
    RoundTripMismatch,
)

NameTable = Dict[str, str]


@dataclass
class NameTableBuild:
    """Output of one build: the table plus what was left out of it."""

    table: NameTable = field(default_factory=dict)
    mismatches: List[RoundTripMismatch] = field(default_factory=list)
    skipped: int = 0
    # Lines whose normalized key was already in the table ("48" after "0048")
    duplicates: int = 0


def block_of(codepoint: int) -> int:
    return codepoint >> 8


def _decompose_records(records: List[CharacterRecord]) -> List[Tuple[str, Optional[str]]]:
    """Worker entry point; module-level so it can be pickled."""
    decomposer = DisplayNameDecomposer()
    return [(record.key, decomposer.decompose(record.raw_name, record.key)) for record in records]


def filter_records(lines: Iterable[Tuple[str, str]], build: NameTableBuild) -> List[CharacterRecord]:
    """Run the record filter, collecting mismatches and skips into `build`."""
    record_filter = RecordFilter()
    records = []
    for hex_field, name_field in lines:
        result = record_filter.apply(hex_field, name_field)
        if result.accepted and result.record is not None:
            records.append(result.record)
        elif result.mismatch is not None:
            build.mismatches.append(result.mismatch)
        else:
            build.skipped += 1
    return records


def build_name_table(lines: Iterable[Tuple[str, str]], config: Optional[GlyphMapConfig] = None) -> NameTableBuild:
    """
    Build the NameTable for a full registry.

    With ``config.workers > 1`` records are partitioned by block and decomposed in
    worker processes. A key always lands in the block of its codepoint, so partitions never
    collide; when two lines normalize to the same key the later one wins and is counted
    in `duplicates`.
    """
    config = config or GlyphMapConfig.create_default()
    build = NameTableBuild()
    records = filter_records(lines, build)

    if config.workers > 1 and records:
        partitions: Dict[int, List[CharacterRecord]] = defaultdict(list)
        for record in records:
            partitions[block_of(record.codepoint)].append(record)
        logging.info(f"Decomposing {len(records)} records in {len(partitions)} blocks with {config.workers} workers")
        with ProcessPoolExecutor(max_workers=config.workers) as executor:
            results = [pair for chunk in executor.map(_decompose_records, partitions.values()) for pair in chunk]
    else:
        results = _decompose_records(records)

    for key, display_name in results:
        if not display_name:
            continue
        if key in build.table:
            build.duplicates += 1
            logging.warning(f"Duplicate registry key {key}: {build.table[key]!r} replaced by {display_name!r}")
        build.table[key] = display_name

    logging.info(
        f"Built name table: {len(build.table)} names, {build.skipped} placeholders skipped, "
        f"{len(build.mismatches)} mismatches, {build.duplicates} duplicate keys"
    )
    return build
