"""
Registry reading and record filtering for UnicodeData.txt.

`RecordFilter` decides, per registry line, whether a record is passed on to the
decomposer. Placeholder names (``<control>``, ``<CJK Ideograph, First>``) are skipped
silently; hex fields that do not survive a UTF-16 encode/decode round trip are skipped
and reported as `RoundTripMismatch` diagnostics.
"""

from __future__ import annotations
import logging
import re
import urllib.request
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from glyphnames.display_names import PLACEHOLDER_MARKER


class GlyphNamesError(Exception):
    """Base class for glyphnames errors."""


class RegistryUnavailableError(GlyphNamesError):
    """The Unicode registry could not be read or downloaded."""


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION DATA
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class GlyphMapConfig:
    """Immutable run configuration."""

    # Directory paths
    cache_dir: Path
    output_dir: Path
    base_url: str

    registry_filename: str

    # Processes used for decomposition; 1 keeps everything in-process
    workers: int
    # Mismatch examples logged at the end of a run
    mismatch_preview_limit: int
    # Per-codepoint files written between progress log lines
    progress_interval: int
    download_timeout: float

    @classmethod
    def create_default(cls) -> "GlyphMapConfig":
        """Factory method to create default configuration."""
        return cls(
            cache_dir=Path.home() / ".cache" / "glyphnames",
            output_dir=Path("v1"),
            base_url="https://www.unicode.org/Public/UCD/latest/ucd/",
            registry_filename="UnicodeData.txt",
            workers=1,
            mismatch_preview_limit=20,
            progress_interval=5000,
            download_timeout=15.0,
        )

    @property
    def registry_path(self) -> Path:
        return self.cache_dir / self.registry_filename

    def with_registry_path(self, registry_path: Path) -> "GlyphMapConfig":
        """Immutable update method - point the run at a local registry file."""
        return replace(self, cache_dir=registry_path.parent, registry_filename=registry_path.name)

    def with_output_dir(self, output_dir: Path) -> "GlyphMapConfig":
        return replace(self, output_dir=output_dir)

    def with_workers(self, workers: int) -> "GlyphMapConfig":
        return replace(self, workers=max(1, workers))

    def with_mismatch_preview_limit(self, limit: int) -> "GlyphMapConfig":
        return replace(self, mismatch_preview_limit=max(0, limit))


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class CharacterRecord:
    """One accepted registry entry."""

    codepoint: int
    key: str  # Normalized hex: "0048", "1F600"
    raw_name: str


@dataclass(frozen=True)
class RoundTripMismatch:
    """A hex field whose codepoint does not survive encode/decode."""

    hex: str
    name: str
    expected: Optional[int]
    actual: Optional[int]


@dataclass(frozen=True)
class FilterResult:
    """Result of filtering one registry line - accepted record or rejection reason."""

    accepted: bool
    record: Optional[CharacterRecord] = None
    reason: Optional[str] = None
    mismatch: Optional[RoundTripMismatch] = None

    @classmethod
    def accept(cls, record: CharacterRecord) -> "FilterResult":
        return cls(accepted=True, record=record)

    @classmethod
    def reject(cls, reason: str, mismatch: Optional[RoundTripMismatch] = None) -> "FilterResult":
        return cls(accepted=False, reason=reason, mismatch=mismatch)


# ════════════════════════════════════════════════════════════════════════════════
# RECORD FILTER
# ════════════════════════════════════════════════════════════════════════════════

EMPTY_OR_PLACEHOLDER_NAME = "empty or placeholder name"
ROUND_TRIP_MISMATCH = "codepoint round-trip mismatch"

# Plain ASCII hex only; int(x, 16) alone also takes "0x48", "00_61" and non-ASCII digits
HEX_KEY_PATTERN = re.compile(r"[0-9A-F]+")


def normalize_hex(hex_field: str) -> str:
    """Uppercase and zero-left-pad to at least 4 digits: "e1" -> "00E1"."""
    return hex_field.strip().upper().rjust(4, "0")


def round_trip_codepoint(codepoint: int) -> Optional[int]:
    """Encode a codepoint as UTF-16 code units and decode it again."""
    try:
        char = chr(codepoint)
    except (ValueError, OverflowError):
        return None
    decoded = char.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    if len(decoded) != 1:
        return None
    return ord(decoded)


class RecordFilter:
    """Accepts or rejects raw (hex, name) pairs from the registry."""

    def apply(self, hex_field: str, name_field: str) -> FilterResult:
        if not name_field or not name_field.strip() or name_field.startswith(PLACEHOLDER_MARKER):
            return FilterResult.reject(EMPTY_OR_PLACEHOLDER_NAME)

        key = normalize_hex(hex_field)
        expected = int(key, 16) if hex_field.strip() and HEX_KEY_PATTERN.fullmatch(key) else None
        actual = round_trip_codepoint(expected) if expected is not None else None

        if expected is None or actual != expected:
            mismatch = RoundTripMismatch(hex=key, name=name_field, expected=expected, actual=actual)
            return FilterResult.reject(ROUND_TRIP_MISMATCH, mismatch)

        return FilterResult.accept(CharacterRecord(codepoint=expected, key=key, raw_name=name_field))


def log_mismatches(mismatches: List[RoundTripMismatch], preview_limit: int = 20) -> None:
    """Report the mismatch count and the first `preview_limit` examples."""
    if not mismatches:
        return
    logging.warning(f"Found {len(mismatches)} codepoint mismatches:")
    for mismatch in mismatches[:preview_limit]:
        logging.warning(f"  {mismatch.hex}: {mismatch.name}")
    if len(mismatches) > preview_limit:
        logging.warning(f"  ... and {len(mismatches) - preview_limit} more")


# ════════════════════════════════════════════════════════════════════════════════
# REGISTRY SOURCE
# ════════════════════════════════════════════════════════════════════════════════


def ensure_registry_file(config: GlyphMapConfig) -> Path:
    """Download the registry into the cache directory if it doesn't exist."""
    file_path = config.registry_path
    if file_path.exists():
        return file_path

    url = config.base_url + config.registry_filename
    logging.info(f"Downloading {url} -> {file_path}")
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with urllib.request.urlopen(url, timeout=config.download_timeout) as response:
            file_path.write_bytes(response.read())
    except OSError as e:
        raise RegistryUnavailableError(f"Failed to download {url}: {e}") from e
    return file_path


def read_registry_lines(path: Path) -> Iterator[Tuple[str, str]]:
    """Yield (hex, name) pairs from a semicolon-delimited registry file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.rstrip("\r\n")
                if not line:
                    continue
                fields = line.split(";")
                if len(fields) < 2:
                    logging.debug(f"Skipping malformed registry line: {line!r}")
                    continue
                yield fields[0], fields[1]
    except OSError as e:
        raise RegistryUnavailableError(f"Cannot read registry {path}: {e}") from e
