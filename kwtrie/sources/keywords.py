from __future__ import annotations

import csv
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from ..utils.logging import get_logger

# Keyword files may carry long phrases in a single field
csv.field_size_limit(sys.maxsize)


def load_keywords(path: str | Path, column: str = "keyword", delimiter: str = ",") -> List[str]:
    """Read keywords from one column of a delimited file with a header row.

    Values are stripped; empty values are skipped. File order is preserved
    and duplicates are kept (the trie collapses them).

    Args:
        path: Path to the delimited file
        column: Header name of the keyword column
        delimiter: Field delimiter

    Returns:
        Keyword strings in file order
    """
    logger = get_logger("load_keywords")
    path = Path(path)
    keywords: List[str] = []
    # utf-8-sig drops the byte-order mark spreadsheet exports put before the header
    with path.open("r", encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f, delimiter=delimiter)
        fields = [name.strip() for name in (reader.fieldnames or [])]
        if column not in fields:
            raise KeyError(f"Column '{column}' not found in {path} (header: {fields})")
        reader.fieldnames = fields
        skipped = 0
        for row in reader:
            value = (row.get(column) or "").strip()
            if not value:
                skipped += 1
                continue
            keywords.append(value)
    if skipped:
        logger.warning("Skipped %d empty keyword rows in %s", skipped, path.name)
    logger.info("Loaded %d keywords from %s", len(keywords), path)
    return keywords


def load_text(path: str | Path) -> str:
    """Read the text to scan as UTF-8; undecodable input raises UnicodeDecodeError."""
    return Path(path).read_text(encoding="utf-8")


def write_matches(matches: Iterable[str], path: Optional[str | Path] = None) -> Optional[str]:
    """Emit one match per line to `path`, or to stdout when no path is given."""
    if path is None:
        for match in matches:
            print(match)
        return None
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as f:
        for match in matches:
            f.write(f"{match}\n")
    return str(out)
