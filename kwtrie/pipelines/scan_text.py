from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from tqdm import tqdm

from ..matching.scanner import Scanner
from ..matching.trie import Trie, build
from ..sources.keywords import load_keywords, load_text, write_matches
from ..utils.logging import get_logger
from ..utils.paths import get_value
from ..utils.runinfo import new_run_id
from ..utils.validate import validate_scan_inputs


def _keyword_settings(cfg: Dict[str, Any], keywords_path: Optional[str]) -> Dict[str, str]:
    path = keywords_path or get_value(cfg, "keywords.path")
    if not path:
        raise ValueError("No keyword file given (set keywords.path or pass --keywords)")
    return {
        "path": str(path),
        "column": get_value(cfg, "keywords.column", "keyword"),
        "delimiter": get_value(cfg, "keywords.delimiter", ","),
    }


def build_trie(keywords: Iterable[str], *, show_progress: bool = False) -> Trie:
    """Insert keywords one by one, with an optional progress bar."""
    return build(tqdm(keywords, desc="Building trie", unit="kw", disable=not show_progress))


def load_trie(cfg: Dict[str, Any], *, keywords_path: Optional[str] = None, show_progress: bool = False) -> Trie:
    logger = get_logger("load_trie")
    settings = _keyword_settings(cfg, keywords_path)
    keywords = load_keywords(settings["path"], column=settings["column"], delimiter=settings["delimiter"])
    trie = build_trie(keywords, show_progress=show_progress)
    logger.info("Trie built: %d distinct keywords, %d nodes", len(trie), trie.node_count)
    return trie


def run(
    cfg: Dict[str, Any],
    *,
    keywords_path: Optional[str] = None,
    text_path: Optional[str] = None,
    output_path: Optional[str] = None,
    show_progress: bool = True,
    run_id: str | None = None,
) -> Dict[str, Any]:
    """
    Keyword scan pipeline: build the trie once, then scan the text in one pass.

    Args:
        cfg: Configuration dictionary from scan.yaml
        keywords_path: Overrides keywords.path
        text_path: Overrides text.path
        output_path: Overrides output.path; matches go to stdout when neither is set
        show_progress: Show a progress bar while building the trie
        run_id: Optional run identifier for tracking

    Returns:
        Dictionary with the matches and run metadata
    """
    logger = get_logger("scan_text")
    run_id = run_id or new_run_id()

    settings = _keyword_settings(cfg, keywords_path)
    text_path = text_path or get_value(cfg, "text.path")
    if not text_path:
        raise ValueError("No text file given (set text.path or pass --text)")
    output_path = output_path or get_value(cfg, "output.path")

    val = validate_scan_inputs(settings["path"], text_path)
    if not val["ok"]:
        logger.error("Input validation failed: %s", val)
        raise ValueError(f"Invalid scan inputs: {val}")

    logger.info("Running scan run_id=%s keywords=%s text=%s", run_id, settings["path"], text_path)
    trie = load_trie(cfg, keywords_path=settings["path"], show_progress=show_progress)
    text = load_text(text_path)

    matches: List[str] = Scanner(trie).match(text)
    logger.info("Scanned %d code points, %d matches", len(text), len(matches))

    written = write_matches(matches, output_path)
    if written:
        logger.info("Matches written to %s", written)

    return {
        "run_id": run_id,
        "matches": matches,
        "num_keywords": len(trie),
        "num_nodes": trie.node_count,
        "num_matches": len(matches),
        "output": written,
    }


def lookup(cfg: Dict[str, Any], prefix: str, *, keywords_path: Optional[str] = None) -> List[str]:
    """Return all configured keywords that start with `prefix`."""
    trie = load_trie(cfg, keywords_path=keywords_path)
    return trie.keywords_with_prefix(prefix)


def contains(cfg: Dict[str, Any], keyword: str, *, keywords_path: Optional[str] = None) -> bool:
    trie = load_trie(cfg, keywords_path=keywords_path)
    return trie.contains(keyword)
