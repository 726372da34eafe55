from __future__ import annotations

from pathlib import Path
from typing import Dict


def validate_scan_inputs(keywords: str, text: str) -> Dict[str, bool]:
    # Column presence is checked by load_keywords while it reads the header
    ok_keywords = Path(keywords).is_file()
    ok_text = Path(text).is_file()
    return {"keywords": ok_keywords, "text": ok_text, "ok": ok_keywords and ok_text}
