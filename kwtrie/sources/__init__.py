from .keywords import load_keywords, load_text, write_matches

__all__ = ["load_keywords", "load_text", "write_matches"]
