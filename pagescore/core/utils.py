from typing import Any


def count_words(text: Any) -> int:
    """Number of whitespace-separated tokens; 0 for None/empty/non-text."""
    if not text or not isinstance(text, str):
        return 0
    return len(text.split())


def dig(obj: Any, *keys: str, default: Any = None) -> Any:
    """Walk nested dicts, returning ``default`` on any missing/None/non-dict hop."""
    for key in keys:
        if not isinstance(obj, dict):
            return default
        obj = obj.get(key)
        if obj is None:
            return default
    return obj
