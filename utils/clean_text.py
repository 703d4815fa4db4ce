import re

_WHITESPACE = re.compile(r"\s+")


def normalize_remark(raw_text) -> str:
    """Collapse whitespace runs to a single space and trim."""
    if not raw_text:
        return ""
    return _WHITESPACE.sub(" ", str(raw_text)).strip()
