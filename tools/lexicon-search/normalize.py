"""
Diacritic-insensitive text folding for Polish search.

Resource files may still carry literal ``\\xHH`` / ``\\uHHHH`` escape sequences
in place of Polish letters, so folding resolves those itself instead of relying
on the display decoder having run first.
"""
import re

POLISH_FOLDING = str.maketrans({
    "ą": "a",
    "ć": "c",
    "ę": "e",
    "ł": "l",
    "ń": "n",
    "ó": "o",
    "ś": "s",
    "ź": "z",
    "ż": "z",
})

ESCAPE_RE = re.compile(r"\\(?:x([0-9a-fA-F]{2})|u([0-9a-fA-F]{4}))")

def _unescape(match: re.Match, ascii_literal: bool = False) -> str:
    code = int(match.group(1) or match.group(2), 16)
    if ascii_literal and code < 0x80:
        return match.group(0)
    return chr(code)

def decode_escapes(text: str | None) -> str:
    """Resolve escape sequences such as ``\\xf3`` (ó) or ``\\u0119`` (ę) for display."""
    if not text:
        return ""
    return ESCAPE_RE.sub(_unescape, text)

def normalize_text(text: str) -> str:
    # ASCII escapes stay literal: decoding one could form a new escape and break idempotence
    folded = ESCAPE_RE.sub(lambda m: _unescape(m, ascii_literal=True), text.lower())
    return folded.lower().translate(POLISH_FOLDING).strip()

def matches(haystack: str, query: str) -> bool:
    return normalize_text(query) in normalize_text(haystack)
