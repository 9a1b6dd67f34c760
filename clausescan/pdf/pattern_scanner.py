"""Heuristic PDF text recovery by scanning raw bytes for text operators.

No object model is built: xref tables, fonts and compressed object streams are
ignored. Four independent passes look for text in content streams, ``Tj``
literals, ``TJ`` arrays and ``BT``/``ET`` blocks; their lines are merged and
deduplicated. Scanning never raises, the worst case is empty text on one page.
"""

import re
from collections.abc import Iterable

from clausescan.pdf.base import BasePdfExtractor
from clausescan.pdf.models import ExtractionCandidate

_STREAM = re.compile(r"stream(.*?)endstream", re.DOTALL)
_STREAM_KEYWORD = re.compile(r"(?:end)?stream")
_NON_PRINTABLE = re.compile(r"[^\x20-\x7e\n\r\t]")
_WHITESPACE = re.compile(r"\s+")
_LETTER_RUN = re.compile(r"[a-zA-Z]{3,}")
_LETTER = re.compile(r"[a-zA-Z]")

_SHOW_TEXT = re.compile(r"\(((?:\\.|[^\\)]){2,})\)\s*Tj", re.DOTALL)
_ARRAY_SHOW = re.compile(r"\[([^\]]+)\]\s*TJ", re.IGNORECASE)
_TEXT_OBJECT = re.compile(r"\bBT\b(.*?)\bET\b", re.DOTALL)
_LITERAL = re.compile(r"\(((?:\\.|[^\\)])*)\)", re.DOTALL)
_ESCAPE = re.compile(r"\\([0-7]{3}|.)", re.DOTALL)

_PAGE_MARKER = re.compile(r"/Type\s*/Page(?!s)")

_HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+")
_BLANK_LINES = re.compile(r"\n\s*\n")

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "",
    "t": "\t",
    "(": "(",
    ")": ")",
    "\\": "\\",
}

STREAM_MIN_LENGTH = 20
SHOW_TEXT_MIN_LENGTH = 10
ARRAY_LINE_MIN_LENGTH = 2
TEXT_OBJECT_MIN_LENGTH = 5


def decode_pdf_bytes(data: bytes) -> str:
    """Decode a PDF buffer as text, replacing undecodable bytes with U+FFFD."""
    return bytes(data).decode("utf-8", errors="replace")


def decode_literal(raw: str, *, octal: bool = False) -> str:
    """Decode backslash escapes of a PDF string literal body.

    ``\\r`` is dropped; three-digit octal codes are decoded only when
    ``octal`` is set. Unknown escapes are left untouched.
    """

    def _replace(match: re.Match[str]) -> str:
        token = match.group(1)
        if len(token) == 3:
            return chr(int(token, 8)) if octal else match.group(0)
        return _SIMPLE_ESCAPES.get(token, match.group(0))

    return _ESCAPE.sub(_replace, raw)


def scan_content_streams(text: str) -> list[str]:
    lines = []
    for match in _STREAM.finditer(text):
        cleaned = _STREAM_KEYWORD.sub("", match.group(0))
        cleaned = _NON_PRINTABLE.sub(" ", cleaned)
        cleaned = _WHITESPACE.sub(" ", cleaned).strip()
        if len(cleaned) > STREAM_MIN_LENGTH and _LETTER_RUN.search(cleaned):
            lines.append(cleaned)
    return lines


def scan_show_text(text: str) -> list[str]:
    literals = [decode_literal(m.group(1)) for m in _SHOW_TEXT.finditer(text)]
    kept = [lit for lit in literals if len(lit) > 1 and _LETTER.search(lit)]
    joined = " ".join(kept)
    if len(joined) > SHOW_TEXT_MIN_LENGTH:
        return [joined]
    return []


def scan_array_show(text: str) -> list[str]:
    lines = []
    for match in _ARRAY_SHOW.finditer(text):
        fragments = [
            decode_literal(lit.group(1), octal=True)
            for lit in _LITERAL.finditer(match.group(1))
        ]
        line = "".join(fragments)
        if len(line) > ARRAY_LINE_MIN_LENGTH and _LETTER.search(line):
            lines.append(line)
    return lines


def scan_text_objects(text: str) -> list[str]:
    lines = []
    for match in _TEXT_OBJECT.finditer(text):
        literals = [
            decode_literal(lit.group(1))
            for lit in _LITERAL.finditer(match.group(1))
            if lit.group(1)
        ]
        block = " ".join(lit for lit in literals if _LETTER.search(lit))
        if len(block) > TEXT_OBJECT_MIN_LENGTH:
            lines.append(block)
    return lines


def merge_passes(passes: Iterable[list[str]]) -> str:
    """Join pass outputs in order and drop repeated lines.

    Overlapping passes often capture the same literal twice, so identical lines
    are kept only at their first position.
    """
    merged = "".join("".join(line + "\n" for line in lines) for lines in passes)
    merged = _HORIZONTAL_WHITESPACE.sub(" ", merged)
    merged = _BLANK_LINES.sub("\n\n", merged)
    lines = [line.strip() for line in merged.split("\n")]
    return "\n".join(dict.fromkeys(lines)).strip()


def estimate_page_count(text: str) -> int:
    """Count ``/Type /Page`` objects, never less than one."""
    return max(1, len(_PAGE_MARKER.findall(text)))


class PatternScanner(BasePdfExtractor):
    """Native engine built on byte-pattern scanning."""

    PASSES = (
        scan_content_streams,
        scan_show_text,
        scan_array_show,
        scan_text_objects,
    )

    def extract(self, pdf_bytes: bytes) -> ExtractionCandidate:
        text = decode_pdf_bytes(pdf_bytes)
        merged = merge_passes(scan(text) for scan in self.PASSES)
        return ExtractionCandidate(text=merged, page_count=estimate_page_count(text))
