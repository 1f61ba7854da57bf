"""Locate and rewrite literal class-attribute values in component sources."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, Dict, List, Tuple

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

Span = Tuple[int, int]

DIALECTS: Dict[str, str] = {
    ".html": "html",
    ".htm": "html",
    ".vue": "vue",
    ".jsx": "jsx",
    ".tsx": "jsx",
    ".js": "jsx",
    ".ts": "jsx",
}

_TAG_PATTERN = re.compile(r"""<(?:[^>"']|"[^"]*"|'[^']*')*>""")
_CLASS_ATTRIBUTE = re.compile(
    r"""(?<![\w:@.-])class\s*=\s*(?P<quote>["'])(?P<value>.*?)(?P=quote)""",
    re.DOTALL,
)
_TEMPLATE_OPEN = re.compile(r"<template\b[^>]*>")
_TEMPLATE_CLOSE = "</template>"

_JSX_PATTERNS = (
    re.compile(r"""\bclass(?:Name)?\s*=\s*(?P<quote>["'])(?P<value>[^"'\n]*)(?P=quote)"""),
    re.compile(
        r"""\bclass(?:Name)?\s*=\s*\{\s*(?P<quote>["'`])(?P<value>[^"'`]*)(?P=quote)\s*\}"""
    ),
)

_GENERIC_PATTERNS = (
    re.compile(r"""(?<![\w:@.-])class(?:Name)?=(?P<quote>["'])(?P<value>[^"']*?)(?P=quote)"""),
    re.compile(r"""(?<![\w:@.-])class(?:Name)?=\{(?P<quote>["'])(?P<value>[^"']*?)(?P=quote)\}"""),
    re.compile(r"""(?<![\w:@.-])class(?:Name)?=\{`(?P<value>[^`]*?)`\}"""),
)

_INTERPOLATION_MARKERS = ("${", "{{")


def dialect_for(path: Path | str) -> str:
    """Return the markup dialect for *path*, ``generic`` when unknown."""
    return DIALECTS.get(Path(path).suffix.lower(), "generic")


def _is_literal(value: str) -> bool:
    return not any(marker in value for marker in _INTERPOLATION_MARKERS)


def _line_offsets(content: str) -> List[int]:
    offsets = [0]
    for match in re.finditer("\n", content):
        offsets.append(match.end())
    return offsets


def _html_spans(content: str) -> List[Span]:
    soup = BeautifulSoup(content, "html.parser", multi_valued_attributes=None)
    offsets = _line_offsets(content)
    spans: List[Span] = []
    for tag in soup.find_all(class_=True):
        if tag.sourceline is None or tag.sourcepos is None:
            continue
        start = offsets[tag.sourceline - 1] + tag.sourcepos
        tag_match = _TAG_PATTERN.match(content, start)
        if tag_match is None:
            raise ValueError(f"could not locate <{tag.name}> at line {tag.sourceline}")
        attribute = _CLASS_ATTRIBUTE.search(tag_match.group(0))
        if attribute is None or not _is_literal(attribute.group("value")):
            continue
        spans.append((start + attribute.start("value"), start + attribute.end("value")))
    return spans


def _vue_spans(content: str) -> List[Span]:
    opening = _TEMPLATE_OPEN.search(content)
    closing = content.rfind(_TEMPLATE_CLOSE)
    if opening is None or closing < opening.end():
        raise ValueError("single-file component has no <template> block")
    offset = opening.end()
    return [(offset + start, offset + end) for start, end in _html_spans(content[offset:closing])]


def _pattern_spans(content: str, patterns) -> List[Span]:
    spans = set()
    for pattern in patterns:
        for match in pattern.finditer(content):
            if _is_literal(match.group("value")):
                spans.add((match.start("value"), match.end("value")))
    return sorted(spans)


def _jsx_spans(content: str) -> List[Span]:
    return _pattern_spans(content, _JSX_PATTERNS)


def _generic_spans(content: str) -> List[Span]:
    return _pattern_spans(content, _GENERIC_PATTERNS)


_STRUCTURED: Dict[str, Callable[[str], List[Span]]] = {
    "html": _html_spans,
    "vue": _vue_spans,
    "jsx": _jsx_spans,
}


def find_class_spans(content: str, dialect: str) -> List[Span]:
    """Return sorted ``(start, end)`` offsets of literal class values.

    The dialect-aware pass runs first; when it raises, or finds nothing in a
    JSX source, the generic regex pass is used instead.
    """
    finder = _STRUCTURED.get(dialect)
    if finder is not None:
        try:
            spans = finder(content)
        except Exception:  # noqa: BLE001 - regex pass is the fallback
            logger.debug("Structured %s pass failed; using regex pass", dialect, exc_info=True)
        else:
            if spans or dialect != "jsx":
                return _without_overlaps(spans)
    return _without_overlaps(_generic_spans(content))


def _without_overlaps(spans: List[Span]) -> List[Span]:
    result: List[Span] = []
    for span in sorted(spans):
        if result and span[0] < result[-1][1]:
            continue
        result.append(span)
    return result


def extract_class_strings(content: str, dialect: str) -> List[str]:
    return [content[start:end] for start, end in find_class_spans(content, dialect)]


def rewrite_class_strings(
    content: str, dialect: str, transform: Callable[[str], str]
) -> Tuple[str, List[str]]:
    """Apply *transform* to every literal class value in *content*.

    Returns the new content and the original values that changed. Values whose
    token sequence is unchanged keep their original spacing.
    """
    pieces: List[str] = []
    changed: List[str] = []
    cursor = 0
    for start, end in find_class_spans(content, dialect):
        original = content[start:end]
        updated = transform(original)
        if updated.split() == original.split():
            continue
        pieces.append(content[cursor:start])
        pieces.append(updated)
        changed.append(original)
        cursor = end
    pieces.append(content[cursor:])
    return "".join(pieces), changed
