"""Rewrite class-attribute strings into light/dark token pairs."""

from __future__ import annotations

from typing import Callable, Iterable, Mapping

from ..io.models import TransformabilityReport
from . import mapping, overrides

ALTERNATE_PREFIX = "dark:"

Resolver = Callable[[str, str], str | None]


def split_classes(value: str) -> list[str]:
    """Split *value* on whitespace, keeping bracketed arbitrary values intact."""
    tokens: list[str] = []
    current: list[str] = []
    depth = 0
    for char in value or "":
        if char == "[":
            depth += 1
        elif char == "]" and depth:
            depth -= 1
        if char.isspace() and depth == 0:
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


def is_alternate(token: str) -> bool:
    return token.startswith(ALTERNATE_PREFIX)


def has_alternate_variant(value: str) -> bool:
    """Return ``True`` when *value* already contains a ``dark:`` token."""
    return any(is_alternate(token) for token in split_classes(value))


def _variant_parts(token: str) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    for char in token:
        if char == "[":
            depth += 1
        elif char == "]" and depth:
            depth -= 1
        if char == ":" and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def utility_slot(token: str) -> tuple[str, str]:
    """Return ``(variants, property)`` for *token*, ignoring the dark variant.

    ``hover:bg-gray-50`` and ``dark:hover:bg-gray-800`` share the slot
    ``("hover", "bg")``.
    """
    parts = _variant_parts(token)
    utility = parts[-1].lstrip("!-")
    variants = ":".join(part for part in parts[:-1] if part != "dark")
    return variants, utility.split("-", 1)[0]


class ClassTransformer:
    """Apply the mapping table and theme overrides to class strings.

    *extra* mappings are consulted before the generic table; they carry the
    brand-aware replacements built by ``features.brand.brand_aware_mappings``.
    """

    def __init__(
        self,
        table: Callable[[str], str | None] = mapping.lookup,
        resolver: Resolver = overrides.resolve,
        extra: Mapping[str, str] | None = None,
    ) -> None:
        self._table = table
        self._resolver = resolver
        self._extra = dict(extra or {})

    def lookup(self, token: str) -> str | None:
        replacement = self._extra.get(token)
        if replacement is not None:
            return replacement
        return self._table(token)

    def transform(self, class_string: str, theme_id: str | None = None) -> str:
        tokens = split_classes(class_string)
        if not tokens:
            return ""
        has_dark = any(is_alternate(token) for token in tokens)
        if theme_id and has_dark:
            return " ".join(self._retheme(tokens, theme_id))
        return " ".join(self._map(tokens, theme_id))

    def _map(self, tokens: list[str], theme_id: str | None) -> list[str]:
        covered = {utility_slot(token) for token in tokens if is_alternate(token)}
        result: list[str] = []
        for token in tokens:
            if is_alternate(token) or utility_slot(token) in covered:
                result.append(token)
                continue
            replacement = self._resolver(token, theme_id) if theme_id else None
            if replacement is None:
                replacement = self.lookup(token)
            result.append(replacement if replacement is not None else token)
        return result

    def _retheme(self, tokens: list[str], theme_id: str) -> list[str]:
        result: list[str] = []
        index = 0
        while index < len(tokens):
            token = tokens[index]
            replacement = None if is_alternate(token) else self._resolver(token, theme_id)
            if replacement is None:
                result.append(token)
                index += 1
                continue
            result.append(replacement)
            following = tokens[index + 1] if index + 1 < len(tokens) else None
            if (
                following is not None
                and is_alternate(following)
                and utility_slot(following) == utility_slot(token)
            ):
                index += 2
            else:
                index += 1
        return result

    def is_transformable(self, token: str) -> bool:
        return not is_alternate(token) and self.lookup(token) is not None


DEFAULT_TRANSFORMER = ClassTransformer()


def transform_classes(class_string: str, theme_id: str | None = None) -> str:
    """Return *class_string* with dark variants added for mapped tokens."""
    return DEFAULT_TRANSFORMER.transform(class_string, theme_id)


def transformable_tokens(class_string: str) -> list[str]:
    return [
        token
        for token in split_classes(class_string)
        if DEFAULT_TRANSFORMER.is_transformable(token)
    ]


def analyze_transformability(class_strings: Iterable[str]) -> TransformabilityReport:
    """Summarise how many tokens across *class_strings* have a dark mapping."""
    mapped: list[str] = []
    unmapped: list[str] = []
    dark: list[str] = []
    for class_string in class_strings:
        for token in split_classes(class_string):
            if is_alternate(token):
                dark.append(token)
            elif DEFAULT_TRANSFORMER.is_transformable(token):
                mapped.append(token)
            else:
                unmapped.append(token)
    total = len(mapped) + len(unmapped) + len(dark)
    percentage = round(len(mapped) / total * 100.0, 1) if total else 0.0
    return TransformabilityReport(
        total=total,
        transformable=len(mapped),
        percentage=percentage,
        transformable_tokens=tuple(mapped),
        unmapped_tokens=tuple(unmapped),
        dark_tokens=tuple(dark),
    )
