"""
Output cleanup for generated HTML.

Applies a fixed, ordered set of textual rewrites that remove artifacts of
word-processor content: bare ampersands, typographic dashes and quotes,
non-breaking spaces, empty list items and whitespace-only bold tags.
"""
from __future__ import annotations

import re
from html.entities import html5
from typing import Callable, Sequence, Tuple, Union

Replacement = Union[str, Callable[[re.Match[str]], str]]


def _escape_ampersand(match: re.Match[str]) -> str:
    reference = match.group(1)
    if reference is None:
        return "&amp;"
    # Keep numeric references and named references HTML5 knows
    if reference.startswith("#") or reference in html5:
        return match.group(0)
    return "&amp;" + reference


class OutputSanitizer:
    """Rewrites assembled HTML with the cleanup rules, in order."""

    AMPERSAND = re.compile(r"&(#[0-9]+;|#[xX][0-9a-fA-F]+;|[a-zA-Z][a-zA-Z0-9]*;)?")

    RULES: Sequence[Tuple[re.Pattern[str], Replacement]] = (
        (AMPERSAND, _escape_ampersand),
        (re.compile("\u2014"), "&mdash;"),
        (re.compile("\u2019"), "'"),
        (re.compile("[\u201c\u201d]"), '"'),
        (re.compile("&nbsp;|\u00a0"), " "),
        (re.compile(r"<li></li>", re.IGNORECASE), ""),
        (re.compile(r"<strong>\s+</strong>", re.IGNORECASE), ""),
        (re.compile(r"\t"), "    "),
    )

    def sanitize(self, html: str) -> str:
        """Apply the rule chain until the output no longer changes."""
        if not html:
            return html

        previous = None
        output = html
        while output != previous:
            previous = output
            output = self._apply_rules(output)
        return output

    def _apply_rules(self, html: str) -> str:
        for pattern, replacement in self.RULES:
            html = pattern.sub(replacement, html)
        return html


def clean_output(html: str) -> str:
    """Convenience wrapper around :class:`OutputSanitizer`."""
    return OutputSanitizer().sanitize(html)
