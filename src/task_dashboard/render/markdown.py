# src/task_dashboard/render/markdown.py

"""
Tiny Markdown-to-HTML converter for notes.

This is a fixed pipeline of regex substitutions, not a Markdown parser:
each rule is a global pass over the whole text, and later rules assume the
earlier ones already ran (headings before bold, bold before italic).

Output is NOT escaped. Notes are local files owned by the user.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class SubstitutionRule:
    name: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(name: str, pattern: str, replacement: str, flags: int = 0) -> SubstitutionRule:
    return SubstitutionRule(name=name, pattern=re.compile(pattern, flags), replacement=replacement)


RULES: tuple[SubstitutionRule, ...] = (
    # Longest heading prefix first so "####" is not taken for "#".
    _rule("h4", r"^#### (.+)$", r"<h4>\1</h4>", re.M),
    _rule("h3", r"^### (.+)$", r"<h3>\1</h3>", re.M),
    _rule("h2", r"^## (.+)$", r"<h2>\1</h2>", re.M),
    _rule("h1", r"^# (.+)$", r"<h1>\1</h1>", re.M),
    _rule("bold", r"\*\*(.+?)\*\*", r"<strong>\1</strong>"),
    _rule("italic", r"\*(.+?)\*", r"<em>\1</em>"),
    _rule("code", r"`([^`]+)`", r"<code>\1</code>"),
    # http(s) only: javascript:, data: etc. stay literal text.
    _rule(
        "link",
        r"\[([^\]]+)\]\((https?://[^)]+)\)",
        r'<a href="\2" target="_blank" rel="noopener noreferrer">\1</a>',
    ),
    _rule("hr", r"^---$", "<hr>", re.M),
    _rule("paragraph", r"\n\n", "</p><p>"),
    # Checkbox items belong to the task list, not to notes.
    _rule("bullet", r"^- (?!\[[ x]\])", "• ", re.M),
)


def markdown_to_html(md: str) -> str:
    html = md
    for rule in RULES:
        html = rule.apply(html)
    return "<p>" + html + "</p>"
