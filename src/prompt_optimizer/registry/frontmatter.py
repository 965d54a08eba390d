"""Header-block parsing and summary extraction for knowledge-base documents."""

from __future__ import annotations

import re

from prompt_optimizer.config.defaults import DEFAULT_SUMMARY_MAX_LENGTH, NO_SUMMARY

_FRONTMATTER_RE = re.compile(r"^---\n(.*?)\n---\n?(.*)$", re.DOTALL)


def parse_frontmatter(content: str) -> tuple[dict[str, str], str]:
    """Split a document into its ``key: value`` header block and body.

    Values are trimmed and one level of matching quotes is stripped. Lines
    without a colon are ignored. A document without a header block returns
    an empty dict and the whole content as body.
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return {}, content

    raw, body = match.group(1), match.group(2)
    frontmatter: dict[str, str] = {}

    for line in raw.split("\n"):
        key, sep, value = line.partition(":")
        if not sep:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        frontmatter[key.strip()] = value

    return frontmatter, body


def summarize(body: str, max_len: int = DEFAULT_SUMMARY_MAX_LENGTH) -> str:
    """Return the first prose line of a body, truncated to ``max_len``.

    Headings, code fences and ``---`` separators are skipped.
    """
    summary = ""
    for line in body.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(("#", "```", "---")):
            continue
        summary = stripped
        break

    if len(summary) > max_len:
        return summary[: max_len - 3] + "..."
    return summary or NO_SUMMARY
