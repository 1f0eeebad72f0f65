"""
Field extraction from captured story bodies.

Each extractor takes the text of one export body (as captured by the
balancer) and returns the field's value, or None when the field is not
present. Extraction is regex-driven and tolerant: unconventional bodies give
None rather than errors.

Fields:
- display_name: `name: 'Primary Button'`
- description: `story: 'Used for main actions.'`
- reference_text: `story: \\`## Props ...\\`` (API export only)
- example_code: the JSX returned by `render: () => { ... }` or by a bare
  function story
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern

from storydoc.extractors.span_extractor import (
    BACKTICK,
    QUOTE_CHARS,
    extract_after_key,
    extract_delimited,
    strip_quotes,
)


@dataclass(frozen=True)
class ReturnRule:
    """A named regex whose first group is the returned expression."""
    name: str
    pattern: Pattern[str]

    def apply(self, text: str) -> Optional[str]:
        match = self.pattern.search(text)
        if not match:
            return None
        return match.group(1).strip()


class FieldExtractor:
    """
    Extract story fields from an export body.

    The return-expression rules are ordered lists, first match wins. Rules for
    a render body are anchored at the end of the body since the return is the
    function's last statement; rules for a bare function body match the first
    return anywhere.
    """

    NAME_PATTERN = re.compile(r'name:\s*["\']([^"\']+)["\']')

    STORY_KEY = 'story:'
    STORY_VALUE_PATTERN = re.compile(r'story:\s*([\s\S]*?)(?:,\s*\}|\})')
    STORY_KEY_PATTERN = re.compile(r'story:\s*')
    QUOTES = QUOTE_CHARS + (BACKTICK,)

    RENDER_PATTERN = re.compile(r'render:\s*\(\)\s*=>\s*\{([\s\S]*?)\n  \}')

    RENDER_RETURN_RULES: List[ReturnRule] = [
        ReturnRule('parenthesized', re.compile(r'return\s*\(([\s\S]*?)\);\s*$')),
        ReturnRule('single-line', re.compile(r'return\s+([^;]+);\s*$')),
        ReturnRule('multi-line', re.compile(r'return\s+([\s\S]*?);\s*$')),
    ]

    BODY_RETURN_RULES: List[ReturnRule] = [
        ReturnRule('parenthesized', re.compile(r'return\s*\(\s*([\s\S]*?)\s*\)\s*;')),
        ReturnRule('bare', re.compile(r'return\s+([\s\S]*?);')),
    ]

    def display_name(self, body: str) -> Optional[str]:
        """Value of the first quoted `name:` field."""
        match = self.NAME_PATTERN.search(body)
        return match.group(1) if match else None

    def description(self, body: str) -> Optional[str]:
        """
        Value of the first `story:` field of an example story.

        The value runs up to the first `}` (optionally preceded by a comma).
        When that capture is a complete quoted literal it is returned with
        double or single quotes stripped; backticks are kept. A value that
        opens with a quote but is cut before its closing quote, such as a
        string followed by a `render` function, is instead read up to its
        matching unescaped quote.
        """
        match = self.STORY_VALUE_PATTERN.search(body)
        captured = match.group(1).strip() if match else None
        if captured and self._is_closed_literal(captured):
            return strip_quotes(captured)

        key = self.STORY_KEY_PATTERN.search(body)
        if not key:
            return None
        value_start = key.end()
        if value_start < len(body) and body[value_start] in self.QUOTES:
            return extract_delimited(body, value_start, body[value_start])

        if captured is None:
            return None
        return strip_quotes(captured)

    def reference_text(self, body: str) -> Optional[str]:
        """Backtick-quoted `story:` text of the API export."""
        return extract_after_key(body, self.STORY_KEY, BACKTICK)

    def example_code(self, body: str) -> Optional[str]:
        """
        JSX returned by the story.

        Object stories are searched for a `render: () => { ... }` function
        closed by a two-space-indented brace. If there is one, only its body is
        considered; otherwise the whole export body is treated as a function
        body.
        """
        render_match = self.RENDER_PATTERN.search(body)
        if render_match:
            return self._first_return(render_match.group(1).strip(), self.RENDER_RETURN_RULES)
        return self._first_return(body, self.BODY_RETURN_RULES)

    def _is_closed_literal(self, value: str) -> bool:
        return len(value) >= 2 and value[0] in self.QUOTES and value[-1] == value[0]

    def _first_return(self, text: str, rules: List[ReturnRule]) -> Optional[str]:
        for rule in rules:
            code = rule.apply(text)
            if code is not None:
                return code
        return None
