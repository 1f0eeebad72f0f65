"""
Brace balancing for story export bodies.

A story export opens one level of braces on its header line. The balancer walks
the following lines counting `{` and `}` until that level closes, returning the
captured body and how many lines the export occupies.

Braces are counted without any lexical context: a brace inside a string, a
comment or a JSX attribute expression counts the same as a structural one.
Pathological input can therefore be over- or under-captured. Callers depend
only on the DelimiterBalancer protocol so a lexically-aware balancer can be
swapped in.
"""

from dataclasses import dataclass
from typing import List, Protocol


@dataclass(frozen=True)
class BodyCapture:
    """Result of capturing an export body."""
    text: str
    lines_consumed: int  # Includes the header line


class DelimiterBalancer(Protocol):
    """Anything that can capture an export body from a list of lines."""

    def capture(self, lines: List[str], start_index: int, initial_depth: int = 1) -> BodyCapture:
        ...


def brace_delta(text: str) -> int:
    """Net number of braces opened by `text`."""
    return text.count('{') - text.count('}')


class BraceBalancer:
    """Naive brace counter, one line at a time."""

    OPEN = '{'
    CLOSE = '}'

    def capture(self, lines: List[str], start_index: int, initial_depth: int = 1) -> BodyCapture:
        """
        Capture lines until the nesting opened by the header returns to zero.

        Args:
            lines: All lines of the source file
            start_index: Index of the first line after the header
            initial_depth: Nesting depth already open when the header ends

        Returns:
            BodyCapture with the joined body (closing line included) and the
            number of lines consumed counting the header itself
        """
        depth = initial_depth
        body_lines = []
        i = start_index

        while i < len(lines) and depth > 0:
            line = lines[i]
            body_lines.append(line)

            for char in line:
                if char == self.OPEN:
                    depth += 1
                elif char == self.CLOSE:
                    depth -= 1

            i += 1

        return BodyCapture(text='\n'.join(body_lines), lines_consumed=len(body_lines) + 1)
