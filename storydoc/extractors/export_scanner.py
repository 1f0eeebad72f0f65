"""
Story export scanning.

Walks a stories file line by line looking for export headers. Three header
shapes are recognized, tried in order:

1. Object story:      export const Primary: Story = {
2. Function story:    export const Secondary = () => {
3. Annotated function story:  export const Custom: Story = (

Each matched export's body is captured with a DelimiterBalancer and turned into
an ExportRecord. The cursor then skips the whole body so nested text is never
scanned for headers.

Known limitation: an annotated function whose body is a parenthesized
expression, such as `export const Template: Story = (args) => (` followed by
JSX and `);`, opens no brace. Its capture starts at depth 1 and runs on through
the following exports until the braces balance or the file ends, so those
exports are folded into the template record.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple
import logging

from storydoc.extractors.balancer import BodyCapture, BraceBalancer, DelimiterBalancer, brace_delta
from storydoc.extractors.field_extractor import FieldExtractor
from storydoc.schemas import REFERENCE_EXPORT_NAME, ExportRecord

logger = logging.getLogger(__name__)

# Story type annotation: Story, StoryObj<typeof meta>, Stories.Story
_TYPE_NAME = r'[\w.]+(?:<[^=]*>)?'


@dataclass(frozen=True)
class ExportShape:
    """One recognized export header shape."""
    name: str
    pattern: Pattern[str]
    opens_brace: bool  # Whether the matched header text ends with `{`


class ExportScanner:
    """
    Find story exports in a stories file.

    New header shapes are added by appending to SHAPES; earlier shapes keep
    priority.
    """

    SHAPES: List[ExportShape] = [
        ExportShape(
            'object',
            re.compile(rf'^export const (\w+):\s*{_TYPE_NAME}\s*=\s*\{{\s*$'),
            opens_brace=True,
        ),
        ExportShape(
            'function',
            re.compile(r'^export const (\w+)\s*=\s*\(\)\s*=>\s*\{'),
            opens_brace=True,
        ),
        ExportShape(
            'annotated-function',
            re.compile(rf'^export const (\w+):\s*{_TYPE_NAME}\s*=\s*\('),
            opens_brace=False,
        ),
    ]

    def __init__(
        self,
        balancer: Optional[DelimiterBalancer] = None,
        fields: Optional[FieldExtractor] = None
    ):
        """
        Initialize the scanner.

        Args:
            balancer: Body capture strategy (default: naive BraceBalancer)
            fields: Field extractor applied to each captured body
        """
        self.balancer = balancer or BraceBalancer()
        self.fields = fields or FieldExtractor()

    def scan(self, content: str) -> List[ExportRecord]:
        """
        Return all recognized story exports in source order.

        Args:
            content: Full text of the stories file

        Returns:
            List of ExportRecord objects (empty if no header matched)
        """
        lines = content.split('\n')
        records = []
        i = 0

        while i < len(lines):
            header = self._match_header(lines[i])
            if header is None:
                i += 1
                continue

            shape, match = header
            export_name = match.group(1)
            capture = self._capture_body(lines, i, shape, lines[i][match.end():])

            logger.debug(
                f"Found {shape.name} export {export_name} "
                f"at line {i + 1} ({capture.lines_consumed} lines)"
            )

            records.append(self.build_record(export_name, capture.text))
            i += capture.lines_consumed

        return records

    def build_record(self, export_name: str, body: str) -> ExportRecord:
        """Build a reference record for the API export, an example record otherwise."""
        if export_name == REFERENCE_EXPORT_NAME:
            return ExportRecord(
                export_name=export_name,
                kind="reference",
                reference_text=self.fields.reference_text(body),
            )

        return ExportRecord(
            export_name=export_name,
            kind="example",
            display_name=self.fields.display_name(body),
            description=self.fields.description(body),
            example_code=self.fields.example_code(body),
        )

    def _match_header(self, line: str) -> Optional[Tuple[ExportShape, re.Match]]:
        for shape in self.SHAPES:
            match = shape.pattern.match(line)
            if match:
                return shape, match
        return None

    def _capture_body(
        self,
        lines: List[str],
        header_index: int,
        shape: ExportShape,
        remainder: str
    ) -> BodyCapture:
        """
        Capture the body following a header.

        The header's own opener leaves one level open. If the rest of the
        header line also carries braces they are counted too; a header line
        that closes everything it opened is a single-line export whose body is
        the rest of that line. Any other text after the opener is kept as the
        first line of the body.
        """
        if '{' not in remainder and '}' not in remainder:
            capture = self.balancer.capture(lines, header_index + 1)
        else:
            depth = (1 if shape.opens_brace else 0) + brace_delta(remainder)
            if depth <= 0:
                return BodyCapture(text=remainder, lines_consumed=1)
            capture = self.balancer.capture(lines, header_index + 1, initial_depth=depth)

        if remainder.strip():
            return BodyCapture(
                text=remainder + '\n' + capture.text,
                lines_consumed=capture.lines_consumed
            )
        return capture
