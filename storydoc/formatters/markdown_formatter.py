"""
Markdown formatter for component documentation.

Structure:
# <Component>

<component description>

## Examples

### <example display name>

<example description>

```tsx
<example code>
```

<API reference text>
"""

from typing import List, Optional
import logging

from storydoc.schemas import ConfigurationInfo, DocumentData, ExportRecord

logger = logging.getLogger(__name__)


class MarkdownFormatter:
    """
    Render DocumentData as a Markdown document.

    Sections are emitted in a fixed order (title, description, examples,
    API reference) and a section with nothing to show is left out entirely.
    Fields that were not found in the stories file render nothing.
    """

    DEFAULT_EXAMPLES_HEADING = "Examples"
    DEFAULT_CODE_LANGUAGE = "tsx"

    def __init__(
        self,
        examples_heading: Optional[str] = None,
        code_language: Optional[str] = None
    ):
        """
        Initialize the formatter.

        Args:
            examples_heading: Heading of the examples section (default: Examples)
            code_language: Fence language of example code blocks (default: tsx)
        """
        self.examples_heading = examples_heading or self.DEFAULT_EXAMPLES_HEADING
        self.code_language = code_language or self.DEFAULT_CODE_LANGUAGE

    def format(self, data: DocumentData, component_name: str) -> str:
        """
        Generate the Markdown document for one component.

        Args:
            data: Extraction result for the component's stories file
            component_name: Used as the document title

        Returns:
            Markdown text
        """
        sections = [
            self._title(component_name),
            self._description(data.configuration),
            self._examples(data.examples),
            self._reference(data.reference),
        ]

        return ''.join(section for section in sections if section)

    def _title(self, component_name: str) -> str:
        return f"# {component_name}\n\n"

    def _description(self, configuration: Optional[ConfigurationInfo]) -> str:
        if configuration is None or configuration.description is None:
            return ''
        return configuration.description + "\n\n"

    def _examples(self, examples: List[ExportRecord]) -> str:
        if not examples:
            return ''

        parts = [f"## {self.examples_heading}\n\n"]

        for example in examples:
            heading = example.display_name or example.export_name
            parts.append(f"### {heading}\n\n")

            if example.description is not None:
                parts.append(example.description + "\n\n")

            if example.example_code is not None:
                parts.append(f"```{self.code_language}\n{example.example_code}\n```\n\n")

        return ''.join(parts)

    def _reference(self, reference: Optional[ExportRecord]) -> str:
        if reference is None or reference.reference_text is None:
            return ''
        return reference.reference_text + "\n"


def generate_markdown(
    data: DocumentData,
    component_name: str,
    examples_heading: Optional[str] = None,
    code_language: Optional[str] = None
) -> str:
    """
    Convenience function to render a component's Markdown.

    Example:
        >>> markdown = generate_markdown(extract_document(content), "Button")
        >>> markdown.splitlines()[0]
        '# Button'
    """
    formatter = MarkdownFormatter(examples_heading=examples_heading, code_language=code_language)
    return formatter.format(data, component_name)
