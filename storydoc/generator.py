"""
storydoc generator - main orchestration logic.

Ties together component path resolution, extraction and Markdown formatting.
Components are processed one at a time; a component that fails is logged and
recorded without stopping the rest of the batch.
"""

from pathlib import Path
from typing import List, Optional
from datetime import datetime
import logging

from storydoc.config import Settings
from storydoc.extractors import StoriesExtractor
from storydoc.formatters import MarkdownFormatter
from storydoc.schemas import ComponentResult, DocumentData, GenerationSummary
from storydoc.utils import ComponentScanner

logger = logging.getLogger(__name__)


class StoryDocGenerator:
    """
    Main generator for component documentation.

    For each component:
    1. Resolve the stories file path
    2. Check that it exists
    3. Extract DocumentData
    4. Render Markdown
    5. Write the output file
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the generator.

        Args:
            settings: Paths and rendering options (default: Settings.from_env())
        """
        self.settings = settings or Settings.from_env()
        self.scanner = ComponentScanner(
            packages_dir=self.settings.packages_dir,
            output_dir=self.settings.output_dir,
            stories_file=self.settings.stories_file,
        )
        self.extractor = StoriesExtractor()
        self.formatter = MarkdownFormatter(
            examples_heading=self.settings.examples_heading,
            code_language=self.settings.code_language,
        )

    def process_component(self, component_name: str) -> ComponentResult:
        """
        Generate and write the Markdown for one component.

        Args:
            component_name: Name of the component's package directory

        Returns:
            ComponentResult describing the written file

        Raises:
            FileNotFoundError: If the component has no stories file
        """
        stories_path = self.scanner.stories_path(component_name)
        if not stories_path.is_file():
            raise FileNotFoundError(
                f"Stories file for component {component_name} does not exist: {stories_path}"
            )

        data = self.extractor.extract_from_file(stories_path)
        markdown = self.formatter.format(data, component_name)

        output_path = self.scanner.output_path(component_name)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markdown, encoding='utf-8')

        logger.info(f"Generated {component_name} documentation: {output_path}")

        return ComponentResult(
            component_name=component_name,
            success=True,
            stories_path=str(stories_path),
            output_path=str(output_path),
            total_exports=len(data.exports),
            total_examples=len(data.examples),
            has_description=data.configuration is not None,
            has_reference=data.reference is not None and data.reference.reference_text is not None,
        )

    def generate(self, component_names: List[str]) -> GenerationSummary:
        """
        Generate documentation for several components.

        Args:
            component_names: Components to process, in order

        Returns:
            GenerationSummary with one result per component
        """
        summary = GenerationSummary(timestamp=datetime.now().isoformat())

        for component_name in component_names:
            try:
                result = self.process_component(component_name)
            except (OSError, UnicodeDecodeError, ValueError) as e:
                logger.error(f"Error processing component {component_name}: {e}")
                result = ComponentResult(
                    component_name=component_name,
                    success=False,
                    stories_path=str(self.scanner.stories_path(component_name)),
                    error=str(e),
                )
            summary.results.append(result)

        logger.info(
            f"Processed {len(summary.results)} components "
            f"({len(summary.succeeded)} succeeded, {len(summary.failed)} failed)"
        )
        return summary

    def generate_all(self) -> GenerationSummary:
        """Generate documentation for every component in the packages directory."""
        return self.generate(self.scanner.list_components())

    def extract_file(self, stories_path: Path) -> DocumentData:
        """Extract a single stories file."""
        return self.extractor.extract_from_file(stories_path)

    def render_file(self, stories_path: Path, component_name: Optional[str] = None) -> str:
        """
        Render a single stories file without writing anything.

        Args:
            stories_path: Path to the stories file
            component_name: Document title (default: the package directory
                name for the conventional layout, else the file's stem)

        Returns:
            Markdown text
        """
        stories_path = Path(stories_path)
        if component_name is None:
            component_name = self._component_name_for(stories_path)

        data = self.extract_file(stories_path)
        return self.formatter.format(data, component_name)

    def _component_name_for(self, stories_path: Path) -> str:
        depth = len(Path(self.settings.stories_file).parts)
        parents = stories_path.parents
        if len(parents) >= depth:
            candidate = parents[depth - 1]
            if candidate.name and candidate / self.settings.stories_file == stories_path:
                return candidate.name
        return stories_path.name.split('.')[0]


def generate_component_markdown(
    component_names: List[str],
    settings: Optional[Settings] = None
) -> GenerationSummary:
    """
    Convenience function to generate documentation for a list of components.

    Example:
        >>> summary = generate_component_markdown(["Button", "Input"])
        >>> [r.component_name for r in summary.failed]
        []
    """
    return StoryDocGenerator(settings).generate(component_names)
