"""
Stories extraction engine.

Combines the meta locator and the export scanner: stories file text in,
DocumentData out. The engine keeps no state between calls and never raises
for any input string.
"""

from pathlib import Path
from typing import Optional
import logging

from storydoc.extractors.balancer import DelimiterBalancer
from storydoc.extractors.export_scanner import ExportScanner
from storydoc.extractors.meta_locator import MetaLocator
from storydoc.schemas import DocumentData

logger = logging.getLogger(__name__)


class StoriesExtractor:
    """Extract DocumentData from stories file content."""

    def __init__(self, balancer: Optional[DelimiterBalancer] = None):
        """
        Initialize the extractor.

        Args:
            balancer: Body capture strategy passed to the export scanner
        """
        self.meta_locator = MetaLocator()
        self.export_scanner = ExportScanner(balancer=balancer)

    def extract(self, content: str) -> DocumentData:
        """Extract the configuration and all story exports from `content`."""
        configuration = self.meta_locator.parse(content)
        exports = self.export_scanner.scan(content)

        logger.debug(
            f"Extracted {len(exports)} exports "
            f"({'with' if configuration else 'without'} component description)"
        )

        return DocumentData(configuration=configuration, exports=tuple(exports))

    def extract_from_file(self, file_path: Path) -> DocumentData:
        """
        Read a stories file and extract it.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        content = Path(file_path).read_text(encoding='utf-8')
        return self.extract(content)


def extract_document(content: str) -> DocumentData:
    """
    Convenience function to extract a stories file's content.

    Example:
        >>> data = extract_document(Path("src/index.stories.tsx").read_text())
        >>> [record.export_name for record in data.exports]
        ['Primary', 'Secondary', 'API']
    """
    return StoriesExtractor().extract(content)
