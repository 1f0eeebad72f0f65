"""
Locate the `meta` configuration block of a stories file.

The block runs from the `const meta` declaration up to `export default meta`.
Inside it, the component description is the backtick literal after the first
`component:` key (typically `parameters.docs.description.component`).
"""

from typing import Optional
import logging

from storydoc.extractors.span_extractor import BACKTICK, extract_after_key
from storydoc.schemas import ConfigurationInfo

logger = logging.getLogger(__name__)


class MetaLocator:
    """Find the meta block and read the component description from it."""

    # Tried in order, first hit wins
    DECLARATION_MARKERS = (
        'const meta',
        'const meta =',
        'const meta:',
    )

    EXPORT_MARKER = 'export default meta'

    COMPONENT_KEY = 'component:'

    def locate_block(self, content: str) -> Optional[str]:
        """
        Return the text of the meta block, or None.

        The returned span includes the declaration marker and stops right
        before the default export marker.
        """
        start = -1
        for marker in self.DECLARATION_MARKERS:
            start = content.find(marker)
            if start != -1:
                break

        if start == -1:
            return None

        end = content.find(self.EXPORT_MARKER, start)
        if end == -1:
            logger.debug("meta declaration found without 'export default meta'")
            return None

        return content[start:end]

    def parse(self, content: str) -> Optional[ConfigurationInfo]:
        """
        Extract the component configuration from a stories file.

        Returns None unless a block, a `component:` key and a backtick
        literal after it are all present.
        """
        block = self.locate_block(content)
        if block is None:
            return None

        description = extract_after_key(block, self.COMPONENT_KEY, BACKTICK)
        if description is None:
            logger.debug("meta block has no backtick component description")
            return None

        return ConfigurationInfo(description=description)
