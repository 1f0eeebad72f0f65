"""
Component scanner for a packages directory.

Each component lives in its own directory under the packages root, with its
stories at a fixed relative path:

    packages/
      Button/
        src/index.stories.tsx   <- input
        Button.md               <- output (unless an output directory is set)
"""

from pathlib import Path
from typing import List, Optional, Set
import logging

logger = logging.getLogger(__name__)


class ComponentScanner:
    """
    Resolve component names to stories/output paths and discover components.

    Excludes common non-component directories:
    - node_modules, .git, __pycache__, build, dist, etc.
    """

    DEFAULT_STORIES_FILE = "src/index.stories.tsx"

    DEFAULT_EXCLUDE_DIRS = {
        'node_modules',
        '__pycache__',
        'build',
        'dist',
        'coverage',
        'storybook-static',
    }

    def __init__(
        self,
        packages_dir: Path,
        output_dir: Optional[Path] = None,
        stories_file: Optional[str] = None,
        exclude_dirs: Optional[Set[str]] = None
    ):
        """
        Initialize the component scanner.

        Args:
            packages_dir: Directory holding one subdirectory per component
            output_dir: Directory for generated Markdown (default: the component's directory)
            stories_file: Stories path relative to a component directory
            exclude_dirs: Directory names that are never components
        """
        self.packages_dir = Path(packages_dir)
        self.output_dir = Path(output_dir) if output_dir else None
        self.stories_file = stories_file or self.DEFAULT_STORIES_FILE
        self.exclude_dirs = exclude_dirs or self.DEFAULT_EXCLUDE_DIRS

    def stories_path(self, component_name: str) -> Path:
        """Path of a component's stories file."""
        return self.packages_dir / component_name / self.stories_file

    def output_path(self, component_name: str) -> Path:
        """Path of a component's generated Markdown file."""
        if self.output_dir is not None:
            return self.output_dir / f"{component_name}.md"
        return self.packages_dir / component_name / f"{component_name}.md"

    def has_stories(self, component_name: str) -> bool:
        return self.stories_path(component_name).is_file()

    def list_components(self) -> List[str]:
        """
        List component names, sorted for consistent ordering.

        Returns:
            Names of the packages directory's subdirectories, skipping hidden
            and excluded ones

        Raises:
            ValueError: If the packages directory does not exist
        """
        if not self.packages_dir.is_dir():
            raise ValueError(f"Packages directory does not exist: {self.packages_dir}")

        names = []
        for item in self.packages_dir.iterdir():
            if not item.is_dir():
                continue
            if item.name.startswith('.') or item.name in self.exclude_dirs:
                logger.debug(f"Skipping directory: {item.name}")
                continue
            names.append(item.name)

        names.sort()
        logger.info(f"Found {len(names)} components in {self.packages_dir}")
        return names


def list_components(packages_dir: Path) -> List[str]:
    """
    Convenience function to list the components of a packages directory.

    Example:
        >>> list_components(Path("packages"))
        ['Button', 'Input', 'Select']
    """
    return ComponentScanner(packages_dir).list_components()
