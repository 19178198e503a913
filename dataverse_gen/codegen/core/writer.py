"""
Persistence of generated files below the configured output root.
"""

from pathlib import Path
from typing import Union

from ...logging_config import get_logger

logger = get_logger(__name__)


class CodeWriter:
    """Writes generated files relative to an output root directory."""

    def __init__(self, output_root: Union[str, Path], encoding: str = "utf-8"):
        self.output_root = Path(output_root)
        self.encoding = encoding

    def resolve(self, relative_path: Union[str, Path]) -> Path:
        return self.output_root / relative_path

    def create_sub_folder(self, relative_path: Union[str, Path]) -> Path:
        """Create a directory under the output root; no-op if it exists."""
        folder = self.resolve(relative_path)
        folder.mkdir(parents=True, exist_ok=True)
        return folder

    def write(self, relative_path: Union[str, Path], content: str) -> Path:
        """
        Create or overwrite a file under the output root.

        Args:
            relative_path: Path relative to the output root
            content: Full file content

        Returns:
            Absolute path of the written file
        """
        target = self.resolve(relative_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding=self.encoding)
        logger.debug("Wrote %d chars to %s", len(content), target)
        return target
