"""Write generated documents to disk."""

from pathlib import Path
from typing import Optional, Union

from ..utils import logger


class FileWriter:
    """Write text files below a root directory.

    Failures are logged and reported through the return value so a
    generation pass can carry on with the remaining files.
    """

    def __init__(self, root: Optional[Union[str, Path]] = None, encoding: str = "utf-8"):
        self.root = Path(root) if root else Path.cwd()
        self.encoding = encoding

    def resolve(self, folder: str, filename: str) -> Path:
        return self.root / folder / filename

    def write(self, folder: str, filename: str, content: str) -> bool:
        """Write ``content`` to ``root/folder/filename``, creating directories."""
        output_file = self.resolve(folder, filename)

        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(content, encoding=self.encoding)
            return True
        except (OSError, ValueError) as e:
            logger.error(f"Error writing {output_file}: {e}")
            return False
