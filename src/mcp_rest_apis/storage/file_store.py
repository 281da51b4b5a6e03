"""Named text blobs stored in one fixed directory."""

from pathlib import Path
from typing import List

from ..exceptions import FileStoreError, NotFoundError
from ..logger import get_logger

logger = get_logger(__name__)


class FileStore:
    """
    Reads, writes and lists text files directly inside a single base directory.

    The file name is the only identity of a stored file. Writes overwrite
    (last write wins) and nothing is ever deleted.
    """

    def __init__(self, base_dir: str | Path) -> None:
        """
        Initialize the FileStore.

        Args:
            base_dir: Directory holding the stored files. It is created on the first save.
        """
        self.base_dir = Path(base_dir)

    def save(self, name: str, content: str) -> Path:
        """Write ``content`` as the full contents of ``name``.

        Args:
            name: File name inside the base directory.
            content: Text to store. It is written as-is, no newline is appended.

        Returns:
            The path of the written file.

        Raises:
            FileStoreError: If the name is invalid or the write fails.
        """
        path = self._resolve(name)
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="") as fh:
                fh.write(content)
        except OSError as e:
            msg = f"Error saving file '{name}': {e}"
            logger.error(msg)
            raise FileStoreError(msg) from e

        logger.info("Saved file '%s' (%d characters).", name, len(content))
        return path

    def get(self, name: str) -> str:
        """Return the full text of ``name``.

        Raises:
            NotFoundError: If no file of that name exists.
            FileStoreError: If the name is invalid or the read fails.
        """
        path = self._resolve(name)
        if not path.is_file():
            msg = f"File '{name}' not found in {self.base_dir}"
            logger.warning(msg)
            raise NotFoundError(msg)

        try:
            with path.open("r", encoding="utf-8", newline="") as fh:
                return fh.read()
        except OSError as e:
            msg = f"Error reading file '{name}': {e}"
            logger.error(msg)
            raise FileStoreError(msg) from e

    def list(self) -> List[str]:
        """Return the sorted names of the entries directly inside the base directory.

        A missing or empty base directory yields an empty list.

        Raises:
            FileStoreError: If the directory cannot be read.
        """
        if not self.base_dir.exists():
            logger.debug("Base directory %s does not exist yet.", self.base_dir)
            return []

        try:
            return sorted(entry.name for entry in self.base_dir.iterdir())
        except OSError as e:
            msg = f"Error listing files in {self.base_dir}: {e}"
            logger.error(msg)
            raise FileStoreError(msg) from e

    def _resolve(self, name: str) -> Path:
        if not name or name in (".", ".."):
            raise FileStoreError(f"Invalid file name: '{name}'")

        path = self.base_dir / name

        # Security check to prevent writing or reading outside the base directory
        try:
            relative = path.resolve().relative_to(self.base_dir.resolve())
        except ValueError:
            msg = f"Access denied: '{name}' is outside of {self.base_dir}"
            logger.warning(msg)
            raise FileStoreError(msg)

        if len(relative.parts) != 1:
            raise FileStoreError(f"Invalid file name: '{name}' must not contain directories")
        return self.base_dir / relative.name
