import logging
import os
import tempfile
import time
import uuid
from pathlib import Path
from typing import Optional, Union

from .errors import DirectoryCreateError, DirectoryNotWritableError

logger = logging.getLogger(__name__)

FILE_PREFIX = "chromepdf_"


class TempHtmlFile:
    """
    Single-use HTML file the browser navigates to.

    Usage:
        with TempHtmlFile(html, folder) as path:
            ...
    The file is removed on exit whatever happens inside the block.
    """

    def __init__(self, content: str, directory: Optional[Union[str, Path]] = None):
        self.content = content
        self.directory = directory
        self.path: Optional[Path] = None

    def __enter__(self) -> Path:
        self.path = self.write(self.content, self.directory)
        return self.path

    def __exit__(self, exc_type, exc, tb):
        if self.path is not None:
            self.delete(self.path)
        return False

    # -------------------------------------------------
    # DIRECTORY
    # -------------------------------------------------
    @staticmethod
    def resolve_directory(directory: Optional[Union[str, Path]] = None) -> Path:
        if directory is None:
            return Path(tempfile.gettempdir())
        return Path(directory)

    @classmethod
    def ensure_directory(cls, directory: Optional[Union[str, Path]] = None) -> Path:
        folder = cls.resolve_directory(directory)

        if not folder.is_dir():
            try:
                folder.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                if not folder.is_dir():
                    raise DirectoryCreateError(folder) from exc
        elif not os.access(folder, os.W_OK):
            raise DirectoryNotWritableError(folder)

        return folder

    # -------------------------------------------------
    # FILE
    # -------------------------------------------------
    @staticmethod
    def unique_name() -> str:
        return f"{FILE_PREFIX}{time.time_ns():x}{uuid.uuid4().hex}.html"

    @classmethod
    def write(cls, content: str, directory: Optional[Union[str, Path]] = None) -> Path:
        folder = cls.ensure_directory(directory)
        path = folder / cls.unique_name()

        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote temp HTML file: %s", path)

        return path

    @staticmethod
    def delete(path: Union[str, Path]) -> None:
        """Remove `path` if present. Never raises."""
        try:
            Path(path).unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Could not delete temp file %s: %s", path, exc)
