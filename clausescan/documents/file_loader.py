import asyncio
import mimetypes
from pathlib import Path

from clausescan.documents.exceptions import FileReadError
from clausescan.documents.models import RawDocument


class FileLoader:
    """Reads a document from disk into a RawDocument."""

    def __init__(self, files_root: Path | None = None) -> None:
        self._files_root = files_root

    async def load(self, path: Path, mime_type: str | None = None) -> RawDocument:
        """Read document bytes without blocking the event loop.

        The media type is guessed from the suffix when not given.

        Raises:
            FileNotFoundError: if the file does not exist at resolved path.
            FileReadError: if the file exists but cannot be read.
        """
        resolved = self._resolve_path(path)
        if not resolved.is_file():
            raise FileNotFoundError(f"File not found: {resolved}")
        try:
            content = await asyncio.to_thread(resolved.read_bytes)
        except OSError as exc:
            raise FileReadError(f"Failed to read {resolved}: {exc}") from exc
        if mime_type is None:
            mime_type = mimetypes.guess_type(resolved.name)[0] or ""
        return RawDocument(content=content, file_name=resolved.name, mime_type=mime_type)

    def _resolve_path(self, path: Path) -> Path:
        if self._files_root is None or path.is_absolute():
            return path
        return self._files_root / path
