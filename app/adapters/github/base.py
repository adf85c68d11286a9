from abc import ABC, abstractmethod

from app.schemas.article import DirectoryEntry


class AbstractContentSource(ABC):
    """Interface for a remote directory of markdown files."""

    @abstractmethod
    async def list_directory(self) -> list[DirectoryEntry]:
        """List the configured articles directory.

        Raises:
            UpstreamAppError: If the listing cannot be obtained.
        """
        ...

    @abstractmethod
    async def fetch_raw(self, url: str) -> str:
        """Download the full text of one file.

        Raises:
            EntryProcessingError: If the server answers with a non-success status.
            httpx.HTTPError: On transport failures.
        """
        ...
