import io
import logging
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Iterable, List, TextIO

from .. import config
from ..core.exceptions import RecordSourceError

logger = logging.getLogger(__name__)


def parse_records(lines: Iterable[str]) -> List[str]:
    """Trim each line and keep the non-blank ones in stream order."""
    records = []
    for line in lines:
        line = line.strip()
        if line:
            records.append(line)
    return records


class RecordSource(ABC):
    """
    A readable, line-delimited stream of records.

    Subclasses only need to know how to open the stream; trimming,
    blank-line skipping and error translation live here.
    """

    @abstractmethod
    def open(self) -> TextIO:
        """Open a fresh text stream over the records."""
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human readable location of the records, used in log and error messages."""
        pass

    def read_records(self) -> List[str]:
        """
        Read every record from the source.

        Raises:
            RecordSourceError: If the stream cannot be opened or read
        """
        try:
            with self.open() as stream:
                records = parse_records(stream)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read records from %s: %s", self.describe(), e)
            raise RecordSourceError(
                f"Failed to read records from {self.describe()}: {e}") from e

        logger.debug("Read %d records from %s", len(records), self.describe())
        return records


class FileRecordSource(RecordSource):
    """Records stored one per line in a file on disk."""

    def __init__(self, file_path, encoding: str = config.RECORD_ENCODING):
        self.file_path = Path(file_path)
        self.encoding = encoding

    def open(self) -> TextIO:
        return open(self.file_path, "r", encoding=self.encoding)

    def describe(self) -> str:
        return str(self.file_path)


class PackageResourceRecordSource(RecordSource):
    """Records bundled as a resource inside an installed package."""

    def __init__(self, package: str = config.WORDS_RESOURCE_PACKAGE,
                 resource: str = config.WORDS_RESOURCE_NAME,
                 encoding: str = config.RECORD_ENCODING):
        self.package = package
        self.resource = resource
        self.encoding = encoding

    def open(self) -> TextIO:
        try:
            root = resources.files(self.package)
        except ModuleNotFoundError as e:
            raise FileNotFoundError(f"Resource package not found: {self.package}") from e
        return root.joinpath(self.resource).open("r", encoding=self.encoding)

    def describe(self) -> str:
        return f"{self.package}/{self.resource}"


class TextRecordSource(RecordSource):
    """Records held in memory as a single newline-delimited string."""

    def __init__(self, text: str):
        self.text = text

    def open(self) -> TextIO:
        return io.StringIO(self.text)

    def describe(self) -> str:
        return "<in-memory text>"
