"""Base class for doc form handlers."""

from abc import ABC, abstractmethod
from typing import List

from ..errors import MalformedRegion
from ..models import DocForm, Region
from ..source import SourceText


class DocFormHandler(ABC):
    """Recognizes, delimits and decodes one concrete doc syntax."""

    form: DocForm

    @abstractmethod
    def recognizes(self, source: SourceText, index: int) -> bool:
        """Return True when ``source.lines[index]`` opens a region of this form at column zero."""

    @abstractmethod
    def scan(self, source: SourceText, index: int) -> Region:
        """Delimit the region opening on ``source.lines[index]``.

        Raises MalformedRegion when the region never closes.
        """

    @abstractmethod
    def decode(self, region: Region) -> List[str]:
        """Strip the form's syntax from a scanned region, yielding text lines."""

    def malformed(self, source: SourceText, offset: int, message: str) -> MalformedRegion:
        line, column = source.position(offset)
        return MalformedRegion(message, path=source.path, line=line, column=column)
