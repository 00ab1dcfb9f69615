# parsers/base.py

from abc import ABC, abstractmethod

from .models import DocumentStructure


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> DocumentStructure:
        """
        Extract the structural model of a document.

        Requirements:
        - Deterministic output for same input
        - Offsets are document-global
        - Malformed markup is skipped, never raised
        - No state kept between calls
        """
        raise NotImplementedError
