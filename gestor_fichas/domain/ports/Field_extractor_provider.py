from abc import ABC, abstractmethod

from gestor_fichas.domain.schemas.extracted_fields import ExtractedFields


class Field_extractor_provider(ABC):
    @abstractmethod
    def extract(self, text: str) -> ExtractedFields:
        """Extract all known ficha fields from the plain document text.

        Implementations must not raise for unmatched fields; they leave the
        corresponding attribute unset instead.
        """
        pass
