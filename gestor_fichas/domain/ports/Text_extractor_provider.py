from abc import ABC, abstractmethod

from gestor_fichas.domain.schemas.input_data import InputData


class Text_extractor_provider(ABC):
    @abstractmethod
    def get_text(self, input: InputData) -> str:
        """Recover plain text from the uploaded document.

        Raise DocumentError when the document cannot be read.
        """
        pass
