from abc import ABC, abstractmethod
from typing import Optional

from gestor_fichas.domain.schemas.extracted_fields import (
    ScopeScores,
    SubmissionModality,
    TerritorialScope,
)


class Scope_classifier(ABC):
    @abstractmethod
    def score(self, text: str) -> ScopeScores:
        pass

    @abstractmethod
    def classify(self, text: str) -> Optional[TerritorialScope]:
        pass


class Modality_classifier(ABC):
    @abstractmethod
    def classify(self, text: str) -> Optional[SubmissionModality]:
        pass
