from abc import ABC, abstractmethod
from typing import Optional


class Worker_directory_provider(ABC):
    @abstractmethod
    def find_id_by_name(self, name: str) -> Optional[str]:
        """Return the id of the first worker whose name contains `name`."""
        pass
