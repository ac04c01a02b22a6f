"""Transport abstraction consumed by the Contentfully facade."""

from abc import ABC, abstractmethod
from typing import Any


class ContentClient(ABC):
    """Abstract interface for reading raw delivery API payloads."""

    @abstractmethod
    def query(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET ``path`` with query ``params``. Raises ContentfulError on failure."""

    def get_entry(self, entry_id: str) -> dict[str, Any]:
        return self.query(f'/entries/{entry_id}')

    def get_entries(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self.query('/entries', params)

    def get_locales(self) -> dict[str, Any]:
        return self.query('/locales')

    def get_content_models(self) -> dict[str, Any]:
        return self.query('/content_types')
