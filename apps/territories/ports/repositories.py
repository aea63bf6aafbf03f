# apps/territories/ports/repositories.py
from abc import ABC, abstractmethod
from typing import List, Optional
from apps.territories.domain.entities import (
    TerritoryEntity, SalesRepEntity, AssignmentRequestEntity, RequestStatus,
)


class TerritoryNotFoundError(LookupError):
    def __init__(self, territory_id):
        super().__init__(f"Territory with ID {territory_id} not found")
        self.territory_id = territory_id


class AssignmentRequestNotFoundError(LookupError):
    def __init__(self, request_id):
        super().__init__(f"Assignment request with ID {request_id} not found")
        self.request_id = request_id


class ITerritoryRepository(ABC):
    @abstractmethod
    def get_by_id(self, territory_id: int) -> Optional[TerritoryEntity]:
        pass

    @abstractmethod
    def list(self, region: Optional[str] = None) -> List[TerritoryEntity]:
        pass

    @abstractmethod
    def save(self, territory: TerritoryEntity) -> TerritoryEntity:
        """Tworzy lub aktualizuje terytorium; nieznane ID -> TerritoryNotFoundError."""
        pass

    @abstractmethod
    def delete(self, territory_id: int) -> bool:
        pass

    # --- Handlowcy ---

    @abstractmethod
    def get_rep(self, rep_id: int) -> Optional[SalesRepEntity]:
        pass

    @abstractmethod
    def list_reps(self, territory_id: Optional[int] = None) -> List[SalesRepEntity]:
        """Wszyscy handlowcy albo tylko przypisani do terytorium."""
        pass

    @abstractmethod
    def assign_rep(self, rep_id: int, territory_id: int) -> None:
        """Przypisuje handlowca do terytorium (bez duplikatów)."""
        pass

    # --- Wnioski o przypisanie ---

    @abstractmethod
    def get_request(self, request_id: int) -> Optional[AssignmentRequestEntity]:
        pass

    @abstractmethod
    def list_requests(self, status: Optional[RequestStatus] = None) -> List[AssignmentRequestEntity]:
        pass

    @abstractmethod
    def save_request(self, request: AssignmentRequestEntity) -> AssignmentRequestEntity:
        """Nieznane ID -> AssignmentRequestNotFoundError."""
        pass
