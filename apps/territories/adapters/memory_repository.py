# apps/territories/adapters/memory_repository.py
from dataclasses import replace
from itertools import count
from typing import Dict, Iterable, List, Optional

from django.utils import timezone

from apps.territories.domain.entities import (
    TerritoryEntity, SalesRepEntity, AssignmentRequestEntity, RequestStatus,
)
from apps.territories.ports.repositories import (
    AssignmentRequestNotFoundError, ITerritoryRepository, TerritoryNotFoundError,
)


class InMemoryTerritoryRepository(ITerritoryRepository):
    """Terytoria, handlowcy i wnioski trzymane w słownikach. Zwraca kopie encji."""

    def __init__(self, territories: Iterable[TerritoryEntity] = (), reps: Iterable[SalesRepEntity] = ()):
        self._territories: Dict[int, TerritoryEntity] = {}
        self._reps: Dict[int, SalesRepEntity] = {}
        self._requests: Dict[int, AssignmentRequestEntity] = {}
        self._territory_ids = count(1)
        self._request_ids = count(1)
        for territory in territories:
            self._insert(territory)
        for rep in reps:
            self._reps[rep.id] = replace(rep, territory_ids=list(rep.territory_ids))

    def get_by_id(self, territory_id: int) -> Optional[TerritoryEntity]:
        territory = self._territories.get(territory_id)
        return replace(territory) if territory else None

    def list(self, region: Optional[str] = None) -> List[TerritoryEntity]:
        territories = [t for t in self._territories.values() if not region or t.region == region]
        territories.sort(key=lambda t: (t.region, t.name))
        return [replace(t) for t in territories]

    def save(self, territory: TerritoryEntity) -> TerritoryEntity:
        if territory.id is None:
            return self._insert(territory)
        if territory.id not in self._territories:
            raise TerritoryNotFoundError(territory.id)
        stored = replace(territory, created_at=self._territories[territory.id].created_at,
                         updated_at=timezone.now())
        self._territories[stored.id] = stored
        return replace(stored)

    def _insert(self, territory: TerritoryEntity) -> TerritoryEntity:
        now = timezone.now()
        territory_id = territory.id if territory.id is not None else self._next_id(
            self._territory_ids, self._territories)
        stored = replace(territory, id=territory_id, created_at=territory.created_at or now,
                         updated_at=territory.updated_at or now)
        self._territories[territory_id] = stored
        return replace(stored)

    def delete(self, territory_id: int) -> bool:
        if self._territories.pop(territory_id, None) is None:
            return False
        for rep in self._reps.values():
            if territory_id in rep.territory_ids:
                rep.territory_ids.remove(territory_id)
        return True

    def get_rep(self, rep_id: int) -> Optional[SalesRepEntity]:
        rep = self._reps.get(rep_id)
        return replace(rep, territory_ids=list(rep.territory_ids)) if rep else None

    def list_reps(self, territory_id: Optional[int] = None) -> List[SalesRepEntity]:
        reps = [
            r for r in self._reps.values()
            if territory_id is None or territory_id in r.territory_ids
        ]
        reps.sort(key=lambda r: r.name)
        return [replace(r, territory_ids=list(r.territory_ids)) for r in reps]

    def assign_rep(self, rep_id: int, territory_id: int) -> None:
        rep = self._reps[rep_id]
        if territory_id not in rep.territory_ids:
            rep.territory_ids.append(territory_id)

    def get_request(self, request_id: int) -> Optional[AssignmentRequestEntity]:
        request = self._requests.get(request_id)
        return replace(request) if request else None

    def list_requests(self, status: Optional[RequestStatus] = None) -> List[AssignmentRequestEntity]:
        requests = [
            r for r in self._requests.values()
            if status is None or r.status == RequestStatus(status)
        ]
        requests.sort(key=lambda r: (r.created_at, r.id), reverse=True)
        return [replace(r) for r in requests]

    def save_request(self, request: AssignmentRequestEntity) -> AssignmentRequestEntity:
        if request.id is None:
            stored = replace(request, id=self._next_id(self._request_ids, self._requests),
                             created_at=request.created_at or timezone.now())
        elif request.id not in self._requests:
            raise AssignmentRequestNotFoundError(request.id)
        else:
            stored = replace(request)
        self._requests[stored.id] = stored
        return replace(stored)

    @staticmethod
    def _next_id(ids, taken) -> int:
        new_id = next(ids)
        while new_id in taken:
            new_id = next(ids)
        return new_id
