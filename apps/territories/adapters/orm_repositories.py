# apps/territories/adapters/orm_repositories.py
from decimal import Decimal
from typing import List, Optional
from apps.territories.domain.entities import (
    TerritoryEntity, SalesRepEntity, AssignmentRequestEntity, RequestStatus, RepRole,
)
from apps.territories.ports.repositories import (
    AssignmentRequestNotFoundError, ITerritoryRepository, TerritoryNotFoundError,
)
from apps.territories.models import Territory, SalesRep, TerritoryAssignmentRequest


class DjangoTerritoryRepository(ITerritoryRepository):
    def to_entity(self, model: Territory) -> TerritoryEntity:
        return TerritoryEntity(
            id=model.id,
            name=model.name,
            description=model.description,
            region=model.region,
            manager=model.manager,
            revenue_target=float(model.revenue_target),
            revenue_current=float(model.revenue_current),
            accounts=model.accounts,
            opportunities=model.opportunities,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def rep_to_entity(self, model: SalesRep) -> SalesRepEntity:
        return SalesRepEntity(
            id=model.id,
            name=model.name,
            email=model.email,
            role=RepRole(model.role),
            territory_ids=sorted(t.id for t in model.territories.all()),
            quota=float(model.quota),
            achieved=float(model.achieved),
        )

    def request_to_entity(self, model: TerritoryAssignmentRequest) -> AssignmentRequestEntity:
        return AssignmentRequestEntity(
            id=model.id,
            territory_id=model.territory_id,
            requested_for_id=model.requested_for_id,
            requested_by_id=model.requested_by_id,
            reason=model.reason,
            status=RequestStatus(model.status),
            created_at=model.created_at,
            resolved_at=model.resolved_at,
            resolved_by_id=model.resolved_by_id,
        )

    def get_by_id(self, territory_id: int) -> Optional[TerritoryEntity]:
        try:
            return self.to_entity(Territory.objects.get(id=territory_id))
        except Territory.DoesNotExist:
            return None

    def list(self, region: Optional[str] = None) -> List[TerritoryEntity]:
        qs = Territory.objects.all()
        if region:
            qs = qs.filter(region=region)
        return [self.to_entity(t) for t in qs]

    def save(self, territory: TerritoryEntity) -> TerritoryEntity:
        data = {
            'name': territory.name,
            'description': territory.description,
            'region': territory.region,
            'manager': territory.manager,
            'revenue_target': Decimal(str(territory.revenue_target)),
            'revenue_current': Decimal(str(territory.revenue_current)),
            'accounts': territory.accounts,
            'opportunities': territory.opportunities,
        }

        if territory.id is not None:
            try:
                obj = Territory.objects.get(id=territory.id)
            except Territory.DoesNotExist:
                raise TerritoryNotFoundError(territory.id)
            for field, value in data.items():
                setattr(obj, field, value)
            obj.save()
        else:
            obj = Territory.objects.create(**data)

        return self.to_entity(obj)

    def delete(self, territory_id: int) -> bool:
        deleted, _ = Territory.objects.filter(id=territory_id).delete()
        return deleted > 0

    def get_rep(self, rep_id: int) -> Optional[SalesRepEntity]:
        try:
            return self.rep_to_entity(SalesRep.objects.prefetch_related('territories').get(id=rep_id))
        except SalesRep.DoesNotExist:
            return None

    def list_reps(self, territory_id: Optional[int] = None) -> List[SalesRepEntity]:
        qs = SalesRep.objects.prefetch_related('territories')
        if territory_id is not None:
            qs = qs.filter(territories__id=territory_id)
        return [self.rep_to_entity(r) for r in qs]

    def assign_rep(self, rep_id: int, territory_id: int) -> None:
        # add() na M2M nie tworzy duplikatów
        SalesRep.objects.get(id=rep_id).territories.add(territory_id)

    def get_request(self, request_id: int) -> Optional[AssignmentRequestEntity]:
        try:
            return self.request_to_entity(TerritoryAssignmentRequest.objects.get(id=request_id))
        except TerritoryAssignmentRequest.DoesNotExist:
            return None

    def list_requests(self, status: Optional[RequestStatus] = None) -> List[AssignmentRequestEntity]:
        qs = TerritoryAssignmentRequest.objects.all()
        if status is not None:
            qs = qs.filter(status=RequestStatus(status).value)
        return [self.request_to_entity(r) for r in qs]

    def save_request(self, request: AssignmentRequestEntity) -> AssignmentRequestEntity:
        data = {
            'territory_id': request.territory_id,
            'requested_for_id': request.requested_for_id,
            'requested_by_id': request.requested_by_id,
            'reason': request.reason,
            'status': request.status.value,
            'resolved_at': request.resolved_at,
            'resolved_by_id': request.resolved_by_id,
        }

        if request.id is not None:
            try:
                obj = TerritoryAssignmentRequest.objects.get(id=request.id)
            except TerritoryAssignmentRequest.DoesNotExist:
                raise AssignmentRequestNotFoundError(request.id)
            for field, value in data.items():
                setattr(obj, field, value)
            obj.save()
        else:
            obj = TerritoryAssignmentRequest.objects.create(**data)

        return self.request_to_entity(obj)
