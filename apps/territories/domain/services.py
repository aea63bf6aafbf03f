# apps/territories/domain/services.py
import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from django.utils import timezone

from apps.goals.domain.progress import display_percentage
from apps.territories.domain.entities import (
    TerritoryEntity, SalesRepEntity, AssignmentRequestEntity, RequestStatus,
)
from apps.territories.ports.repositories import (
    ITerritoryRepository, TerritoryNotFoundError, AssignmentRequestNotFoundError,
)

logger = logging.getLogger(__name__)

RESOLUTION_STATUSES = (RequestStatus.APPROVED, RequestStatus.REJECTED)


def progress_variant(percentage: int) -> str:
    """Kolor paska postępu (klasy Bootstrapa)."""
    if percentage >= 100:
        return 'success'
    if percentage >= 75:
        return 'info'
    if percentage >= 50:
        return 'warning'
    return 'danger'


def validate_territory(territory: TerritoryEntity) -> None:
    if not territory.name or not territory.name.strip():
        raise ValueError("Territory name is required")
    if not territory.region or not territory.region.strip():
        raise ValueError("Region is required")
    for field in ('revenue_target', 'revenue_current', 'accounts', 'opportunities'):
        if getattr(territory, field) < 0:
            raise ValueError(f"{field.replace('_', ' ').capitalize()} cannot be negative")


class TerritoryService:
    """
    Operacje na terytoriach: postęp przychodu, zapis z walidacją
    i obieg wniosków o przypisanie handlowca.
    """

    def __init__(self, repository: ITerritoryRepository):
        self.repo = repository

    @staticmethod
    def revenue_progress(territory: TerritoryEntity) -> int:
        if territory.revenue_target <= 0:
            return 0
        return display_percentage(territory.revenue_current / territory.revenue_target * 100)

    @staticmethod
    def rep_attainment(rep: SalesRepEntity) -> int:
        if rep.quota <= 0:
            return 0
        return display_percentage(rep.achieved / rep.quota * 100)

    def save_territory(self, territory: TerritoryEntity) -> TerritoryEntity:
        validate_territory(territory)
        if territory.id is not None and self.repo.get_by_id(territory.id) is None:
            raise TerritoryNotFoundError(territory.id)
        saved = self.repo.save(territory)
        logger.info("Territory saved: %s (%s)", saved.id, saved.name)
        return saved

    def delete_territory(self, territory_id: int) -> None:
        if not self.repo.delete(territory_id):
            raise TerritoryNotFoundError(territory_id)
        logger.info("Territory deleted: %s", territory_id)

    def create_request(self, territory_id: int, requested_for_id: int, reason: str,
                       requested_by_id: Optional[int] = None) -> AssignmentRequestEntity:
        if self.repo.get_by_id(territory_id) is None:
            raise TerritoryNotFoundError(territory_id)
        if self.repo.get_rep(requested_for_id) is None:
            raise ValueError(f"Sales rep with ID {requested_for_id} not found")
        if not reason or not reason.strip():
            raise ValueError("Reason is required")

        request = AssignmentRequestEntity(
            id=None,
            territory_id=territory_id,
            requested_for_id=requested_for_id,
            requested_by_id=requested_by_id,
            reason=reason.strip(),
        )
        saved = self.repo.save_request(request)
        logger.info("Assignment request %s created for rep %s -> territory %s",
                    saved.id, requested_for_id, territory_id)
        return saved

    def resolve_request(self, request_id: int, status, resolved_by_id: Optional[int],
                        now: Optional[datetime] = None) -> AssignmentRequestEntity:
        status = RequestStatus(status)
        if status not in RESOLUTION_STATUSES:
            raise ValueError(f"Invalid resolution status: {status.value}")

        request = self.repo.get_request(request_id)
        if request is None:
            raise AssignmentRequestNotFoundError(request_id)
        if not request.is_pending():
            raise ValueError(f"Request {request_id} is already {request.status.value}")

        resolved = replace(
            request,
            status=status,
            resolved_by_id=resolved_by_id,
            resolved_at=now or timezone.now(),
        )
        resolved = self.repo.save_request(resolved)

        if status == RequestStatus.APPROVED:
            self.repo.assign_rep(request.requested_for_id, request.territory_id)

        logger.info("Assignment request %s %s by user %s", request_id, status.value, resolved_by_id)
        return resolved
