# apps/territories/domain/entities.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class RequestStatus(str, Enum):
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'


class RepRole(str, Enum):
    TERRITORY_MANAGER = 'territory_manager'
    ACCOUNT_EXECUTIVE = 'account_executive'
    SALES_DEVELOPMENT_REP = 'sales_development_rep'


@dataclass
class TerritoryEntity:
    id: Optional[int]
    name: str
    region: str
    description: str = ""
    manager: str = ""
    revenue_target: float = 0.0
    revenue_current: float = 0.0
    accounts: int = 0
    opportunities: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class SalesRepEntity:
    id: Optional[int]
    name: str
    email: str
    role: RepRole = RepRole.ACCOUNT_EXECUTIVE
    territory_ids: List[int] = field(default_factory=list)
    quota: float = 0.0
    achieved: float = 0.0


@dataclass
class AssignmentRequestEntity:
    id: Optional[int]
    territory_id: int
    requested_for_id: int  # SalesRep
    reason: str
    requested_by_id: Optional[int] = None  # User
    status: RequestStatus = RequestStatus.PENDING
    created_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None
    resolved_by_id: Optional[int] = None

    def is_pending(self) -> bool:
        return self.status == RequestStatus.PENDING
