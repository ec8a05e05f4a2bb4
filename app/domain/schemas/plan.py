"""Pydantic schemas for Plan and SubPlan."""

from datetime import datetime

from pydantic import Field, field_validator

from app.domain.schemas.common import CamelModel, OwnerSummary, reject_null
from app.domain.schemas.company import CompanyLocation, CompanyRead, CompanySummary


class PlanCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    company_id: int = Field(ge=1)


class PlanUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None

    @field_validator("name")
    @classmethod
    def required_columns_not_null(cls, value):
        return reject_null(value)


class PlanRead(CamelModel):
    id: int
    name: str
    description: str | None = None
    company_id: int
    owner_id: int
    company: CompanySummary | None = None
    owner: OwnerSummary | None = None
    sub_plan_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SubPlanCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    picture_url: str | None = None
    file_url: str = Field(min_length=1)
    plan_id: int = Field(ge=1)


class SubPlanUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    picture_url: str | None = None
    file_url: str | None = Field(default=None, min_length=1)

    @field_validator("name", "file_url")
    @classmethod
    def required_columns_not_null(cls, value):
        return reject_null(value)


class SubPlanRead(CamelModel):
    id: int
    name: str
    picture_url: str | None = None
    file_url: str
    plan_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PlanSummary(CamelModel):
    id: int
    name: str
    company: CompanySummary | None = None


class SubPlanListItem(SubPlanRead):
    plan: PlanSummary | None = None


class PlanWithOwner(CamelModel):
    id: int
    name: str
    description: str | None = None
    owner_id: int
    company: CompanyLocation | None = None
    owner: OwnerSummary | None = None


class SubPlanDetail(SubPlanRead):
    plan: PlanWithOwner | None = None


class PlanDetail(PlanRead):
    company: CompanyLocation | None = None
    sub_plans: list[SubPlanRead] = []


class CompanyDetail(CompanyRead):
    plans: list[PlanRead] = []
