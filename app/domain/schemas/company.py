"""Pydantic schemas for Company."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import Field, field_validator

from app.domain.models.company import CompanyType
from app.domain.schemas.common import CamelModel, OwnerSummary, reject_null


class CompanyCreate(CamelModel):
    numero_inscription: str = Field(min_length=1, max_length=100)
    date_immatriculation: date | None = None
    raison_sociale: str = Field(min_length=1, max_length=255)
    forme_juridique: str | None = None
    regime_juridique: str | None = None
    capital: Decimal | None = Field(default=None, ge=0)
    nis: str | None = None
    nif: str | None = None
    adresse: str | None = None
    commune: str | None = None
    wilaya: str | None = None
    solution_immobiliere: str | None = None
    nos_services: str | None = None
    nos_residences: str | None = None
    type: CompanyType


class CompanyUpdate(CamelModel):
    numero_inscription: str | None = Field(default=None, min_length=1, max_length=100)
    date_immatriculation: date | None = None
    raison_sociale: str | None = Field(default=None, min_length=1, max_length=255)
    forme_juridique: str | None = None
    regime_juridique: str | None = None
    capital: Decimal | None = Field(default=None, ge=0)
    nis: str | None = None
    nif: str | None = None
    adresse: str | None = None
    commune: str | None = None
    wilaya: str | None = None
    solution_immobiliere: str | None = None
    nos_services: str | None = None
    nos_residences: str | None = None
    type: CompanyType | None = None

    @field_validator("numero_inscription", "raison_sociale", "type")
    @classmethod
    def required_columns_not_null(cls, value):
        return reject_null(value)


class CompanySummary(CamelModel):
    id: int
    raison_sociale: str
    type: CompanyType


class CompanyLocation(CompanySummary):
    adresse: str | None = None
    commune: str | None = None
    wilaya: str | None = None


class CompanyRead(CamelModel):
    id: int
    numero_inscription: str
    date_immatriculation: date | None = None
    raison_sociale: str
    forme_juridique: str | None = None
    regime_juridique: str | None = None
    capital: Decimal | None = None
    nis: str | None = None
    nif: str | None = None
    adresse: str | None = None
    commune: str | None = None
    wilaya: str | None = None
    solution_immobiliere: str | None = None
    nos_services: str | None = None
    nos_residences: str | None = None
    type: CompanyType
    owner_id: int
    owner: OwnerSummary | None = None
    plan_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
