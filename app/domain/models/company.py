"""Company domain model — maps to the 'companies' table."""

import enum

from sqlalchemy import Column, Date, Enum, ForeignKey, Integer, Numeric, String, Text, func, select
from sqlalchemy.orm import column_property, relationship

from app.domain.models.plan import Plan
from app.infrastructure.database import Base, TimestampMixin


class CompanyType(str, enum.Enum):
    ARCHITECT = "ARCHITECT"
    ENTERPRISE = "ENTERPRISE"


class Company(TimestampMixin, Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    numero_inscription = Column(String(100), unique=True, nullable=False)
    date_immatriculation = Column(Date, nullable=True)
    raison_sociale = Column(String(255), nullable=False)
    forme_juridique = Column(String(100), nullable=True)
    regime_juridique = Column(String(100), nullable=True)
    capital = Column(Numeric(15, 2), nullable=True)
    nis = Column(String(50), nullable=True)
    nif = Column(String(50), nullable=True)
    adresse = Column(String(500), nullable=True)
    commune = Column(String(255), nullable=True, index=True)
    wilaya = Column(String(255), nullable=True, index=True)
    solution_immobiliere = Column(Text, nullable=True)
    nos_services = Column(Text, nullable=True)
    nos_residences = Column(Text, nullable=True)
    type = Column(Enum(CompanyType, name="company_type"), nullable=False)

    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    owner = relationship("User", back_populates="companies")
    plans = relationship("Plan", back_populates="company")
    plan_count = column_property(
        select(func.count(Plan.id))
        .where(Plan.company_id == id)
        .correlate_except(Plan)
        .scalar_subquery()
    )

    def __repr__(self):
        return f"<Company {self.numero_inscription} - {self.raison_sociale}>"
