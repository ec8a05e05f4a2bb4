"""Plan and SubPlan domain models — map to 'plans' and 'sub_plans'."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text, func, select
from sqlalchemy.orm import column_property, relationship

from app.infrastructure.database import Base, TimestampMixin


class Plan(TimestampMixin, Base):
    __tablename__ = "plans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False, index=True)
    # Copied from the company at creation, never re-synced.
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    company = relationship("Company", back_populates="plans")
    owner = relationship("User", back_populates="plans")
    sub_plans = relationship("SubPlan", back_populates="plan", order_by="[SubPlan.created_at.desc(), SubPlan.id.desc()]")

    def __repr__(self):
        return f"<Plan {self.id} - {self.name}>"


class SubPlan(TimestampMixin, Base):
    __tablename__ = "sub_plans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    picture_url = Column(String(500), nullable=True)
    file_url = Column(String(500), nullable=False)

    plan_id = Column(Integer, ForeignKey("plans.id"), nullable=False, index=True)

    plan = relationship("Plan", back_populates="sub_plans")

    def __repr__(self):
        return f"<SubPlan {self.id} - {self.name}>"


Plan.sub_plan_count = column_property(
    select(func.count(SubPlan.id))
    .where(SubPlan.plan_id == Plan.id)
    .correlate_except(SubPlan)
    .scalar_subquery()
)
