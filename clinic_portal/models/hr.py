import uuid
from datetime import date, datetime
from decimal import Decimal
from enum import Enum as PyEnum

from sqlalchemy import (
    BigInteger,
    Boolean,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    Uuid,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from clinic_portal.models.base import HrBase


class EmployeeStatus(str, PyEnum):
    ACTIVE = "ACTIVE"
    ON_LEAVE = "ON_LEAVE"
    RESIGNED = "RESIGNED"


class EmploymentType(str, PyEnum):
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"


class PolicyType(str, PyEnum):
    PERCENTAGE = "PERCENTAGE"
    FIXED = "FIXED"


class Employee(HrBase):
    """
    HR record for one clinic employee.

    Not linked to an auth user; clinic_id is a reference into the auth store.
    """

    __tablename__ = "employees"
    __table_args__ = (
        UniqueConstraint("clinic_id", "employee_number", name="uq_employees_clinic_number"),
    )

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    clinic_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    employee_number: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    position: Mapped[str | None] = mapped_column(String(100), nullable=True)
    department: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)

    hire_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[EmployeeStatus] = mapped_column(
        Enum(EmployeeStatus, name="employee_status_enum"),
        nullable=False,
        default=EmployeeStatus.ACTIVE,
    )
    employment_type: Mapped[EmploymentType] = mapped_column(
        Enum(EmploymentType, name="employment_type_enum"),
        nullable=False,
        default=EmploymentType.FULL_TIME,
    )
    base_salary: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=datetime.utcnow,
    )


class IncentivePolicy(HrBase):
    __tablename__ = "incentive_policies"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    clinic_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    policy_type: Mapped[PolicyType] = mapped_column(
        Enum(PolicyType, name="policy_type_enum"),
        nullable=False,
    )
    value: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    min_achievement_rate: Mapped[Decimal] = mapped_column(
        Numeric(5, 2),
        nullable=False,
        default=Decimal("100"),
        doc="Percent of the monthly target an employee must reach.",
    )
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )


class TargetRevenue(HrBase):
    __tablename__ = "target_revenues"
    __table_args__ = (
        UniqueConstraint("employee_id", "year", "month", name="uq_target_revenues_employee_period"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    clinic_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    employee_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
    )

    year: Mapped[int] = mapped_column(Integer, nullable=False)
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    target_amount: Mapped[int] = mapped_column(BigInteger, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )


TABLES = [
    Employee.__table__,
    IncentivePolicy.__table__,
    TargetRevenue.__table__,
]
