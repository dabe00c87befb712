import uuid
from datetime import date, datetime
from enum import Enum as PyEnum

from sqlalchemy import (
    BigInteger,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from clinic_portal.models.base import MarketingBase


class CampaignType(str, PyEnum):
    EVENT = "EVENT"
    SEARCH = "SEARCH"
    SNS = "SNS"
    OFFLINE = "OFFLINE"


class CampaignStatus(str, PyEnum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Campaign(MarketingBase):
    __tablename__ = "campaigns"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    clinic_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[CampaignType] = mapped_column(
        Enum(CampaignType, name="campaign_type_enum"),
        nullable=False,
    )
    status: Mapped[CampaignStatus] = mapped_column(
        Enum(CampaignStatus, name="campaign_status_enum"),
        nullable=False,
        default=CampaignStatus.DRAFT,
    )
    budget: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    spent_amount: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    target_patients: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

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


class MarketingExpense(MarketingBase):
    __tablename__ = "marketing_expenses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    clinic_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    campaign_id: Mapped[str | None] = mapped_column(
        String(50),
        ForeignKey("campaigns.id", ondelete="SET NULL"),
        nullable=True,
    )

    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    expense_date: Mapped[date] = mapped_column(Date, nullable=False)


class CampaignPerformance(MarketingBase):
    """Daily metrics snapshot for one campaign."""

    __tablename__ = "campaign_performances"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    campaign_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("campaigns.id", ondelete="CASCADE"),
        nullable=False,
    )

    metric_date: Mapped[date] = mapped_column("date", Date, nullable=False)
    impressions: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    clicks: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    conversions: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    revenue: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)


class PatientSource(MarketingBase):
    __tablename__ = "patient_sources"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    clinic_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    source: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        doc="Acquisition channel, e.g. NAVER_SEARCH, INSTAGRAM, REFERRAL",
    )
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    record_date: Mapped[date] = mapped_column(Date, nullable=False)


TABLES = [
    Campaign.__table__,
    MarketingExpense.__table__,
    CampaignPerformance.__table__,
    PatientSource.__table__,
]
