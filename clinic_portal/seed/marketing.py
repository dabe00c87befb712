# clinic_portal/seed/marketing.py
import logging

from sqlalchemy.orm import Session

from clinic_portal.models import marketing as models
from clinic_portal.seed.base import DomainSeeder, SeedResult

logger = logging.getLogger(__name__)


class MarketingSeeder(DomainSeeder):
    name = "marketing"
    tables = models.TABLES

    def referenced_clinics(self) -> set[str]:
        fx = self.fixtures
        return {
            row["clinic_id"]
            for rows in (fx.campaigns, fx.marketing_expenses, fx.patient_sources)
            for row in rows
        }

    def populate(self, db: Session, result: SeedResult) -> None:
        for campaign in self.fixtures.campaigns:
            row, created = self.upsert(db, result, models.Campaign, {"id": campaign["id"]}, campaign)
            if created:
                logger.info("  ✓ Created campaign: %s", row.name)

        for expense in self.fixtures.marketing_expenses:
            if expense.get("campaign_id") is not None:
                self.require_row(db, models.Campaign, expense["campaign_id"])
        expenses = self.append(db, result, models.MarketingExpense, self.fixtures.marketing_expenses)
        for expense in expenses:
            logger.info("  ✓ Recorded expense: %s %d (%s)", expense.campaign_id, expense.amount, expense.category)

        for perf in self.fixtures.campaign_performances:
            self.require_row(db, models.Campaign, perf["campaign_id"])
        performances = self.append(
            db, result, models.CampaignPerformance, self.fixtures.campaign_performances
        )
        for perf in performances:
            logger.info("  ✓ Recorded performance: %s on %s", perf.campaign_id, perf.metric_date)

        sources = self.append(db, result, models.PatientSource, self.fixtures.patient_sources)
        for source in sources:
            logger.info("  ✓ Recorded patient source: %s (%d)", source.source, source.count)
