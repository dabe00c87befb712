# clinic_portal/seed/hr.py
import logging

from sqlalchemy.orm import Session

from clinic_portal.models import hr as models
from clinic_portal.seed.base import DomainSeeder, SeedResult

logger = logging.getLogger(__name__)


class HrSeeder(DomainSeeder):
    name = "hr"
    tables = models.TABLES

    def referenced_clinics(self) -> set[str]:
        fx = self.fixtures
        return {
            row["clinic_id"]
            for rows in (fx.employees, fx.incentive_policies, fx.target_revenues)
            for row in rows
        }

    def populate(self, db: Session, result: SeedResult) -> None:
        for employee in self.fixtures.employees:
            row, created = self.upsert(db, result, models.Employee, {"id": employee["id"]}, employee)
            if created:
                logger.info("  ✓ Created employee: %s (%s)", row.name, row.position)

        for policy in self.fixtures.incentive_policies:
            row, created = self.upsert(db, result, models.IncentivePolicy, {"id": policy["id"]}, policy)
            if created:
                logger.info("  ✓ Created incentive policy: %s", row.name)

        for target in self.fixtures.target_revenues:
            self.require_row(db, models.Employee, target["employee_id"])
            key = {
                "employee_id": target["employee_id"],
                "year": target["year"],
                "month": target["month"],
            }
            row, created = self.upsert(db, result, models.TargetRevenue, key, target)
            if created:
                logger.info(
                    "  ✓ Created target revenue: %s %d-%02d",
                    row.employee_id,
                    row.year,
                    row.month,
                )
