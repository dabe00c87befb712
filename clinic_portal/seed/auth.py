# clinic_portal/seed/auth.py
import logging

from sqlalchemy.orm import Session

from clinic_portal.core.security import get_password_hash
from clinic_portal.models import auth as models
from clinic_portal.seed.base import DomainSeeder, SeedResult

logger = logging.getLogger(__name__)


class AuthSeeder(DomainSeeder):
    """
    Creates the tenant anchor (clinic) and its demo logins.

    Runs first: every other store references the clinic it creates.
    """

    name = "auth"
    tables = models.TABLES
    requires_clinic = False

    def populate(self, db: Session, result: SeedResult) -> None:
        for clinic in self.fixtures.clinics:
            row, created = self.upsert(db, result, models.Clinic, {"id": clinic["id"]}, clinic)
            if created:
                logger.info("  ✓ Created clinic: %s", row.name)

        # One bcrypt hash shared by all demo users, computed lazily.
        hashed_password: str | None = None

        for user in self.fixtures.users:
            self.require_row(db, models.Clinic, user["clinic_id"])
            missing = db.query(models.User.id).filter_by(email=user["email"]).first() is None
            if missing and hashed_password is None:
                hashed_password = get_password_hash(self.settings.seed_user_password)

            row, created = self.upsert(
                db,
                result,
                models.User,
                {"email": user["email"]},
                {**user, "password": hashed_password},
            )
            if created:
                logger.info("  ✓ Created %s user: %s", row.role.value.lower(), row.email)
