# clinic_portal/seed/inventory.py
import logging

from sqlalchemy.orm import Session

from clinic_portal.models import inventory as models
from clinic_portal.seed.base import DomainSeeder, SeedResult

logger = logging.getLogger(__name__)


class InventorySeeder(DomainSeeder):
    name = "inventory"
    tables = models.TABLES

    def referenced_clinics(self) -> set[str]:
        fx = self.fixtures
        return {
            row["clinic_id"]
            for rows in (fx.suppliers, fx.products, fx.stock_movements)
            for row in rows
        }

    def populate(self, db: Session, result: SeedResult) -> None:
        for supplier in self.fixtures.suppliers:
            row, created = self.upsert(db, result, models.Supplier, {"id": supplier["id"]}, supplier)
            if created:
                logger.info("  ✓ Created supplier: %s", row.name)

        for product in self.fixtures.products:
            row, created = self.upsert(db, result, models.Product, {"id": product["id"]}, product)
            if created:
                logger.info("  ✓ Created product: %s", row.name)

        for link in self.fixtures.product_suppliers:
            self.require_row(db, models.Product, link["product_id"])
            self.require_row(db, models.Supplier, link["supplier_id"])
            key = {"product_id": link["product_id"], "supplier_id": link["supplier_id"]}
            _, created = self.upsert(db, result, models.ProductSupplier, key, link)
            if created:
                logger.info("  ✓ Linked product %s to supplier %s", link["product_id"], link["supplier_id"])

        # Ledger: appended on every run, never deduplicated.
        for movement in self.fixtures.stock_movements:
            self.require_row(db, models.Product, movement["product_id"])
        movements = self.append(db, result, models.StockMovement, self.fixtures.stock_movements)
        for movement in movements:
            logger.info(
                "  ✓ Recorded stock movement: %s %s %d",
                movement.product_id,
                movement.type.value,
                movement.quantity,
            )
