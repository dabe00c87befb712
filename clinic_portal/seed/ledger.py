# clinic_portal/seed/ledger.py
"""
Stock ledger consistency.

For every product: current_stock == opening stock + sum(IN) - sum(OUT).
The seeder stores current_stock as given by the fixtures and never derives
it; these helpers report where the stored value and the ledger disagree.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Mapping

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from clinic_portal.core.config import Settings
from clinic_portal.core.database import domain_session
from clinic_portal.models import inventory as models
from clinic_portal.models.inventory import MovementType, Product, StockMovement
from clinic_portal.seed.fixtures import TenantFixtureSet


@dataclass(frozen=True)
class StockDiscrepancy:
    product_id: str
    recorded: int
    ledger: int

    @property
    def difference(self) -> int:
        return self.recorded - self.ledger


def signed_quantity(movement_type: MovementType, quantity: int) -> int:
    return quantity if movement_type == MovementType.IN else -quantity


def stock_ledger_discrepancies(
    db: Session,
    opening_stock: Mapping[str, int] | None = None,
) -> list[StockDiscrepancy]:
    opening = opening_stock or {}
    signed = case(
        (StockMovement.type == MovementType.IN, StockMovement.quantity),
        else_=-StockMovement.quantity,
    )
    totals = {
        product_id: int(total)
        for product_id, total in db.query(
            StockMovement.product_id,
            func.coalesce(func.sum(signed), 0),
        )
        .group_by(StockMovement.product_id)
        .all()
    }

    out = []
    for product in db.query(Product).order_by(Product.id).all():
        expected = opening.get(product.id, 0) + totals.get(product.id, 0)
        if product.current_stock != expected:
            out.append(StockDiscrepancy(product.id, product.current_stock, expected))
    return out


def fixture_stock_discrepancies(
    fixtures: TenantFixtureSet,
    opening_stock: Mapping[str, int] | None = None,
) -> list[StockDiscrepancy]:
    """Same check as stock_ledger_discrepancies, against the fixture set only."""
    opening = opening_stock or {}
    totals: dict[str, int] = defaultdict(int)
    for movement in fixtures.stock_movements:
        totals[movement["product_id"]] += signed_quantity(movement["type"], movement["quantity"])

    out = []
    for product in sorted(fixtures.products, key=lambda p: p["id"]):
        expected = opening.get(product["id"], 0) + totals[product["id"]]
        if product["current_stock"] != expected:
            out.append(StockDiscrepancy(product["id"], product["current_stock"], expected))
    return out


def verify_inventory_stock(settings: Settings) -> list[StockDiscrepancy]:
    with domain_session(settings.inventory_database_url, models.TABLES) as db:
        return stock_ledger_discrepancies(db)
