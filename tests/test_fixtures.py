"""
Unit tests for the tenant fixture set.
"""
from datetime import date

import pytest

from clinic_portal.models.auth import UserRole
from clinic_portal.seed.fixtures import (
    FIXTURE_VERSION,
    SEED_CLINIC_ID,
    build_fixture_set,
    seed_credentials,
)

from tests.conftest import SEED_DAY


class TestCardinalities:
    """The demo tenant has fixed row counts per entity."""

    @pytest.mark.unit
    def test_counts_match_demo_tenant(self, fixtures):
        assert fixtures.counts() == {
            "clinics": 1,
            "users": 3,
            "employees": 5,
            "incentive_policies": 1,
            "target_revenues": 3,
            "suppliers": 3,
            "products": 6,
            "product_suppliers": 6,
            "stock_movements": 7,
            "campaigns": 4,
            "marketing_expenses": 5,
            "campaign_performances": 4,
            "patient_sources": 6,
        }

    @pytest.mark.unit
    def test_version_is_recorded(self, fixtures):
        assert fixtures.version == FIXTURE_VERSION


class TestStableIdentifiers:
    @pytest.mark.unit
    def test_every_clinic_reference_points_at_seed_clinic(self, fixtures):
        assert fixtures.clinics[0]["id"] == SEED_CLINIC_ID
        scoped = (
            fixtures.users
            + fixtures.employees
            + fixtures.incentive_policies
            + fixtures.target_revenues
            + fixtures.suppliers
            + fixtures.products
            + fixtures.stock_movements
            + fixtures.campaigns
            + fixtures.marketing_expenses
            + fixtures.patient_sources
        )
        assert {row["clinic_id"] for row in scoped} == {SEED_CLINIC_ID}

    @pytest.mark.unit
    def test_ids_do_not_depend_on_the_day(self):
        a = build_fixture_set(date(2024, 1, 1))
        b = build_fixture_set(date(2026, 7, 9))
        assert [e["id"] for e in a.employees] == [e["id"] for e in b.employees]
        assert [p["id"] for p in a.products] == [p["id"] for p in b.products]
        assert [c["id"] for c in a.campaigns] == [c["id"] for c in b.campaigns]

    @pytest.mark.unit
    def test_users_are_keyed_by_unique_email(self, fixtures):
        emails = [u["email"] for u in fixtures.users]
        assert len(emails) == len(set(emails))
        assert {u["role"] for u in fixtures.users} == {UserRole.ADMIN, UserRole.MANAGER, UserRole.STAFF}

    @pytest.mark.unit
    def test_product_supplier_pairs_are_unique_and_resolvable(self, fixtures):
        pairs = [(ps["product_id"], ps["supplier_id"]) for ps in fixtures.product_suppliers]
        assert len(pairs) == len(set(pairs))
        product_ids = {p["id"] for p in fixtures.products}
        supplier_ids = {s["id"] for s in fixtures.suppliers}
        assert all(p in product_ids and s in supplier_ids for p, s in pairs)


class TestRelativeDates:
    @pytest.mark.unit
    def test_targets_use_current_month(self, fixtures):
        assert {(t["year"], t["month"]) for t in fixtures.target_revenues} == {(2025, 3)}

    @pytest.mark.unit
    def test_offline_campaign_ran_last_december(self, fixtures):
        camp = next(c for c in fixtures.campaigns if c["id"] == "camp-004")
        assert camp["start_date"] == date(2024, 12, 1)
        assert camp["end_date"] == date(2024, 12, 31)

    @pytest.mark.unit
    def test_ledger_rows_are_dated_today(self, fixtures):
        assert {e["expense_date"] for e in fixtures.marketing_expenses} == {SEED_DAY}
        assert {p["metric_date"] for p in fixtures.campaign_performances} == {SEED_DAY}
        assert {s["record_date"] for s in fixtures.patient_sources} == {SEED_DAY}


class TestIsolation:
    @pytest.mark.unit
    def test_each_build_returns_fresh_rows(self):
        a = build_fixture_set(SEED_DAY)
        b = build_fixture_set(SEED_DAY)
        a.employees[0]["name"] = "changed"
        assert b.employees[0]["name"] == "김영희"

    @pytest.mark.unit
    def test_credentials_list_demo_logins(self):
        creds = seed_credentials("pw")
        assert [c["email"] for c in creds] == [
            "admin@vibe-dental.com",
            "manager@vibe-dental.com",
            "staff@vibe-dental.com",
        ]
        assert {c["password"] for c in creds} == {"pw"}
        assert {c["clinic"] for c in creds} == {SEED_CLINIC_ID}
