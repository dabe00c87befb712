# clinic_portal/seed/fixtures.py
"""
Demonstration tenant used to bootstrap every domain store.

Rows carry stable, caller-assigned identifiers (clinic-001, emp-001, ...)
so a reseed resolves against the same keys and stays idempotent. Only the
dates that are relative to "now" (current target month, campaign windows,
ledger dates) are derived from the ``today`` passed to build_fixture_set().
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal
from typing import Any

from clinic_portal.models.auth import UserRole
from clinic_portal.models.hr import EmployeeStatus, EmploymentType, PolicyType
from clinic_portal.models.inventory import MovementType
from clinic_portal.models.marketing import CampaignStatus, CampaignType

FIXTURE_VERSION = "2025.1"

SEED_CLINIC_ID = "clinic-001"
SEED_PERFORMER = "system"

Row = dict[str, Any]

CLINIC = {
    "id": SEED_CLINIC_ID,
    "name": "VIBE 치과의원",
    "business_number": "123-45-67890",
    "address": "서울시 강남구 테헤란로 123",
    "phone": "02-1234-5678",
    "email": "contact@vibe-dental.com",
}

# (email, display name, role); all share settings.seed_user_password
USERS = [
    ("admin@vibe-dental.com", "관리자", UserRole.ADMIN),
    ("manager@vibe-dental.com", "매니저", UserRole.MANAGER),
    ("staff@vibe-dental.com", "직원", UserRole.STAFF),
]

EMPLOYEES = [
    ("emp-001", "EMP001", "김영희", "원장", "진료", "kim@vibe-dental.com", "010-1234-5678", date(2020, 3, 15), EmploymentType.FULL_TIME, 8_000_000),
    ("emp-002", "EMP002", "이철수", "치과의사", "진료", "lee@vibe-dental.com", "010-2345-6789", date(2021, 6, 1), EmploymentType.FULL_TIME, 6_000_000),
    ("emp-003", "EMP003", "박미정", "치위생사", "진료지원", "park@vibe-dental.com", "010-3456-7890", date(2022, 1, 10), EmploymentType.FULL_TIME, 3_200_000),
    ("emp-004", "EMP004", "정수진", "간호조무사", "진료지원", "jung@vibe-dental.com", "010-4567-8901", date(2022, 8, 20), EmploymentType.FULL_TIME, 2_800_000),
    ("emp-005", "EMP005", "최민호", "데스크", "행정", "choi@vibe-dental.com", "010-5678-9012", date(2023, 2, 1), EmploymentType.PART_TIME, 1_800_000),
]

INCENTIVE_POLICY = {
    "id": "policy-001",
    "name": "기본 인센티브",
    "policy_type": PolicyType.PERCENTAGE,
    "value": Decimal("5"),
    "min_achievement_rate": Decimal("100"),
    "is_default": True,
    "is_active": True,
}

# employee_id -> monthly target (KRW) for the current month
MONTHLY_TARGETS = [
    ("emp-001", 50_000_000),
    ("emp-002", 35_000_000),
    ("emp-003", 8_000_000),
]

SUPPLIERS = [
    ("sup-001", "의료용품상사", "김상사", "02-1234-5678", "contact@medical.co.kr", "서울시 강남구 테헤란로 123"),
    ("sup-002", "덴탈플러스", "이플러스", "02-2345-6789", "info@dentalplus.com", "서울시 서초구 서초대로 456"),
    ("sup-003", "덴탈코리아", "박코리아", "02-3456-7890", "sales@dentalkorea.com", "경기도 성남시 분당구 판교로 789"),
]

# (id, code, name, category, description, unit, unit_price, current, min, max)
PRODUCTS = [
    ("prod-001", "PRD001", "일회용 장갑 (M)", "소모품", "라텍스 프리 일회용 장갑 (중)", "박스", 15_000, 500, 100, 1000),
    ("prod-002", "PRD002", "마스크 (KF94)", "소모품", "KF94 의료용 마스크", "박스", 25_000, 80, 100, 500),
    ("prod-003", "PRD003", "레진 (A2)", "재료", "복합레진 A2 색상", "개", 120_000, 15, 10, 50),
    ("prod-004", "PRD004", "칫솔 (성인용)", "구강용품", "부드러운 모 칫솔", "개", 3_000, 200, 50, 300),
    ("prod-005", "PRD005", "치실", "구강용품", "왁스 코팅 치실", "개", 5_000, 150, 50, 200),
    ("prod-006", "PRD006", "치약 (미백)", "구강용품", "미백 효과 치약", "개", 8_000, 100, 30, 150),
]

# (product_id, supplier_id, is_preferred, supplier_product_code)
PRODUCT_SUPPLIERS = [
    ("prod-001", "sup-001", True, "MED-GL-001"),
    ("prod-001", "sup-002", False, "DP-GLV-M"),
    ("prod-002", "sup-001", True, "MED-MSK-94"),
    ("prod-003", "sup-003", True, "DK-RSN-A2"),
    ("prod-004", "sup-002", True, "DP-TB-AD"),
    ("prod-005", "sup-002", True, "DP-FLS-01"),
]

STOCK_MOVEMENTS = [
    ("prod-001", MovementType.IN, 500, "초기 입고"),
    ("prod-002", MovementType.IN, 100, "초기 입고"),
    ("prod-003", MovementType.IN, 20, "초기 입고"),
    ("prod-004", MovementType.IN, 200, "초기 입고"),
    ("prod-005", MovementType.IN, 150, "초기 입고"),
    ("prod-002", MovementType.OUT, 20, "진료 사용"),
    ("prod-003", MovementType.OUT, 5, "진료 사용"),
]

MARKETING_EXPENSES = [
    ("camp-001", 3_200_000, "ADVERTISING", "이벤트 홍보물 제작"),
    ("camp-002", 1_800_000, "ADVERTISING", "네이버 광고비 (1월)"),
    ("camp-003", 800_000, "ADVERTISING", "인스타그램 광고비"),
    ("camp-003", 500_000, "INFLUENCER", "인플루언서 협찬"),
    ("camp-004", 500_000, "PRINT", "전단지 인쇄 및 배포"),
]

# (campaign_id, impressions, clicks, conversions, revenue)
CAMPAIGN_PERFORMANCES = [
    ("camp-001", 50_000, 2_500, 35, 45_000_000),
    ("camp-002", 100_000, 5_000, 28, 18_000_000),
    ("camp-003", 80_000, 4_000, 12, 8_500_000),
    ("camp-004", 10_000, 500, 18, 12_000_000),
]

PATIENT_SOURCES = [
    ("NAVER_SEARCH", 45),
    ("INSTAGRAM", 28),
    ("REFERRAL", 52),
    ("FLYER", 12),
    ("KAKAO", 18),
    ("OTHER", 15),
]


@dataclass(frozen=True)
class TenantFixtureSet:
    """
    Every record needed to bootstrap one demonstration tenant, per domain.

    Rows are plain dicts keyed by ORM attribute name. Seeders read them and
    never write back.
    """

    version: str
    today: date
    clinics: tuple[Row, ...]
    users: tuple[Row, ...]
    employees: tuple[Row, ...]
    incentive_policies: tuple[Row, ...]
    target_revenues: tuple[Row, ...]
    suppliers: tuple[Row, ...]
    products: tuple[Row, ...]
    product_suppliers: tuple[Row, ...]
    stock_movements: tuple[Row, ...]
    campaigns: tuple[Row, ...]
    marketing_expenses: tuple[Row, ...]
    campaign_performances: tuple[Row, ...]
    patient_sources: tuple[Row, ...]

    def counts(self) -> dict[str, int]:
        return {
            f.name: len(getattr(self, f.name))
            for f in fields(self)
            if isinstance(getattr(self, f.name), tuple)
        }


def _campaigns(today: date) -> list[Row]:
    year = today.year
    rows = [
        ("camp-001", "신년 임플란트 할인 이벤트", CampaignType.EVENT, CampaignStatus.ACTIVE, 5_000_000,
         date(year, 1, 1), date(year, 1, 31), 50, "새해를 맞아 임플란트 20% 할인 이벤트"),
        ("camp-002", "네이버 검색광고", CampaignType.SEARCH, CampaignStatus.ACTIVE, 2_000_000,
         date(year, 1, 1), date(year, 3, 31), 30, "네이버 키워드 광고 (치과, 임플란트, 교정)"),
        ("camp-003", "인스타그램 프로모션", CampaignType.SNS, CampaignStatus.ACTIVE, 1_500_000,
         date(year, 1, 15), date(year, 2, 15), 20, "인스타그램 광고 및 인플루언서 협업"),
        ("camp-004", "지역 전단지 배포", CampaignType.OFFLINE, CampaignStatus.COMPLETED, 500_000,
         date(year - 1, 12, 1), date(year - 1, 12, 31), 15, "강남구 주요 아파트 단지 전단지 배포"),
    ]
    return [
        {
            "id": cid,
            "clinic_id": SEED_CLINIC_ID,
            "name": name,
            "type": ctype,
            "status": status,
            "budget": budget,
            "start_date": start,
            "end_date": end,
            "target_patients": target,
            "description": description,
        }
        for cid, name, ctype, status, budget, start, end, target, description in rows
    ]


def build_fixture_set(today: date | None = None) -> TenantFixtureSet:
    """
    Materialise the tenant fixtures for a given day.
    """
    today = today or date.today()
    clinic_id = SEED_CLINIC_ID

    return TenantFixtureSet(
        version=FIXTURE_VERSION,
        today=today,
        clinics=(dict(CLINIC),),
        users=tuple(
            {"email": email, "name": name, "role": role, "clinic_id": clinic_id}
            for email, name, role in USERS
        ),
        employees=tuple(
            {
                "id": emp_id,
                "clinic_id": clinic_id,
                "employee_number": number,
                "name": name,
                "position": position,
                "department": department,
                "email": email,
                "phone": phone,
                "hire_date": hire_date,
                "status": EmployeeStatus.ACTIVE,
                "employment_type": employment_type,
                "base_salary": salary,
            }
            for emp_id, number, name, position, department, email, phone, hire_date, employment_type, salary in EMPLOYEES
        ),
        incentive_policies=({**INCENTIVE_POLICY, "clinic_id": clinic_id},),
        target_revenues=tuple(
            {
                "clinic_id": clinic_id,
                "employee_id": employee_id,
                "year": today.year,
                "month": today.month,
                "target_amount": amount,
            }
            for employee_id, amount in MONTHLY_TARGETS
        ),
        suppliers=tuple(
            {
                "id": sup_id,
                "clinic_id": clinic_id,
                "name": name,
                "contact_person": contact,
                "phone": phone,
                "email": email,
                "address": address,
            }
            for sup_id, name, contact, phone, email, address in SUPPLIERS
        ),
        products=tuple(
            {
                "id": prod_id,
                "clinic_id": clinic_id,
                "code": code,
                "name": name,
                "category": category,
                "description": description,
                "unit": unit,
                "unit_price": price,
                "current_stock": current,
                "min_stock": minimum,
                "max_stock": maximum,
            }
            for prod_id, code, name, category, description, unit, price, current, minimum, maximum in PRODUCTS
        ),
        product_suppliers=tuple(
            {
                "product_id": product_id,
                "supplier_id": supplier_id,
                "is_preferred": preferred,
                "supplier_product_code": code,
            }
            for product_id, supplier_id, preferred, code in PRODUCT_SUPPLIERS
        ),
        stock_movements=tuple(
            {
                "clinic_id": clinic_id,
                "product_id": product_id,
                "type": mtype,
                "quantity": quantity,
                "reason": reason,
                "performed_by": SEED_PERFORMER,
            }
            for product_id, mtype, quantity, reason in STOCK_MOVEMENTS
        ),
        campaigns=tuple(_campaigns(today)),
        marketing_expenses=tuple(
            {
                "clinic_id": clinic_id,
                "campaign_id": campaign_id,
                "amount": amount,
                "category": category,
                "description": description,
                "expense_date": today,
            }
            for campaign_id, amount, category, description in MARKETING_EXPENSES
        ),
        campaign_performances=tuple(
            {
                "campaign_id": campaign_id,
                "metric_date": today,
                "impressions": impressions,
                "clicks": clicks,
                "conversions": conversions,
                "revenue": revenue,
            }
            for campaign_id, impressions, clicks, conversions, revenue in CAMPAIGN_PERFORMANCES
        ),
        patient_sources=tuple(
            {"clinic_id": clinic_id, "source": source, "count": count, "record_date": today}
            for source, count in PATIENT_SOURCES
        ),
    )


def seed_credentials(password: str) -> list[dict[str, str]]:
    """
    Demo login list (for docs / manual testing).
    """
    return [
        {
            "email": email,
            "password": password,
            "role": role.value,
            "clinic": SEED_CLINIC_ID,
        }
        for email, _, role in USERS
    ]
