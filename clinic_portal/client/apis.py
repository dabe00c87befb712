# clinic_portal/client/apis.py
"""
Thin typed wrappers: one logical operation -> one HTTP call.

Payloads are passed through untouched; the backend services own the
business rules.
"""

from __future__ import annotations

from typing import Any

from clinic_portal.client.http import ApiClient
from clinic_portal.schemas.envelope import ApiResponse, Page

Json = dict[str, Any]


class _DomainApi:
    def __init__(self, client: ApiClient):
        self.client = client


class AuthApi(_DomainApi):
    def login(self, email: str, password: str) -> ApiResponse[Json]:
        return self.client.request(
            "POST", "/auth/login", json={"email": email, "password": password}, response_model=Json
        )

    def signup(self, data: Json) -> ApiResponse[Json]:
        return self.client.request("POST", "/auth/signup", json=data, response_model=Json)

    def logout(self) -> ApiResponse[Any]:
        return self.client.request("POST", "/auth/logout")

    def get_me(self) -> ApiResponse[Json]:
        return self.client.request("GET", "/auth/me", response_model=Json)

    def update_me(self, data: Json) -> ApiResponse[Json]:
        return self.client.request("PUT", "/auth/me", json=data, response_model=Json)

    def refresh(self) -> ApiResponse[Any]:
        return self.client.request("POST", "/auth/refresh")


class RevenueApi(_DomainApi):
    def get_daily_reports(
        self,
        date: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> ApiResponse[Json]:
        params = {"date": date, "startDate": start_date, "endDate": end_date}
        return self.client.request("GET", "/revenue/daily-reports", params=params, response_model=Json)

    def create_income(self, data: Json) -> ApiResponse[Any]:
        return self.client.request("POST", "/revenue/daily-reports/income", json=data)

    def create_expense(self, data: Json) -> ApiResponse[Any]:
        return self.client.request("POST", "/revenue/daily-reports/expense", json=data)

    def create_oral_sale(self, data: Json) -> ApiResponse[Any]:
        return self.client.request("POST", "/revenue/daily-reports/oral-sales", json=data)

    def get_monthly_analytics(self, year: int, month: int) -> ApiResponse[Any]:
        return self.client.request("GET", f"/revenue/analytics/monthly/{year}/{month}")

    def get_yearly_analytics(self, year: int) -> ApiResponse[Any]:
        return self.client.request("GET", f"/revenue/analytics/yearly/{year}")


class HrApi(_DomainApi):
    def get_employees(self, params: Json | None = None) -> ApiResponse[Page[Json]]:
        return self.client.request("GET", "/hr/employees", params=params, response_model=Page[Json])

    def get_employee(self, employee_id: str) -> ApiResponse[Json]:
        return self.client.request("GET", f"/hr/employees/{employee_id}", response_model=Json)

    def create_employee(self, data: Json) -> ApiResponse[Json]:
        return self.client.request("POST", "/hr/employees", json=data, response_model=Json)

    def get_employee_stats(self) -> ApiResponse[Any]:
        return self.client.request("GET", "/hr/employees/stats")

    def get_salaries(self, year: int, month: int) -> ApiResponse[Any]:
        return self.client.request("GET", f"/hr/salaries/monthly/{year}/{month}")

    def get_policies(self) -> ApiResponse[Any]:
        return self.client.request("GET", "/hr/policies")

    def get_targets(self, year: int, month: int) -> ApiResponse[Any]:
        return self.client.request("GET", f"/hr/targets/{year}/{month}")


class InventoryApi(_DomainApi):
    def get_products(self, params: Json | None = None) -> ApiResponse[Page[Json]]:
        return self.client.request("GET", "/inventory/products", params=params, response_model=Page[Json])

    def get_product(self, product_id: str) -> ApiResponse[Json]:
        return self.client.request("GET", f"/inventory/products/{product_id}", response_model=Json)

    def get_low_stock(self) -> ApiResponse[list[Json]]:
        return self.client.request("GET", "/inventory/products/low-stock", response_model=list[Json])

    def get_current_stock(self) -> ApiResponse[list[Json]]:
        return self.client.request("GET", "/inventory/stock/current", response_model=list[Json])

    def get_stock_movements(self, params: Json | None = None) -> ApiResponse[Page[Json]]:
        return self.client.request(
            "GET", "/inventory/stock/movements", params=params, response_model=Page[Json]
        )

    def create_stock_movement(self, data: Json) -> ApiResponse[Json]:
        return self.client.request("POST", "/inventory/stock/movements", json=data, response_model=Json)

    def get_suppliers(self, params: Json | None = None) -> ApiResponse[Page[Json]]:
        return self.client.request("GET", "/inventory/suppliers", params=params, response_model=Page[Json])


class MarketingApi(_DomainApi):
    def get_campaigns(self, params: Json | None = None) -> ApiResponse[Page[Json]]:
        return self.client.request("GET", "/marketing/campaigns", params=params, response_model=Page[Json])

    def get_active_campaigns(self) -> ApiResponse[list[Json]]:
        return self.client.request("GET", "/marketing/campaigns/active", response_model=list[Json])

    def get_expenses(self, params: Json | None = None) -> ApiResponse[Page[Json]]:
        return self.client.request("GET", "/marketing/expenses", params=params, response_model=Page[Json])

    def get_patient_sources(self, params: Json | None = None) -> ApiResponse[Page[Json]]:
        return self.client.request("GET", "/marketing/sources", params=params, response_model=Page[Json])

    def get_monthly_analytics(self, year: int, month: int) -> ApiResponse[Any]:
        return self.client.request("GET", f"/marketing/analytics/monthly/{year}/{month}")
