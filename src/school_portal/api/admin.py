from __future__ import annotations

from typing import Any, Optional

from .client import ApiClient


class AdminApi:
    """Superadmin endpoints spanning every branch."""

    def __init__(self, api: ApiClient):
        self._api = api

    # --- Registrations & branches ---
    def get_registration_requests(self) -> list[dict]:
        return self._api.get_list("/admin/requests/registration")

    def approve_request(self, request_id: str) -> None:
        self._api.put(f"/admin/requests/registration/{request_id}/approve")

    def deny_request(self, request_id: str) -> None:
        self._api.put(f"/admin/requests/registration/{request_id}/deny")

    def get_branches(self, status: Optional[str] = None) -> list[dict]:
        params = {"status": status} if status else None
        return self._api.get_list("/admin/branches", params=params)

    def update_branch_status(self, branch_id: str, status: str) -> None:
        self._api.put(f"/admin/branches/{branch_id}/status", {"status": status})

    def update_branch_details(self, branch_id: str, updates: dict[str, Any]) -> None:
        self._api.put(f"/admin/branches/{branch_id}", updates)

    def delete_branch(self, branch_id: str) -> None:
        self._api.delete(f"/admin/branches/{branch_id}")

    def get_school_details(self, branch_id: str) -> Optional[dict]:
        return self._api.get(f"/admin/schools/{branch_id}")

    # --- Users & system ---
    def get_dashboard_data(self) -> dict:
        return self._api.get("/admin/dashboard") or {}

    def get_all_users(self) -> list[dict]:
        return self._api.get_list("/admin/users")

    def reset_user_password(self, user_id: str) -> dict:
        return self._api.post(f"/admin/users/{user_id}/reset-password") or {}

    def get_system_settings(self) -> dict:
        return self._api.get("/admin/system/settings") or {}

    def update_system_settings(self, settings: dict[str, Any]) -> None:
        self._api.put("/admin/system/settings", settings)

    def get_audit_logs(self) -> list[dict]:
        return self._api.get_list("/admin/audit-logs")

    # --- Analytics & finance ---
    def get_system_wide_financials(self, start_date: Optional[str] = None, end_date: Optional[str] = None) -> dict:
        params = {k: v for k, v in {"startDate": start_date, "endDate": end_date}.items() if v}
        return self._api.get("/admin/finance/system-wide", params=params or None) or {}

    def get_system_wide_analytics(self) -> dict:
        return self._api.get("/admin/analytics") or {}

    def get_system_wide_infrastructure(self) -> dict:
        return self._api.get("/admin/infrastructure") or {}

    def get_erp_payments(self) -> list[dict]:
        return self._api.get_list("/admin/finance/erp-billing")

    def get_system_wide_erp_financials(self) -> dict:
        return self._api.get("/admin/finance/system-wide-erp") or {}

    def get_school_financial_details(self, branch_id: str) -> dict:
        return self._api.get(f"/admin/finance/school/{branch_id}") or {}

    def record_manual_erp_payment(
        self,
        branch_id: str,
        *,
        amount: float,
        payment_date: str,
        notes: str,
        period_end_date: str,
        admin_id: str,
    ) -> None:
        self._api.post(
            f"/admin/finance/erp-billing/{branch_id}/manual",
            {
                "amount": amount,
                "paymentDate": payment_date,
                "notes": notes,
                "periodEndDate": period_end_date,
                "adminId": admin_id,
            },
        )

    # --- Communication ---
    def get_communication_history(self) -> dict:
        data = self._api.get("/admin/communication/history")
        return data or {"sms": [], "email": [], "notification": []}

    def send_bulk_sms(self, target: dict[str, Any], message: str, sent_by: str) -> None:
        self._api.post("/admin/communication/sms", {"target": target, "message": message, "sentBy": sent_by})

    def send_bulk_email(self, target: dict[str, Any], subject: str, body: str, sent_by: str) -> None:
        self._api.post(
            "/admin/communication/email",
            {"target": target, "subject": subject, "body": body, "sentBy": sent_by},
        )

    def send_bulk_notification(self, target: dict[str, Any], title: str, message: str, sent_by: str) -> None:
        self._api.post(
            "/admin/communication/notification",
            {"target": target, "title": title, "message": message, "sentBy": sent_by},
        )

    # --- Principal queries ---
    def get_principal_queries(self, status: Optional[str] = None) -> list[dict]:
        params = {"status": status} if status else None
        return self._api.get_list("/admin/queries/principal", params=params)

    def resolve_principal_query(self, query_id: str, admin_notes: str, admin_id: str) -> dict:
        return self._api.put(
            f"/admin/queries/principal/{query_id}/resolve",
            {"adminNotes": admin_notes, "adminId": admin_id},
        ) or {}
