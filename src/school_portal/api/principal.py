from __future__ import annotations

from typing import Any, Optional

from .client import ApiClient


class PrincipalApi:
    def __init__(self, api: ApiClient):
        self._api = api

    # --- Profile & dashboard ---
    def request_profile_access_otp(self) -> None:
        self._api.post("/principal/profile/request-otp")

    def verify_profile_access_otp(self, otp: str) -> bool:
        return bool(self._api.post("/principal/profile/verify-otp", {"otp": otp}))

    def update_branch_details(self, updates: dict[str, Any]) -> None:
        self._api.put("/principal/branch-details", updates)

    def get_dashboard_data(self) -> dict:
        return self._api.get("/principal/dashboard") or {}

    # --- Faculty & staff ---
    def get_faculty_applications(self) -> list[dict]:
        return self._api.get_list("/principal/faculty/applications")

    def approve_faculty_application(self, app_id: str, salary: float) -> dict:
        return self._api.put(f"/principal/faculty/applications/{app_id}/approve", {"salary": salary}) or {}

    def reject_faculty_application(self, app_id: str) -> None:
        self._api.put(f"/principal/faculty/applications/{app_id}/reject")

    def get_staff(self) -> list[dict]:
        return self._api.get_list("/principal/staff")

    def create_staff_member(self, *, name: str, email: str, phone: str, role: str, salary: float) -> dict:
        payload = {"name": name, "email": email, "phone": phone, "role": role, "salary": salary}
        return self._api.post("/principal/staff", payload) or {}

    def suspend_staff(self, staff_id: str) -> None:
        self._api.put(f"/principal/staff/{staff_id}/suspend")

    def reinstate_staff(self, staff_id: str) -> None:
        self._api.put(f"/principal/staff/{staff_id}/reinstate")

    def delete_staff(self, staff_id: str) -> None:
        self._api.delete(f"/principal/staff/{staff_id}")

    def get_teacher_profile_details(self, teacher_id: str) -> Optional[dict]:
        return self._api.get(f"/principal/teachers/{teacher_id}/profile")

    def update_teacher(self, teacher_id: str, updates: dict[str, Any]) -> None:
        self._api.put(f"/principal/teachers/{teacher_id}", updates)

    # --- Academics ---
    def get_class_view(self) -> list[dict]:
        return self._api.get_list("/principal/classes/view")

    def get_examinations_with_result_status(self) -> list[dict]:
        return self._api.get_list("/principal/examinations")

    def publish_examination_results(self, examination_id: str) -> None:
        self._api.put(f"/principal/examinations/{examination_id}/publish")

    def get_student_results_for_examination(self, examination_id: str) -> list[dict]:
        return self._api.get_list(f"/principal/examinations/{examination_id}/results")

    def send_results_sms(self, examination_id: str, message_template: str) -> None:
        self._api.post(
            f"/principal/examinations/{examination_id}/send-results-sms",
            {"messageTemplate": message_template},
        )

    def get_attendance_overview(self) -> dict:
        return self._api.get("/principal/attendance/overview") or {}

    # --- Requests ---
    def get_fee_rectification_requests(self) -> list[dict]:
        return self._api.get_list("/principal/requests/fees")

    def process_fee_rectification_request(self, request_id: str, status: str) -> None:
        self._api.put(f"/principal/requests/fees/{request_id}/process", {"status": status})

    def get_teacher_attendance_rectification_requests(self) -> list[dict]:
        return self._api.get_list("/principal/requests/attendance")

    def process_teacher_attendance_rectification_request(self, request_id: str, status: str) -> None:
        self._api.put(f"/principal/requests/attendance/{request_id}/process", {"status": status})

    def get_leave_applications(self) -> list[dict]:
        return self._api.get_list("/principal/requests/leaves")

    def process_leave_application(self, request_id: str, status: str) -> None:
        self._api.put(f"/principal/requests/leaves/{request_id}/process", {"status": status})

    # --- Discipline & grievances ---
    def raise_complaint_about_student(self, complaint: dict[str, Any]) -> None:
        self._api.post("/principal/complaints/student", complaint)

    def get_complaints_about_students(self) -> list[dict]:
        return self._api.get_list("/principal/complaints/student")

    def get_teacher_complaints(self) -> list[dict]:
        return self._api.get_list("/principal/complaints/teacher")

    def get_suspension_records(self) -> list[dict]:
        return self._api.get_list("/principal/students/suspensions")

    # --- Finance & payroll ---
    def get_financials_overview(self) -> dict:
        return self._api.get("/principal/financials/overview") or {}

    def add_fee_adjustment(self, student_id: str, *, adjustment_type: str, amount: float, reason: str) -> None:
        self._api.post(
            f"/principal/students/{student_id}/fee-adjustments",
            {"type": adjustment_type, "amount": amount, "reason": reason},
        )

    def get_manual_expenses(self) -> list[dict]:
        return self._api.get_list("/principal/expenses")

    def add_manual_expense(self, expense: dict[str, Any]) -> None:
        self._api.post("/principal/expenses", expense)

    def add_manual_salary_adjustment(self, staff_id: str, *, amount: float, reason: str, month: str) -> None:
        self._api.post(
            "/principal/payroll/adjustments",
            {"staffId": staff_id, "amount": amount, "reason": reason, "month": month},
        )

    def get_staff_payroll_for_month(self, month: str) -> list[dict]:
        return self._api.get_list("/principal/payroll", params={"month": month})

    def process_payroll(self, payroll_records: list[dict[str, Any]]) -> None:
        self._api.post("/principal/payroll/process", {"payrollRecords": payroll_records})

    # --- Communication ---
    def get_announcements(self) -> list[dict]:
        return self._api.get_list("/principal/communication/announcements")

    def get_sms_history(self) -> list[dict]:
        return self._api.get_list("/principal/communication/sms-history")

    def send_announcement(self, *, title: str, message: str, audience: str) -> None:
        self._api.post(
            "/principal/communication/announcements",
            {"title": title, "message": message, "audience": audience},
        )

    def send_sms_to_students(self, student_ids: list[str], message: str) -> dict:
        return self._api.post("/principal/communication/sms", {"studentIds": student_ids, "message": message}) or {}

    def clear_announcements_history(self, from_date: str, to_date: str) -> None:
        self._api.post("/principal/communication/announcements/clear", {"fromDate": from_date, "toDate": to_date})

    def clear_sms_history(self, from_date: str, to_date: str) -> None:
        self._api.post("/principal/communication/sms-history/clear", {"fromDate": from_date, "toDate": to_date})

    # --- Events & session ---
    def create_school_event(self, event: dict[str, Any]) -> None:
        self._api.post("/principal/events", event)

    def update_school_event(self, event_id: str, event: dict[str, Any]) -> None:
        self._api.put(f"/principal/events/{event_id}", event)

    def update_school_event_status(self, event_id: str, status: str) -> None:
        self._api.put(f"/principal/events/{event_id}/status", {"status": status})

    def start_new_academic_session(self, new_start_date: str) -> None:
        self._api.post("/principal/academic-session/start", {"newStartDate": new_start_date})

    # --- ERP billing & admin queries ---
    def pay_erp_bill(self, amount: float, transaction_id: str) -> None:
        self._api.post("/principal/erp/pay", {"amount": amount, "transactionId": transaction_id})

    def get_erp_payments(self) -> list[dict]:
        return self._api.get_list("/principal/erp/payments")

    def get_erp_financials(self) -> dict:
        return self._api.get("/principal/erp/financials") or {}

    def raise_query_to_admin(self, query: dict[str, Any]) -> dict:
        return self._api.post("/principal/queries", query) or {}

    def get_queries(self) -> list[dict]:
        return self._api.get_list("/principal/queries")
