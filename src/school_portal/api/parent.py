from __future__ import annotations

from typing import Any, Optional

from .client import ApiClient


class ParentApi:
    def __init__(self, api: ApiClient):
        self._api = api

    def get_dashboard_data(self) -> dict:
        return self._api.get("/parent/dashboard") or {}

    # --- Children ---
    def get_student_profile_details(self, student_id: str) -> Optional[dict]:
        return self._api.get(f"/parent/children/{student_id}/profile")

    def get_complaints_about_student(self, student_id: str) -> list[dict]:
        return self._api.get_list(f"/parent/children/{student_id}/complaints")

    def get_fee_history_for_student(self, student_id: str) -> list[dict]:
        return self._api.get_list(f"/parent/children/{student_id}/fees/history")

    def get_fee_record_for_student(self, student_id: str) -> Optional[dict]:
        return self._api.get(f"/parent/children/{student_id}/fees/record")

    def get_teachers_for_student(self, student_id: str) -> list[dict]:
        return self._api.get_list(f"/parent/children/{student_id}/teachers")

    def get_student_grades(self, student_id: str) -> list[dict]:
        return self._api.get_list(f"/parent/children/{student_id}/grades")

    # --- Meetings ---
    def get_meeting_requests(self) -> list[dict]:
        return self._api.get_list("/parent/meetings")

    def get_teacher_availability(self, teacher_id: str, day: str) -> list[str]:
        return self._api.get_list(f"/parent/teachers/{teacher_id}/availability", params={"date": day})

    def create_meeting_request(self, request: dict[str, Any]) -> None:
        self._api.post("/parent/meetings", request)

    def update_meeting_request(self, request_id: str, updates: dict[str, Any]) -> None:
        self._api.put(f"/parent/meetings/{request_id}", updates)

    # --- Fees ---
    def record_fee_payment(self, payment: dict[str, Any]) -> None:
        self._api.post("/parent/fees/record-payment", payment)

    def pay_student_fees(self, student_id: str, amount: float, details: str) -> None:
        self._api.post(f"/parent/children/{student_id}/fees/pay", {"amount": amount, "details": details})
