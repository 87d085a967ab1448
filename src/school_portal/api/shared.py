from __future__ import annotations

from typing import Any, Optional

from .client import ApiClient


class SharedApi:
    """Endpoints available to every signed-in role (auth, profile, leave, staff)."""

    def __init__(self, api: ApiClient):
        self._api = api

    # --- Session & authentication ---
    def login(self, identifier: str, password: str) -> Optional[dict]:
        return self._api.post("/auth/login", {"identifier": identifier, "password": password})

    def verify_otp(self, user_id: str, otp: str) -> Optional[dict]:
        return self._api.post("/auth/verify-otp", {"userId": user_id, "otp": otp})

    def logout(self) -> None:
        self._api.post("/auth/logout")

    def check_session(self) -> Optional[dict]:
        return self._api.get("/auth/session")

    def register_school(
        self,
        *,
        principal_name: str,
        school_name: str,
        email: str,
        phone: str,
        location: str,
        registration_id: str,
    ) -> None:
        self._api.post(
            "/auth/register-school",
            {
                "principalName": principal_name,
                "schoolName": school_name,
                "email": email,
                "phone": phone,
                "location": location,
                "registrationId": registration_id,
            },
        )

    def change_password(self, current: str, new_password: str) -> None:
        self._api.post("/auth/change-password", {"current": current, "newPass": new_password})

    def reset_user_password(self, user_id: str) -> dict:
        return self._api.post(f"/users/{user_id}/reset-password") or {}

    # --- Profile & branch ---
    def update_user_profile(self, updates: dict[str, Any]) -> dict:
        return self._api.put("/profile", updates) or {}

    def get_branch_by_id(self, branch_id: str) -> Optional[dict]:
        return self._api.get(f"/general/branches/{branch_id}")

    def get_school_events(self, branch_id: str) -> list[dict]:
        return self._api.get_list("/general/events", params={"branchId": branch_id})

    def get_super_admin_contact_details(self) -> Optional[dict]:
        return self._api.get("/super-admin/contact-details")

    # --- Leave ---
    def create_leave_application(self, application: dict[str, Any]) -> None:
        self._api.post("/leaves/applications", application)

    def get_leave_applications_for_user(self) -> list[dict]:
        return self._api.get_list("/leaves/my-applications")

    def get_leave_settings_for_branch(self) -> list[dict]:
        return self._api.get_list("/leaves/settings")

    # --- Staff ---
    def get_staff_list_for_branch(self) -> list[dict]:
        return self._api.get_list("/staff/list")

    def get_staff_attendance_and_leave_for_month(self, year: int, month: int) -> dict:
        """Attendance and leaves of the signed-in staff member.

        ``month`` is one-based; the backend takes a zero-based month index.
        """
        data = self._api.get("/staff/my-attendance-and-leaves", params={"year": year, "month": month - 1})
        return data or {"attendance": [], "leaves": []}

    def search_library_books(self, query: str) -> list[dict]:
        return self._api.get_list("/library/search", params={"q": query})
