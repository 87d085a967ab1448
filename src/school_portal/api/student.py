from __future__ import annotations

from typing import Any, Optional

from .client import ApiClient


class StudentApi:
    def __init__(self, api: ApiClient):
        self._api = api

    # --- Dashboard & profile ---
    def get_dashboard_data(self) -> dict:
        return self._api.get("/student/dashboard") or {}

    def get_profile_details(self) -> Optional[dict]:
        return self._api.get("/student/profile")

    def update_profile(self, updates: dict[str, Any]) -> None:
        self._api.put("/student/profile", updates)

    def get_attendance(self) -> list[dict]:
        return self._api.get_list("/student/attendance")

    def get_grades(self) -> list[dict]:
        return self._api.get_list("/student/grades")

    # --- Learning ---
    def get_course_content(self) -> list[dict]:
        return self._api.get_list("/student/course-content")

    def get_lectures(self) -> list[dict]:
        return self._api.get_list("/student/lectures")

    def get_self_study_progress(self) -> list[str]:
        return self._api.get_list("/student/self-study/progress")

    def update_self_study_progress(self, lecture_id: str, is_completed: bool) -> None:
        self._api.post("/student/self-study/progress", {"lectureId": lecture_id, "isCompleted": is_completed})

    def get_assignments(self, branch_id: str) -> dict:
        data = self._api.get("/student/assignments", params={"branchId": branch_id})
        return data or {"pending": [], "graded": []}

    def get_available_quizzes(self) -> list[dict]:
        return self._api.get_list("/student/quizzes/available")

    def get_quiz_for_attempt(self, student_quiz_id: str) -> Optional[dict]:
        return self._api.get(f"/student/quizzes/{student_quiz_id}/attempt")

    def submit_quiz(self, student_quiz_id: str, answers: list[dict[str, Any]]) -> None:
        self._api.post(f"/student/quizzes/{student_quiz_id}/submit", {"answers": answers})

    # --- Fees ---
    def get_fee_record(self) -> Optional[dict]:
        return self._api.get("/student/fees/record")

    def record_fee_payment(self, payment: dict[str, Any]) -> None:
        self._api.post("/student/fees/record-payment", payment)

    # --- Feedback & complaints ---
    def get_feedback_history(self, student_id: str) -> list[dict]:
        return self._api.get_list(f"/student/feedback/history/{student_id}")

    def submit_teacher_feedback(self, feedback: dict[str, Any]) -> None:
        self._api.post("/student/feedback/submit", feedback)

    def get_complaints_by_student(self) -> list[dict]:
        return self._api.get_list("/student/complaints/by-me")

    def get_complaints_about_student(self) -> list[dict]:
        return self._api.get_list("/student/complaints/about-me")

    def submit_teacher_complaint(self, complaint: dict[str, Any]) -> None:
        self._api.post("/student/complaints/submit", complaint)

    def resolve_complaint(self, complaint_id: str) -> None:
        self._api.put(f"/student/complaints/{complaint_id}/resolve")

    # --- Misc ---
    def get_my_transport_details(self) -> Optional[dict]:
        return self._api.get("/student/my-transport-details")

    def get_leave_applications(self) -> list[dict]:
        return self._api.get_list("/student/leaves")

    def search_library_books(self, query: str) -> list[dict]:
        return self._api.get_list("/student/library/search", params={"q": query})
