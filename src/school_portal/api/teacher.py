from __future__ import annotations

from typing import Any, BinaryIO, Optional

from .client import ApiClient, form_fields


class TeacherApi:
    def __init__(self, api: ApiClient):
        self._api = api

    # --- Dashboard & courses ---
    def get_dashboard_data(self) -> dict:
        return self._api.get("/teacher/dashboard") or {}

    def get_students_for_teacher(self) -> list[dict]:
        return self._api.get_list("/teacher/students")

    def get_teacher_courses(self) -> list[dict]:
        return self._api.get_list("/teacher/courses")

    def find_course_by_subject(self, subject_id: str) -> Optional[dict]:
        return self._api.get("/teacher/courses/find", params={"subjectId": subject_id})

    def get_teacher_attendance(self) -> list[dict]:
        return self._api.get_list("/teacher/my-attendance")

    # --- Assignments ---
    def get_assignments(self) -> list[dict]:
        return self._api.get_list("/teacher/assignments")

    def create_assignment(self, assignment: dict[str, Any]) -> None:
        self._api.post("/teacher/assignments", assignment)

    def update_assignment(self, assignment_id: str, updates: dict[str, Any]) -> None:
        self._api.put(f"/teacher/assignments/{assignment_id}", updates)

    # --- Attendance & gradebook ---
    def get_attendance_for_course(self, course_id: str, day: str) -> dict:
        data = self._api.get(f"/teacher/courses/{course_id}/attendance", params={"date": day})
        return data or {"isSaved": False, "attendance": []}

    def save_attendance(self, records: list[dict[str, Any]]) -> None:
        self._api.post("/teacher/courses/attendance", {"records": records})

    def submit_rectification_request(self, request: dict[str, Any]) -> None:
        self._api.post("/teacher/requests/rectification", request)

    def create_marking_template(self, template: dict[str, Any]) -> None:
        self._api.post("/teacher/gradebook/templates", template)

    def get_marking_templates_for_course(self, course_id: str) -> list[dict]:
        return self._api.get_list(f"/teacher/courses/{course_id}/gradebook/templates")

    def get_student_marks_for_template(self, template_id: str) -> list[dict]:
        return self._api.get_list(f"/teacher/gradebook/templates/{template_id}/marks")

    def save_student_marks(self, template_id: str, marks: list[dict[str, Any]]) -> None:
        self._api.post(f"/teacher/gradebook/templates/{template_id}/marks", {"marks": marks})

    def delete_marking_template(self, template_id: str) -> None:
        self._api.delete(f"/teacher/gradebook/templates/{template_id}")

    # --- Quizzes ---
    def get_quizzes(self) -> list[dict]:
        return self._api.get_list("/teacher/quizzes")

    def update_quiz_status(self, quiz_id: str, status: str) -> None:
        self._api.put(f"/teacher/quizzes/{quiz_id}/status", {"status": status})

    def get_quiz_with_questions(self, quiz_id: str) -> Optional[dict]:
        return self._api.get(f"/teacher/quizzes/{quiz_id}/details")

    def save_quiz(self, quiz: dict[str, Any], questions: list[dict[str, Any]]) -> None:
        self._api.post("/teacher/quizzes/save", {"quizData": quiz, "questionsData": questions})

    def get_quiz_results(self, quiz_id: str) -> Optional[dict]:
        return self._api.get(f"/teacher/quizzes/{quiz_id}/results")

    # --- Syllabus & content ---
    def get_lectures(self, class_id: str, subject_id: str) -> list[dict]:
        return self._api.get_list("/teacher/syllabus/lectures", params={"classId": class_id, "subjectId": subject_id})

    def save_lectures(self, class_id: str, subject_id: str, lectures: list[dict[str, Any]]) -> None:
        self._api.post(
            "/teacher/syllabus/lectures/save",
            {"classId": class_id, "subjectId": subject_id, "lectures": lectures},
        )

    def update_lecture_status(self, lecture_id: str, status: str = "completed") -> None:
        self._api.put(f"/teacher/syllabus/lectures/{lecture_id}/status", {"status": status})

    def submit_syllabus_change_request(self, request: dict[str, Any]) -> None:
        self._api.post("/teacher/requests/syllabus-change", request)

    def get_course_content(self) -> list[dict]:
        return self._api.get_list("/teacher/course-content")

    def upload_course_content(self, content: dict[str, Any], filename: str, stream: BinaryIO) -> None:
        self._api.post(
            "/teacher/course-content/upload",
            data=form_fields(content),
            files={"file": (filename, stream)},
        )

    # --- Meetings ---
    def get_meeting_requests(self) -> list[dict]:
        return self._api.get_list("/teacher/meetings")

    def update_meeting_request(self, request_id: str, updates: dict[str, Any]) -> None:
        self._api.put(f"/teacher/meetings/{request_id}", updates)

    def get_teacher_availability(self, day: str) -> list[str]:
        return self._api.get_list("/teacher/availability", params={"date": day})

    # --- Examinations ---
    def get_examinations(self) -> list[dict]:
        return self._api.get_list("/teacher/examinations")

    def get_exam_schedules(self, examination_id: str) -> list[dict]:
        return self._api.get_list(f"/teacher/examinations/{examination_id}/schedules")

    def get_exam_marks_for_schedule(self, schedule_id: str) -> list[dict]:
        return self._api.get_list(f"/teacher/examinations/schedules/{schedule_id}/marks")

    def save_exam_marks(self, marks: list[dict[str, Any]]) -> None:
        self._api.post("/teacher/examinations/marks/save", {"marks": marks})

    def submit_exam_mark_rectification_request(self, request: dict[str, Any]) -> None:
        self._api.post("/teacher/requests/exam-mark", request)

    # --- Students ---
    def raise_complaint_about_student(self, complaint: dict[str, Any]) -> None:
        self._api.post("/teacher/complaints/student", complaint)

    def get_skill_assessment_for_student(self, student_id: str) -> Optional[dict]:
        return self._api.get(f"/teacher/students/{student_id}/skill-assessment")

    def submit_skill_assessment(self, assessment: dict[str, Any]) -> None:
        self._api.post("/teacher/students/skill-assessment", assessment)

    # --- Leaves ---
    def get_leave_applications_for_user(self) -> list[dict]:
        return self._api.get_list("/teacher/leaves/my-applications")

    def get_student_leave_applications(self) -> list[dict]:
        return self._api.get_list("/teacher/leaves/student-applications")

    def process_leave_application(self, request_id: str, status: str) -> None:
        self._api.put(f"/teacher/leaves/applications/{request_id}/process", {"status": status})
