from __future__ import annotations

from typing import Any, Optional

from .client import ApiClient


class RegistrarApi:
    def __init__(self, api: ApiClient):
        self._api = api

    # --- Dashboard ---
    def get_dashboard_data(self) -> dict:
        return self._api.get("/registrar/dashboard") or {}

    # --- Admissions & applications ---
    def get_applications(self) -> list[dict]:
        return self._api.get_list("/registrar/admissions/applications")

    def update_application_status(self, app_id: str, status: str) -> None:
        self._api.put(f"/registrar/admissions/applications/{app_id}/status", {"status": status})

    def get_faculty_applications(self) -> list[dict]:
        return self._api.get_list("/registrar/faculty/applications")

    def submit_faculty_application(self, data: dict[str, Any]) -> None:
        self._api.post("/registrar/faculty/applications", data)

    def admit_student(self, student_data: dict[str, Any]) -> dict:
        """Returns the generated login credentials of the admitted student."""
        return self._api.post("/registrar/admissions/admit-student", {"studentData": student_data}) or {}

    # --- Students ---
    def get_students(self, *, grade_level: Optional[int] = None) -> list[dict]:
        params = {"gradeLevel": grade_level} if grade_level is not None else None
        return self._api.get_list("/registrar/students", params=params)

    def get_student_profile_details(self, student_id: str) -> Optional[dict]:
        return self._api.get(f"/registrar/students/{student_id}/profile")

    def update_student(self, student_id: str, updates: dict[str, Any]) -> None:
        self._api.patch(f"/registrar/students/{student_id}", updates)

    def delete_student(self, student_id: str) -> None:
        self._api.delete(f"/registrar/students/{student_id}")

    def suspend_student(self, student_id: str, *, reason: str, end_date: str) -> None:
        self._api.put(f"/registrar/students/{student_id}/suspend", {"reason": reason, "endDate": end_date})

    def remove_suspension(self, student_id: str) -> None:
        self._api.put(f"/registrar/students/{student_id}/reinstate")

    def mark_fees_as_paid_and_unsuspend(self, student_id: str) -> None:
        self._api.put(f"/registrar/students/{student_id}/pay-and-reinstate")

    def promote_students(self, student_ids: list[str], target_class_id: str, academic_session: str) -> None:
        self._api.post(
            "/registrar/students/promote",
            {"studentIds": student_ids, "targetClassId": target_class_id, "academicSession": academic_session},
        )

    def demote_students(self, student_ids: list[str], target_class_id: str) -> None:
        self._api.post("/registrar/students/demote", {"studentIds": student_ids, "targetClassId": target_class_id})

    def reset_student_and_parent_passwords(self, student_id: str) -> dict:
        return self._api.post(f"/registrar/students/{student_id}/reset-passwords") or {}

    def get_suspension_records(self) -> list[dict]:
        return self._api.get_list("/registrar/suspension-records")

    def get_fee_records(self) -> list[dict]:
        return self._api.get_list("/registrar/fee-records")

    def get_attendance_records(self) -> list[dict]:
        return self._api.get_list("/registrar/attendance-records")

    # --- Staff ---
    def get_all_staff(self) -> list[dict]:
        return self._api.get_list("/registrar/staff/all")

    def get_support_staff(self) -> list[dict]:
        return self._api.get_list("/registrar/staff/support")

    def create_support_staff(self, data: dict[str, Any]) -> dict:
        return self._api.post("/registrar/staff/support", data) or {}

    def update_support_staff(self, staff_id: str, updates: dict[str, Any]) -> None:
        self._api.put(f"/registrar/staff/support/{staff_id}", updates)

    def delete_support_staff(self, staff_id: str) -> None:
        self._api.delete(f"/registrar/staff/support/{staff_id}")

    def update_teacher(self, teacher_id: str, updates: dict[str, Any]) -> None:
        self._api.put(f"/registrar/teachers/{teacher_id}", updates)

    def get_user_by_id(self, user_id: str) -> Optional[dict]:
        return self._api.get(f"/registrar/user-details/{user_id}")

    # --- Classes & subjects ---
    def get_school_classes(self) -> list[dict]:
        return self._api.get_list("/registrar/classes")

    def get_class_details(self, class_id: str) -> Optional[dict]:
        return self._api.get(f"/registrar/classes/{class_id}")

    def get_students_for_class(self, class_id: str) -> list[dict]:
        return self._api.get_list(f"/registrar/classes/{class_id}/students")

    def create_school_class(self, data: dict[str, Any]) -> None:
        self._api.post("/registrar/classes", data)

    def update_school_class(self, class_id: str, updates: dict[str, Any]) -> None:
        self._api.put(f"/registrar/classes/{class_id}", updates)

    def delete_school_class(self, class_id: str) -> None:
        self._api.delete(f"/registrar/classes/{class_id}")

    def update_class_subjects(self, class_id: str, subject_ids: list[str]) -> None:
        self._api.put(f"/registrar/classes/{class_id}/subjects", {"subjectIds": subject_ids})

    def assign_students_to_class(self, class_id: str, student_ids: list[str]) -> None:
        self._api.post(f"/registrar/classes/{class_id}/students", {"studentIds": student_ids})

    def remove_student_from_class(self, class_id: str, student_id: str) -> None:
        self._api.delete(f"/registrar/classes/{class_id}/students/{student_id}")

    def assign_class_mentor(self, class_id: str, teacher_id: str) -> None:
        self._api.put(f"/registrar/classes/{class_id}/assign-mentor", {"teacherId": teacher_id})

    def get_subjects(self) -> list[dict]:
        return self._api.get_list("/registrar/subjects")

    def create_subject(self, data: dict[str, Any]) -> None:
        self._api.post("/registrar/subjects", data)

    def update_subject(self, subject_id: str, updates: dict[str, Any]) -> None:
        self._api.put(f"/registrar/subjects/{subject_id}", updates)

    def delete_subject(self, subject_id: str) -> None:
        self._api.delete(f"/registrar/subjects/{subject_id}")

    # --- Fees ---
    def get_fee_templates(self) -> list[dict]:
        return self._api.get_list("/registrar/fees/templates")

    def create_fee_template(self, template: dict[str, Any]) -> None:
        self._api.post("/registrar/fees/templates", template)

    def assign_fee_template_to_class(self, class_id: str, fee_template_id: Optional[str]) -> None:
        self._api.put(f"/registrar/classes/{class_id}/assign-fee-template", {"feeTemplateId": fee_template_id})

    def request_fee_template_update(self, template_id: str, new_data: dict[str, Any], reason: str) -> None:
        self._api.post(f"/registrar/fees/templates/{template_id}/request-update", {"newData": new_data, "reason": reason})

    def request_fee_template_deletion(self, template_id: str, reason: str) -> None:
        self._api.post(f"/registrar/fees/templates/{template_id}/request-delete", {"reason": reason})

    def get_class_fee_summaries(self) -> list[dict]:
        return self._api.get_list("/registrar/fees/class-summaries")

    def get_defaulters_for_class(self, class_id: str) -> list[dict]:
        return self._api.get_list(f"/registrar/fees/classes/{class_id}/defaulters")

    # --- Attendance ---
    def get_daily_attendance_for_class(self, class_id: str, day: str) -> dict:
        data = self._api.get(f"/registrar/classes/{class_id}/attendance", params={"date": day})
        return data or {"isSaved": False, "attendance": []}

    def get_teacher_attendance(self, day: str) -> dict:
        data = self._api.get("/registrar/staff/attendance", params={"date": day})
        return data or {"isSaved": False, "attendance": []}

    def save_teacher_attendance(self, records: list[dict[str, Any]]) -> None:
        self._api.post("/registrar/staff/attendance", {"attendanceData": records})

    def get_staff_attendance_and_leave_for_month(self, staff_id: str, year: int, month: int) -> dict:
        """Attendance and leaves of one staff member.

        ``month`` is one-based; the backend path takes a zero-based month index.
        """
        data = self._api.get(f"/registrar/staff/{staff_id}/attendance/{year}/{month - 1}")
        return data or {"attendance": [], "leaves": []}

    # --- Timetable ---
    def get_timetable_config(self, class_id: str) -> Optional[dict]:
        return self._api.get(f"/registrar/classes/{class_id}/timetable-config")

    def create_timetable_config(self, class_id: str, time_slots: list[dict[str, str]]) -> None:
        self._api.post(f"/registrar/classes/{class_id}/timetable-config", {"timeSlots": time_slots})

    def get_timetable_for_class(self, class_id: str) -> list[dict]:
        return self._api.get_list(f"/registrar/classes/{class_id}/timetable")

    def get_available_teachers_for_slot(self, day: str, start_time: str) -> list[dict]:
        return self._api.get_list(
            "/registrar/timetable/available-teachers", params={"day": day, "startTime": start_time}
        )

    def set_timetable_slot(self, slot: dict[str, Any]) -> None:
        self._api.post("/registrar/timetable/slots", slot)

    def delete_timetable_slot(self, slot_id: str) -> None:
        self._api.delete(f"/registrar/timetable/slots/{slot_id}")

    # --- Academic & leave requests ---
    def get_rectification_requests(self) -> list[dict]:
        return self._api.get_list("/registrar/requests/grade-attendance")

    def process_rectification_request(self, request_id: str, status: str) -> None:
        self._api.put(f"/registrar/requests/grade-attendance/{request_id}/process", {"status": status})

    def get_exam_mark_rectification_requests(self) -> list[dict]:
        return self._api.get_list("/registrar/requests/exam-marks")

    def process_exam_mark_rectification_request(self, request_id: str, status: str) -> None:
        self._api.put(f"/registrar/requests/exam-marks/{request_id}/process", {"status": status})

    def get_syllabus_change_requests(self) -> list[dict]:
        return self._api.get_list("/registrar/requests/syllabus")

    def process_syllabus_change_request(self, request_id: str, status: str) -> None:
        self._api.put(f"/registrar/requests/syllabus/{request_id}/process", {"status": status})

    def get_leave_settings(self) -> Optional[dict]:
        return self._api.get("/registrar/leaves/settings")

    def update_leave_settings(self, settings: dict[str, Any]) -> None:
        self._api.put("/registrar/leaves/settings", settings)

    def create_leave_application(self, application: dict[str, Any]) -> None:
        self._api.post("/registrar/leaves/applications", application)

    def get_leave_applications(self) -> list[dict]:
        return self._api.get_list("/registrar/leaves/my-applications")

    def process_leave_application(self, request_id: str, status: str) -> None:
        self._api.put(f"/registrar/leaves/applications/{request_id}/process", {"status": status})

    # --- Examinations ---
    def get_examinations(self) -> list[dict]:
        return self._api.get_list("/registrar/examinations")

    def create_examination(self, data: dict[str, Any]) -> None:
        self._api.post("/registrar/examinations", data)

    def get_exam_schedules(self, examination_id: str) -> list[dict]:
        return self._api.get_list(f"/registrar/examinations/{examination_id}/schedules")

    def create_exam_schedule(self, schedule: dict[str, Any]) -> None:
        self._api.post("/registrar/examinations/schedules", schedule)

    # --- Communication ---
    def get_announcements(self) -> list[dict]:
        return self._api.get_list("/registrar/communication/announcements")

    def send_announcement(self, *, title: str, message: str, audience: str) -> None:
        self._api.post(
            "/registrar/communication/announcements",
            {"title": title, "message": message, "audience": audience},
        )

    def get_sms_history(self) -> list[dict]:
        return self._api.get_list("/registrar/communication/sms-history")

    def send_sms_to_students(self, student_ids: list[str], message: str) -> dict:
        return self._api.post("/registrar/communication/sms", {"studentIds": student_ids, "message": message}) or {}

    # --- Documents & events ---
    def get_school_documents(self) -> list[dict]:
        return self._api.get_list("/registrar/documents")

    def create_school_document(self, *, name: str, doc_type: str, owner_id: str, file_url: str) -> dict:
        return self._api.post(
            "/registrar/documents",
            {"name": name, "type": doc_type, "ownerId": owner_id, "fileUrl": file_url},
        )

    def get_school_events(self) -> list[dict]:
        return self._api.get_list("/registrar/events")

    def create_school_event(self, event: dict[str, Any]) -> None:
        self._api.post("/registrar/events", event)

    def update_school_event(self, event_id: str, updates: dict[str, Any]) -> None:
        self._api.put(f"/registrar/events/{event_id}", updates)

    def delete_school_event(self, event_id: str) -> None:
        self._api.delete(f"/registrar/events/{event_id}")

    # --- Hostels ---
    def get_hostels(self) -> list[dict]:
        return self._api.get_list("/registrar/hostels")

    def get_all_rooms(self) -> list[dict]:
        return self._api.get_list("/registrar/hostels/all-rooms")

    def create_hostel(self, hostel: dict[str, Any]) -> None:
        self._api.post("/registrar/hostels", hostel)

    def update_hostel(self, hostel_id: str, updates: dict[str, Any]) -> None:
        self._api.put(f"/registrar/hostels/{hostel_id}", updates)

    def delete_hostel(self, hostel_id: str) -> None:
        self._api.delete(f"/registrar/hostels/{hostel_id}")

    def get_rooms(self, hostel_id: str) -> list[dict]:
        return self._api.get_list(f"/registrar/hostels/{hostel_id}/rooms")

    def assign_student_to_room(self, student_id: str, room_id: str) -> None:
        self._api.post(f"/registrar/hostels/rooms/{room_id}/assign-student", {"studentId": student_id})

    def remove_student_from_room(self, student_id: str) -> None:
        self._api.delete(f"/registrar/hostels/rooms/remove-student/{student_id}")

    # --- Inventory ---
    def get_inventory(self) -> list[dict]:
        return self._api.get_list("/registrar/inventory/items")

    def get_inventory_logs(self) -> list[dict]:
        return self._api.get_list("/registrar/inventory/logs")

    def create_inventory_item(self, item: dict[str, Any], reason: str) -> None:
        self._api.post("/registrar/inventory/items", {"data": item, "reason": reason})

    def update_inventory_item(self, item_id: str, updates: dict[str, Any], reason: str) -> None:
        self._api.put(f"/registrar/inventory/items/{item_id}", {"data": updates, "reason": reason})

    def delete_inventory_item(self, item_id: str) -> None:
        self._api.delete(f"/registrar/inventory/items/{item_id}")

    # --- Transport ---
    def get_transport_routes(self) -> list[dict]:
        return self._api.get_list("/registrar/transport/routes")

    def create_transport_route(self, route: dict[str, Any]) -> None:
        self._api.post("/registrar/transport/routes", route)

    def update_transport_route(self, route_id: str, updates: dict[str, Any]) -> None:
        self._api.put(f"/registrar/transport/routes/{route_id}", updates)

    def delete_transport_route(self, route_id: str) -> None:
        self._api.delete(f"/registrar/transport/routes/{route_id}")

    def get_unassigned_members(self) -> dict:
        data = self._api.get("/registrar/transport/unassigned-members")
        return data or {"students": [], "teachers": []}

    def assign_member_to_route(self, route_id: str, *, member_id: str, member_type: str, stop_id: str) -> None:
        self._api.post(
            f"/registrar/transport/routes/{route_id}/assign-member",
            {"memberId": member_id, "memberType": member_type, "stopId": stop_id},
        )

    def remove_member_from_route(self, route_id: str, member_id: str) -> None:
        self._api.delete(f"/registrar/transport/routes/{route_id}/remove-member/{member_id}")

    def get_transport_details_for_member(self, member_id: str, member_type: str) -> Optional[dict]:
        return self._api.get(
            "/registrar/transport/member-details", params={"memberId": member_id, "memberType": member_type}
        )
