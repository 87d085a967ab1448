from __future__ import annotations

import io


def test_registrar_promotion_payload(container, fake_http):
    fake_http.add("POST", "/registrar/students/promote", None)

    container.registrar_api.promote_students(["s-1", "s-2"], "cls-9", "2024-2025")

    assert fake_http.calls[0].json == {
        "studentIds": ["s-1", "s-2"],
        "targetClassId": "cls-9",
        "academicSession": "2024-2025",
    }


def test_principal_otp_verification_is_boolean(container, fake_http):
    fake_http.add("POST", "/principal/profile/verify-otp", True)

    assert container.principal_api.verify_profile_access_otp("123456") is True


def test_teacher_course_upload_is_multipart(container, fake_http):
    fake_http.add("POST", "/teacher/course-content/upload", None)

    container.teacher_api.upload_course_content({"title": "Week 1", "courseId": "c-1"}, "notes.pdf", io.BytesIO(b"x"))

    call = fake_http.calls[0]
    assert call.kwargs["data"] == {"title": "Week 1", "courseId": "c-1"}
    assert call.kwargs["files"]["file"][0] == "notes.pdf"


def test_student_quiz_submission(container, fake_http):
    fake_http.add("POST", "/student/quizzes/sq-1/submit", None)

    container.student_api.submit_quiz("sq-1", [{"questionId": "q1", "answer": "B"}])

    assert fake_http.calls[0].json == {"answers": [{"questionId": "q1", "answer": "B"}]}


def test_parent_direct_fee_payment(container, fake_http):
    fake_http.add("POST", "/parent/children/s-1/fees/pay", None)

    container.parent_api.pay_student_fees("s-1", 500, "Cash at counter")

    assert fake_http.calls[0].json == {"amount": 500, "details": "Cash at counter"}


def test_librarian_issue_book(container, fake_http):
    fake_http.add("POST", "/librarian/issuances", None)

    container.librarian_api.issue_book(book_id="b-1", member_id="s-1", member_type="Student", due_date="2024-02-01",
                                       fine_per_day=2)

    assert fake_http.calls[0].json == {
        "bookId": "b-1",
        "memberId": "s-1",
        "memberType": "Student",
        "dueDate": "2024-02-01",
        "finePerDay": 2,
    }


def test_librarian_issuances_with_member_details(container, fake_http):
    fake_http.add("GET", "/librarian/issuances", [])

    container.librarian_api.get_issuances(with_member_details=True)

    assert fake_http.calls[0].params == {"details": "true"}


def test_admin_financials_skip_empty_dates(container, fake_http):
    fake_http.add("GET", "/admin/finance/system-wide", {"totalRevenue": 10})

    assert container.admin_api.get_system_wide_financials(start_date="2024-01-01") == {"totalRevenue": 10}
    assert fake_http.calls[0].params == {"startDate": "2024-01-01"}


def test_admin_communication_history_default(container, fake_http):
    fake_http.add("GET", "/admin/communication/history", None)

    assert container.admin_api.get_communication_history() == {"sms": [], "email": [], "notification": []}
