from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Sequence

import requests

from .api.admin import AdminApi
from .api.client import ApiClient
from .api.librarian import LibrarianApi
from .api.parent import ParentApi
from .api.principal import PrincipalApi
from .api.registrar import RegistrarApi
from .api.shared import SharedApi
from .api.student import StudentApi
from .api.teacher import TeacherApi
from .attendance.service import StaffCalendarService
from .auth.service import AuthService
from .auth.store import FlaskSessionStore, SessionStore
from .common.datetime_utils import today_local
from .core.constants import (
    DEFAULT_API_TIMEOUT,
    DEFAULT_PAYMENT_CURRENCY,
    DEFAULT_UPLOAD_HANDLER_PATH,
    DEFAULT_WEEKLY_HOLIDAYS,
)
from .documents.upload import DocumentUploadService
from .events.bus import RefreshBus
from .fees.payments import FeePaymentService
from .leave.service import LeaveService
from .requests.service import ApprovalService


@dataclass(frozen=True)
class Container:
    store: SessionStore
    api: ApiClient
    bus: RefreshBus

    shared_api: SharedApi
    admin_api: AdminApi
    principal_api: PrincipalApi
    registrar_api: RegistrarApi
    teacher_api: TeacherApi
    student_api: StudentApi
    parent_api: ParentApi
    librarian_api: LibrarianApi

    auth_service: AuthService
    calendar_service: StaffCalendarService
    leave_service: LeaveService
    approval_service: ApprovalService
    fee_service: FeePaymentService
    document_service: DocumentUploadService

    clock: Callable[[], date]


def build_container(
    *,
    api_base_url: str,
    api_timeout: float = DEFAULT_API_TIMEOUT,
    weekly_holidays: Sequence[int] = DEFAULT_WEEKLY_HOLIDAYS,
    payment_currency: str = DEFAULT_PAYMENT_CURRENCY,
    upload_handler_path: str = DEFAULT_UPLOAD_HANDLER_PATH,
    store: Optional[SessionStore] = None,
    http: Optional[requests.Session] = None,
    clock: Callable[[], date] = today_local,
) -> Container:
    store = store or FlaskSessionStore()
    api = ApiClient(api_base_url, store, timeout=api_timeout, http=http)
    bus = RefreshBus()

    shared_api = SharedApi(api)
    admin_api = AdminApi(api)
    principal_api = PrincipalApi(api)
    registrar_api = RegistrarApi(api)
    teacher_api = TeacherApi(api)
    student_api = StudentApi(api)
    parent_api = ParentApi(api)
    librarian_api = LibrarianApi(api)

    auth_service = AuthService(shared_api, store, bus)
    calendar_service = StaffCalendarService(
        registrar_api,
        shared_api,
        weekly_holidays=weekly_holidays,
        clock=clock,
    )
    leave_service = LeaveService(shared_api, registrar_api, bus)
    approval_service = ApprovalService(registrar_api, principal_api, teacher_api, bus)
    fee_service = FeePaymentService(student_api, parent_api, shared_api, bus, currency=payment_currency)
    document_service = DocumentUploadService(api, registrar_api, bus, handler_path=upload_handler_path)

    return Container(
        store=store,
        api=api,
        bus=bus,
        shared_api=shared_api,
        admin_api=admin_api,
        principal_api=principal_api,
        registrar_api=registrar_api,
        teacher_api=teacher_api,
        student_api=student_api,
        parent_api=parent_api,
        librarian_api=librarian_api,
        auth_service=auth_service,
        calendar_service=calendar_service,
        leave_service=leave_service,
        approval_service=approval_service,
        fee_service=fee_service,
        document_service=document_service,
        clock=clock,
    )
