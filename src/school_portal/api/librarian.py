from __future__ import annotations

from typing import Any, BinaryIO, Optional

from .client import ApiClient, form_fields


class LibrarianApi:
    def __init__(self, api: ApiClient):
        self._api = api

    def get_dashboard_data(self) -> dict:
        return self._api.get("/librarian/dashboard") or {}

    # --- Books ---
    def get_books(self) -> list[dict]:
        return self._api.get_list("/librarian/books")

    def search_books(self, query: str) -> list[dict]:
        return self._api.get_list("/librarian/books/search", params={"q": query})

    def create_book(self, book: dict[str, Any], pdf: Optional[tuple[str, BinaryIO]] = None) -> None:
        files = {"pdfFile": pdf} if pdf else None
        self._api.post("/librarian/books", data=form_fields(book), files=files)

    def update_book(self, book_id: str, book: dict[str, Any], pdf: Optional[tuple[str, BinaryIO]] = None) -> None:
        files = {"pdfFile": pdf} if pdf else None
        self._api.put(f"/librarian/books/{book_id}", data=form_fields(book), files=files)

    def delete_book(self, book_id: str) -> None:
        self._api.delete(f"/librarian/books/{book_id}")

    # --- Circulation ---
    def get_issuances(self, *, with_member_details: bool = False) -> list[dict]:
        params = {"details": "true"} if with_member_details else None
        return self._api.get_list("/librarian/issuances", params=params)

    def issue_book(
        self,
        *,
        book_id: str,
        member_id: str,
        member_type: str,
        due_date: str,
        fine_per_day: float,
    ) -> None:
        self._api.post(
            "/librarian/issuances",
            {
                "bookId": book_id,
                "memberId": member_id,
                "memberType": member_type,
                "dueDate": due_date,
                "finePerDay": fine_per_day,
            },
        )

    def issue_book_by_identifier(self, *, book_identifier: str, member_id: str, due_date: str, fine_per_day: float) -> dict:
        payload = {
            "bookIdentifier": book_identifier,
            "memberId": member_id,
            "dueDate": due_date,
            "finePerDay": fine_per_day,
        }
        return self._api.post("/librarian/issuances/by-identifier", payload) or {}

    def return_book(self, issuance_id: str) -> None:
        self._api.put(f"/librarian/issuances/{issuance_id}/return")

    def get_attendance(self) -> list[dict]:
        return self._api.get_list("/librarian/attendance")
