"""Book catalog — course textbooks and where their PDFs live."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class BookEntry:
    title: str
    course: str
    subject: str
    pdf_url: str = ""
    drive_id: str = ""


BOOKS: list[BookEntry] = [
    BookEntry(
        title="Ciencias Naturales 5° Básico",
        course="5A",
        subject="Ciencias",
        pdf_url="https://drive.google.com/file/d/1cN5bAsIcOcIeNcIaS5aTxT/view?usp=sharing",
    ),
    BookEntry(
        title="Matemática 5° Básico",
        course="5A",
        subject="Matemáticas",
        drive_id="1mAt5bAsIcOmAtEmAtIcA5aTx",
    ),
    BookEntry(
        title="Lenguaje y Comunicación 5° Básico",
        course="5A",
        subject="Lenguaje",
        drive_id="1lEn5bAsIcOlEnGuAjE5aTxTt",
    ),
    BookEntry(
        title="Historia, Geografía y Ciencias Sociales 6° Básico",
        course="6A",
        subject="Historia",
        drive_id="1hIs6bAsIcOhIsToRiA6aTxTt",
    ),
    BookEntry(
        title="Ciencias Naturales 6° Básico",
        course="6A",
        subject="Ciencias",
        pdf_url="https://drive.google.com/file/d/1cN6bAsIcOcIeNcIaS6aTxT/view",
    ),
]

_DRIVE_VIEW_LINK = re.compile(r"/file/d/([^/]+)/view")


def _normalize(value: str | None) -> str:
    return (value or "").strip().lower()


def candidates_for(course: str, hint: str, books: list[BookEntry] | None = None) -> list[BookEntry]:
    """Books of ``course`` whose title or subject equals ``hint``."""
    books = BOOKS if books is None else books
    course, hint = (course or "").strip(), (hint or "").strip()
    return [b for b in books if b.course == course and hint in (b.title, b.subject)]


def resolve_book(
    book_title: str = "",
    subject: str = "",
    course: str = "",
    books: list[BookEntry] | None = None,
) -> tuple[BookEntry | None, str]:
    """Find one book by exact title, then subject+course, then subject alone.

    Returns (book, matched_by) where matched_by is "title", "subject-course" or "subject".
    """
    books = BOOKS if books is None else books
    title_n, subject_n, course_n = _normalize(book_title), _normalize(subject), _normalize(course)

    if title_n:
        for b in books:
            if _normalize(b.title) == title_n:
                return b, "title"

    if subject_n and course_n:
        in_course = [b for b in books if _normalize(b.course) == course_n]
        match = next((b for b in in_course if _normalize(b.subject) == subject_n), None)
        if match is None:
            match = next((b for b in in_course if subject_n in _normalize(b.subject)), None)
        if match is not None:
            return match, "subject-course"

    if subject_n:
        match = next((b for b in books if _normalize(b.subject) == subject_n), None)
        if match is None:
            match = next((b for b in books if subject_n in _normalize(b.subject)), None)
        if match is not None:
            return match, "subject"

    return None, ""


def to_drive_download_url(book: BookEntry) -> str | None:
    """Direct-download URL for a catalog entry, or None when it has no location."""
    if book.drive_id:
        return f"https://drive.google.com/uc?export=download&id={book.drive_id}"
    if book.pdf_url:
        m = _DRIVE_VIEW_LINK.search(book.pdf_url)
        if m:
            return f"https://drive.google.com/uc?export=download&id={m.group(1)}"
        return book.pdf_url
    return None
