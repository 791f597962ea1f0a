"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

from datetime import date

from school_attendance.attendance.filters import AttendanceFilter
from school_attendance.container import build_container
from school_attendance.storage.memory_storage import InMemoryStorage


def main():
    container = build_container(session_storage=InMemoryStorage(), storage=InMemoryStorage())

    teacher = container.auth_service.sign_in("teacher@example.com", "password123")
    view = container.attendance_service.history(teacher, AttendanceFilter.last_days(date.today(), 7))
    print(view.stats)
    for row in view.page.items[:3]:
        print(row["date"], row["className"], [e["status"] for e in row["records"]])


if __name__ == "__main__":
    main()
