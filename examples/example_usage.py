"""Example: using the service layer directly (no Flask).

Controllers are a thin layer; everything below is plain services and repositories.
"""

import importlib

from config import get_settings_module

from src.student_attendance.student_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    admin = container.admin_service
    print(admin.get_unlock_stats().to_dict())
    for row in admin.get_attendance_reports()[:5]:
        print(row.to_dict())


if __name__ == "__main__":
    main()
