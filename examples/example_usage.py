"""Example: use the service layer directly (no Flask).

Controllers stay thin; registration and attendance rules live in services.
"""

from event_checkin.container import build_container
from event_checkin.core.exceptions import AlreadyMarkedError


def main():
    container = build_container(database_url="sqlite:///:memory:", auto_init_db=True)
    try:
        alice = container.registration_service.register("Alice", "a@x.com", "R1")
        container.attendance_service.mark_attendance(alice.registration_id)
        try:
            container.attendance_service.mark_attendance(alice.registration_id)
        except AlreadyMarkedError as e:
            print(e)
        print(container.registration_service.counts())
    finally:
        container.close()


if __name__ == "__main__":
    main()
