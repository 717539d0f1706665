"""Example: use the service layer directly, without Flask.

Controllers are thin; the attendance rules live in the services.
"""

from src.bunk_buddy.bunk_buddy.container import build_container
from src.bunk_buddy.bunk_buddy.database.seed import DEMO_USER_ID


def main():
    container = build_container(seed_demo_data=True)

    for subject in container.subject_service.list_for_user(DEMO_USER_ID):
        report = container.subject_service.attendance_for(subject)
        calc = report.calculation
        print(
            f"{subject.name:<12} {calc.current_percentage:5.1f}%  "
            f"can bunk {calc.can_bunk}, must attend {calc.must_attend}  ({report.bunkometer.status})"
        )

    stats = container.dashboard_service.build_stats(DEMO_USER_ID)
    print(f"overall {stats.overall_attendance}%  safe to bunk {stats.safe_to_bunk}")


if __name__ == "__main__":
    main()
