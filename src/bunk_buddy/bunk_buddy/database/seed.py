from __future__ import annotations

import logging

from ..core.constants import DEFAULT_REQUIRED_PERCENTAGE
from ..subjects.memory_subject_repository import InMemorySubjectRepository
from ..users.memory_user_repository import InMemoryUserRepository

logger = logging.getLogger(__name__)

DEMO_USER_ID = "demo-user-1"

_DEMO_SUBJECTS = (
    # id, name, total, attended, color
    ("subject-1", "Mathematics", 30, 26, "#10b981"),
    ("subject-2", "Physics", 25, 19, "#f59e0b"),
    ("subject-3", "Chemistry", 28, 19, "#ef4444"),
)


def ensure_demo_data(users: InMemoryUserRepository, subjects: InMemorySubjectRepository) -> None:
    """Seed the demo user and three subjects. Safe to call more than once."""
    if users.get_by_id(DEMO_USER_ID):
        return

    users.create(
        user_id=DEMO_USER_ID,
        username="johndoe",
        email="john@example.com",
        name="John Doe",
        avatar="https://images.unsplash.com/photo-1535713875002-d1d0cf377fde?ixlib=rb-4.0.3&auto=format&fit=crop&w=32&h=32",
    )
    for subject_id, name, total, attended, color in _DEMO_SUBJECTS:
        subjects.create(
            subject_id=subject_id,
            user_id=DEMO_USER_ID,
            name=name,
            total_lectures=total,
            attended_lectures=attended,
            required_percentage=DEFAULT_REQUIRED_PERCENTAGE,
            color=color,
        )
    logger.info("Seeded demo user %s with %d subjects", DEMO_USER_ID, len(_DEMO_SUBJECTS))
