from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance zone of a subject relative to its required percentage."""

    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"


class EventType(str, Enum):
    EXAM = "exam"
    ASSIGNMENT = "assignment"
    LAB = "lab"
    QUIZ = "quiz"
    PROJECT = "project"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class NotificationType(str, Enum):
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class BunkPlanStatus(str, Enum):
    """Lifecycle of a planned bunk."""

    PLANNED = "planned"
    EXECUTED = "executed"
    CANCELLED = "cancelled"
