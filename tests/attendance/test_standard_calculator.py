import pytest

from src.bunk_buddy.bunk_buddy.attendance.bunkometer import (
    get_attendance_color,
    get_bunkometer_status,
    get_progress_bar_color,
)
from src.bunk_buddy.bunk_buddy.attendance.calculator.standard_calculator import (
    StandardAttendanceCalculator,
    calculate_attendance,
    classify_attendance,
    required_lectures,
)
from src.bunk_buddy.bunk_buddy.core.enums import AttendanceStatus


def test_safe_subject_has_bunk_margin():
    calc = calculate_attendance(26, 30, 75)

    assert calc.current_percentage == pytest.approx(86.6667, rel=1e-4)
    assert calc.can_bunk == 3
    assert calc.must_attend == 0
    assert calc.status == AttendanceStatus.SAFE


def test_warning_subject_just_above_requirement():
    calc = calculate_attendance(19, 25, 75)

    assert calc.current_percentage == pytest.approx(76.0)
    assert calc.can_bunk == 0
    assert calc.must_attend == 0
    assert calc.status == AttendanceStatus.WARNING


def test_danger_subject_must_attend():
    calc = calculate_attendance(19, 28, 75)

    assert calc.current_percentage == pytest.approx(67.857, rel=1e-4)
    assert calc.can_bunk == 0
    assert calc.must_attend == 2
    assert calc.status == AttendanceStatus.DANGER


def test_required_lectures_round_up():
    # 75% of 30 is 22.5 -> 23 lectures needed.
    assert calculate_attendance(23, 30).can_bunk == 0
    assert calculate_attendance(22, 30).must_attend == 1


def test_whole_number_requirement_is_not_inflated_by_float_error():
    # 28% of 25 is exactly 7 lectures.
    calc = calculate_attendance(7, 25, 28)

    assert calc.must_attend == 0
    assert calc.can_bunk == 0
    assert calc.status == AttendanceStatus.WARNING


def test_required_lectures_for_exact_fractions():
    assert required_lectures(25, 28) == 7
    assert required_lectures(50, 14) == 7
    assert required_lectures(100, 7) == 7


def test_zero_total_gives_zero_percentage_and_danger():
    calc = calculate_attendance(0, 0, 75)

    assert calc.current_percentage == 0
    assert calc.can_bunk == 0
    assert calc.must_attend == 0
    assert calc.status == AttendanceStatus.DANGER


def test_zero_total_with_zero_requirement_is_warning_by_formula():
    # 0 < 0 is false, 0 < 0 + 10 is true.
    assert calculate_attendance(0, 0, 0).status == AttendanceStatus.WARNING


def test_default_requirement_is_75():
    assert calculate_attendance(19, 25) == calculate_attendance(19, 25, 75)


def test_attended_above_total_is_tolerated():
    calc = calculate_attendance(12, 10, 75)

    assert calc.current_percentage == pytest.approx(120.0)
    assert calc.can_bunk == 4
    assert calc.status == AttendanceStatus.SAFE


@pytest.mark.parametrize("required", [0, 50, 75, 90, 100])
def test_margins_never_negative_and_never_both_positive(required):
    calculator = StandardAttendanceCalculator()
    for total in range(0, 41):
        for attended in range(0, total + 1):
            calc = calculator.calculate(attended, total, required)
            assert calc.can_bunk >= 0
            assert calc.must_attend >= 0
            assert not (calc.can_bunk > 0 and calc.must_attend > 0)
            if total > 0:
                assert calc.current_percentage == pytest.approx(attended / total * 100)


@pytest.mark.parametrize(
    "percentage, expected",
    [
        (74.99, AttendanceStatus.DANGER),
        (75.0, AttendanceStatus.WARNING),
        (84.99, AttendanceStatus.WARNING),
        (85.0, AttendanceStatus.SAFE),
    ],
)
def test_classification_boundaries(percentage, expected):
    assert classify_attendance(percentage, 75) == expected


@pytest.mark.parametrize("percentage", [0, 50, 74.9, 75, 80, 84.9, 85, 100])
def test_bunkometer_agrees_with_status(percentage):
    labels = {
        AttendanceStatus.SAFE: "Safe zone",
        AttendanceStatus.WARNING: "Warning zone",
        AttendanceStatus.DANGER: "Danger zone",
    }
    assert get_bunkometer_status(percentage, 75).status == labels[classify_attendance(percentage, 75)]


def test_style_tokens_follow_zone():
    assert get_attendance_color(90) == "text-green-600 dark:text-green-400"
    assert get_progress_bar_color(80) == "bg-yellow-500"
    assert get_bunkometer_status(60).bg_color == "bg-red-100 dark:bg-red-900"
