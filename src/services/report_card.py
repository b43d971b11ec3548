"""Report Card Calculator

Turns a student's subject marks into totals, a percentage, a letter grade
and pass/fail lists.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from constants import FAIL_GRADE, GRADE_BANDS, MAX_MARK, PASS_MARK
from core.logging import get_logger
from core.numeric import Number, round_half_up
from records.models import Student
from records.parser import parse_student

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReportCard:
    """Derived report for one student."""

    name: str
    total_marks: Number
    percentage: float
    grade: str
    highest_subject: str
    lowest_subject: str
    subject_count: int
    passed_subjects: List[str] = field(default_factory=list)
    failed_subjects: List[str] = field(default_factory=list)


def grade_for(percentage: Number) -> str:
    """Letter grade for a percentage.

    Examples:
        >>> grade_for(90)
        'A+'
        >>> grade_for(89.99)
        'A'
        >>> grade_for(39.5)
        'F'
    """
    for floor, grade in GRADE_BANDS:
        if percentage >= floor:
            return grade
    return FAIL_GRADE


def extreme_subjects(student: Student) -> Tuple[str, str]:
    """Subjects with the highest and lowest mark.

    Comparisons are strict, so on a tie the earlier subject is kept.
    """
    highest, lowest = None, None
    best, worst = float("-inf"), float("inf")
    for subject, mark in student.marks.items():
        if mark > best:
            highest, best = subject, mark
        if mark < worst:
            lowest, worst = subject, mark
    return highest, lowest


def build_report_card(student: Any) -> Optional[ReportCard]:
    """Build a report card from ``{"name": ..., "marks": {subject: mark}}``.

    Args:
        student: Student record with marks in [0, 100]

    Returns:
        ReportCard, or None if the record is malformed or a mark is out of
        range
    """
    parsed = parse_student(student)
    if not parsed["ok"]:
        logger.debug("Rejected student: {}", parsed["error"])
        return None

    record: Student = parsed["value"]
    total = sum(record.marks.values())
    percentage = round_half_up(total / (record.subject_count * MAX_MARK) * 100, 2)
    highest, lowest = extreme_subjects(record)

    card = ReportCard(
        name=record.name,
        total_marks=total,
        percentage=percentage,
        grade=grade_for(percentage),
        highest_subject=highest,
        lowest_subject=lowest,
        subject_count=record.subject_count,
        passed_subjects=[s for s, m in record.marks.items() if m >= PASS_MARK],
        failed_subjects=[s for s, m in record.marks.items() if m < PASS_MARK],
    )
    logger.debug("Report card for {}: {}% ({})", card.name, card.percentage, card.grade)
    return card
