"""
Report Records
==============

Plain, immutable records passed between the store adapter, the aggregators
and the API layer. Store rows are converted into these records inside
``reports.store``; nothing else in the package touches ORM objects.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CourseRef:
    id: int
    short_name: str
    full_name: str


@dataclass(frozen=True)
class QuizRef:
    id: int
    name: str
    created_time: int


@dataclass(frozen=True)
class GroupRef:
    id: int
    name: str


@dataclass(frozen=True)
class UserRef:
    id: int
    first_name: str
    last_name: str
    email: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class AttemptRow:
    """A finished attempt joined with its user and, when one matches, its grade."""

    attempt_id: int
    quiz_id: int
    user_id: int
    first_name: str
    last_name: str
    start_time: int
    finish_time: int
    sum_of_subscores: Optional[float] = None
    grade: Optional[float] = None

    @property
    def duration(self) -> int:
        return self.finish_time - self.start_time

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class GradeRow:
    quiz_id: int
    quiz_name: str
    grade: float
    last_modified_time: int


@dataclass(frozen=True)
class QuizReportRow:
    user_id: int
    full_name: str
    start_time: str
    finish_time: str
    duration_seconds: int
    duration: str
    duration_delta_seconds: float
    duration_delta: str
    grade: str
    grade_value: Optional[float]
    attempts_count: int
    avg_score: float


@dataclass(frozen=True)
class QuizReport:
    quiz_id: int
    group_id: int
    participant_count: int
    grade_avg: Optional[float]
    duration_avg: Optional[float]
    duration_avg_display: Optional[str]
    rows: Tuple[QuizReportRow, ...] = ()


@dataclass(frozen=True)
class UserReportRow:
    quiz_id: int
    quiz_name: str
    start_time: Optional[str]
    finish_time: Optional[str]
    duration: Optional[str]
    grade: float


@dataclass(frozen=True)
class UserReport:
    course_id: int
    user_id: int
    full_name: str
    solved_count: int
    grade_sum: float
    grade_avg: float
    rows: Tuple[UserReportRow, ...] = ()


@dataclass(frozen=True)
class ChartSeries:
    name: str
    values: Tuple[float, ...] = ()


@dataclass(frozen=True)
class Chart:
    labels: Tuple[str, ...] = ()
    series: Tuple[ChartSeries, ...] = ()


@dataclass(frozen=True)
class GroupStanding:
    group_id: int
    group_name: str
    student_count: int
    avg_grade: float
