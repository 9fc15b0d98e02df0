import logging

from . import store
from .durations import format_duration, format_timestamp
from .records import UserReport, UserReportRow

logger = logging.getLogger(__name__)


def _pick_attempt(grade_row, attempts):
    # Prefer the attempt that produced the grade, then the latest one
    for attempt in attempts:
        if attempt.finish_time == grade_row.last_modified_time:
            return attempt
    if attempts:
        return max(attempts, key=lambda attempt: (attempt.finish_time, attempt.attempt_id))
    return None


def _build_row(grade_row, attempts) -> UserReportRow:
    attempt = _pick_attempt(grade_row, attempts)
    if attempt is None:
        return UserReportRow(
            quiz_id=grade_row.quiz_id,
            quiz_name=grade_row.quiz_name,
            start_time=None,
            finish_time=None,
            duration=None,
            grade=grade_row.grade,
        )
    return UserReportRow(
        quiz_id=grade_row.quiz_id,
        quiz_name=grade_row.quiz_name,
        start_time=format_timestamp(attempt.start_time),
        finish_time=format_timestamp(attempt.finish_time),
        duration=format_duration(attempt.duration),
        grade=grade_row.grade,
    )


def aggregate_user(course_id, user_id) -> UserReport:
    """One row per graded quiz of the course, in quiz creation order, plus grade totals."""
    grades = store.fetch_user_grades(course_id, user_id)
    attempts_by_quiz = {}
    for attempt in store.fetch_user_attempts(course_id, user_id):
        attempts_by_quiz.setdefault(attempt.quiz_id, []).append(attempt)

    rows = tuple(_build_row(grade_row, attempts_by_quiz.get(grade_row.quiz_id, [])) for grade_row in grades)
    solved_count = len(rows)
    grade_sum = sum(grade_row.grade for grade_row in grades)

    user = store.fetch_user(user_id)
    logger.debug('User report course=%s user=%s: %d graded quizzes', course_id, user_id, solved_count)
    return UserReport(
        course_id=course_id,
        user_id=user_id,
        full_name=user.full_name if user else '',
        solved_count=solved_count,
        grade_sum=grade_sum,
        grade_avg=grade_sum / solved_count if solved_count else 0,
        rows=rows,
    )
