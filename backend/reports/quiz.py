import logging

from . import store
from .conf import format_grade
from .durations import format_duration, format_timestamp
from .records import QuizReport, QuizReportRow

logger = logging.getLogger(__name__)


def _build_row(attempt, duration_avg, stats) -> QuizReportRow:
    attempts_count, score_total = stats
    delta = attempt.duration - duration_avg
    return QuizReportRow(
        user_id=attempt.user_id,
        full_name=attempt.full_name,
        start_time=format_timestamp(attempt.start_time),
        finish_time=format_timestamp(attempt.finish_time),
        duration_seconds=attempt.duration,
        duration=format_duration(attempt.duration),
        duration_delta_seconds=delta,
        duration_delta=format_duration(delta),
        grade=format_grade(attempt.grade),
        grade_value=attempt.grade,
        attempts_count=attempts_count,
        # Raw attempt score; kept apart from the scaled grade on purpose
        avg_score=score_total / attempts_count if attempts_count else 0.0,
    )


def aggregate_quiz(quiz_id, group_id=0) -> QuizReport:
    """
    Summarise the finished attempts of one quiz, optionally for one group.

    Rows come one per finished attempt, fastest first. Each row's duration
    delta is measured against the average duration of the whole quiz, so
    narrowing the report to a group never moves the baseline. A quiz nobody
    finished yields an empty report rather than an error.
    """
    attempts = store.fetch_finished_attempts(quiz_id, group_id)
    if not attempts:
        logger.debug('Quiz report quiz=%s group=%s has no finished attempts', quiz_id, group_id)
        return QuizReport(
            quiz_id=quiz_id,
            group_id=group_id,
            participant_count=0,
            grade_avg=None,
            duration_avg=None,
            duration_avg_display=None,
        )

    duration_avg = store.fetch_average_duration(quiz_id)
    stats = store.fetch_attempt_stats(quiz_id, group_id)

    participants = list(dict.fromkeys(attempt.user_id for attempt in attempts))
    grades = store.fetch_quiz_grades(quiz_id, participants)
    grade_values = [grades[user_id] for user_id in participants if user_id in grades]
    grade_avg = sum(grade_values) / len(grade_values) if grade_values else None

    rows = tuple(
        _build_row(attempt, duration_avg, stats.get(attempt.user_id, (0, 0.0)))
        for attempt in attempts
    )
    logger.debug(
        'Quiz report quiz=%s group=%s: %d participants, %d rows',
        quiz_id,
        group_id,
        len(participants),
        len(rows),
    )
    return QuizReport(
        quiz_id=quiz_id,
        group_id=group_id,
        participant_count=len(participants),
        grade_avg=grade_avg,
        duration_avg=duration_avg,
        duration_avg_display=format_duration(duration_avg),
        rows=rows,
    )
