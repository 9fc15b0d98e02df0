"""
Series Aligner
==============

Quiz charts share one axis: every quiz of the course in creation order (the
universe). A report invocation fetches the universe once and hands the same
list to every series builder, so all series line up label for label even if
quizzes are added or removed while the report is being computed.
"""

import logging

from . import store
from .conf import report_setting
from .records import Chart, ChartSeries

logger = logging.getLogger(__name__)

MISSING_VALUE = 0

GRADES_SERIES = 'Grade'
USER_DURATION_SERIES = 'Solve time'
AVERAGE_DURATION_SERIES = 'Average solve time'
ATTEMPTS_SERIES = 'Attempts'
GROUP_GRADE_SERIES = 'Average grade'


def _quiz_key(entry):
    return getattr(entry, 'id', entry)


def align_series(universe, sparse):
    """
    Spread ``sparse`` (quiz id -> value) over ``universe``.

    The result always has one entry per universe quiz, in universe order;
    quizzes missing from ``sparse`` get 0. ``universe`` may hold quiz ids or
    ``QuizRef`` records.
    """
    return [sparse.get(_quiz_key(entry), MISSING_VALUE) for entry in universe]


def _labels(universe):
    return tuple(getattr(entry, 'name', str(entry)) for entry in universe)


def _chart(universe, named_values):
    return Chart(
        labels=_labels(universe),
        series=tuple(
            ChartSeries(name=name, values=tuple(align_series(universe, sparse)))
            for name, sparse in named_values
        ),
    )


def grade_chart(universe, course_id, user_id) -> Chart:
    grades = {grade_row.quiz_id: grade_row.grade for grade_row in store.fetch_user_grades(course_id, user_id)}
    return _chart(universe, [(GRADES_SERIES, grades)])


def duration_chart(universe, course_id, user_id) -> Chart:
    """The user's solve time per quiz next to the quiz-wide average, in seconds."""
    return _chart(
        universe,
        [
            (USER_DURATION_SERIES, store.fetch_user_durations(course_id, user_id)),
            (AVERAGE_DURATION_SERIES, store.fetch_quiz_average_durations(course_id)),
        ],
    )


def attempts_chart(universe, course_id, user_id=None) -> Chart:
    return _chart(universe, [(ATTEMPTS_SERIES, store.fetch_attempt_counts(course_id, user_id))])


def group_chart(standings) -> Chart:
    """Bars over groups instead of quizzes; the standings already fix the axis."""
    template = report_setting('GROUP_LABEL')
    return Chart(
        labels=tuple(
            template.format(name=standing.group_name, count=standing.student_count)
            for standing in standings
        ),
        series=(
            ChartSeries(
                name=GROUP_GRADE_SERIES,
                values=tuple(standing.avg_grade for standing in standings),
            ),
        ),
    )


def build_course_charts(course_id, user_id):
    universe = store.fetch_universe(course_id)
    logger.debug('Building charts for course=%s user=%s over %d quizzes', course_id, user_id, len(universe))
    return {
        'grades': grade_chart(universe, course_id, user_id),
        'durations': duration_chart(universe, course_id, user_id),
        'attempts': attempts_chart(universe, course_id, user_id),
    }
