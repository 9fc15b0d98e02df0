"""
Record Joiner
=============

Read-only queries against the ``courses`` tables. Every function here turns
rows into records from ``reports.records`` before returning, so aggregators
never see ORM instances or ``values()`` dicts.

An attempt is tied to the grade it produced by the store convention
``attempt.finish_time == grade.last_modified_time``. Database errors are not
caught: a failed query must not look like an empty report.
"""

import logging

from django.contrib.auth import get_user_model
from django.db.models import Avg, Count, F, OuterRef, Q, Subquery, Sum

from courses.models import Course, CourseGroup, GroupMembership, Quiz, QuizAttempt, QuizGrade
from .records import AttemptRow, CourseRef, GradeRow, GroupRef, QuizRef, UserRef

logger = logging.getLogger(__name__)

ORDER_BY_DURATION = 'duration'
ORDER_BY_CREATED = 'created'

_ORDERINGS = {
    ORDER_BY_DURATION: ('elapsed', 'id'),
    ORDER_BY_CREATED: ('start_time', 'id'),
}


def _finished_attempts(quiz_id, group_id=0):
    attempts = QuizAttempt.objects.filter(quiz_id=quiz_id, state=QuizAttempt.State.FINISHED)
    if group_id:
        # Both conditions must hold for the same membership row
        attempts = attempts.filter(
            user__group_memberships__group_id=group_id,
            user__group_memberships__group__course_id=F('quiz__course_id'),
        )
    return attempts


def _attempt_rows(attempts, order_by):
    if order_by not in _ORDERINGS:
        raise ValueError(f'Unknown attempt ordering: {order_by!r}')
    matched_grade = QuizGrade.objects.filter(
        quiz_id=OuterRef('quiz_id'),
        user_id=OuterRef('user_id'),
        last_modified_time=OuterRef('finish_time'),
    ).values('grade')[:1]
    rows = (
        attempts
        .annotate(
            elapsed=F('finish_time') - F('start_time'),
            matched_grade=Subquery(matched_grade),
        )
        .order_by(*_ORDERINGS[order_by])
        .values(
            'id',
            'quiz_id',
            'user_id',
            'user__first_name',
            'user__last_name',
            'start_time',
            'finish_time',
            'sum_of_subscores',
            'matched_grade',
        )
    )
    return [
        AttemptRow(
            attempt_id=row['id'],
            quiz_id=row['quiz_id'],
            user_id=row['user_id'],
            first_name=row['user__first_name'] or '',
            last_name=row['user__last_name'] or '',
            start_time=row['start_time'],
            finish_time=row['finish_time'],
            sum_of_subscores=row['sum_of_subscores'],
            grade=row['matched_grade'],
        )
        for row in rows
    ]


def fetch_finished_attempts(quiz_id, group_id=0, order_by=ORDER_BY_DURATION):
    """
    Finished attempts of a quiz with user identity and the grade each one produced.

    ``group_id`` of 0 means every participant; otherwise only members of that
    group in the quiz's course. Attempts whose grade cannot be matched are kept
    with ``grade=None``.
    """
    rows = _attempt_rows(_finished_attempts(quiz_id, group_id), order_by)
    logger.debug('Fetched %d finished attempts for quiz=%s group=%s', len(rows), quiz_id, group_id)
    return rows


def fetch_user_attempts(course_id, user_id, order_by=ORDER_BY_CREATED):
    attempts = QuizAttempt.objects.filter(
        quiz__course_id=course_id,
        user_id=user_id,
        state=QuizAttempt.State.FINISHED,
    )
    return _attempt_rows(attempts, order_by)


def fetch_grade(quiz_id, user_id):
    return (
        QuizGrade.objects.filter(quiz_id=quiz_id, user_id=user_id)
        .values_list('grade', flat=True)
        .first()
    )


def fetch_quiz_grades(quiz_id, user_ids):
    """Map user id to grade for the given users; users without a grade are absent."""
    return dict(
        QuizGrade.objects.filter(quiz_id=quiz_id, user_id__in=list(user_ids))
        .values_list('user_id', 'grade')
    )


def fetch_universe(course_id):
    """Every quiz of the course in creation order: the shared axis of all quiz charts."""
    quizzes = (
        Quiz.objects.filter(course_id=course_id)
        .order_by('created_time', 'id')
        .values_list('id', 'name', 'created_time')
    )
    return [QuizRef(id=quiz_id, name=name, created_time=created) for quiz_id, name, created in quizzes]


def fetch_average_duration(quiz_id):
    return _finished_attempts(quiz_id).aggregate(
        avg_duration=Avg(F('finish_time') - F('start_time'))
    )['avg_duration']


def fetch_attempt_stats(quiz_id, group_id=0):
    """Map user id to ``(finished attempt count, total of sum_of_subscores)``."""
    rows = (
        _finished_attempts(quiz_id, group_id)
        .values('user_id')
        .annotate(attempts=Count('id'), score_total=Sum('sum_of_subscores'))
        .order_by()
    )
    return {row['user_id']: (row['attempts'], row['score_total'] or 0.0) for row in rows}


def fetch_user_grades(course_id, user_id):
    grades = (
        QuizGrade.objects.filter(quiz__course_id=course_id, user_id=user_id)
        .order_by('quiz__created_time', 'quiz_id')
        .values_list('quiz_id', 'quiz__name', 'grade', 'last_modified_time')
    )
    return [
        GradeRow(quiz_id=quiz_id, quiz_name=name, grade=grade, last_modified_time=modified)
        for quiz_id, name, grade, modified in grades
    ]


def fetch_attempt_counts(course_id, user_id=None):
    """Map quiz id to its number of finished attempts, optionally for one user."""
    attempts = QuizAttempt.objects.filter(quiz__course_id=course_id, state=QuizAttempt.State.FINISHED)
    if user_id is not None:
        attempts = attempts.filter(user_id=user_id)
    rows = attempts.values('quiz_id').annotate(attempts=Count('id')).order_by()
    return {row['quiz_id']: row['attempts'] for row in rows}


def _average_durations(attempts):
    rows = (
        attempts
        .values('quiz_id')
        .annotate(avg_duration=Avg(F('finish_time') - F('start_time')))
        .order_by()
    )
    return {row['quiz_id']: row['avg_duration'] for row in rows}


def fetch_quiz_average_durations(course_id):
    return _average_durations(
        QuizAttempt.objects.filter(quiz__course_id=course_id, state=QuizAttempt.State.FINISHED)
    )


def fetch_user_durations(course_id, user_id):
    return _average_durations(
        QuizAttempt.objects.filter(
            quiz__course_id=course_id,
            user_id=user_id,
            state=QuizAttempt.State.FINISHED,
        )
    )


def fetch_course_groups(course_id):
    groups = CourseGroup.objects.filter(course_id=course_id).order_by('name', 'id').values_list('id', 'name')
    return [GroupRef(id=group_id, name=name) for group_id, name in groups]


def fetch_group_members(course_id):
    """Map group id to the ids of its members, for every group of the course."""
    members = {}
    rows = (
        GroupMembership.objects.filter(group__course_id=course_id)
        .order_by('group_id', 'user_id')
        .values_list('group_id', 'user_id')
    )
    for group_id, user_id in rows:
        members.setdefault(group_id, []).append(user_id)
    return members


def fetch_student_averages(course_id):
    """Map user id to the mean of that user's quiz grades in the course."""
    rows = (
        QuizGrade.objects.filter(quiz__course_id=course_id)
        .values('user_id')
        .annotate(avg_grade=Avg('grade'))
        .order_by()
    )
    return {row['user_id']: row['avg_grade'] for row in rows}


def fetch_course_users(course_id, group_id=0, search=''):
    """Users with at least one attempt in the course, for the user selector."""
    users = get_user_model().objects.filter(quiz_attempts__quiz__course_id=course_id)
    if group_id:
        users = users.filter(
            group_memberships__group_id=group_id,
            group_memberships__group__course_id=course_id,
        )
    search = (search or '').strip()
    if search:
        users = users.filter(
            Q(first_name__icontains=search)
            | Q(last_name__icontains=search)
            | Q(email__icontains=search)
        )
    rows = (
        users.distinct()
        .order_by('last_name', 'first_name', 'id')
        .values_list('id', 'first_name', 'last_name', 'email')
    )
    return [
        UserRef(id=user_id, first_name=first or '', last_name=last or '', email=email or '')
        for user_id, first, last, email in rows
    ]


def fetch_user(user_id):
    row = (
        get_user_model().objects.filter(id=user_id)
        .values_list('id', 'first_name', 'last_name', 'email')
        .first()
    )
    if row is None:
        return None
    user_id, first, last, email = row
    return UserRef(id=user_id, first_name=first or '', last_name=last or '', email=email or '')


def fetch_viewable_courses(user):
    """Courses whose reports ``user`` may open: all of them for a superuser, taught ones for an instructor."""
    if not user or not user.is_authenticated:
        return []
    if user.is_superuser:
        courses = Course.objects.all()
    else:
        instructor = getattr(user, 'instructor', None)
        if instructor is None:
            return []
        courses = instructor.courses.all()
    rows = courses.order_by('short_name', 'id').values_list('id', 'short_name', 'full_name')
    return [
        CourseRef(id=course_id, short_name=short_name, full_name=full_name or '')
        for course_id, short_name, full_name in rows
    ]
