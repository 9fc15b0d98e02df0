import logging

import numpy as np

from . import store
from .records import GroupStanding

logger = logging.getLogger(__name__)


def compare_groups(course_id):
    """
    Compare the groups of a course by average grade.

    The group average is a mean of per-student means: a student graded on many
    quizzes counts once, exactly like a student graded on one. Groups with no
    graded member are left out.
    """
    student_averages = store.fetch_student_averages(course_id)
    members = store.fetch_group_members(course_id)

    standings = []
    for group in store.fetch_course_groups(course_id):
        averages = [
            student_averages[user_id]
            for user_id in members.get(group.id, [])
            if student_averages.get(user_id) is not None
        ]
        if not averages:
            continue
        standings.append(
            GroupStanding(
                group_id=group.id,
                group_name=group.name,
                student_count=len(averages),
                avg_grade=float(np.mean(averages)),
            )
        )
    logger.debug('Compared %d groups for course=%s', len(standings), course_id)
    return standings
