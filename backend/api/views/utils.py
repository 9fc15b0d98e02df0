from django.shortcuts import get_object_or_404
from rest_framework.exceptions import ValidationError

from courses.models import CourseGroup


def parse_group_id(request, course_id) -> int:
    """
    Read the optional ``group`` query parameter.

    0 (or a missing value) means no group filter. Any other value must name a
    group of ``course_id``.
    """
    raw = (request.query_params.get('group') or '').strip()
    if not raw:
        return 0
    try:
        group_id = int(raw)
    except ValueError:
        raise ValidationError({'group': 'Group must be an integer id.'})
    if group_id < 0:
        raise ValidationError({'group': 'Group must be an integer id.'})
    if group_id:
        get_object_or_404(CourseGroup, id=group_id, course_id=course_id)
    return group_id
