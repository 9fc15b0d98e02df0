import logging

from rest_framework.permissions import BasePermission

logger = logging.getLogger(__name__)


def can_view_course(user, course) -> bool:
    """Whether ``user`` may see reports covering every student of ``course``."""
    if not user or not user.is_authenticated:
        return False
    if user.is_superuser:
        return True
    instructor = getattr(user, 'instructor', None)
    return instructor is not None and instructor.teaches(course.pk)


class IsCourseViewer(BasePermission):
    message = 'You do not have permission to view reports for this course.'

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated)

    def has_object_permission(self, request, view, obj):
        allowed = can_view_course(request.user, obj)
        if not allowed:
            logger.info('Denied course report access: user=%s course=%s', request.user.pk, obj.pk)
        return allowed


class IsSelfOrCourseViewer(BasePermission):
    message = 'You can only view your own report.'

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated)

    def has_object_permission(self, request, view, obj):
        # Students may always see their own report
        if str(request.user.pk) == str(view.kwargs.get('user_id')):
            return True
        allowed = can_view_course(request.user, obj)
        if not allowed:
            logger.info(
                'Denied user report access: user=%s subject=%s course=%s',
                request.user.pk,
                view.kwargs.get('user_id'),
                obj.pk,
            )
        return allowed
