from django.shortcuts import get_object_or_404
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsCourseViewer
from api.serializers import CourseSerializer, GroupRefSerializer, QuizRefSerializer, UserRefSerializer
from courses.models import Course
from reports.store import fetch_course_groups, fetch_course_users, fetch_universe, fetch_viewable_courses
from .utils import parse_group_id


class CourseList(APIView):
    """Courses the caller may open reports for; empty for a plain student."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = CourseSerializer(fetch_viewable_courses(request.user), many=True)
        return Response(serializer.data)


class CourseQuizList(APIView):
    permission_classes = [IsCourseViewer]

    def get(self, request, course_id):
        course = get_object_or_404(Course, id=course_id)
        self.check_object_permissions(request, course)
        serializer = QuizRefSerializer(fetch_universe(course.id), many=True)
        return Response(serializer.data)


class CourseGroupList(APIView):
    permission_classes = [IsCourseViewer]

    def get(self, request, course_id):
        course = get_object_or_404(Course, id=course_id)
        self.check_object_permissions(request, course)
        serializer = GroupRefSerializer(fetch_course_groups(course.id), many=True)
        return Response(serializer.data)


class CourseUserList(APIView):
    """Dataset behind the user selector: course participants, optionally per group."""

    permission_classes = [IsCourseViewer]

    def get(self, request, course_id):
        course = get_object_or_404(Course, id=course_id)
        self.check_object_permissions(request, course)
        group_id = parse_group_id(request, course.id)
        users = fetch_course_users(course.id, group_id, request.query_params.get('search', ''))
        return Response({'users': UserRefSerializer(users, many=True).data})
