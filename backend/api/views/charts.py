import logging

from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsCourseViewer, IsSelfOrCourseViewer
from api.serializers import ChartSerializer, GroupStandingSerializer
from courses.models import Course
from reports.cohort import compare_groups
from reports.series import attempts_chart, build_course_charts, group_chart
from reports.store import fetch_universe

logger = logging.getLogger(__name__)


class UserChartsView(APIView):
    permission_classes = [IsSelfOrCourseViewer]

    def get(self, request, course_id, user_id):
        course = get_object_or_404(Course, id=course_id)
        self.check_object_permissions(request, course)
        get_object_or_404(get_user_model(), id=user_id)

        charts = build_course_charts(course.id, user_id)
        logger.info('User charts viewed: course=%s user=%s viewer=%s', course.id, user_id, request.user.pk)
        return Response({name: ChartSerializer(chart).data for name, chart in charts.items()})


class CourseAttemptsChartView(APIView):
    permission_classes = [IsCourseViewer]

    def get(self, request, course_id):
        course = get_object_or_404(Course, id=course_id)
        self.check_object_permissions(request, course)
        chart = attempts_chart(fetch_universe(course.id), course.id)
        return Response(ChartSerializer(chart).data)


class GroupComparisonView(APIView):
    permission_classes = [IsCourseViewer]

    def get(self, request, course_id):
        course = get_object_or_404(Course, id=course_id)
        self.check_object_permissions(request, course)

        standings = compare_groups(course.id)
        logger.info('Group comparison viewed: course=%s viewer=%s', course.id, request.user.pk)
        return Response(
            {
                'groups': GroupStandingSerializer(standings, many=True).data,
                'chart': ChartSerializer(group_chart(standings)).data,
            }
        )
