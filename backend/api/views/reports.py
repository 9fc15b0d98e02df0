import logging

from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsCourseViewer, IsSelfOrCourseViewer
from api.serializers import QuizReportSerializer, UserReportSerializer
from courses.models import Course, Quiz
from reports.quiz import aggregate_quiz
from reports.user import aggregate_user
from .utils import parse_group_id

logger = logging.getLogger(__name__)


class QuizReportView(APIView):
    permission_classes = [IsCourseViewer]

    def get(self, request, quiz_id):
        quiz = get_object_or_404(Quiz.objects.select_related('course'), id=quiz_id)
        self.check_object_permissions(request, quiz.course)
        group_id = parse_group_id(request, quiz.course_id)

        report = aggregate_quiz(quiz.id, group_id)
        logger.info('Quiz report viewed: quiz=%s group=%s viewer=%s', quiz.id, group_id, request.user.pk)

        data = dict(QuizReportSerializer(report).data)
        data['quiz_name'] = quiz.name
        data['course_id'] = quiz.course_id
        return Response(data)


class UserReportView(APIView):
    permission_classes = [IsSelfOrCourseViewer]

    def get(self, request, course_id, user_id):
        course = get_object_or_404(Course, id=course_id)
        self.check_object_permissions(request, course)
        get_object_or_404(get_user_model(), id=user_id)

        report = aggregate_user(course.id, user_id)
        logger.info('User report viewed: course=%s user=%s viewer=%s', course.id, user_id, request.user.pk)
        return Response(UserReportSerializer(report).data)
