from django.urls import path

from .views import (
    CourseAttemptsChartView,
    CourseGroupList,
    CourseList,
    CourseQuizList,
    CourseUserList,
    GroupComparisonView,
    QuizReportView,
    UserChartsView,
    UserReportView,
)

urlpatterns = [
    path('courses/', CourseList.as_view(), name='course-list'),
    path('courses/<int:course_id>/quizzes/', CourseQuizList.as_view(), name='course-quizzes'),
    path('courses/<int:course_id>/groups/', CourseGroupList.as_view(), name='course-groups'),
    path('courses/<int:course_id>/groups/compare/', GroupComparisonView.as_view(), name='group-comparison'),
    path('courses/<int:course_id>/users/', CourseUserList.as_view(), name='course-users'),
    path('courses/<int:course_id>/users/<int:user_id>/report/', UserReportView.as_view(), name='user-report'),
    path('courses/<int:course_id>/users/<int:user_id>/charts/', UserChartsView.as_view(), name='user-charts'),
    path('courses/<int:course_id>/charts/attempts/', CourseAttemptsChartView.as_view(), name='course-attempts-chart'),
    path('quizzes/<int:quiz_id>/report/', QuizReportView.as_view(), name='quiz-report'),
]
