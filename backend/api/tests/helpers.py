from django.contrib.auth import get_user_model

from accounts.models import Instructor
from courses.models import Course, CourseGroup, GroupMembership, Quiz, QuizAttempt, QuizGrade

User = get_user_model()


class ReportFixtureMixin:
    """A course taught by one instructor with two students, each in their own group."""

    def setUp(self):
        self.course = Course.objects.create(short_name='MATH101')
        self.other_course = Course.objects.create(short_name='PHYS101')
        self.quiz1 = Quiz.objects.create(course=self.course, name='Quiz 1', created_time=100)
        self.quiz2 = Quiz.objects.create(course=self.course, name='Quiz 2', created_time=200)

        self.instructor_user = User.objects.create_user(username='instructor', password='password')
        Instructor.objects.create(user=self.instructor_user).courses.add(self.course)
        self.outsider = User.objects.create_user(username='outsider', password='password')
        Instructor.objects.create(user=self.outsider).courses.add(self.other_course)

        self.alice = User.objects.create_user(
            username='alice', password='password', first_name='Alice', last_name='Smith', email='alice@example.com'
        )
        self.bob = User.objects.create_user(
            username='bob', password='password', first_name='Bob', last_name='Jones', email='bob@example.com'
        )

        self.group_a = CourseGroup.objects.create(course=self.course, name='Group A')
        GroupMembership.objects.create(group=self.group_a, user=self.alice)
        self.group_b = CourseGroup.objects.create(course=self.course, name='Group B')
        GroupMembership.objects.create(group=self.group_b, user=self.bob)
        self.foreign_group = CourseGroup.objects.create(course=self.other_course, name='Group C')

    def finish_attempt(self, quiz, user, start, duration, score=None):
        return QuizAttempt.objects.create(
            quiz=quiz,
            user=user,
            start_time=start,
            finish_time=start + duration,
            state=QuizAttempt.State.FINISHED,
            sum_of_subscores=score,
        )

    def grade(self, quiz, user, value, modified=1):
        return QuizGrade.objects.create(quiz=quiz, user=user, grade=value, last_modified_time=modified)
