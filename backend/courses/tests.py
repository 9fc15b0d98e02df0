from django.contrib.auth import get_user_model
from django.db import IntegrityError
from django.test import TestCase
from django.urls import reverse

from .models import Course, Quiz, QuizAttempt, QuizGrade

User = get_user_model()


class QuizAttemptModelTests(TestCase):
    def setUp(self):
        self.course = Course.objects.create(short_name='MATH101', full_name='Mathematics')
        self.quiz = Quiz.objects.create(course=self.course, name='Quiz 1', created_time=100)
        self.user = User.objects.create_user(username='student', password='password')

    def test_duration_of_finished_attempt(self):
        attempt = QuizAttempt.objects.create(
            quiz=self.quiz,
            user=self.user,
            start_time=1000,
            finish_time=1125,
            state=QuizAttempt.State.FINISHED,
        )
        self.assertTrue(attempt.is_finished)
        self.assertEqual(attempt.duration, 125)

    def test_unfinished_attempt_has_no_duration(self):
        attempt = QuizAttempt.objects.create(quiz=self.quiz, user=self.user, start_time=1000)
        self.assertEqual(attempt.state, QuizAttempt.State.IN_PROGRESS)
        self.assertEqual(attempt.finish_time, 0)
        self.assertIsNone(attempt.duration)

    def test_quizzes_ordered_by_creation(self):
        first = Quiz.objects.create(course=self.course, name='Quiz 0', created_time=50)
        self.assertEqual(list(self.course.quizzes.all()), [first, self.quiz])

    def test_one_grade_per_user_and_quiz(self):
        QuizGrade.objects.create(quiz=self.quiz, user=self.user, grade=5.0, last_modified_time=1)
        with self.assertRaises(IntegrityError):
            QuizGrade.objects.create(quiz=self.quiz, user=self.user, grade=6.0, last_modified_time=2)

    def test_str(self):
        self.assertEqual(str(self.course), 'MATH101')
        self.assertEqual(str(self.quiz), 'Quiz 1')


class QuizAttemptAdminTests(TestCase):
    def test_changelist_shows_duration(self):
        admin = User.objects.create_superuser(username='admin', password='password', email='admin@example.com')
        course = Course.objects.create(short_name='MATH101')
        quiz = Quiz.objects.create(course=course, name='Quiz 1', created_time=100)
        QuizAttempt.objects.create(
            quiz=quiz,
            user=admin,
            start_time=1000,
            finish_time=5321,
            state=QuizAttempt.State.FINISHED,
        )
        self.client.force_login(admin)

        response = self.client.get(reverse('admin:courses_quizattempt_changelist'))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, '<td class="field-duration">4321</td>', html=True)
