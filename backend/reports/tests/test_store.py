from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from accounts.models import Instructor
from courses.models import Course, CourseGroup, GroupMembership, Quiz, QuizAttempt, QuizGrade
from reports import store

User = get_user_model()


class RecordJoinerTests(TestCase):
    def setUp(self):
        self.course = Course.objects.create(short_name='MATH101')
        self.other_course = Course.objects.create(short_name='PHYS101')
        self.quiz = Quiz.objects.create(course=self.course, name='Quiz 1', created_time=100)

        self.alice = User.objects.create_user(
            username='alice', password='password', first_name='Alice', last_name='Smith', email='alice@example.com'
        )
        self.bob = User.objects.create_user(
            username='bob', password='password', first_name='Bob', last_name='Jones', email='bob@example.com'
        )

        self.group = CourseGroup.objects.create(course=self.course, name='Group A')
        GroupMembership.objects.create(group=self.group, user=self.alice)
        self.foreign_group = CourseGroup.objects.create(course=self.other_course, name='Group B')
        GroupMembership.objects.create(group=self.foreign_group, user=self.bob)

    def finish_attempt(self, user, start, duration, score=None, quiz=None):
        return QuizAttempt.objects.create(
            quiz=quiz or self.quiz,
            user=user,
            start_time=start,
            finish_time=start + duration,
            state=QuizAttempt.State.FINISHED,
            sum_of_subscores=score,
        )

    def test_only_finished_attempts_are_returned(self):
        self.finish_attempt(self.alice, 1000, 200)
        QuizAttempt.objects.create(quiz=self.quiz, user=self.bob, start_time=1000, state=QuizAttempt.State.IN_PROGRESS)
        QuizAttempt.objects.create(
            quiz=self.quiz, user=self.bob, start_time=1000, finish_time=1100, state=QuizAttempt.State.ABANDONED
        )

        rows = store.fetch_finished_attempts(self.quiz.id)

        self.assertEqual([row.user_id for row in rows], [self.alice.id])
        self.assertEqual(rows[0].full_name, 'Alice Smith')
        self.assertEqual(rows[0].duration, 200)

    def test_default_order_is_by_duration(self):
        self.finish_attempt(self.alice, 1000, 200)
        self.finish_attempt(self.bob, 2000, 100)

        rows = store.fetch_finished_attempts(self.quiz.id)

        self.assertEqual([row.duration for row in rows], [100, 200])

    def test_created_order(self):
        self.finish_attempt(self.alice, 1000, 200)
        self.finish_attempt(self.bob, 2000, 100)

        rows = store.fetch_finished_attempts(self.quiz.id, order_by=store.ORDER_BY_CREATED)

        self.assertEqual([row.user_id for row in rows], [self.alice.id, self.bob.id])

    def test_unknown_order_is_rejected(self):
        with self.assertRaises(ValueError):
            store.fetch_finished_attempts(self.quiz.id, order_by='grade')

    def test_grade_matched_by_finish_time(self):
        first = self.finish_attempt(self.alice, 1000, 100)
        second = self.finish_attempt(self.alice, 2000, 300)
        QuizGrade.objects.create(quiz=self.quiz, user=self.alice, grade=8.0, last_modified_time=second.finish_time)

        rows = {row.attempt_id: row for row in store.fetch_finished_attempts(self.quiz.id)}

        self.assertIsNone(rows[first.id].grade)
        self.assertEqual(rows[second.id].grade, 8.0)

    def test_attempt_without_matching_grade_is_kept(self):
        self.finish_attempt(self.alice, 1000, 100)
        QuizGrade.objects.create(quiz=self.quiz, user=self.alice, grade=8.0, last_modified_time=99999)

        rows = store.fetch_finished_attempts(self.quiz.id)

        self.assertEqual(len(rows), 1)
        self.assertIsNone(rows[0].grade)

    def test_group_filter(self):
        self.finish_attempt(self.alice, 1000, 200)
        self.finish_attempt(self.bob, 1000, 100)

        rows = store.fetch_finished_attempts(self.quiz.id, self.group.id)

        self.assertEqual([row.user_id for row in rows], [self.alice.id])

    def test_group_from_another_course_matches_nothing(self):
        self.finish_attempt(self.bob, 1000, 100)

        self.assertEqual(store.fetch_finished_attempts(self.quiz.id, self.foreign_group.id), [])

    def test_fetch_grade(self):
        QuizGrade.objects.create(quiz=self.quiz, user=self.alice, grade=6.5, last_modified_time=1)

        self.assertEqual(store.fetch_grade(self.quiz.id, self.alice.id), 6.5)
        self.assertIsNone(store.fetch_grade(self.quiz.id, self.bob.id))

    def test_universe_is_in_creation_order(self):
        later = Quiz.objects.create(course=self.course, name='Quiz 3', created_time=300)
        earlier = Quiz.objects.create(course=self.course, name='Quiz 0', created_time=50)
        Quiz.objects.create(course=self.other_course, name='Elsewhere', created_time=10)

        universe = store.fetch_universe(self.course.id)

        self.assertEqual([quiz.id for quiz in universe], [earlier.id, self.quiz.id, later.id])
        self.assertEqual(universe[0].name, 'Quiz 0')

    def test_average_duration(self):
        self.assertIsNone(store.fetch_average_duration(self.quiz.id))

        self.finish_attempt(self.alice, 1000, 100)
        self.finish_attempt(self.alice, 2000, 200)

        self.assertEqual(store.fetch_average_duration(self.quiz.id), 150)

    def test_attempt_stats(self):
        self.finish_attempt(self.alice, 1000, 100, score=4.0)
        self.finish_attempt(self.alice, 2000, 200, score=6.0)
        self.finish_attempt(self.bob, 1000, 100)

        stats = store.fetch_attempt_stats(self.quiz.id)

        self.assertEqual(stats[self.alice.id], (2, 10.0))
        self.assertEqual(stats[self.bob.id], (1, 0.0))

    def test_attempt_counts_per_quiz(self):
        quiz2 = Quiz.objects.create(course=self.course, name='Quiz 2', created_time=200)
        self.finish_attempt(self.alice, 1000, 100)
        self.finish_attempt(self.alice, 2000, 100)
        self.finish_attempt(self.bob, 1000, 100, quiz=quiz2)

        self.assertEqual(store.fetch_attempt_counts(self.course.id), {self.quiz.id: 2, quiz2.id: 1})
        self.assertEqual(store.fetch_attempt_counts(self.course.id, self.bob.id), {quiz2.id: 1})

    def test_student_averages(self):
        quiz2 = Quiz.objects.create(course=self.course, name='Quiz 2', created_time=200)
        QuizGrade.objects.create(quiz=self.quiz, user=self.alice, grade=4.0, last_modified_time=1)
        QuizGrade.objects.create(quiz=quiz2, user=self.alice, grade=8.0, last_modified_time=1)

        self.assertEqual(store.fetch_student_averages(self.course.id), {self.alice.id: 6.0})

    def test_course_users(self):
        self.finish_attempt(self.alice, 1000, 100)
        self.finish_attempt(self.alice, 2000, 100)
        self.finish_attempt(self.bob, 1000, 100)

        users = store.fetch_course_users(self.course.id)
        self.assertEqual([user.id for user in users], [self.bob.id, self.alice.id])

        in_group = store.fetch_course_users(self.course.id, self.group.id)
        self.assertEqual([user.id for user in in_group], [self.alice.id])

        found = store.fetch_course_users(self.course.id, search='JON')
        self.assertEqual([user.full_name for user in found], ['Bob Jones'])

    def test_viewable_courses(self):
        admin = User.objects.create_superuser(username='admin', password='password', email='admin@example.com')
        instructor = User.objects.create_user(username='instructor', password='password')
        Instructor.objects.create(user=instructor).courses.add(self.other_course)

        self.assertEqual([course.short_name for course in store.fetch_viewable_courses(admin)], ['MATH101', 'PHYS101'])
        self.assertEqual([course.id for course in store.fetch_viewable_courses(instructor)], [self.other_course.id])
        self.assertEqual(store.fetch_viewable_courses(self.alice), [])
        self.assertEqual(store.fetch_viewable_courses(AnonymousUser()), [])
