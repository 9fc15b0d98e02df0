from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.test import TestCase
from django.urls import reverse

from courses.models import Course
from .models import Instructor
from .permissions import can_view_course

User = get_user_model()


class InstructorModelTests(TestCase):
    def test_create_instructor(self):
        user = User.objects.create_user(username='testuser', password='password')
        instructor = Instructor.objects.create(user=user)
        self.assertEqual(instructor.user, user)
        self.assertEqual(str(instructor), 'testuser')
        self.assertEqual(instructor.display_name, 'testuser')

    def test_display_name_with_names(self):
        user = User.objects.create_user(username='nameduser', password='password', first_name='John', last_name='Doe')
        instructor = Instructor.objects.create(user=user)
        self.assertEqual(instructor.display_name, 'John Doe')

    def test_teaches(self):
        course = Course.objects.create(short_name='MATH101')
        other = Course.objects.create(short_name='PHYS101')
        user = User.objects.create_user(username='instructor', password='password')
        instructor = Instructor.objects.create(user=user)
        instructor.courses.add(course)

        self.assertTrue(instructor.teaches(course.id))
        self.assertFalse(instructor.teaches(other.id))


class CourseAccessTests(TestCase):
    def setUp(self):
        self.course = Course.objects.create(short_name='MATH101')

    def test_superuser_sees_every_course(self):
        admin = User.objects.create_superuser(username='admin', password='password', email='admin@example.com')
        self.assertTrue(can_view_course(admin, self.course))

    def test_instructor_sees_own_course(self):
        user = User.objects.create_user(username='instructor', password='password')
        Instructor.objects.create(user=user).courses.add(self.course)
        self.assertTrue(can_view_course(user, self.course))

    def test_instructor_of_other_course(self):
        user = User.objects.create_user(username='instructor', password='password')
        Instructor.objects.create(user=user)
        self.assertFalse(can_view_course(user, self.course))

    def test_student(self):
        user = User.objects.create_user(username='student', password='password')
        self.assertFalse(can_view_course(user, self.course))

    def test_anonymous(self):
        self.assertFalse(can_view_course(AnonymousUser(), self.course))


class InstructorAdminTests(TestCase):
    def test_changelist_shows_display_name(self):
        admin = User.objects.create_superuser(username='admin', password='password', email='admin@example.com')
        user = User.objects.create_user(username='jdoe', password='password', first_name='John', last_name='Doe')
        Instructor.objects.create(user=user)
        self.client.force_login(admin)

        response = self.client.get(reverse('admin:accounts_instructor_changelist'))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'John Doe')
