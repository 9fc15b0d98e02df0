from django.conf import settings
from django.db import models

from courses.models import Course


class Instructor(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    courses = models.ManyToManyField(Course, related_name='instructors', blank=True)

    def __str__(self) -> str:
        return self.user.get_username()

    @property
    def display_name(self) -> str:
        first_name = self.user.first_name or ''
        last_name = self.user.last_name or ''
        name = f"{first_name} {last_name}".strip()
        return name or self.user.get_username()

    def teaches(self, course_id) -> bool:
        return self.courses.filter(id=course_id).exists()

