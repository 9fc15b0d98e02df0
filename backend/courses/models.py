from django.conf import settings
from django.db import models
from django.utils import timezone


def epoch_now() -> int:
    return int(timezone.now().timestamp())


class Course(models.Model):
    short_name = models.CharField(max_length=255)
    full_name = models.CharField(max_length=255, blank=True)

    def __str__(self) -> str:
        return self.short_name


class Quiz(models.Model):
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name='quizzes')
    name = models.CharField(max_length=255)
    created_time = models.PositiveBigIntegerField(
        default=epoch_now,
        help_text='Unix time the quiz was created; orders quizzes on every report axis.',
    )

    class Meta:
        ordering = ['created_time', 'id']

    def __str__(self) -> str:
        return self.name


class QuizAttempt(models.Model):
    class State(models.TextChoices):
        IN_PROGRESS = 'inprogress', 'In progress'
        OVERDUE = 'overdue', 'Overdue'
        FINISHED = 'finished', 'Finished'
        ABANDONED = 'abandoned', 'Never submitted'

    quiz = models.ForeignKey(Quiz, on_delete=models.CASCADE, related_name='attempts')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='quiz_attempts')
    start_time = models.PositiveBigIntegerField(default=epoch_now)
    finish_time = models.PositiveBigIntegerField(default=0, help_text='Unix time; 0 until the attempt is finished.')
    state = models.CharField(max_length=16, choices=State.choices, default=State.IN_PROGRESS)
    sum_of_subscores = models.FloatField(null=True, blank=True)

    class Meta:
        indexes = [
            models.Index(fields=['quiz', 'state'], name='attempt_quiz_state_idx'),
            models.Index(fields=['user', 'state'], name='attempt_user_state_idx'),
        ]

    def __str__(self) -> str:
        return f"Attempt {self.id} on {self.quiz.name}"

    @property
    def is_finished(self) -> bool:
        return self.state == self.State.FINISHED

    @property
    def duration(self):
        if not self.is_finished:
            return None
        return self.finish_time - self.start_time


class QuizGrade(models.Model):
    """The quiz engine's resolved grade for a user, rewritten whenever an attempt is finished."""

    quiz = models.ForeignKey(Quiz, on_delete=models.CASCADE, related_name='grades')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='quiz_grades')
    grade = models.FloatField()
    last_modified_time = models.PositiveBigIntegerField(default=epoch_now)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['quiz', 'user'], name='unique_quiz_user_grade')
        ]

    def __str__(self) -> str:
        return f"{self.quiz.name}: {self.grade}"


class CourseGroup(models.Model):
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name='groups')
    name = models.CharField(max_length=255)

    class Meta:
        ordering = ['name', 'id']

    def __str__(self) -> str:
        return f"{self.course.short_name}: {self.name}"


class GroupMembership(models.Model):
    group = models.ForeignKey(CourseGroup, on_delete=models.CASCADE, related_name='memberships')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='group_memberships')

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['group', 'user'], name='unique_group_member')
        ]

    def __str__(self) -> str:
        return f"{self.group.name} - {self.user}"
