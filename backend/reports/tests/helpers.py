from django.contrib.auth import get_user_model

from courses.models import QuizAttempt, QuizGrade

User = get_user_model()


def make_user(username, first_name='', last_name=''):
    return User.objects.create_user(
        username=username,
        password='password',
        first_name=first_name,
        last_name=last_name,
        email=f'{username}@example.com',
    )


def finish_attempt(quiz, user, start, duration, score=None):
    return QuizAttempt.objects.create(
        quiz=quiz,
        user=user,
        start_time=start,
        finish_time=start + duration,
        state=QuizAttempt.State.FINISHED,
        sum_of_subscores=score,
    )


def grade(quiz, user, value, modified=1):
    return QuizGrade.objects.create(quiz=quiz, user=user, grade=value, last_modified_time=modified)
