from django.contrib import admin

from .models import Course, Quiz, QuizAttempt, QuizGrade, CourseGroup, GroupMembership


class QuizInline(admin.TabularInline):
    model = Quiz
    extra = 0


class CourseGroupInline(admin.TabularInline):
    model = CourseGroup
    extra = 0


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ('short_name', 'full_name')
    search_fields = ('short_name', 'full_name')
    inlines = [QuizInline, CourseGroupInline]


@admin.register(Quiz)
class QuizAdmin(admin.ModelAdmin):
    list_display = ('name', 'course', 'created_time')
    list_filter = ('course',)


@admin.register(QuizAttempt)
class QuizAttemptAdmin(admin.ModelAdmin):
    list_display = ('quiz', 'user', 'state', 'start_time', 'finish_time', 'duration', 'sum_of_subscores')
    list_filter = ('state', 'quiz__course')


@admin.register(QuizGrade)
class QuizGradeAdmin(admin.ModelAdmin):
    list_display = ('quiz', 'user', 'grade', 'last_modified_time')
    list_filter = ('quiz__course',)


class GroupMembershipInline(admin.TabularInline):
    model = GroupMembership
    extra = 0


@admin.register(CourseGroup)
class CourseGroupAdmin(admin.ModelAdmin):
    list_display = ('name', 'course')
    list_filter = ('course',)
    inlines = [GroupMembershipInline]
