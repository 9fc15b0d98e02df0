from rest_framework import serializers


class CourseSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    short_name = serializers.CharField()
    full_name = serializers.CharField(allow_blank=True)


class QuizRefSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    created_time = serializers.IntegerField()


class GroupRefSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()


class UserRefSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    full_name = serializers.CharField()
    email = serializers.CharField()


class QuizReportRowSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    full_name = serializers.CharField()
    start_time = serializers.CharField()
    finish_time = serializers.CharField()
    duration_seconds = serializers.IntegerField()
    duration = serializers.CharField()
    duration_delta_seconds = serializers.FloatField()
    duration_delta = serializers.CharField()
    grade = serializers.CharField()
    grade_value = serializers.FloatField(allow_null=True)
    attempts_count = serializers.IntegerField()
    avg_score = serializers.FloatField()


class QuizReportSerializer(serializers.Serializer):
    quiz_id = serializers.IntegerField()
    group_id = serializers.IntegerField()
    participant_count = serializers.IntegerField()
    grade_avg = serializers.FloatField(allow_null=True)
    duration_avg = serializers.FloatField(allow_null=True)
    duration_avg_display = serializers.CharField(allow_null=True)
    rows = QuizReportRowSerializer(many=True)


class UserReportRowSerializer(serializers.Serializer):
    quiz_id = serializers.IntegerField()
    quiz_name = serializers.CharField()
    start_time = serializers.CharField(allow_null=True)
    finish_time = serializers.CharField(allow_null=True)
    duration = serializers.CharField(allow_null=True)
    grade = serializers.FloatField()


class UserReportSerializer(serializers.Serializer):
    course_id = serializers.IntegerField()
    user_id = serializers.IntegerField()
    full_name = serializers.CharField()
    solved_count = serializers.IntegerField()
    grade_sum = serializers.FloatField()
    grade_avg = serializers.FloatField()
    rows = UserReportRowSerializer(many=True)


class ChartSeriesSerializer(serializers.Serializer):
    name = serializers.CharField()
    values = serializers.ListField(child=serializers.FloatField())


class ChartSerializer(serializers.Serializer):
    labels = serializers.ListField(child=serializers.CharField())
    series = ChartSeriesSerializer(many=True)


class GroupStandingSerializer(serializers.Serializer):
    group_id = serializers.IntegerField()
    group_name = serializers.CharField()
    student_count = serializers.IntegerField()
    avg_grade = serializers.FloatField()
