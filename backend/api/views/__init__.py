from .lookups import CourseList, CourseQuizList, CourseGroupList, CourseUserList
from .reports import QuizReportView, UserReportView
from .charts import UserChartsView, CourseAttemptsChartView, GroupComparisonView
