from django.conf import settings

DEFAULTS = {
    'GRADE_NOT_AVAILABLE': '-',
    'GRADE_DECIMALS': 2,
    'GROUP_LABEL': '{name} ({count} студ.)',
}


def report_setting(name):
    """Read a key of the ``QUIZREPORT`` setting, falling back to the package default."""
    return getattr(settings, 'QUIZREPORT', {}).get(name, DEFAULTS[name])


def format_grade(value) -> str:
    if value is None:
        return report_setting('GRADE_NOT_AVAILABLE')
    return f"{value:.{report_setting('GRADE_DECIMALS')}f}"
