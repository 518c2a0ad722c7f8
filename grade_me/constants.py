"""
Constants used by Grade Me.
"""


class ProjectType:
    """
    The host projects a plugin app may be installed into.
    """
    LMS = 'lms.djangoapp'


class SettingsType:
    """
    The settings modules a host project loads plugin settings from.
    """
    PRODUCTION = 'production'
    COMMON = 'common'
    TEST = 'test'


class ContextLevel:
    """
    Context levels used by the host's permission contexts.
    """
    COURSE = 50
    MODULE = 70


class QuestionStepState:
    """
    States of a question attempt step that matter to the grading list.
    """
    NEEDS_GRADING = 'needsgrading'


# Table owning the latest needs-grading step of every quiz question attempt.
QUIZ_NGRADE_TABLE = 'block_grade_me_quiz_ngrade'

# Table listing gradeable items per course, joined by every plugin query as ``bgm``.
GRADEABLE_TABLE = 'block_grade_me'

DAYSECS = 86400

# Activity modules Grade Me knows how to query, in the order they are listed.
GRADEABLE_MODULES = ('assign', 'assignment', 'data', 'forum', 'glossary', 'quiz', 'turnitintooltwo')
