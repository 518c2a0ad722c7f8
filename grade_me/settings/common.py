"""
Common Grade Me settings, applied by the host's plugin settings loader.
"""


def plugin_settings(settings):
    """
    Fill in the ``GRADE_ME`` settings, keeping any value the host already set.
    """
    defaults = {
        'MAX_AGE': 0,
        'MAX_COURSES': 10,
        'GRADEBOOK_ROLES': (),
        'GRADER_ROLES': ('editingteacher', 'teacher'),
        'ROOT_URL': getattr(settings, 'LMS_ROOT_URL', ''),
        'ENABLE_ADMIN_VIEW_ALL': False,
        'ENABLE_ASSIGN': True,
        'ENABLE_ASSIGNMENT': True,
        'ENABLE_DATA': True,
        'ENABLE_FORUM': True,
        'ENABLE_GLOSSARY': True,
        'ENABLE_QUIZ': True,
        'ENABLE_TURNITINTOOLTWO': True,
    }
    defaults.update(getattr(settings, 'GRADE_ME', {}))
    settings.GRADE_ME = defaults
