"""
Accessors for the non-boolean values of the ``GRADE_ME`` settings dictionary.
"""

from django.conf import settings

DEFAULT_MAX_COURSES = 10
DEFAULT_GRADER_ROLES = ('editingteacher', 'teacher')


def _grade_me_settings():
    return getattr(settings, 'GRADE_ME', {})


def get_max_age():
    """
    Maximum age, in days, of a submission shown in the list. ``0`` means unlimited.
    """
    return int(_grade_me_settings().get('MAX_AGE', 0) or 0)


def get_max_courses():
    return int(_grade_me_settings().get('MAX_COURSES', DEFAULT_MAX_COURSES))


def get_gradebook_roles():
    """
    Ids of the roles whose holders' work appears in the list.

    Accepts a sequence of ids or a comma separated string, the way the host stores it.
    """
    roles = _grade_me_settings().get('GRADEBOOK_ROLES', ())
    if isinstance(roles, str):
        roles = [role for role in roles.split(',') if role.strip()]
    return [int(role) for role in roles]


def get_grader_roles():
    return list(_grade_me_settings().get('GRADER_ROLES', DEFAULT_GRADER_ROLES))


def get_root_url():
    return _grade_me_settings().get('ROOT_URL', '').rstrip('/')
