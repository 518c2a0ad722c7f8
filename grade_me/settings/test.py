"""
Grade Me settings for the host's test environment.
"""

from .common import plugin_settings as common_plugin_settings


def plugin_settings(settings):
    common_plugin_settings(settings)
    settings.GRADE_ME['ENABLE_ADMIN_VIEW_ALL'] = True
