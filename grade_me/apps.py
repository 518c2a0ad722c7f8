"""
Grade Me Application Configuration

Signal handlers are connected here.
"""


from django.apps import AppConfig
from edx_django_utils.plugins import PluginSettings

from .constants import ProjectType, SettingsType


class GradeMeConfig(AppConfig):
    """
    Application Configuration for Grade Me.
    """
    name = 'grade_me'
    verbose_name = 'Grade Me'
    default_auto_field = 'django.db.models.AutoField'

    plugin_app = {
        PluginSettings.CONFIG: {
            ProjectType.LMS: {
                SettingsType.PRODUCTION: {PluginSettings.RELATIVE_PATH: 'settings.common'},
                SettingsType.COMMON: {PluginSettings.RELATIVE_PATH: 'settings.common'},
                SettingsType.TEST: {PluginSettings.RELATIVE_PATH: 'settings.test'},
            }
        }
    }

    def ready(self):
        """
        Connect handlers that keep the quiz grading cache current.
        """
        # Can't import models at module level in AppConfigs, and models get
        # included from the signal handlers
        from .signals import handlers  # pylint: disable=unused-import
