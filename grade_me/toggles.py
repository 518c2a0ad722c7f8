"""
Toggles for the Grade Me app.

All of them live in the ``GRADE_ME`` settings dictionary.
"""

from edx_toggles.toggles import SettingDictToggle

SETTINGS_NAME = 'GRADE_ME'

# .. toggle_name: GRADE_ME['ENABLE_ADMIN_VIEW_ALL']
# .. toggle_implementation: SettingDictToggle
# .. toggle_default: False
# .. toggle_description: When enabled, superusers see the grading list of every course instead of only the courses
#   where they hold a grader role.
# .. toggle_use_cases: open_edx
# .. toggle_creation_date: 2013-02-01
ENABLE_ADMIN_VIEW_ALL = SettingDictToggle(SETTINGS_NAME, 'ENABLE_ADMIN_VIEW_ALL', default=False, module_name=__name__)

# .. toggle_name: GRADE_ME['ENABLE_ASSIGN']
# .. toggle_implementation: SettingDictToggle
# .. toggle_default: True
# .. toggle_description: List assignment submissions waiting for a grade.
# .. toggle_use_cases: open_edx
# .. toggle_creation_date: 2013-02-01
ENABLE_ASSIGN = SettingDictToggle(SETTINGS_NAME, 'ENABLE_ASSIGN', default=True, module_name=__name__)

# .. toggle_name: GRADE_ME['ENABLE_ASSIGNMENT']
# .. toggle_implementation: SettingDictToggle
# .. toggle_default: True
# .. toggle_description: List legacy assignment submissions modified since they were marked.
# .. toggle_use_cases: open_edx
# .. toggle_creation_date: 2013-02-01
ENABLE_ASSIGNMENT = SettingDictToggle(SETTINGS_NAME, 'ENABLE_ASSIGNMENT', default=True, module_name=__name__)

# .. toggle_name: GRADE_ME['ENABLE_DATA']
# .. toggle_implementation: SettingDictToggle
# .. toggle_default: True
# .. toggle_description: List database records the viewer has not rated yet.
# .. toggle_use_cases: open_edx
# .. toggle_creation_date: 2013-02-01
ENABLE_DATA = SettingDictToggle(SETTINGS_NAME, 'ENABLE_DATA', default=True, module_name=__name__)

# .. toggle_name: GRADE_ME['ENABLE_FORUM']
# .. toggle_implementation: SettingDictToggle
# .. toggle_default: True
# .. toggle_description: List forum posts the viewer has not rated yet.
# .. toggle_use_cases: open_edx
# .. toggle_creation_date: 2013-02-01
ENABLE_FORUM = SettingDictToggle(SETTINGS_NAME, 'ENABLE_FORUM', default=True, module_name=__name__)

# .. toggle_name: GRADE_ME['ENABLE_GLOSSARY']
# .. toggle_implementation: SettingDictToggle
# .. toggle_default: True
# .. toggle_description: List glossary entries the viewer has not rated yet.
# .. toggle_use_cases: open_edx
# .. toggle_creation_date: 2013-02-01
ENABLE_GLOSSARY = SettingDictToggle(SETTINGS_NAME, 'ENABLE_GLOSSARY', default=True, module_name=__name__)

# .. toggle_name: GRADE_ME['ENABLE_QUIZ']
# .. toggle_implementation: SettingDictToggle
# .. toggle_default: True
# .. toggle_description: List quiz attempts with manually graded questions still waiting for a grade.
# .. toggle_use_cases: open_edx
# .. toggle_creation_date: 2013-02-01
ENABLE_QUIZ = SettingDictToggle(SETTINGS_NAME, 'ENABLE_QUIZ', default=True, module_name=__name__)

# .. toggle_name: GRADE_ME['ENABLE_TURNITINTOOLTWO']
# .. toggle_implementation: SettingDictToggle
# .. toggle_default: True
# .. toggle_description: List Turnitin submissions without a grade.
# .. toggle_use_cases: open_edx
# .. toggle_creation_date: 2015-02-19
ENABLE_TURNITINTOOLTWO = SettingDictToggle(
    SETTINGS_NAME, 'ENABLE_TURNITINTOOLTWO', default=True, module_name=__name__
)
