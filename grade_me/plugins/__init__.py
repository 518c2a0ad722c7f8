"""
Per-module gradeable queries.

Each plugin module provides ``query_<module>(user_ids, grader_id=0)``, which
returns a ``(sql_fragment, params)`` pair, or ``False`` when ``user_ids`` is
empty, plus the paths the grading list links to.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from edx_toggles.toggles import SettingDictToggle

from grade_me import toggles

from . import assign, assignment, data, forum, glossary, quiz, turnitintooltwo


@dataclass(frozen=True)
class GradeMePlugin:
    """
    Everything the block needs to list one module's submissions.
    """
    name: str
    query: Callable
    toggle: SettingDictToggle
    submission_path: Callable
    grading_path: Optional[Callable] = None

    def is_enabled(self):
        return self.toggle.is_enabled()

    def module_path(self, item):
        return f"/mod/{self.name}/view.php?id={item['coursemoduleid']}"

    def grading_link_path(self, item):
        if self.grading_path is None:
            return self.module_path(item)
        return self.grading_path(item)


def _plugin(name, module, toggle):
    return GradeMePlugin(
        name=name,
        query=getattr(module, f'query_{name}'),
        toggle=toggle,
        submission_path=module.submission_path,
        grading_path=getattr(module, 'grading_path', None),
    )


PLUGINS = {
    plugin.name: plugin
    for plugin in (
        _plugin('assign', assign, toggles.ENABLE_ASSIGN),
        _plugin('assignment', assignment, toggles.ENABLE_ASSIGNMENT),
        _plugin('data', data, toggles.ENABLE_DATA),
        _plugin('forum', forum, toggles.ENABLE_FORUM),
        _plugin('glossary', glossary, toggles.ENABLE_GLOSSARY),
        _plugin('quiz', quiz, toggles.ENABLE_QUIZ),
        _plugin('turnitintooltwo', turnitintooltwo, toggles.ENABLE_TURNITINTOOLTWO),
    )
}


def get_plugin(name):
    try:
        return PLUGINS[name]
    except KeyError:
        raise ValueError(f'Unknown gradeable module: {name}') from None


def enabled_plugins():
    """
    The plugins switched on in the ``GRADE_ME`` settings, in listing order.
    """
    return [plugin for plugin in PLUGINS.values() if plugin.is_enabled()]
