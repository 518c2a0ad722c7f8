"""
The Grade Me block: the list of work waiting for the viewing grader.
"""

import logging
from dataclasses import dataclass

from django.utils.translation import gettext as _
from markupsafe import Markup

from .config import get_gradebook_roles, get_grader_roles, get_max_courses
from .constants import ContextLevel
from .db import GradeMeDatabase
from .plugins import enabled_plugins
from .queries import in_clause, query_prefix, query_suffix
from .rendering import gradeables_array, tree
from .toggles import ENABLE_ADMIN_VIEW_ALL

log = logging.getLogger(__name__)

ALL_COURSES_SQL = 'SELECT c.id, c.fullname FROM course c ORDER BY c.id'

GRADER_COURSES_SQL = """
    SELECT DISTINCT c.id, c.fullname
      FROM course c
      JOIN context ctx ON ctx.instanceid = c.id AND ctx.contextlevel = {course_level}
      JOIN role_assignments ra ON ra.contextid = ctx.id
      JOIN role r ON r.id = ra.roleid
     WHERE ra.userid = %s
           AND r.shortname {roles}
  ORDER BY c.id
"""

GRADEBOOK_USERS_SQL = """
    SELECT DISTINCT ra.userid
      FROM role_assignments ra
      JOIN context ctx ON ctx.id = ra.contextid AND ctx.contextlevel = {course_level}
      JOIN user_enrolments ue ON ue.userid = ra.userid AND ue.status = 0
      JOIN enrol e ON e.id = ue.enrolid AND e.courseid = ctx.instanceid AND e.status = 0
     WHERE ctx.instanceid = %s
           AND ra.roleid {roles}
  ORDER BY ra.userid
"""


@dataclass(frozen=True)
class BlockContent:
    text: str
    footer: str = ''


class GradeMeBlock:
    """
    Gathers and renders the submissions waiting for ``user`` in every course they grade.
    """

    def __init__(self, user, db=None):
        self.user = user
        self.db = db or GradeMeDatabase()
        self._content = None

    def has_config(self):
        return True

    def get_courses(self):
        """
        Return ``(course_id, fullname)`` pairs of the courses the viewer grades.
        """
        if self.user.is_superuser and ENABLE_ADMIN_VIEW_ALL.is_enabled():
            rows = self.db.get_recordset_sql(ALL_COURSES_SQL)
        else:
            roles = get_grader_roles()
            if not roles:
                return []
            roles_sql, params = in_clause(roles)
            rows = self.db.get_recordset_sql(
                GRADER_COURSES_SQL.format(course_level=ContextLevel.COURSE, roles=roles_sql),
                [self.user.id] + params,
            )
        return [(row['id'], row['fullname']) for row in rows]

    def get_gradebook_users(self, course_id):
        """
        Ids of the actively enrolled users of a course holding one of the gradebook roles.
        """
        roles = get_gradebook_roles()
        if not roles:
            return []
        roles_sql, params = in_clause(roles)
        return self.db.get_fieldset_sql(
            GRADEBOOK_USERS_SQL.format(course_level=ContextLevel.COURSE, roles=roles_sql),
            [course_id] + params,
        )

    def get_gradeables(self):
        """
        Run every enabled plugin's query for every course and fold the rows together.
        """
        gradeables = {}
        plugins = enabled_plugins()
        for course_id, _fullname in self.get_courses():
            user_ids = self.get_gradebook_users(course_id)
            if not user_ids:
                continue
            for plugin in plugins:
                query = plugin.query(user_ids, self.user.id)
                if not query:
                    continue
                sql, params = query
                sql = query_prefix() + sql + query_suffix(plugin.name)
                for record in self.db.get_recordset_sql(sql, params + [course_id]):
                    gradeables_array(gradeables, record)
        return gradeables

    def get_content(self):
        """
        Return the block's ``BlockContent``, computing it on first use.
        """
        if self._content is not None:
            return self._content

        gradeables = self.get_gradeables()
        max_courses = get_max_courses()
        course_ids = list(gradeables)
        shown = course_ids[:max_courses]

        if shown:
            text = Markup('<dl>{}</dl>').format(Markup('').join(tree(gradeables[course_id]) for course_id in shown))
        else:
            text = _('Nothing to grade!')

        footer = ''
        if len(course_ids) > len(shown):
            footer = _('Showing {shown} of {total} courses with work to grade.').format(
                shown=len(shown), total=len(course_ids),
            )
        log.info(
            'Grade Me: user %s has work to grade in %d courses, showing %d',
            self.user.id, len(course_ids), len(shown),
        )
        self._content = BlockContent(text=str(text), footer=footer)
        return self._content
