"""
Glossary entries the grader has not rated yet.
"""

from grade_me.constants import ContextLevel
from grade_me.queries import in_clause


def query_glossary(user_ids, grader_id=0):
    if not user_ids:
        return False
    insql, params = in_clause(user_ids)
    sql = f""", ge.id submissionid, ge.userid, ge.timemodified timesubmitted
        FROM glossary_entries ge
        JOIN glossary g ON g.id = ge.glossaryid
   LEFT JOIN block_grade_me bgm ON bgm.courseid = g.course AND bgm.iteminstance = g.id
       WHERE ge.userid {insql}
             AND g.assessed <> 0
             AND NOT EXISTS (
             SELECT 1
               FROM rating r
              WHERE r.itemid = ge.id
                    AND r.userid = %s
                    AND r.component = 'mod_glossary'
                    AND r.contextid IN (
                    SELECT cx.id
                      FROM context cx
                     WHERE cx.contextlevel = {ContextLevel.MODULE}
                           AND cx.instanceid = bgm.coursemoduleid
                    )
             )"""
    return sql, params + [grader_id]


def submission_path(item, submission):  # pylint: disable=unused-argument
    return f"/mod/glossary/showentry.php?eid={submission['submissionid']}"
