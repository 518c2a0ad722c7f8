"""
Database activity records the grader has not rated yet.
"""

from grade_me.constants import ContextLevel
from grade_me.queries import in_clause


def query_data(user_ids, grader_id=0):
    if not user_ids:
        return False
    insql, params = in_clause(user_ids)
    sql = f""", dr.id submissionid, dr.userid, dr.timemodified timesubmitted
        FROM data_records dr
        JOIN data d ON d.id = dr.dataid
   LEFT JOIN block_grade_me bgm ON bgm.courseid = d.course AND bgm.iteminstance = d.id
       WHERE dr.userid {insql}
             AND d.assessed = 1
             AND NOT EXISTS (
             SELECT 1
               FROM rating r
              WHERE r.itemid = dr.id
                    AND r.userid = %s
                    AND r.component = 'mod_data'
                    AND r.contextid IN (
                    SELECT cx.id
                      FROM context cx
                     WHERE cx.contextlevel = {ContextLevel.MODULE}
                           AND cx.instanceid = bgm.coursemoduleid
                    )
             )"""
    return sql, params + [grader_id]


def submission_path(item, submission):  # pylint: disable=unused-argument
    return f"/mod/data/view.php?rid={submission['submissionid']}&mode=single"
