"""
Forum posts the grader has not rated yet.
"""

from grade_me.constants import ContextLevel
from grade_me.queries import in_clause


def query_forum(user_ids, grader_id=0):
    """
    Posts in rated forums, with the discussion each belongs to for deep linking.
    """
    if not user_ids:
        return False
    insql, params = in_clause(user_ids)
    sql = f""", fp.id submissionid, fp.userid, fp.modified timesubmitted, fd.id forum_discussion_id
        FROM forum_posts fp
        JOIN forum_discussions fd ON fd.id = fp.discussion
        JOIN forum f ON f.id = fd.forum
   LEFT JOIN block_grade_me bgm ON bgm.courseid = f.course AND bgm.iteminstance = f.id
       WHERE fp.userid {insql}
             AND f.assessed <> 0
             AND NOT EXISTS (
             SELECT 1
               FROM rating r
              WHERE r.itemid = fp.id
                    AND r.userid = %s
                    AND r.component = 'mod_forum'
                    AND r.contextid IN (
                    SELECT cx.id
                      FROM context cx
                     WHERE cx.contextlevel = {ContextLevel.MODULE}
                           AND cx.instanceid = bgm.coursemoduleid
                    )
             )"""
    return sql, params + [grader_id]


def submission_path(item, submission):  # pylint: disable=unused-argument
    return f"/mod/forum/discuss.php?d={submission['forum_discussion_id']}#p{submission['submissionid']}"
