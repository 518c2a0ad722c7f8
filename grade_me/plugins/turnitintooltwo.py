"""
Turnitin submissions without a grade.
"""

from grade_me.queries import in_clause


def query_turnitintooltwo(user_ids, grader_id=0):  # pylint: disable=unused-argument
    if not user_ids:
        return False
    insql, params = in_clause(user_ids)
    sql = f""", tts.id submissionid, tts.userid, tts.submission_modified timesubmitted
        FROM turnitintooltwo_submissions tts
        JOIN turnitintooltwo t ON t.id = tts.turnitintooltwoid
   LEFT JOIN block_grade_me bgm ON bgm.courseid = t.course AND bgm.iteminstance = t.id
       WHERE tts.userid {insql}
             AND tts.submission_grade IS NULL"""
    return sql, params


def grading_path(item):
    return f"/mod/turnitintooltwo/view.php?id={item['coursemoduleid']}&do=submissions"


def submission_path(item, submission):
    return f"/mod/turnitintooltwo/view.php?id={item['coursemoduleid']}&do=submissions&user={submission['userid']}"
