"""
Legacy assignment submissions modified since they were last marked.
"""

from grade_me.queries import in_clause


def query_assignment(user_ids, grader_id=0):  # pylint: disable=unused-argument
    if not user_ids:
        return False
    insql, params = in_clause(user_ids)
    sql = f""", asgn_sub.id submissionid, asgn_sub.userid, asgn_sub.timemodified timesubmitted
        FROM assignment_submissions asgn_sub
        JOIN assignment a ON a.id = asgn_sub.assignment
   LEFT JOIN block_grade_me bgm ON bgm.courseid = a.course AND bgm.iteminstance = a.id
       WHERE asgn_sub.userid {insql}
             AND a.grade > 0
             AND asgn_sub.timemarked < asgn_sub.timemodified"""
    return sql, params


def grading_path(item):
    return f"/mod/assignment/submissions.php?id={item['coursemoduleid']}"


def submission_path(item, submission):
    return (
        f"/mod/assignment/submissions.php?id={item['coursemoduleid']}&userid={submission['userid']}"
        "&mode=single&filter=0&offset=0"
    )
