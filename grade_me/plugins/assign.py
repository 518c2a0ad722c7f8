"""
Assignment submissions waiting for a grade.
"""

from grade_me.queries import in_clause


def query_assign(user_ids, grader_id=0):  # pylint: disable=unused-argument
    """
    Latest submitted attempts that have no grade, or were resubmitted after being graded.
    """
    if not user_ids:
        return False
    insql, params = in_clause(user_ids)
    sql = f""", asgn_sub.id submissionid, asgn_sub.userid, asgn_sub.timemodified timesubmitted,
             asgn_sub.attemptnumber, a.maxattempts
        FROM assign_submission asgn_sub
        JOIN assign a ON a.id = asgn_sub.assignment
   LEFT JOIN block_grade_me bgm ON bgm.courseid = a.course AND bgm.iteminstance = a.id
   LEFT JOIN assign_grades ag ON ag.assignment = asgn_sub.assignment
                             AND ag.userid = asgn_sub.userid
                             AND ag.attemptnumber = asgn_sub.attemptnumber
       WHERE asgn_sub.userid {insql}
             AND asgn_sub.status = 'submitted'
             AND asgn_sub.latest = 1
             AND a.grade <> 0
             AND (ag.id IS NULL OR ag.grade IS NULL OR ag.grade < 0 OR ag.timemodified < asgn_sub.timemodified)"""
    return sql, params


def grading_path(item):
    return f"/mod/assign/view.php?id={item['coursemoduleid']}&action=grading"


def submission_path(item, submission):
    return f"/mod/assign/view.php?id={item['coursemoduleid']}&action=grade&userid={submission['userid']}"
