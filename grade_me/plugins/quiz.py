"""
Quiz attempts with questions waiting for a manual grade.

Reads the ``block_grade_me_quiz_ngrade`` cache maintained by
``grade_me.quiz_observers``; one row per question step waiting for a grade.
"""

from grade_me.constants import QUIZ_NGRADE_TABLE
from grade_me.queries import in_clause


def query_quiz(user_ids, grader_id=0):  # pylint: disable=unused-argument
    if not user_ids:
        return False
    insql, params = in_clause(user_ids)
    sql = f""", qas.id step_id, qza.userid, qza.timefinish timesubmitted, qza.id submissionid, qas.sequencenumber
        FROM {QUIZ_NGRADE_TABLE} ngrade
        JOIN quiz_attempts qza ON qza.id = ngrade.attemptid
        JOIN question_attempt_steps qas ON qas.id = ngrade.questionattemptstepid
        JOIN quiz q ON q.id = ngrade.quizid
   LEFT JOIN block_grade_me bgm ON bgm.courseid = q.course AND bgm.iteminstance = q.id
       WHERE qza.userid {insql}"""
    return sql, params


def grading_path(item):
    return f"/mod/quiz/report.php?id={item['coursemoduleid']}&mode=grading"


def submission_path(item, submission):  # pylint: disable=unused-argument
    return f"/mod/quiz/review.php?attempt={submission['submissionid']}"
