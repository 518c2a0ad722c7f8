"""
Observers keeping ``block_grade_me_quiz_ngrade`` in step with the quiz tables.

Every observer takes the typed event and the ``GradeMeDatabase`` to work on.
They run inline in the host's request and let database errors propagate.
"""

import logging

from . import events
from .constants import QUIZ_NGRADE_TABLE, QuestionStepState
from .models import QuizNeedsGrading

log = logging.getLogger(__name__)

# Latest step of every question attempt, kept when that step needs grading.
# ``usage_filter`` restricts the question attempts considered by the
# sequence subquery; it is empty for a full rebuild.
NEEDS_GRADING_SQL = """
    INSERT INTO {table} (attemptid, userid, quizid, questionattemptstepid, courseid)
    SELECT qza.id, qza.userid, qza.quiz, qas.id, q.course
      FROM question_attempt_steps qas
      JOIN question_attempts qna ON qas.questionattemptid = qna.id
      JOIN quiz_attempts qza ON qna.questionusageid = qza.uniqueid
      JOIN (SELECT qas1.questionattemptid questionattemptid, MAX(qas1.sequencenumber) maxseq
              FROM question_attempt_steps qas1
              JOIN question_attempts qna1 ON qas1.questionattemptid = qna1.id
             {usage_filter}
          GROUP BY qas1.questionattemptid) maxseq ON maxseq.questionattemptid = qna.id
                                                 AND qas.sequencenumber = maxseq.maxseq
      JOIN quiz q ON q.id = qza.quiz
     WHERE qas.state = %s
"""

ATTEMPT_USAGE_FILTER = 'WHERE qna1.questionusageid = (SELECT uniqueid FROM quiz_attempts WHERE id = %s)'


def course_content_deleted(event, db):
    """
    Drop every cached step of a course whose content was deleted.
    """
    deleted = db.delete_records(QuizNeedsGrading, course_id=event.course_id)
    log.debug('Removed %d quiz grading rows for deleted course %s', deleted, event.course_id)
    return deleted


def course_reset_ended(event, db):
    """
    Drop the cached steps of a course when its reset removed quiz attempts.
    """
    if not event.reset_quiz_attempts:
        return 0
    deleted = db.delete_records(QuizNeedsGrading, course_id=event.course_id)
    log.debug('Removed %d quiz grading rows for reset course %s', deleted, event.course_id)
    return deleted


def course_module_deleted(event, db):
    """
    Drop the cached steps of a deleted quiz. Other activities are ignored.
    """
    if event.module_name != 'quiz':
        return 0
    deleted = db.delete_records(QuizNeedsGrading, quiz_id=event.instance_id)
    log.debug('Removed %d quiz grading rows for deleted quiz %s', deleted, event.instance_id)
    return deleted


def attempt_deleted(event, db):
    deleted = db.delete_records(QuizNeedsGrading, attempt_id=event.attempt_id)
    log.debug('Removed %d quiz grading rows for deleted attempt %s', deleted, event.attempt_id)
    return deleted


def attempt_submitted(event, db):
    """
    Replace the user's cached steps for the quiz with those of the submitted attempt.

    Returns a ``(deleted, inserted)`` pair.
    """
    with db.atomic():
        deleted = db.delete_records(QuizNeedsGrading, quiz_id=event.quiz_id, user_id=event.user_id)
        inserted = db.execute(
            NEEDS_GRADING_SQL.format(table=QUIZ_NGRADE_TABLE, usage_filter=ATTEMPT_USAGE_FILTER),
            [event.attempt_id, QuestionStepState.NEEDS_GRADING],
        )
    log.debug(
        'Attempt %s of quiz %s by user %s: replaced %d quiz grading rows with %d',
        event.attempt_id, event.quiz_id, event.user_id, deleted, inserted,
    )
    return deleted, inserted


def question_manually_graded(event, db):
    """
    Drop the cached steps of an attempt once a grader has graded it by hand.
    """
    deleted = db.delete_records(QuizNeedsGrading, attempt_id=event.attempt_id, quiz_id=event.quiz_id)
    log.debug('Removed %d quiz grading rows for graded attempt %s', deleted, event.attempt_id)
    return deleted


def rebuild_quiz_needs_grading(db):
    """
    Recompute the whole cache from the question attempt tables.

    Returns the number of rows the cache holds afterwards.
    """
    with db.atomic():
        db.delete_records(QuizNeedsGrading)
        inserted = db.execute(
            NEEDS_GRADING_SQL.format(table=QUIZ_NGRADE_TABLE, usage_filter=''),
            [QuestionStepState.NEEDS_GRADING],
        )
    log.info('Rebuilt the quiz grading cache with %d rows', inserted)
    return inserted


OBSERVERS = {
    events.CourseContentDeleted: course_content_deleted,
    events.CourseResetEnded: course_reset_ended,
    events.CourseModuleDeleted: course_module_deleted,
    events.AttemptDeleted: attempt_deleted,
    events.AttemptSubmitted: attempt_submitted,
    events.QuestionManuallyGraded: question_manually_graded,
}


def observe(event, db):
    """
    Run the observer registered for ``event``'s type.
    """
    return OBSERVERS[type(event)](event, db)
