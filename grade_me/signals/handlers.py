"""
Grade Me signal handlers.
"""

from logging import getLogger

from django.dispatch import receiver

from grade_me import quiz_observers
from grade_me.db import GradeMeDatabase

from .signals import (
    COURSE_CONTENT_DELETED,
    COURSE_MODULE_DELETED,
    COURSE_RESET_ENDED,
    QUESTION_MANUALLY_GRADED,
    QUIZ_ATTEMPT_DELETED,
    QUIZ_ATTEMPT_SUBMITTED
)

log = getLogger(__name__)


@receiver(COURSE_CONTENT_DELETED, dispatch_uid='grade_me_course_content_deleted')
def course_content_deleted_handler(sender, event, **kwargs):  # pylint: disable=unused-argument
    """
    Consume the COURSE_CONTENT_DELETED signal and forget the course's pending quiz steps.
    """
    log.info('Grade Me: course %s content deleted', event.course_id)
    quiz_observers.course_content_deleted(event, GradeMeDatabase())


@receiver(COURSE_RESET_ENDED, dispatch_uid='grade_me_course_reset_ended')
def course_reset_ended_handler(sender, event, **kwargs):  # pylint: disable=unused-argument
    """
    Consume the COURSE_RESET_ENDED signal. Only resets that removed quiz attempts touch the cache.
    """
    log.info('Grade Me: course %s reset ended, quiz attempts reset: %s', event.course_id, event.reset_quiz_attempts)
    quiz_observers.course_reset_ended(event, GradeMeDatabase())


@receiver(COURSE_MODULE_DELETED, dispatch_uid='grade_me_course_module_deleted')
def course_module_deleted_handler(sender, event, **kwargs):  # pylint: disable=unused-argument
    log.info('Grade Me: %s %s deleted', event.module_name, event.instance_id)
    quiz_observers.course_module_deleted(event, GradeMeDatabase())


@receiver(QUIZ_ATTEMPT_DELETED, dispatch_uid='grade_me_quiz_attempt_deleted')
def quiz_attempt_deleted_handler(sender, event, **kwargs):  # pylint: disable=unused-argument
    log.info('Grade Me: quiz attempt %s deleted', event.attempt_id)
    quiz_observers.attempt_deleted(event, GradeMeDatabase())


@receiver(QUIZ_ATTEMPT_SUBMITTED, dispatch_uid='grade_me_quiz_attempt_submitted')
def quiz_attempt_submitted_handler(sender, event, **kwargs):  # pylint: disable=unused-argument
    """
    Consume the QUIZ_ATTEMPT_SUBMITTED signal and cache the attempt's questions waiting for a grade.
    """
    log.info(
        'Grade Me: quiz attempt %s submitted for quiz %s by user %s',
        event.attempt_id, event.quiz_id, event.user_id,
    )
    quiz_observers.attempt_submitted(event, GradeMeDatabase())


@receiver(QUESTION_MANUALLY_GRADED, dispatch_uid='grade_me_question_manually_graded')
def question_manually_graded_handler(sender, event, **kwargs):  # pylint: disable=unused-argument
    log.info('Grade Me: quiz attempt %s of quiz %s graded manually', event.attempt_id, event.quiz_id)
    quiz_observers.question_manually_graded(event, GradeMeDatabase())
