"""
Host lifecycle signals observed by Grade Me.

Senders pass the typed event from ``grade_me.events`` as ``event``.
"""
from django.dispatch import Signal

from grade_me import events

# Signal that indicates that all the content of a course has been deleted.
# providing_args=['event']  # CourseContentDeleted
COURSE_CONTENT_DELETED = Signal()

# Signal that indicates that a course reset has finished.
# providing_args=['event']  # CourseResetEnded
COURSE_RESET_ENDED = Signal()

# Signal that indicates that an activity has been removed from a course.
# providing_args=['event']  # CourseModuleDeleted
COURSE_MODULE_DELETED = Signal()

# Signal that indicates that a quiz attempt has been deleted.
# providing_args=['event']  # AttemptDeleted
QUIZ_ATTEMPT_DELETED = Signal()

# Signal that indicates that a student has submitted a quiz attempt.
# providing_args=['event']  # AttemptSubmitted
QUIZ_ATTEMPT_SUBMITTED = Signal()

# Signal that indicates that a grader has graded a quiz question by hand.
# providing_args=['event']  # QuestionManuallyGraded
QUESTION_MANUALLY_GRADED = Signal()

EVENT_SIGNALS = {
    events.CourseContentDeleted: COURSE_CONTENT_DELETED,
    events.CourseResetEnded: COURSE_RESET_ENDED,
    events.CourseModuleDeleted: COURSE_MODULE_DELETED,
    events.AttemptDeleted: QUIZ_ATTEMPT_DELETED,
    events.AttemptSubmitted: QUIZ_ATTEMPT_SUBMITTED,
    events.QuestionManuallyGraded: QUESTION_MANUALLY_GRADED,
}


def send_event(event, sender=None):
    """
    Send the signal matching a typed event.
    """
    return EVENT_SIGNALS[type(event)].send(sender=sender, event=event)


def send_host_event(event_name, data, sender=None):
    """
    Parse a host event given by name and payload, and send its signal.

    Raises ``ValueError`` for events Grade Me does not observe and ``KeyError``
    for payloads missing a field the observer needs.
    """
    return send_event(events.parse_event(event_name, data), sender=sender)
