"""
Host lifecycle events observed by Grade Me.

Each event is an immutable value object carrying exactly what its observer
needs. ``from_payload`` builds one from the host's loosely typed event data;
a missing field raises ``KeyError`` so the host's dispatcher reports it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

UNSET_FLAGS = (None, False, 0, '', '0')


@dataclass(frozen=True)
class CourseContentDeleted:
    """
    All content of a course has been deleted.
    """
    course_id: int

    event_name = r'\core\event\course_content_deleted'

    @classmethod
    def from_payload(cls, data: dict) -> CourseContentDeleted:
        return cls(course_id=data['courseid'])


@dataclass(frozen=True)
class CourseResetEnded:
    """
    A course reset has finished.

    ``course_id`` is only guaranteed when quiz attempts were part of the reset.
    """
    course_id: Optional[int]
    reset_quiz_attempts: bool

    event_name = r'\core\event\course_reset_ended'

    @classmethod
    def from_payload(cls, data: dict) -> CourseResetEnded:
        reset_options = data['other']['reset_options']
        # Unchecked boxes arrive as '0'.
        reset_quiz_attempts = reset_options.get('reset_quiz_attempts') not in UNSET_FLAGS
        if reset_quiz_attempts:
            course_id = reset_options['courseid']
        else:
            course_id = reset_options.get('courseid')
        return cls(course_id=course_id, reset_quiz_attempts=reset_quiz_attempts)


@dataclass(frozen=True)
class CourseModuleDeleted:
    """
    An activity has been removed from a course.
    """
    module_name: str
    instance_id: int

    event_name = r'\core\event\course_module_deleted'

    @classmethod
    def from_payload(cls, data: dict) -> CourseModuleDeleted:
        other = data['other']
        return cls(module_name=other['modulename'], instance_id=other['instanceid'])


@dataclass(frozen=True)
class AttemptDeleted:
    """
    A quiz attempt has been deleted.
    """
    attempt_id: int

    event_name = r'\mod_quiz\event\attempt_deleted'

    @classmethod
    def from_payload(cls, data: dict) -> AttemptDeleted:
        return cls(attempt_id=data['objectid'])


@dataclass(frozen=True)
class AttemptSubmitted:
    """
    A student has submitted a quiz attempt.
    """
    attempt_id: int
    quiz_id: int
    user_id: int

    event_name = r'\mod_quiz\event\attempt_submitted'

    @classmethod
    def from_payload(cls, data: dict) -> AttemptSubmitted:
        return cls(attempt_id=data['objectid'], quiz_id=data['other']['quizid'], user_id=data['userid'])


@dataclass(frozen=True)
class QuestionManuallyGraded:
    """
    A grader has graded a question of a quiz attempt by hand.
    """
    attempt_id: int
    quiz_id: int

    event_name = r'\mod_quiz\event\question_manually_graded'

    @classmethod
    def from_payload(cls, data: dict) -> QuestionManuallyGraded:
        other = data['other']
        return cls(attempt_id=other['attemptid'], quiz_id=other['quizid'])


GradeMeEvent = Union[
    CourseContentDeleted,
    CourseResetEnded,
    CourseModuleDeleted,
    AttemptDeleted,
    AttemptSubmitted,
    QuestionManuallyGraded,
]

EVENT_TYPES = {
    event_type.event_name: event_type
    for event_type in (
        CourseContentDeleted,
        CourseResetEnded,
        CourseModuleDeleted,
        AttemptDeleted,
        AttemptSubmitted,
        QuestionManuallyGraded,
    )
}


def parse_event(event_name: str, data: dict) -> GradeMeEvent:
    """
    Build the typed event for a host event name and its payload.
    """
    try:
        event_type = EVENT_TYPES[event_name]
    except KeyError:
        raise ValueError(f'Grade Me does not observe {event_name}') from None
    return event_type.from_payload(data)
