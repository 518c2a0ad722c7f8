"""
Models owned by Grade Me.

Both tables hold derived data: they can always be rebuilt from the host's
gradebook and quiz tables, and deleting rows from them has no side effects
beyond the grading list.
"""


from django.db import models

from .constants import GRADEABLE_TABLE, QUIZ_NGRADE_TABLE


class GradeableItem(models.Model):
    """
    A gradeable activity of a course, as listed in the host gradebook.

    Every plugin query joins this table (aliased ``bgm``) to learn the course
    and course module an activity belongs to.

    .. no_pii:
    """
    item_type = models.CharField(max_length=30, db_column='itemtype')
    item_module = models.CharField(max_length=50, db_column='itemmodule', db_index=True)
    item_instance = models.BigIntegerField(db_column='iteminstance')
    item_name = models.CharField(max_length=255, db_column='itemname')
    item_sort_order = models.BigIntegerField(default=0, db_column='itemsortorder')
    course_id = models.BigIntegerField(db_column='courseid', db_index=True)
    course_name = models.CharField(max_length=255, db_column='coursename')
    course_module_id = models.BigIntegerField(db_column='coursemoduleid')
    time_modified = models.BigIntegerField(default=0, db_column='timemodified')

    class Meta:
        db_table = GRADEABLE_TABLE
        indexes = [
            models.Index(fields=['course_id', 'item_module', 'item_instance'], name='grade_me_item_lookup'),
        ]

    def __str__(self):
        return f'GradeableItem {self.item_module}:{self.item_instance} in course {self.course_id}'


class QuizNeedsGrading(models.Model):
    """
    The latest step of a quiz question attempt, when that step is waiting for a manual grade.

    .. no_pii:
    """
    attempt_id = models.BigIntegerField(db_column='attemptid', db_index=True)
    user_id = models.BigIntegerField(db_column='userid')
    quiz_id = models.BigIntegerField(db_column='quizid')
    question_attempt_step_id = models.BigIntegerField(db_column='questionattemptstepid')
    course_id = models.BigIntegerField(db_column='courseid', db_index=True)

    class Meta:
        db_table = QUIZ_NGRADE_TABLE
        constraints = [
            models.UniqueConstraint(fields=['attempt_id', 'question_attempt_step_id'], name='grade_me_ngrade_step'),
        ]
        indexes = [
            models.Index(fields=['quiz_id', 'user_id'], name='grade_me_ngrade_quiz_user'),
        ]

    def __str__(self):
        return f'QuizNeedsGrading attempt {self.attempt_id} step {self.question_attempt_step_id}'
