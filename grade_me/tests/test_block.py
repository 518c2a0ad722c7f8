"""
Tests for the Grade Me block content.
"""

from unittest.mock import patch

import ddt
from django.test import TestCase

from grade_me.block import BlockContent, GradeMeBlock
from grade_me.constants import ContextLevel
from grade_me.db import GradeMeDatabase
from grade_me.quiz_observers import rebuild_quiz_needs_grading
from grade_me.rendering import gradeables_array
from grade_me.tests.factories import (
    AdminFactory,
    EnrolFactory,
    RoleAssignmentFactory,
    RoleFactory,
    UserEnrolmentFactory,
    UserFactory
)
from grade_me.tests.host.models import Context, UserEnrolment
from grade_me.tests.utils import create_grade_me_data, grade_me_settings


class GradeMeBlockTestCase(TestCase):
    """
    Loads a dataset and enrols its users in the gradebook of its course.
    """

    def load(self, filename, gradebook_users=1):
        self.users, self.courses, self.plugins = create_grade_me_data(filename)
        course = self.courses[0]
        self.course_context = Context.objects.get(contextlevel=ContextLevel.COURSE, instanceid=course.id)
        enrol = EnrolFactory(courseid=course.id)
        self.gradebook_roles = []
        for index, user in enumerate(self.users[:gradebook_users]):
            role = RoleFactory(shortname=f'gradebook{index}')
            self.gradebook_roles.append(role.id)
            RoleAssignmentFactory(roleid=role.id, contextid=self.course_context.id, userid=user.id)
            UserEnrolmentFactory(enrolid=enrol.id, userid=user.id, status=0)

    def get_text(self, user=None, **settings):
        settings.setdefault('GRADEBOOK_ROLES', ','.join(str(role) for role in self.gradebook_roles))
        with grade_me_settings(**settings):
            return GradeMeBlock(user or AdminFactory()).get_content().text


@ddt.ddt
class GetContentTest(GradeMeBlockTestCase):
    """
    Tests for get_content with the gradebook of a single course.
    """

    def test_has_config(self):
        assert GradeMeBlock(UserFactory()).has_config() is True

    @ddt.data(
        ('assign', [
            'Go to assign',
            'mod/assign/view.php',
            'action=grade&amp;userid={user0}"',
            'testassignment3',
            'testassignment4',
        ]),
        ('assignment', [
            'Go to assignment',
            'mod/assignment/submissions.php',
            'userid={user0}&amp;mode=single',
            'testassignment5',
            'testassignment6',
        ]),
    )
    @ddt.unpack
    def test_get_content_single_user(self, plugin, expected_values):
        self.load('block_grade_me.xml')
        text = self.get_text(**{f'ENABLE_{plugin.upper()}': True})
        for expected in expected_values:
            assert expected.format(user0=self.users[0].id) in text
        assert f'userid={self.users[1].id}' not in text

    @ddt.data(
        ('assign', [
            'Go to assign',
            'mod/assign/view.php',
            'action=grade&amp;userid={user0}"',
            'action=grade&amp;userid={user1}"',
            'testassignment3',
            'testassignment4',
        ]),
        ('assignment', [
            'Go to assignment',
            'mod/assignment/submissions.php',
            'userid={user0}&amp;mode=single',
            'userid={user1}&amp;mode=single',
            'testassignment5',
            'testassignment6',
        ]),
    )
    @ddt.unpack
    def test_get_content_multiple_user(self, plugin, expected_values):
        self.load('block_grade_me.xml', gradebook_users=2)
        text = self.get_text(**{f'ENABLE_{plugin.upper()}': True})
        for expected in expected_values:
            assert expected.format(user0=self.users[0].id, user1=self.users[1].id) in text

    def test_get_content_quiz(self):
        self.load('quiz1.xml', gradebook_users=2)
        rebuild_quiz_needs_grading(GradeMeDatabase())
        text = self.get_text()
        assert 'Go to quiz' in text
        assert 'mod/quiz/view.php' in text
        assert '/mod/quiz/review.php?attempt=4"' in text
        assert '/mod/quiz/review.php?attempt=5"' in text
        assert 'quizitem4' in text
        assert 'quizitem1' not in text

    def test_disabled_plugin(self):
        self.load('block_grade_me.xml')
        text = self.get_text(ENABLE_ASSIGN=False)
        assert 'mod/assign/view.php' not in text
        assert 'mod/assignment/submissions.php' in text

    def test_inactive_enrolment(self):
        self.load('block_grade_me.xml')
        UserEnrolment.objects.update(status=1)
        assert self.get_text() == 'Nothing to grade!'

    def test_no_gradebook_roles(self):
        self.load('block_grade_me.xml')
        assert self.get_text(GRADEBOOK_ROLES=()) == 'Nothing to grade!'

    def test_admin_without_view_all(self):
        self.load('block_grade_me.xml')
        assert self.get_text(ENABLE_ADMIN_VIEW_ALL=False) == 'Nothing to grade!'

    @ddt.data('editingteacher', 'teacher')
    def test_grader_role(self, shortname):
        self.load('block_grade_me.xml')
        grader = UserFactory()
        role = RoleFactory(shortname=shortname)
        RoleAssignmentFactory(roleid=role.id, contextid=self.course_context.id, userid=grader.id)
        text = self.get_text(user=grader, ENABLE_ADMIN_VIEW_ALL=False)
        assert 'testassignment3' in text

    def test_user_without_grader_role(self):
        self.load('block_grade_me.xml')
        student = UserFactory()
        role = RoleFactory(shortname='student')
        RoleAssignmentFactory(roleid=role.id, contextid=self.course_context.id, userid=student.id)
        assert self.get_text(user=student) == 'Nothing to grade!'

    def test_content_is_computed_once(self):
        self.load('block_grade_me.xml')
        block = GradeMeBlock(AdminFactory())
        with grade_me_settings(GRADEBOOK_ROLES=self.gradebook_roles):
            first = block.get_content()
            with patch.object(GradeMeBlock, 'get_gradeables') as mock_get_gradeables:
                assert block.get_content() is first
        mock_get_gradeables.assert_not_called()


class MaxCoursesTest(TestCase):
    """
    Only the first MAX_COURSES courses with work to grade are rendered.
    """

    def gradeables(self, count):
        gradeables = {}
        for course_id in range(1, count + 1):
            gradeables_array(gradeables, {
                'courseid': course_id,
                'coursename': f'Course {course_id}',
                'itemmodule': 'assign',
                'iteminstance': course_id,
                'itemname': f'Assignment {course_id}',
                'coursemoduleid': 100 + course_id,
                'itemsortorder': 0,
                'submissionid': course_id,
                'userid': 0,
                'timesubmitted': 0,
            })
        return gradeables

    def test_max_courses(self):
        user = UserFactory()
        with patch.object(GradeMeBlock, 'get_gradeables', return_value=self.gradeables(3)):
            with grade_me_settings(MAX_COURSES=2):
                content = GradeMeBlock(user).get_content()
        assert isinstance(content, BlockContent)
        assert 'Course 1' in content.text
        assert 'Course 2' in content.text
        assert 'Course 3' not in content.text
        assert content.footer == 'Showing 2 of 3 courses with work to grade.'

    def test_all_courses_shown(self):
        user = UserFactory()
        with patch.object(GradeMeBlock, 'get_gradeables', return_value=self.gradeables(2)):
            content = GradeMeBlock(user).get_content()
        assert content.text.startswith('<dl>')
        assert content.footer == ''
