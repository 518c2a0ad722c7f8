"""
Helpers for loading XML datasets into the host tables.

Datasets use the flat ``<dataset><table name=""><column/><row><value/></row>``
layout, with ``<null/>`` standing in for a NULL value. Gradeable module tables
(``assign``, ``quiz`` and the rest) are not loaded as they are: each of their
rows becomes a freshly generated activity with its course module and module
context, and every other table's references to users, courses and activities
are rewritten from dataset indexes to the generated ids.
"""

import os
from collections import namedtuple

from django.apps import apps
from django.conf import settings
from django.test import override_settings
from lxml import etree

from grade_me.constants import GRADEABLE_MODULES, ContextLevel
from grade_me.tests.factories import (
    ContextFactory,
    CourseFactory,
    CourseModuleFactory,
    ModuleFactory,
    UserFactory
)

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')

PluginInstance = namedtuple('PluginInstance', ['id', 'cmid', 'contextid'])
GradeMeData = namedtuple('GradeMeData', ['users', 'courses', 'plugins'])

# column -> where its new value comes from, which attribute to read and the
# tables whose column is rewritten. Dataset values are indexes into the source.
Override = namedtuple('Override', ['source', 'attribute', 'tables'])

OVERRIDES = {
    'assignment': Override('plugins', 'id', ('assign_grades', 'assign_submission', 'assignment_submissions')),
    'contextid': Override('plugins', 'contextid', ('rating',)),
    'course': Override('courses', 'id', ('course_modules', 'forum_discussions')),
    'courseid': Override('courses', 'id', ('block_grade_me', 'grade_items')),
    'coursemoduleid': Override('plugins', 'cmid', ('block_grade_me',)),
    'coursename': Override('courses', 'fullname', ('block_grade_me',)),
    'dataid': Override('plugins', 'id', ('data_records',)),
    'forum': Override('plugins', 'id', ('forum_discussions',)),
    'glossaryid': Override('plugins', 'id', ('glossary_entries',)),
    'iteminstance': Override('plugins', 'id', ('block_grade_me', 'grade_items')),
    'quiz': Override('plugins', 'id', ('quiz_attempts',)),
    'turnitintooltwoid': Override('plugins', 'id', ('turnitintooltwo_submissions',)),
    'userid': Override('users', 'id', (
        'assign_grades', 'assign_submission', 'assignment_submissions', 'data_records', 'forum_discussions',
        'forum_posts', 'glossary_entries', 'grade_grades', 'question_attempt_steps', 'quiz_attempts', 'rating',
        'turnitintooltwo_submissions',
    )),
}


def grade_me_settings(**overrides):
    """
    ``override_settings`` for individual ``GRADE_ME`` keys.
    """
    return override_settings(GRADE_ME={**settings.GRADE_ME, **overrides})


def read_dataset(filename):
    """
    Parse a dataset file into ``{table_name: [row_dict, ...]}``, keeping row order.
    """
    root = etree.parse(os.path.join(FIXTURES_DIR, filename)).getroot()
    dataset = {}
    for table in root.iterfind('table'):
        columns = [column.text for column in table.iterfind('column')]
        rows = []
        for row in table.iterfind('row'):
            values = [
                None if value.tag == 'null' else (value.text or '')
                for value in row
                if value.tag in ('value', 'null')
            ]
            rows.append(dict(zip(columns, values)))
        dataset[table.get('name')] = rows
    return dataset


def model_for_table(table_name):
    for model in apps.get_models():
        if model._meta.db_table == table_name:  # pylint: disable=protected-access
            return model
    raise LookupError(f'No model for table {table_name}')


def create_module_instance(module_name, fields, course):
    """
    Create an activity with its course module and module context.
    """
    fields = {column: value for column, value in fields.items() if column != 'id'}
    fields['course'] = course.id
    instance = model_for_table(module_name).objects.create(**fields)
    module = ModuleFactory(name=module_name)
    course_module = CourseModuleFactory(course=course.id, module=module.id, instance=instance.id)
    context = ContextFactory(contextlevel=ContextLevel.MODULE, instanceid=course_module.id)
    return PluginInstance(id=instance.id, cmid=course_module.id, contextid=context.id)


def _resolve(value, values, attribute):
    try:
        index = int(value)
    except (TypeError, ValueError):
        return value
    if 0 <= index < len(values):
        return getattr(values[index], attribute)
    return value


def apply_overrides(dataset, sources):
    """
    Rewrite index references in ``dataset`` in place using ``sources`` (users, courses and plugins).
    """
    for column, override in OVERRIDES.items():
        values = sources[override.source]
        for table_name in override.tables:
            for row in dataset.get(table_name, ()):
                if column in row:
                    row[column] = _resolve(row[column], values, override.attribute)


def load_rows(table_name, rows):
    model = model_for_table(table_name)
    attnames = {field.column: field.attname for field in model._meta.concrete_fields}  # pylint: disable=protected-access
    model.objects.bulk_create([
        model(**{attnames[column]: value for column, value in row.items()})
        for row in rows
    ])


def create_grade_me_data(filename):
    """
    Load a dataset for two users and one course, returning the generated rows.
    """
    dataset = read_dataset(filename)
    users = [UserFactory(), UserFactory()]
    courses = [CourseFactory()]
    for course in courses:
        ContextFactory(contextlevel=ContextLevel.COURSE, instanceid=course.id)

    plugins = []
    for module_name in GRADEABLE_MODULES:
        for fields in dataset.pop(module_name, ()):
            course = courses[int(fields['course'])]
            plugins.append(create_module_instance(module_name, fields, course))

    apply_overrides(dataset, {'users': users, 'courses': courses, 'plugins': plugins})
    for table_name, rows in dataset.items():
        if rows:
            load_rows(table_name, rows)
    return GradeMeData(users=users, courses=courses, plugins=plugins)
