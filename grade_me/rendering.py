"""
Folding gradeable rows into per-course trees, and rendering those trees as HTML.
"""

from datetime import datetime, timezone

from django.contrib.auth import get_user_model
from django.utils.translation import gettext as _
from markupsafe import Markup

from .config import get_root_url
from .plugins import get_plugin

COURSE_META_FIELDS = ('courseid', 'coursename')
ITEM_META_FIELDS = ('itemmodule', 'iteminstance', 'itemname', 'coursemoduleid', 'itemsortorder')
SUBMISSION_META_FIELDS = ('submissionid', 'userid', 'timesubmitted')
OPTIONAL_SUBMISSION_FIELDS = ('forum_discussion_id', 'attemptnumber', 'maxattempts', 'step_id')

DATE_FORMAT = '%m/%d/%Y'


def gradeables_array(gradeables, record):
    """
    Fold one query row into ``gradeables`` and return it.

    The structure is keyed by course id, then course module id, then
    ``(timesubmitted, submissionid)``; each level keeps its own ``meta`` dict.
    Rows repeating a submission (one per quiz step waiting for a grade, for
    instance) collapse onto the same entry.
    """
    course = gradeables.setdefault(record['courseid'], {
        'meta': {field: record[field] for field in COURSE_META_FIELDS},
        'items': {},
    })
    item = course['items'].setdefault(record['coursemoduleid'], {
        'meta': {field: record[field] for field in ITEM_META_FIELDS},
        'submissions': {},
    })
    meta = {field: record[field] for field in SUBMISSION_META_FIELDS}
    meta.update({field: record[field] for field in OPTIONAL_SUBMISSION_FIELDS if field in record})
    item['submissions'][(record['timesubmitted'], record['submissionid'])] = {'meta': meta}
    return gradeables


def format_time(timestamp):
    return datetime.fromtimestamp(int(timestamp), tz=timezone.utc).strftime(DATE_FORMAT)


def _url(path):
    return get_root_url() + path


def _user_names(course):
    user_ids = {
        submission['meta']['userid']
        for item in course['items'].values()
        for submission in item['submissions'].values()
    }
    users = get_user_model().objects.in_bulk(user_ids)
    return {user_id: user.get_full_name() or user.username for user_id, user in users.items()}


def tree(course, user_names=None):
    """
    Render one course of the folded structure as a definition list.

    ``user_names`` maps user ids to display names; it is looked up from the
    user model when omitted. Returns an empty ``Markup`` for a course without
    items.
    """
    if not course['items']:
        return Markup('')
    if user_names is None:
        user_names = _user_names(course)

    course_id = course['meta']['courseid']
    text = Markup('<dt id="courseid{course_id}" class="cmod">'
                  '<a href="{gradebook}" title="{gradebook_title}" class="gm_gradebook">{gradebook_title}</a> '
                  '<a href="{course_link}">{course_name}</a></dt>\n').format(
        course_id=course_id,
        gradebook=_url(f'/grade/report/index.php?id={course_id}'),
        gradebook_title=_('Gradebook'),
        course_link=_url(f'/course/view.php?id={course_id}'),
        course_name=course['meta']['coursename'],
    )

    items = sorted(course['items'].values(), key=lambda item: (item['meta']['itemsortorder'], item['meta']['coursemoduleid']))
    for item in items:
        text += _item_html(course_id, item, user_names)
    return Markup('<div>{}</div>').format(text)


def _item_html(course_id, item, user_names):
    meta = item['meta']
    plugin = get_plugin(meta['itemmodule'])
    grade_title = _('Go to {module}').format(module=meta['itemmodule'])
    submissions = item['submissions']

    html = Markup('<dd id="cmid{cmid}" class="module">\n'
                  '<a href="{grading_link}" title="{grade_title}" class="gm_grade">{grade_title}</a> '
                  '<a href="{module_link}">{item_name}</a> ({count})\n'
                  '<ul class="gm_togglefoo">').format(
        cmid=meta['coursemoduleid'],
        grading_link=_url(plugin.grading_link_path(meta)),
        grade_title=grade_title,
        module_link=_url(plugin.module_path(meta)),
        item_name=meta['itemname'],
        count=len(submissions),
    )
    for key in sorted(submissions):
        submission = submissions[key]['meta']
        user_id = submission['userid']
        html += Markup('<li class="gradable">'
                       '<a href="{submission_link}" title="{grade_title}" class="gm_grade">{grade_title}</a> '
                       '<a href="{user_link}">{user_name}</a> '
                       '<span class="gm_date">({submitted})</span></li>\n').format(
            submission_link=_url(plugin.submission_path(meta, submission)),
            grade_title=grade_title,
            user_link=_url(f'/user/view.php?id={user_id}&course={course_id}'),
            user_name=user_names.get(user_id, user_id),
            submitted=format_time(submission['timesubmitted']),
        )
    html += Markup('</ul>\n</dd>\n')
    return html
