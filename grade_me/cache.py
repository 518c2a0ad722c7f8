"""
Rebuilding the ``block_grade_me`` list of gradeable items from the host gradebook.
"""

import logging
import time

from .db import GradeMeDatabase
from .models import GradeableItem
from .plugins import enabled_plugins
from .queries import in_clause
from .quiz_observers import rebuild_quiz_needs_grading

log = logging.getLogger(__name__)

# One row per activity grade item; ``itemnumber`` 0 is an activity's main grade.
GRADE_ITEMS_SQL = """
    SELECT gi.itemtype, gi.itemmodule, gi.iteminstance, gi.itemname, gi.sortorder itemsortorder,
           gi.courseid, c.fullname coursename, cm.id coursemoduleid
      FROM grade_items gi
      JOIN course c ON c.id = gi.courseid
      JOIN modules m ON m.name = gi.itemmodule
      JOIN course_modules cm ON cm.course = gi.courseid
                            AND cm.module = m.id
                            AND cm.instance = gi.iteminstance
     WHERE gi.itemtype = 'mod'
           AND gi.itemnumber = 0
           AND gi.itemmodule {modules}
  ORDER BY gi.courseid, gi.sortorder, gi.id
"""


def _item_key(course_id, item_module, item_instance):
    return (int(course_id), item_module, int(item_instance))


def cache_grade_data(db=None, now=None):
    """
    Bring ``block_grade_me`` in line with the gradebook items of the enabled plugins.

    Existing rows are updated in place, missing ones inserted and rows whose
    activity is gone, or whose plugin is disabled, deleted. The quiz grading
    cache is rebuilt afterwards. Returns a dict of row counts.
    """
    db = db or GradeMeDatabase()
    now = int(time.time() if now is None else now)
    modules = [plugin.name for plugin in enabled_plugins()]

    rows = []
    if modules:
        modules_sql, params = in_clause(modules)
        rows = list(db.get_recordset_sql(GRADE_ITEMS_SQL.format(modules=modules_sql), params))

    items = GradeableItem.objects.using(db.using)
    with db.atomic():
        existing = {
            _item_key(item.course_id, item.item_module, item.item_instance): item
            for item in items.all()
        }
        seen = set()
        to_create = []
        to_update = []
        for row in rows:
            key = _item_key(row['courseid'], row['itemmodule'], row['iteminstance'])
            if key in seen:
                continue
            seen.add(key)
            item = existing.get(key) or GradeableItem(
                course_id=row['courseid'], item_module=row['itemmodule'], item_instance=row['iteminstance'],
            )
            item.item_type = row['itemtype']
            item.item_name = row['itemname'] or ''
            item.item_sort_order = row['itemsortorder'] or 0
            item.course_name = row['coursename']
            item.course_module_id = row['coursemoduleid']
            item.time_modified = now
            if item.pk is None:
                to_create.append(item)
            else:
                to_update.append(item)

        items.bulk_create(to_create)
        items.bulk_update(
            to_update,
            ['item_type', 'item_name', 'item_sort_order', 'course_name', 'course_module_id', 'time_modified'],
        )
        stale = [item.pk for key, item in existing.items() if key not in seen]
        deleted = db.delete_records(GradeableItem, pk__in=stale) if stale else 0

    quiz_rows = rebuild_quiz_needs_grading(db)
    result = {
        'created': len(to_create),
        'updated': len(to_update),
        'deleted': deleted,
        'quiz_needs_grading': quiz_rows,
    }
    log.info(
        'Grade Me cache refreshed: %(created)d created, %(updated)d updated, %(deleted)d deleted, '
        '%(quiz_needs_grading)d quiz steps waiting for a grade', result,
    )
    return result
