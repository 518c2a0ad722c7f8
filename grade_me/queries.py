"""
Shared pieces of the gradeable-item queries.

A full query is ``query_prefix() + fragment + query_suffix(module)``, where the
fragment comes from one of the ``grade_me.plugins`` query builders. The
prefix opens a subquery selecting the ``bgm`` columns, the fragment adds its
own columns, ``FROM`` and an open ``WHERE`` clause, and the suffix restricts
to one course and module before closing the subquery. The suffix takes one
positional parameter, the course id, after the fragment's parameters.
"""

import time

from .config import get_max_age
from .constants import DAYSECS, GRADEABLE_MODULES


def query_prefix():
    return (
        'SELECT * FROM (SELECT bgm.courseid, bgm.coursename, bgm.itemmodule, bgm.iteminstance, bgm.itemname, '
        'bgm.coursemoduleid, bgm.itemsortorder'
    )


def query_suffix(module, now=None):
    """
    Close a gradeable query for ``module``, applying the maximum submission age when one is set.
    """
    if module not in GRADEABLE_MODULES:
        raise ValueError(f'Unknown gradeable module: {module}')

    sql = f"""
             AND bgm.courseid = %s
             AND bgm.itemmodule = '{module}') gradeables"""

    max_age = get_max_age()
    if max_age:
        now = time.time() if now is None else now
        oldest = int(now) - max_age * DAYSECS
        sql += f'\n       WHERE timesubmitted >= {oldest}'
    return sql


def in_clause(values):
    """
    Return an ``IN (%s,...)`` clause and its parameters for a non-empty sequence.
    """
    values = list(values)
    if not values:
        raise ValueError('in_clause needs at least one value')
    placeholders = ','.join(['%s'] * len(values))
    return f'IN ({placeholders})', values
