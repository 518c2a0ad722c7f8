"""
Celery tasks for Grade Me.
"""

from logging import getLogger

from celery import shared_task
from celery_utils.logged_task import LoggedTask

from grade_me.cache import cache_grade_data
from grade_me.db import GradeMeDatabase

log = getLogger(__name__)


@shared_task(base=LoggedTask, ignore_result=True)
def refresh_grade_me_cache(using='default'):
    """
    Rebuild the gradeable item list and the quiz grading cache on the ``using`` database.
    """
    log.info('Refreshing the Grade Me cache on database %s', using)
    return cache_grade_data(GradeMeDatabase(using=using))
