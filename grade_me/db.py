"""
Record-oriented access to the host database.

Observers, query builders and the block receive a ``GradeMeDatabase`` rather
than reaching for ``django.db.connection`` themselves, so tests and hosts with
several databases can choose the connection explicitly.
"""

from django.db import DEFAULT_DB_ALIAS, connections, transaction


def dictfetchall(cursor):
    """
    Returns all rows from a cursor as a list of column: value dicts.
    """
    columns = [col[0] for col in cursor.description]
    return [dict(zip(columns, row)) for row in cursor.fetchall()]


class GradeMeDatabase:
    """
    Thin wrapper around one Django database alias.
    """

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def __repr__(self):
        return f'GradeMeDatabase(using={self.using!r})'

    @property
    def connection(self):
        return connections[self.using]

    def atomic(self):
        """
        Atomic block on this database; a savepoint when the host already has a transaction open.
        """
        return transaction.atomic(using=self.using)

    def delete_records(self, model, **filters):
        """
        Delete the rows of ``model`` matching ``filters`` and return how many went.
        """
        deleted, _ = model.objects.using(self.using).filter(**filters).delete()
        return deleted

    def execute(self, sql, params=()):
        """
        Run a statement that returns no rows and return the affected row count.
        """
        with self.connection.cursor() as cursor:
            cursor.execute(sql, list(params))
            return cursor.rowcount

    def get_recordset_sql(self, sql, params=()):
        """
        Yield the rows of a query as dicts, in the order the database returns them.
        """
        with self.connection.cursor() as cursor:
            cursor.execute(sql, list(params))
            yield from dictfetchall(cursor)

    def get_records_sql(self, sql, params=()):
        """
        Return the rows of a query as a dict keyed by each row's first column.

        Later rows win when the first column repeats.
        """
        records = {}
        with self.connection.cursor() as cursor:
            cursor.execute(sql, list(params))
            first_column = cursor.description[0][0]
            for row in dictfetchall(cursor):
                records[row[first_column]] = row
        return records

    def get_fieldset_sql(self, sql, params=()):
        """
        Return the first column of every row of a query.
        """
        with self.connection.cursor() as cursor:
            cursor.execute(sql, list(params))
            return [row[0] for row in cursor.fetchall()]
