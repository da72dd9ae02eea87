from datetime import date
from decimal import Decimal

import pytest

from src.printpress.printpress.core.enums import TaskStatus
from src.printpress.printpress.database.bootstrap import iter_sql_statements
from src.printpress.printpress.database.mysql_base import build_set_clause
from src.printpress.printpress.finance.mysql_finance_repository import MySQLDeductionRepository


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.rowcount = 0

    def execute(self, sql, params=()):
        if self._conn.fail_on and self._conn.fail_on in sql:
            raise RuntimeError("boom")
        self._conn.executed.append((" ".join(sql.split()), params))
        self.rowcount = 1

    def close(self):
        pass


class FakeConnection:
    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.executed = []
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return FakeCursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeFactory:
    def __init__(self, conn):
        self._conn = conn

    def connect(self):
        return self._conn


def test_deduction_insert_and_advance_update_share_one_transaction():
    conn = FakeConnection()
    repo = MySQLDeductionRepository(FakeFactory(conn))

    repo.create(employee_id="e1", amount=Decimal("50"), deduction_date=date(2024, 3, 1), advance_id="a1")

    statements = [sql for sql, _ in conn.executed]
    assert statements[0].startswith("INSERT INTO salary_deductions")
    assert statements[1] == "UPDATE advances SET is_paid=1 WHERE id=%s"
    assert conn.committed and not conn.rolled_back


def test_failed_advance_update_rolls_back_the_deduction():
    conn = FakeConnection(fail_on="UPDATE advances")
    repo = MySQLDeductionRepository(FakeFactory(conn))

    with pytest.raises(RuntimeError):
        repo.create(employee_id="e1", amount=Decimal("50"), deduction_date=date(2024, 3, 1), advance_id="a1")

    assert conn.rolled_back and not conn.committed


def test_iter_sql_statements_keeps_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES (\"c\");\n"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", 'INSERT INTO t VALUES ("c")']


def test_build_set_clause_maps_columns_and_enum_values():
    sql, params = build_set_clause({"status": TaskStatus.COMPLETED, "title": "X"}, {"status": "status", "title": "title"})

    assert sql == "status=%s, title=%s"
    assert params == ["Completed", "X"]
