# tests/helpers.py
"""
Sample failures used across the test-suite.

``make_exception`` builds the three-level chain a web request produces when
a database update fails: the request handler wraps the row update failure,
which wraps the database error. Only the database error was raised through
real frames, so only it carries a stack trace.
"""

from causeprint.introspect import CapturedFailure, RawStackElement

DB_MESSAGE = "Database failure\nSELECT FOO, BAR, BAZ\nFROM GNIP\nfailed with ABC123"


class DatabaseError(Exception):

    def __init__(self, message, sql_state, error_code):
        super().__init__(message)
        self.sql_state = sql_state
        self.error_code = error_code


class ChainError(Exception):
    """Plain exception used to build synthetic error graphs."""


def jdbc_update():
    raise DatabaseError(DB_MESSAGE, "ABC", 123)


def update_row():
    try:
        jdbc_update()
    except DatabaseError as exc:
        raise RuntimeError("Failure updating row") from exc


def make_exception():
    """Return (not raise) the outermost error of the chain."""
    try:
        update_row()
    except RuntimeError as exc:
        error = RuntimeError("Request handling exception")
        error.__cause__ = exc
        return error


def make_captured_failure():
    """The same database error as captured from a JVM running Clojure code."""
    return CapturedFailure(
        "java.sql.SQLException",
        "Database failure",
        stack_trace=[
            RawStackElement("user.clj", 7, "user$jdbc_update", "invoke"),
            RawStackElement("user.clj", 19, "user$update_row", "invoke"),
            RawStackElement("AFn.java", 152, "clojure.lang.AFn", "applyToHelper"),
        ],
        properties={"SQLState": "ABC", "errorCode": 123},
    )
