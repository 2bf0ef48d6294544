# tests/test_stack.py
"""
Tests for stack-trace expansion and symbolic-name recovery.
"""

import pytest

from causeprint.errors import EmptyStackWarning, IntrospectionError
from causeprint.introspect import (
    CapturedFailure,
    IntrospectorRegistry,
    PythonIntrospector,
    RawStackElement,
)
from causeprint.stack import StackFrameExpander, expand_stack_trace


class TestStackFrameExpander:

    def test_symbolic_frame(self):
        frame = StackFrameExpander().expand_element(
            RawStackElement("core.clj", 12, "my_app.core$process_row__1234", "invoke")
        )
        assert frame.names == ("my-app.core", "process-row")
        assert frame.name == "my-app.core/process-row"
        assert frame.line == "12"
        assert frame.class_name == "my_app.core$process_row__1234"

    def test_nested_function(self):
        frame = StackFrameExpander().expand_element(
            RawStackElement("user.clj", 3, "user$eval1234$fn__1235", "doInvoke")
        )
        assert frame.names == ("user", "eval1234", "fn")

    def test_demangled_function_name(self):
        frame = StackFrameExpander().expand_element(
            RawStackElement("user.clj", 3, "user$valid_QMARK_", "invoke")
        )
        assert frame.name == "user/valid?"

    def test_java_frame_not_symbolic(self):
        frame = StackFrameExpander().expand_element(
            RawStackElement("AFn.java", 18, "clojure.lang.AFn", "applyToHelper")
        )
        assert frame.names == ()
        assert frame.name == ""
        assert frame.method == "applyToHelper"

    def test_clojure_file_other_method_not_symbolic(self):
        frame = StackFrameExpander().expand_element(
            RawStackElement("user.clj", 3, "user$foo", "applyTo")
        )
        assert frame.name == ""

    def test_missing_file_and_line(self):
        frame = StackFrameExpander().expand_element(
            RawStackElement(None, None, "sun.reflect.Generated", "invoke")
        )
        assert frame.file == ""
        assert frame.line == ""
        assert frame.names == ()

    def test_custom_scheme(self):
        expander = StackFrameExpander(
            source_suffix=".cljs", invoke_methods={"call"}, separator="."
        )
        frame = expander.expand_element(
            RawStackElement("app.cljs", 1, "app.core.do_it", "call")
        )
        assert frame.names == ("app", "core", "do-it")

    def test_empty_stack_warns(self):
        with pytest.warns(EmptyStackWarning):
            assert StackFrameExpander().expand([]) == []


class TestExpandStackTrace:

    def test_captured_failure(self, captured_failure):
        frames = expand_stack_trace(captured_failure)
        assert [f.name for f in frames] == ["user/jdbc-update", "user/update-row", ""]

    def test_python_exception_innermost_first(self, request_failure):
        root = request_failure.__cause__.__cause__
        frames = expand_stack_trace(root)
        assert [f.method for f in frames] == ["jdbc_update", "update_row"]
        assert all(f.file == "helpers.py" for f in frames)
        assert all(f.name == "" for f in frames)

    def test_unraised_exception_warns(self):
        with pytest.warns(EmptyStackWarning):
            assert expand_stack_trace(ValueError("never raised")) == []

    def test_failing_introspector(self):
        class NoStack(PythonIntrospector):
            def stack_trace(self, error):
                raise AttributeError("no stack")

        registry = IntrospectorRegistry()
        registry.register(BaseException, NoStack())
        with pytest.raises(IntrospectionError):
            expand_stack_trace(ValueError("x"), registry)

    def test_captured_failure_without_stack_warns(self):
        with pytest.warns(EmptyStackWarning):
            assert expand_stack_trace(CapturedFailure("x.Y")) == []
