"""Tests for RenderContext and the ContextVar-held default context.

Validates immutability, deeper(), from_dict filtering, context manager
behavior and thread isolation.
"""

from threading import Thread

import pytest

from tsdecl import (
    RenderContext,
    create_interface,
    create_interface_property,
    default_context,
    get_default_context,
    reset_default_context,
    set_default_context,
)


class TestRenderContextDataclass:
    """Test RenderContext frozen dataclass behavior."""

    def test_default_values(self) -> None:
        ctx = RenderContext()
        assert ctx.depth == 0
        assert ctx.indent_unit == "  "
        assert ctx.continuation_indent_unit == "  "
        assert ctx.suppress_comments is False

    def test_immutability(self) -> None:
        ctx = RenderContext()
        with pytest.raises(AttributeError):
            ctx.depth = 3  # type: ignore[misc]

    def test_deeper_increments_depth_only(self) -> None:
        ctx = RenderContext(indent_unit="\t", continuation_indent_unit="    ", suppress_comments=True)
        deeper = ctx.deeper()
        assert deeper.depth == 1
        assert deeper.indent_unit == "\t"
        assert deeper.continuation_indent_unit == "    "
        assert deeper.suppress_comments is True
        # Receiver untouched
        assert ctx.depth == 0

    def test_deeper_chains(self) -> None:
        assert RenderContext().deeper().deeper().deeper().depth == 3

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            RenderContext(depth=-1)


class TestFromDict:
    """Test RenderContext.from_dict."""

    def test_known_keys(self) -> None:
        ctx = RenderContext.from_dict({"depth": 2, "indent_unit": "\t"})
        assert ctx.depth == 2
        assert ctx.indent_unit == "\t"
        assert ctx.suppress_comments is False

    def test_unknown_keys_ignored(self) -> None:
        ctx = RenderContext.from_dict({"suppress_comments": True, "level": 9})
        assert ctx == RenderContext(suppress_comments=True)

    def test_empty_dict_is_default(self) -> None:
        assert RenderContext.from_dict({}) == RenderContext()


class TestDefaultContextFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_default_context()

    def test_default(self) -> None:
        assert get_default_context() == RenderContext()

    def test_set_and_get(self) -> None:
        set_default_context(RenderContext(indent_unit="\t"))
        assert get_default_context().indent_unit == "\t"

    def test_reset_restores_default(self) -> None:
        set_default_context(RenderContext(suppress_comments=True))
        reset_default_context()
        assert get_default_context().suppress_comments is False

    def test_render_without_context_uses_default(self) -> None:
        node = create_interface("A", [create_interface_property("x", "number")])
        set_default_context(RenderContext(indent_unit="\t"))
        assert node.render() == "export interface A {\n\tx: number;\n}"

    def test_render_default_merges_over_active_default(self) -> None:
        node = create_interface("A", [create_interface_property("x", "number")])
        set_default_context(RenderContext(indent_unit="\t"))
        assert node.render_default(depth=1) == "\texport interface A {\n\t\tx: number;\n\t}"


class TestDefaultContextManager:
    """Test default_context context manager."""

    def test_context_sets_default(self) -> None:
        with default_context(RenderContext(indent_unit="    ")):
            assert get_default_context().indent_unit == "    "
        assert get_default_context().indent_unit == "  "

    def test_nested_contexts(self) -> None:
        with default_context(RenderContext(indent_unit="\t")):
            with default_context(RenderContext(suppress_comments=True)):
                assert get_default_context().suppress_comments is True
                assert get_default_context().indent_unit == "  "
            assert get_default_context().indent_unit == "\t"
            assert get_default_context().suppress_comments is False

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with default_context(RenderContext(indent_unit="\t")):
                raise ValueError("test")
        assert get_default_context() == RenderContext()


class TestThreadIsolation:
    """Test thread-local default context isolation."""

    def test_thread_isolation(self) -> None:
        results: dict[int, str | None] = {}
        node = create_interface("A", [create_interface_property("x", "number")])

        def worker(thread_id: int, unit: str) -> None:
            set_default_context(RenderContext(indent_unit=unit))
            results[thread_id] = node.render()

        units = ["  ", "\t", "    "]
        threads = [Thread(target=worker, args=(i, u)) for i, u in enumerate(units)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for i, unit in enumerate(units):
            assert results[i] == f"export interface A {{\n{unit}x: number;\n}}"
        # Main thread unaffected
        assert get_default_context() == RenderContext()
