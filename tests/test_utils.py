"""Tests for plumilla utility modules."""

import logging

import pytest

from plumilla import compile


class TestGetLogger:
    def test_prefix_added(self) -> None:
        from plumilla.utils.logger import get_logger

        assert get_logger("mymodule").name == "plumilla.mymodule"

    def test_prefix_not_doubled(self) -> None:
        from plumilla.utils.logger import get_logger

        assert get_logger("plumilla.parser").name == "plumilla.parser"
        assert get_logger("plumilla").name == "plumilla"

    def test_similar_name_is_prefixed(self) -> None:
        from plumilla.utils.logger import get_logger

        assert get_logger("plumillas").name == "plumilla.plumillas"


class TestPipelineLogging:
    def test_debug_records(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="plumilla"):
            compile("# Hi")
        messages = [r.getMessage() for r in caplog.records]
        assert any("tokens" in m for m in messages)
        assert any("blocks" in m for m in messages)
        assert all(r.levelno == logging.DEBUG for r in caplog.records)

    def test_unterminated_fence_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="plumilla"):
            compile("```js\ncode")
        assert any("Unterminated code fence" in r.getMessage() for r in caplog.records)


class TestStringBuilder:
    def test_append_and_build(self) -> None:
        from plumilla.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.append("<p>").append("").append("x").append("</p>")
        assert sb.build() == "<p>x</p>"
        assert sb.size == 8

    def test_empty(self) -> None:
        from plumilla.stringbuilder import StringBuilder

        sb = StringBuilder()
        assert sb.build() == ""
        assert sb.size == 0
