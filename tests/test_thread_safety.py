"""Thread safety tests for the compile pipeline.

The pipeline keeps all state per call and configuration in a ContextVar.
These tests run it from a thread pool and check that results match the
single-threaded output exactly.
"""

from concurrent.futures import ThreadPoolExecutor

from plumilla import CompileConfig, Markdown, compile
from plumilla.renderers.html import HtmlRenderer

SOURCES = [
    "# Title\n\nSome **bold** text\nwrapped.",
    "- a\n  - b\n    - c\n- d",
    "> quote\n>\n> > nested",
    "```py\nprint('x')\n```\n\n---",
    "![img](a.png)\n\n[link](b.html) and `code`sh",
]


class TestConcurrentCompile:
    def test_results_match_sequential(self) -> None:
        expected = [compile(source) for source in SOURCES]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(compile, SOURCES * 25))
        assert results == expected * 25

    def test_shared_markdown_instances(self) -> None:
        plain = Markdown(CompileConfig(heading_rule=False))
        ruled = Markdown()

        def work(i: int) -> tuple[int, str]:
            md = plain if i % 2 else ruled
            return i, md("# Hi")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(work, range(100)))

        for i, html in results:
            assert html == ("<h1>Hi</h1>" if i % 2 else "<h1>Hi</h1><hr>")

    def test_shared_renderer(self) -> None:
        from plumilla import build, scan

        renderer = HtmlRenderer()
        docs = [build(scan(source)) for source in SOURCES]
        expected = [renderer.render(doc) for doc in docs]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(renderer.render, docs * 20))
        assert results == expected * 20
