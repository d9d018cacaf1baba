"""Write a standalone HTML preview of a Markdown file.

Usage:
    python preview_page.py notes.md notes.html
"""

import sys
from pathlib import Path

from plumilla import CompileConfig, Markdown


def main(source: Path, target: Path) -> None:
    md = Markdown(CompileConfig(list_indent_width=4))
    page = md.compile_document(source.read_text(encoding="utf-8"), title=source.stem)
    target.write_text(page, encoding="utf-8")


if __name__ == "__main__":
    main(Path(sys.argv[1]), Path(sys.argv[2]))
