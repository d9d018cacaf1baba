"""Compile Markdown in one call, or run the three stages yourself."""

from plumilla import build, compile, render, scan

print(compile("# Hello **World**"))

tokens = scan("- one\n  - nested")
tree = build(tokens)
print(render(tree))
