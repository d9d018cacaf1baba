"""
plumilla: a small Markdown to HTML compiler

Three stages run in strict order: the lexer turns source text into a flat
token list, the parser builds an immutable document tree, and the renderer
walks the tree to produce compact HTML.

Quick Start:
    >>> from plumilla import compile
    >>> compile("# Hello")
    '<h1>Hello</h1><hr>'

    >>> # Run the stages one at a time
    >>> from plumilla import build, render, scan
    >>> tokens = scan("**bold** and _italic_")
    >>> render(build(tokens))
    '<p><b>bold</b> and <i>italic</i></p>'

    >>> # Or keep a configured compiler around
    >>> from plumilla import CompileConfig, Markdown
    >>> md = Markdown(CompileConfig(heading_rule=False))
    >>> md("# Hello")
    '<h1>Hello</h1>'
"""

from collections.abc import Sequence

from plumilla.config import (
    CompileConfig,
    compile_config_context,
    get_compile_config,
    reset_compile_config,
    set_compile_config,
)
from plumilla.document import DEFAULT_STYLESHEET, DEFAULT_TITLE, wrap_document
from plumilla.errors import (
    ExhaustedTokensError,
    MalformedInputError,
    ParseError,
    PlumillaError,
    RenderError,
    ScanError,
    UnexpectedTokenError,
    UnknownNodeKindError,
)
from plumilla.lexer import Lexer
from plumilla.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Heading,
    Image,
    Inline,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    QuoteItem,
    Text,
    ThematicBreak,
)
from plumilla.parser import Parser
from plumilla.renderers.html import HtmlRenderer
from plumilla.tokens import Token, TokenType
from plumilla.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)

# The renderer keeps no per-call state, so one instance serves every caller
_renderer = HtmlRenderer()


def scan(source: str) -> list[Token]:
    """Tokenize Markdown source.

    Args:
        source: Markdown source text

    Returns:
        Tokens in source order; ends with a LineBreakToken unless empty

    Raises:
        MalformedInputError: If a recognized construct is internally inconsistent.
    """
    tokens = list(Lexer(source).tokenize())
    logger.debug("Scanned %d characters into %d tokens", len(source), len(tokens))
    return tokens


def build(tokens: Sequence[Token]) -> Document:
    """Build a document tree from tokens.

    Raises:
        UnexpectedTokenError: If a token appears where the grammar forbids it.
        ExhaustedTokensError: If the tokens end inside a construct.
    """
    return Parser(tokens).parse()


def render(tree: Document) -> str:
    """Render a document tree to HTML.

    Raises:
        UnknownNodeKindError: If the tree holds a node with no emitter.
    """
    return _renderer.render(tree)


def compile(source: str) -> str:
    """Compile Markdown source to an HTML fragment.

    Equivalent to ``render(build(scan(source)))``; errors from any stage
    propagate unchanged.

    Example:
        >>> compile("- a\\n  - b")
        '<ul><li>a<ul><li>b</li></ul></li></ul>'
    """
    return render(build(scan(source)))


def compile_document(source: str, *, title: str = DEFAULT_TITLE) -> str:
    """Compile Markdown source to a complete HTML page."""
    return wrap_document(compile(source), title=title)


class Markdown:
    """Compiler bound to one CompileConfig.

    Usage:
        >>> md = Markdown(CompileConfig(list_indent_width=4))
        >>> md("- a\\n    - b")
        '<ul><li>a<ul><li>b</li></ul></li></ul>'

        >>> # Access the intermediate stages
        >>> doc = md.build(md.scan("# Heading"))
        >>> doc.children[0].level
        1

    Thread Safety:
        The config is applied through a ContextVar for the duration of each
        call only. Instances may be shared between threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: CompileConfig | None = None) -> None:
        """Initialize the compiler.

        Args:
            config: Configuration for every call (defaults if None)
        """
        self._config = config or CompileConfig()

    @property
    def config(self) -> CompileConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Compile Markdown source to an HTML fragment."""
        with compile_config_context(self._config):
            return compile(source)

    def scan(self, source: str) -> list[Token]:
        """Tokenize with this compiler's configuration."""
        with compile_config_context(self._config):
            return scan(source)

    def build(self, tokens: Sequence[Token]) -> Document:
        """Build a document tree from tokens."""
        with compile_config_context(self._config):
            return build(tokens)

    def render(self, tree: Document) -> str:
        """Render a document tree to HTML."""
        return render(tree)

    def compile_document(self, source: str, *, title: str = DEFAULT_TITLE) -> str:
        """Compile Markdown source to a complete HTML page."""
        with compile_config_context(self._config):
            return compile_document(source, title=title)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "scan",
    "build",
    "render",
    "compile",
    "compile_document",
    "wrap_document",
    "Markdown",
    # Configuration
    "CompileConfig",
    "compile_config_context",
    "get_compile_config",
    "reset_compile_config",
    "set_compile_config",
    # Document shell
    "DEFAULT_STYLESHEET",
    "DEFAULT_TITLE",
    # Pipeline stages
    "Lexer",
    "Parser",
    "HtmlRenderer",
    # Tokens
    "Token",
    "TokenType",
    # Nodes
    "Node",
    "Block",
    "Inline",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "QuoteItem",
    "List",
    "ListItem",
    "ThematicBreak",
    "Image",
    "Text",
    "Link",
    "CodeSpan",
    # Errors
    "PlumillaError",
    "ScanError",
    "MalformedInputError",
    "ParseError",
    "UnexpectedTokenError",
    "ExhaustedTokensError",
    "RenderError",
    "UnknownNodeKindError",
]
