"""ContextVar-based compile configuration for plumilla.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set for the duration of a compile call and read by the lexer.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Through the Markdown class
    md = Markdown(CompileConfig(list_indent_width=4))
    html = md("- a\\n    - b")  # Sets config internally via ContextVar

    # Or use the context manager around the stage functions
    with compile_config_context(CompileConfig(heading_rule=False)):
        html = compile("# Title")

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CompileConfig:
    """Immutable compile configuration.

    The defaults reproduce the standard plumilla output. Frozen dataclass
    ensures thread-safety (immutable after creation).

    Attributes:
        list_indent_width: Leading spaces per list nesting level
        heading_rule: Emit a thematic break after every heading

    """

    list_indent_width: int = 2
    heading_rule: bool = True

    def __post_init__(self) -> None:
        if self.list_indent_width < 1:
            raise ValueError(
                f"list_indent_width must be at least 1, got {self.list_indent_width}"
            )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "CompileConfig":
        """Create CompileConfig from a mapping.

        Only includes keys that are valid CompileConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Mapping with config values. Keys should match
                CompileConfig attribute names.

        Returns:
            New CompileConfig instance with values from the mapping.

        Example:
            >>> config = CompileConfig.from_dict({
            ...     "list_indent_width": 4,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.list_indent_width
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: CompileConfig = CompileConfig()

_compile_config: ContextVar[CompileConfig] = ContextVar(
    "compile_config",
    default=_DEFAULT_CONFIG,
)


def get_compile_config() -> CompileConfig:
    """Get current compile configuration (thread-local).

    Returns:
        The active CompileConfig for this thread/context.

    """
    return _compile_config.get()


def set_compile_config(config: CompileConfig) -> None:
    """Set compile configuration for current context.

    Args:
        config: CompileConfig instance to use for this context.

    """
    _compile_config.set(config)


def reset_compile_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.

    """
    _compile_config.set(_DEFAULT_CONFIG)


@contextmanager
def compile_config_context(config: CompileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: CompileConfig to use within the context.

    Yields:
        None

    Example:
        >>> with compile_config_context(CompileConfig(heading_rule=False)):
        ...     html = compile("# Title")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    token = _compile_config.set(config)
    try:
        yield
    finally:
        _compile_config.reset(token)


__all__ = [
    "CompileConfig",
    "get_compile_config",
    "set_compile_config",
    "reset_compile_config",
    "compile_config_context",
]
