"""Scanner mixins for the plumilla lexer."""

from plumilla.lexer.scanners.block import BlockScannerMixin
from plumilla.lexer.scanners.inline import InlineScannerMixin

__all__ = ["BlockScannerMixin", "InlineScannerMixin"]
