"""Tree-to-text printing."""

from cssfmt.printer.blocks import print_stylesheet
from cssfmt.printer.context import RenderContext

__all__ = ["RenderContext", "print_stylesheet"]
