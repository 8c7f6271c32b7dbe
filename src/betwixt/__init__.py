from importlib.metadata import PackageNotFoundError, version

from betwixt.markup import preview_replacements
from betwixt.models import DelimiterMode, Match, ReplaceRequest, ReplaceResult, Span
from betwixt.replace import replace_between, replace_between_detailed
from betwixt.scan import scan

try:
    __version__ = version("betwixt")
except PackageNotFoundError:
    # Package is not installed (e.g., running from source/dev)
    __version__ = "0.0.0-dev"

__all__ = [
    "replace_between",
    "replace_between_detailed",
    "preview_replacements",
    "scan",
    "DelimiterMode",
    "Match",
    "ReplaceRequest",
    "ReplaceResult",
    "Span",
    "__version__",
]
