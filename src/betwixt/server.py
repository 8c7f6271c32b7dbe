from pathlib import Path
from typing import Optional

import structlog
from mcp.server.fastmcp import FastMCP

from betwixt.log import configure_logging

# CRITICAL: Any output to stdout will break the MCP JSON-RPC protocol.
configure_logging()

from betwixt.markup import preview_replacements  # noqa: E402
from betwixt.models import DelimiterMode, ReplaceRequest  # noqa: E402
from betwixt.replace import replace_between_detailed  # noqa: E402
from betwixt.scan import scan  # noqa: E402

logger = structlog.get_logger(__name__)

# Initialize the MCP Server
mcp = FastMCP("Betwixt Replacement Service")


def _read_text(path: str) -> str:
    """Helper to read a UTF-8 text file."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return p.read_text(encoding="utf-8")


def _build_request(
    source: str,
    opening: str,
    closing: str,
    replacement: str,
    case_insensitive: bool,
    strip_delimiters: bool,
    limit: Optional[int],
) -> ReplaceRequest:
    return ReplaceRequest(
        source=source,
        opening=opening,
        closing=closing,
        replacement=replacement,
        case_insensitive=case_insensitive,
        mode=DelimiterMode.STRIP if strip_delimiters else DelimiterMode.PRESERVE,
        limit=limit,
    )


@mcp.tool()
def replace_between_text(
    source: str,
    opening: str,
    closing: str,
    replacement: str,
    case_insensitive: bool = False,
    strip_delimiters: bool = False,
    limit: Optional[int] = None,
) -> str:
    """
    Replaces the text between each OPENING/CLOSING delimiter pair in SOURCE and returns the result.

    Delimiters are literal strings (no regex). Matches never overlap: each one ends at the first
    CLOSING after its OPENING. By default the delimiters themselves are kept; set strip_delimiters
    to replace them too.
    Example: source="token=<secret>", opening="<", closing=">", replacement="***" -> "token=<***>".
    """
    try:
        request = _build_request(source, opening, closing, replacement, case_insensitive, strip_delimiters, limit)
        return replace_between_detailed(request).output
    except Exception as e:
        logger.error(f"replace_between_text failed: {e}")
        return f"Error replacing text: {str(e)}"


@mcp.tool()
def preview_replacements_text(
    source: str,
    opening: str,
    closing: str,
    replacement: str,
    case_insensitive: bool = False,
    strip_delimiters: bool = False,
    limit: Optional[int] = None,
) -> str:
    """
    Shows what replace_between_text would change, as CriticMarkup ({--old--}{++new++}).

    Use this to check which spans match before committing to a replacement.
    """
    try:
        request = _build_request(source, opening, closing, replacement, case_insensitive, strip_delimiters, limit)
        matches = scan(request.source, request.opening, request.closing, request.case_insensitive, request.limit)
        if not matches:
            return "No delimited spans found."
        return preview_replacements(
            request.source,
            matches,
            request.replacement,
            preserve_delimiters=request.mode == DelimiterMode.PRESERVE,
        )
    except Exception as e:
        logger.error(f"preview_replacements_text failed: {e}")
        return f"Error computing preview: {str(e)}"


@mcp.tool()
def replace_between_in_file(
    input_path: str,
    output_path: str,
    opening: str,
    closing: str,
    replacement: str,
    case_insensitive: bool = False,
    strip_delimiters: bool = False,
    limit: Optional[int] = None,
) -> str:
    """
    Applies replace_between_text to a local UTF-8 text file and saves the result to a NEW file,
    leaving the original unchanged.

    Returns the number of replaced spans.
    Note: output_path must be writable. If it exists, it will be overwritten.
    """
    try:
        source = _read_text(input_path)
        request = _build_request(source, opening, closing, replacement, case_insensitive, strip_delimiters, limit)
        result = replace_between_detailed(request)

        Path(output_path).write_text(result.output, encoding="utf-8")

        return f"Replaced {result.match_count} span(s). Saved to: {output_path}"

    except Exception as e:
        logger.error(f"replace_between_in_file failed: {e}")
        return f"Error processing file: {str(e)}"


def run() -> None:
    # Runs the server over stdio
    mcp.run()


if __name__ == "__main__":
    run()
