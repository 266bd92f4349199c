"""
Unified logging for the asset compiler.

Console output goes to stderr so stdout stays reserved for the extracted
JSON. An optional log file receives the same lines without colours.
Tracks warnings and errors for end-of-run summary.

Usage:
    from asset_compiler.utils import log, logWarning, logError, logDebug, init_logging, print_summary

    # At start of main script:
    init_logging()                       # console only
    init_logging(Path("extract.log"))    # console + file

    # Throughout code:
    log("Projecting sprite parameters...")    # Info - section headers, major points
    logWarning("key '?' is not numeric")      # May cause issues with output
    logError("missing enumeration entry")     # Fundamentally breaks output
    logDebug("descriptor 12 -> Tower")        # Useful for debugging

    # At end:
    print_summary()  # Shows warning/error counts
"""

import sys
import atexit
from pathlib import Path
from datetime import datetime
from typing import List, Optional, Tuple

# ANSI color codes
class Colors:
    YELLOW = '\033[93m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    BOLD = '\033[1m'
    RESET = '\033[0m'


# Module state
_log_file = None
_log_path = None
_initialized = False
_atexit_registered = False
_warnings: List[str] = []
_errors: List[str] = []


def init_logging(log_path: Optional[Path] = None):
    """
    Initialize logging to the console and, optionally, a file.

    Args:
        log_path: Path to log file. None logs to the console only.
    """
    global _log_file, _log_path, _initialized, _atexit_registered, _warnings, _errors

    if _initialized:
        return

    _warnings = []
    _errors = []
    _initialized = True

    if log_path is None:
        return

    _log_path = Path(log_path)
    _log_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        _log_file = open(_log_path, 'w', encoding='utf-8')

        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        _log_file.write(f"Extraction started: {timestamp}\n")
        _log_file.write("=" * 70 + "\n\n")
        _log_file.flush()

        if not _atexit_registered:
            atexit.register(close_logging)
            _atexit_registered = True

    except OSError as e:
        print(f"Warning: Could not open log file {_log_path}: {e}", file=sys.stderr)
        _log_file = None


def close_logging():
    """Close the log file and reset state."""
    global _log_file, _log_path, _initialized

    if _log_file is not None:
        try:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
            _log_file.write(f"\n{'=' * 70}\n")
            _log_file.write(f"Extraction finished: {timestamp}\n")
            _log_file.close()
        except OSError:
            pass
        _log_file = None

    _log_path = None
    _initialized = False


def print_summary():
    """
    Print a summary of warnings and errors at the end of the run.
    Uses colors for terminal output.
    """
    log("\n" + "=" * 70)
    log("EXTRACTION SUMMARY")
    log("=" * 70)

    if _errors:
        _console(f"\n{Colors.RED}{Colors.BOLD}Errors ({len(_errors)}):{Colors.RESET}")
        for err in _errors:
            _console(f"  {Colors.RED}- {err}{Colors.RESET}")
        _write_to_file(f"\nErrors ({len(_errors)}):")
        for err in _errors:
            _write_to_file(f"  - {err}")

    if _warnings:
        _console(f"\n{Colors.YELLOW}{Colors.BOLD}Warnings ({len(_warnings)}):{Colors.RESET}")
        for warn in _warnings:
            _console(f"  {Colors.YELLOW}- {warn}{Colors.RESET}")
        _write_to_file(f"\nWarnings ({len(_warnings)}):")
        for warn in _warnings:
            _write_to_file(f"  - {warn}")

    _console()
    if _errors:
        _console(f"{Colors.RED}{Colors.BOLD}{len(_errors)} Error(s){Colors.RESET}", end="")
    else:
        _console(f"{Colors.GREEN}0 Errors{Colors.RESET}", end="")

    _console(" | ", end="")

    if _warnings:
        _console(f"{Colors.YELLOW}{Colors.BOLD}{len(_warnings)} Warning(s){Colors.RESET}")
    else:
        _console(f"{Colors.GREEN}0 Warnings{Colors.RESET}")

    _write_to_file(f"\n{len(_errors)} Error(s) | {len(_warnings)} Warning(s)")


def get_counts() -> Tuple[int, int]:
    """Return (error_count, warning_count)."""
    return len(_errors), len(_warnings)


def _console(msg: str = "", end: str = "\n"):
    print(msg, end=end, file=sys.stderr)


def _write_to_file(msg: str, end: str = "\n"):
    """Write message to log file."""
    if _log_file is not None:
        try:
            _log_file.write(msg + end)
            _log_file.flush()
        except OSError:
            pass


def log(msg: str = "", end: str = "\n"):
    """
    Log an info message to the console and file.
    Use for section headers and major points in the run.
    """
    if not _initialized:
        init_logging()

    _console(msg, end=end)
    _write_to_file(msg, end)


def logWarning(msg: str, end: str = "\n"):
    """
    Log a warning message. Warnings indicate something may cause issues with output.
    Displayed in yellow. Tracked for end-of-run summary.
    """
    if not _initialized:
        init_logging()

    formatted = f"Warning: {msg}"
    _console(f"{Colors.YELLOW}{formatted}{Colors.RESET}", end=end)
    _write_to_file(formatted, end)
    _warnings.append(msg)


def logError(msg: str, end: str = "\n"):
    """
    Log an error message. Errors indicate something fundamentally breaks the output.
    Displayed in red. Tracked for end-of-run summary.
    """
    if not _initialized:
        init_logging()

    formatted = f"ERROR: {msg}"
    _console(f"{Colors.RED}{formatted}{Colors.RESET}", end=end)
    _write_to_file(formatted, end)
    _errors.append(msg)


def logDebug(msg: str, end: str = "\n"):
    """
    Log a debug message. Only written to log file, not shown in console.
    """
    if not _initialized:
        init_logging()

    _write_to_file(f"[DEBUG] {msg}", end)
