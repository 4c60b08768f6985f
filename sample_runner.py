# sample_runner.py
"""Console helpers shared by every sample: error reporting, prompts and output framing."""

import sys
import traceback
from typing import Callable, Optional

from googleapiclient.errors import HttpError

from youtube_client import http_error_code, http_error_message

BANNER_WIDTH = 18
SEPARATOR = "\n-------------------------------------------------------------\n"


def safe_print(*args, **kwargs):
    """Helper wrapper for consistent output to console."""
    print(*args, **kwargs)


def run_sample(body: Callable[[], Optional[int]]) -> int:
    """Run a sample body. Any failure is printed and ends the command with status 1."""
    try:
        return body() or 0
    except HttpError as e:
        safe_print(f"HttpError code: {http_error_code(e)} : {http_error_message(e)}", file=sys.stderr)
        traceback.print_exc()
    except OSError as e:
        safe_print("IOError:", e, file=sys.stderr)
        traceback.print_exc()
    except Exception as e:
        safe_print("Unexpected error:", e, file=sys.stderr)
        traceback.print_exc()
    return 1


def prompt(text: str, default: Optional[str] = None, required_message: Optional[str] = None) -> str:
    """Ask for one line on stdin. Empty input falls back to `default` or exits."""
    safe_print(text, end="", flush=True)
    answer = sys.stdin.readline().strip()
    if answer:
        return answer
    if default is not None:
        return default
    safe_print(required_message or "A value is required.", file=sys.stderr)
    sys.exit(1)


def usage_error(message: str) -> int:
    safe_print(message, file=sys.stderr)
    return 1


def print_banner(title: str):
    bar = "=" * BANNER_WIDTH
    safe_print(f"\n{bar} {title} {bar}\n")


def print_separator():
    safe_print(SEPARATOR)


def print_fields(*pairs):
    """Print `  - Label: value` lines."""
    for label, value in pairs:
        safe_print(f"  - {label}: {value}")
