"""Colorful CLI output helpers."""

import sys

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗


def _supports_color() -> bool:
    """Check if stdout is a terminal."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def header(message: str) -> None:
    """Print header message in blue."""
    print(_colorize(message, BLUE))


def info(message: str) -> None:
    """Print info message with yellow bullet."""
    bullet = _colorize(BULLET, YELLOW)
    print(f"{bullet} {message}")


def error(message: str) -> None:
    """Print error message with red cross."""
    cross = _colorize(CROSS, RED)
    print(f"{cross} {message}", file=sys.stderr)


def task_line(text: str, done: bool, priority: str, due: str = "", overdue: bool = False) -> None:
    """Print one task: check mark when done, bullet when open."""
    mark = _colorize(CHECK, GREEN) if done else _colorize(BULLET, YELLOW)
    parts = [f"{mark} [{priority}] {text}"]
    if due:
        parts.append(_colorize(due, DIM))
    if overdue:
        parts.append(_colorize("OVERDUE", RED))
    print("  ".join(parts))
