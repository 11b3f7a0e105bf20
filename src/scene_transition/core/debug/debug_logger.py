"""
debug_logger.py
---------------
Category-filtered console logger for the transition pipeline.

Every phase line, barrier trace and loader step goes through DebugLogger,
so one category table and one level decide what reaches the console.

Levels, from least to most verbose: NONE, ERROR, WARN, INFO, VERBOSE.
Warnings and failures ignore the category table.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Mutable switches read on every log call."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"

    CATEGORIES = {
        "system": True,
        "config": False,
        "transition": True,     # [STM] phase lines
        "barrier": True,        # blocking operation traces
        "hooks": False,         # subscribe/unsubscribe chatter
        "loading": True,
        "scene": True,
        "ui": False,
    }

    SHOW_TIMESTAMP = True
    SHOW_SOURCE = True


class Colors:
    """ANSI escape codes."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


SEVERITY = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

# tag -> (color, severity)
TAGS = {
    "INIT": (Colors.WHITE, "INFO"),
    "SYSTEM": (Colors.MAGENTA, "INFO"),
    "STATE": (Colors.CYAN, "INFO"),
    "ACTION": (Colors.GREEN, "INFO"),
    "TRACE": (Colors.BLUE, "VERBOSE"),
    "WARN": (Colors.YELLOW, "WARN"),
    "FAIL": (Colors.RED, "ERROR"),
}


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger. All methods are safe to call before configure()."""

    LINE_LENGTH = 59
    STATUS_COLUMN = 30

    @staticmethod
    def configure(level: str = None, enabled: bool = None, **categories):
        """
        Adjust logging at runtime.

        Args:
            level: One of SEVERITY's keys
            enabled: Master switch
            **categories: category=True/False overrides

        Raises:
            ValueError: For an unknown level
        """
        if level is not None:
            level = level.upper()
            if level not in SEVERITY:
                raise ValueError(f"Unknown log level: {level}")
            LoggerConfig.LOG_LEVEL = level
        if enabled is not None:
            LoggerConfig.ENABLE_LOGGING = enabled
        LoggerConfig.CATEGORIES.update(categories)

    @staticmethod
    def is_enabled(category: str, tag: str = "STATE") -> bool:
        """Whether a message with this tag and category would be printed."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        severity = SEVERITY[TAGS[tag][1]]
        if severity > SEVERITY.get(LoggerConfig.LOG_LEVEL, SEVERITY["INFO"]):
            return False
        if severity <= SEVERITY["WARN"]:
            return True
        return LoggerConfig.CATEGORIES.get(category, False)

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Startup line. An empty message prints a blank line."""
        if not msg.strip():
            if LoggerConfig.ENABLE_LOGGING:
                print()
            return
        DebugLogger._emit("INIT", msg, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "transition"):
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "barrier"):
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._emit("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._emit("FAIL", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Ruled header separating startup stages."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        heading = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{Colors.WHITE}{rule}\n{heading}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """
        Dotted status line, e.g. ``> TransitionScheduler ........ [OK]``.
        """
        if not LoggerConfig.ENABLE_LOGGING:
            return
        label = f"> {module}".ljust(DebugLogger.STATUS_COLUMN)
        badge = f"[{status}]"
        dots = "." * max(DebugLogger.LINE_LENGTH - len(label) - len(badge) - 1, 1)
        color = Colors.RED if status.upper() == "FAIL" else Colors.GREEN
        print(f"{Colors.WHITE}{label}{dots} {color}{badge}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Indented detail under the last init_entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{' ' * (level * 4)}• {Colors.WHITE}{detail}{Colors.RESET}")

    # ===========================================================
    # Internal
    # ===========================================================

    @staticmethod
    def _emit(tag: str, msg: str, category: str):
        if not DebugLogger.is_enabled(category, tag):
            return
        color = TAGS[tag][0]
        parts = []
        if LoggerConfig.SHOW_TIMESTAMP:
            parts.append(f"[{datetime.now():%H:%M:%S}] ")
        if LoggerConfig.SHOW_SOURCE:
            parts.append(f"[{DebugLogger._caller()}]")
        parts.append(f"[{tag}] ")
        print(f"{color}{''.join(parts)}{msg}{Colors.RESET}")

    @staticmethod
    def _caller() -> str:
        """Class name of the first frame outside this module, else its file name."""
        frame = sys._getframe(1)
        while frame is not None and frame.f_globals.get("__name__") == __name__:
            frame = frame.f_back
        if frame is None:
            return "Unknown"

        owner = frame.f_locals.get("self", frame.f_locals.get("cls"))
        if owner is not None:
            return owner.__name__ if isinstance(owner, type) else type(owner).__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
        return "".join(part.capitalize() for part in module[:-3].split("_"))
