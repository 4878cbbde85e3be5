# logger_utils.py - file/console log lines and timing metrics for the CLI

import os
import time
from datetime import datetime
from typing import Optional

# Directory where log files are stored, created on first write
LOG_DIR = "logs"
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "word_frequency.log")


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(self, path: Optional[str] = None, use_color: bool = True, echo: bool = True):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.echo = echo

    def write(self, level: str, msg: str) -> str:
        """
        Append one entry to the log file and echo it to the console.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        _append(self.path, line)

        if self.echo:
            if self.use_color and level in self.COLORS:
                print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
            else:
                print(line)
        return line

    def debug(self, msg: str) -> str:
        return self.write("DEBUG", msg)

    def info(self, msg: str) -> str:
        return self.write("INFO", msg)

    def warning(self, msg: str) -> str:
        return self.write("WARNING", msg)

    def error(self, msg: str) -> str:
        return self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> str:
        """
        Record a metric such as a timing or a count.
        Example line: [12:45:02] count done: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        _append(self.path, line)
        if self.echo:
            print(line)
        return line

    def time_block(self, label: str) -> "_Timer":
        """
        Measure how long a block takes and record it as a metric:
            with log.time_block("aggregate"):
                do_some_work()
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used by Log.time_block."""
    def __init__(self, log: Log, label: str):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        self.log.metric(f"{self.label} done", self.elapsed, "s")
        return False


def _append(path: str, line: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")
