from __future__ import annotations

import logging

TRACE = 5


def level_label(level: int) -> str:
    """Four-letter console label for a stdlib logging level."""
    if level >= logging.CRITICAL:
        return "crit"
    if level >= logging.ERROR:
        return "fail"
    if level >= logging.WARNING:
        return "warn"
    if level >= logging.INFO:
        return "info"
    if level >= logging.DEBUG:
        return "dbug"
    return "trce"


def syslog_severity(level: int) -> int:
    if level >= logging.CRITICAL:
        return 2
    if level >= logging.ERROR:
        return 3
    if level >= logging.WARNING:
        return 4
    if level >= logging.INFO:
        return 6
    return 7
