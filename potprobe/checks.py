"""Run every honeypot probe against one target in a fixed order."""

from __future__ import annotations

from potprobe.banner import check_banner
from potprobe.delay import run_delay_check
from potprobe.disconnect import check_disconnect
from potprobe.helpcheck import check_help
from potprobe.invalid_command import check_invalid_command
from potprobe.none_auth import check_none_auth
from potprobe.probe import CheckResult
from potprobe.protocol_version import check_protocol_version
from potprobe.trash import check_trash

_CHECKS = (
    ("DELAY", run_delay_check),
    ("BANNER", check_banner),
    ("TRASH SEND", check_trash),
    ("INVALID COMMAND", check_invalid_command),
    ("UNEXPECTED DISCONNECT", check_disconnect),
    ('COMMAND "HELP" CHECK', check_help),
    ("NONE AUTH", check_none_auth),
    ("PROTOCOL PROBE", check_protocol_version),
)


def run_checks(target: str) -> list[CheckResult]:
    """Run all probes against ``target`` and collect their results."""
    results = []
    for name, check in _CHECKS:
        details, score = check(target)
        results.append(CheckResult(name=name, details=details, score=int(score)))
    return results