"""Remediation text lookup for issues."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from sca_report.models.config import HowToFixRule
from sca_report.models.issue import Issue
from sca_report.resolvers.base import HowToFixTextProvider


class NoHowToFixTextProvider(HowToFixTextProvider):
    """Provider that never has remediation text."""

    def get_how_to_fix_text(self, issue: Issue) -> Optional[str]:
        return None


class ConfiguredHowToFixTextProvider(HowToFixTextProvider):
    """Provide remediation text from rules matching the issue message.

    The first rule whose regular expression is found in the issue message
    wins.
    """

    def __init__(self, rules: Sequence[HowToFixRule]) -> None:
        self._rules = [(re.compile(rule.message), rule.text) for rule in rules]

    def get_how_to_fix_text(self, issue: Issue) -> Optional[str]:
        for pattern, text in self._rules:
            if pattern.search(issue.message):
                return text
        return None
