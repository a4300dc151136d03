"""Automated checks to highlight registry problems."""

from __future__ import annotations

from dataclasses import dataclass

from ..app import HookApp
from ..domain.scope import callback_attribute


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(app: HookApp) -> list[ChecklistIssue]:
    issues: list[ChecklistIssue] = []
    prefix = app.config.callback_prefix

    for event_name in app.events.event_names():
        records = app.events.records(event_name)
        if not records:
            issues.append(
                ChecklistIssue("warning", f"Event '{event_name}' has no listeners left.")
            )
            continue

        dead = sum(1 for record in records if record.is_dead)
        if dead:
            issues.append(
                ChecklistIssue(
                    "warning",
                    f"Event '{event_name}' has {dead} dead listener slot(s).",
                )
            )

        attribute = callback_attribute(event_name, prefix)
        for record in records:
            scope = record.scope
            if scope is None:
                continue
            if not callable(getattr(scope, attribute, None)):
                issues.append(
                    ChecklistIssue(
                        "error",
                        f"Scope {record.identity_key!r} listens to '{event_name}' "
                        f"but has no callable {attribute}.",
                    )
                )

    return issues
