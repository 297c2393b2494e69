from __future__ import annotations

import math
from typing import Iterable

from aspyr.catalog import index_skills
from aspyr.models import GapAnalysisResult, RoleDefinition, Skill, TimelineEvent

APPLY_DESCRIPTION = "Start applying for positions and prepare for interviews"


def _apply_for_jobs(month: int) -> TimelineEvent:
    return TimelineEvent(
        id="apply-jobs",
        skill_id="jobs",
        skill_name="Apply for Jobs",
        month=month,
        description=APPLY_DESCRIPTION,
    )


def _ready_timeline() -> list[TimelineEvent]:
    return [
        TimelineEvent(
            id="ready",
            skill_id="ready",
            skill_name="You're Ready!",
            month=1,
            description=(
                "You have all the required skills. Start applying for jobs and preparing for interviews."
            ),
        ),
        _apply_for_jobs(2),
    ]


def order_by_importance(missing_skills: list[str], role: RoleDefinition) -> list[str]:
    """Most important first; equal importance keeps the analyzer's order."""
    weights = {req.skill_id: req.importance for req in role.required_skills}
    return sorted(missing_skills, key=lambda skill_id: weights.get(skill_id, 0), reverse=True)


def plan_months(skill_count: int, horizon_months: int) -> tuple[int, int]:
    """Return ``(effective_months, skills_per_month)`` for a timeline.

    The last effective month is reserved for the job-search milestone, so
    skills are spread over ``effective_months - 1`` months.
    """
    effective = max(2, min(horizon_months, skill_count + 1))
    per_month = max(1, math.ceil(skill_count / (effective - 1)))
    return effective, per_month


def generate_timeline(
    analysis: GapAnalysisResult,
    catalog: Iterable[Skill],
    role: RoleDefinition,
    horizon_months: int = 12,
) -> list[TimelineEvent]:
    if not analysis.missing_skills:
        return _ready_timeline()

    skills_by_id = index_skills(catalog)
    ordered = order_by_importance(analysis.missing_skills, role)
    effective, per_month = plan_months(len(ordered), horizon_months)

    events: list[TimelineEvent] = []
    month = 1
    cursor = 0
    while cursor < len(ordered) and month < effective:
        chunk = ordered[cursor : cursor + per_month]
        for skill_id in chunk:
            skill = skills_by_id.get(skill_id)
            if skill is None:
                continue
            events.append(
                TimelineEvent(
                    id=f"{skill_id}-{month}",
                    skill_id=skill_id,
                    skill_name=skill.label,
                    month=month,
                    description=f"Learn {skill.label} fundamentals and practice with projects",
                )
            )
        cursor += len(chunk)
        month += 1

    events.append(_apply_for_jobs(effective))
    return events
