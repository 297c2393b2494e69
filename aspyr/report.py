from __future__ import annotations

from dataclasses import asdict
from typing import Iterable

import pandas as pd

from aspyr.catalog import index_skills, skill_label
from aspyr.models import (
    SKILL_CATEGORIES,
    GapAnalysisResult,
    LearningPlan,
    RecommendedResource,
    Skill,
    TimelineEvent,
)


def timeline_frame(events: Iterable[TimelineEvent]) -> pd.DataFrame:
    rows = [
        {"Month": event.month, "Milestone": event.skill_name, "Details": event.description}
        for event in events
    ]
    return pd.DataFrame(rows, columns=["Month", "Milestone", "Details"])


def category_frame(analysis: GapAnalysisResult, catalog: Iterable[Skill]) -> pd.DataFrame:
    skills_by_id = index_skills(catalog)
    rows = []
    for category in SKILL_CATEGORIES:
        ids = analysis.missing_skills_by_category.get(category, [])
        rows.append(
            {
                "Category": category.title(),
                "Missing": len(ids),
                "Skills": ", ".join(skills_by_id[s].label for s in ids if s in skills_by_id),
            }
        )
    return pd.DataFrame(rows, columns=["Category", "Missing", "Skills"])


def resources_frame(resources: Iterable[RecommendedResource]) -> pd.DataFrame:
    rows = [
        {"Title": r.title, "Type": r.type, "URL": r.url, "Description": r.description}
        for r in resources
    ]
    return pd.DataFrame(rows, columns=["Title", "Type", "URL", "Description"])


def export_payload(plan: LearningPlan, catalog: Iterable[Skill]) -> dict:
    skills_by_id = index_skills(catalog)
    analysis = plan.analysis
    return {
        "role": {"id": plan.role.id, "name": plan.role.name},
        "analysis": {
            **asdict(analysis),
            "matched_labels": [skill_label(s, skills_by_id) for s in analysis.matched_skills],
            "missing_labels": [skill_label(s, skills_by_id) for s in analysis.missing_skills],
        },
        "timeline": [asdict(event) for event in plan.timeline],
        "resources": [asdict(resource) for resource in plan.resources],
        "projects": [asdict(project) for project in plan.projects],
    }
