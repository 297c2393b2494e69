from __future__ import annotations

from typing import Iterable, Sequence

from aspyr.config import Settings, load_settings
from aspyr.gap_analysis import analyze_gaps
from aspyr.models import LearningPlan, RoleDefinition, Skill
from aspyr.projects import generate_project_suggestions
from aspyr.resources import recommend_resources
from aspyr.timeline import generate_timeline, order_by_importance


def build_learning_plan(
    user_skills: Sequence[str],
    role: RoleDefinition,
    catalog: Iterable[Skill],
    horizon_months: int | None = None,
    settings: Settings | None = None,
) -> LearningPlan:
    """Rebuild every derived view for one (skills, role) pair.

    Nothing is cached or updated in place; call again whenever the user's
    skills, the role or the horizon change.
    """
    catalog = list(catalog)
    settings = settings or load_settings()
    horizon = horizon_months or settings.horizon_months

    analysis = analyze_gaps(user_skills, role, catalog)
    timeline = generate_timeline(analysis, catalog, role, horizon)
    prioritized = order_by_importance(analysis.missing_skills, role)
    resources = recommend_resources(prioritized, catalog, role)
    projects = generate_project_suggestions(
        analysis, catalog, role, analysis.normalized_user_skills, settings=settings
    )
    return LearningPlan(
        role=role,
        analysis=analysis,
        timeline=timeline,
        resources=resources,
        projects=projects,
    )
