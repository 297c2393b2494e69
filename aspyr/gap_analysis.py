from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from aspyr.catalog import index_skills
from aspyr.models import SKILL_CATEGORIES, GapAnalysisResult, RoleDefinition, Skill

logger = logging.getLogger(__name__)


def _dedupe(tokens: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for token in tokens:
        if token in seen:
            continue
        seen.add(token)
        unique.append(token)
    return unique


def _readiness(matched: int, required: int) -> int:
    if required == 0:
        return 100
    # Half-up rounding, 12.5 -> 13.
    return int(math.floor(100.0 * matched / required + 0.5))


def _by_category(missing: list[str], skills_by_id: dict[str, Skill]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {category: [] for category in SKILL_CATEGORIES}
    for skill_id in missing:
        skill = skills_by_id.get(skill_id)
        if skill is None:
            # Still counted in missing_skills and in the readiness denominator.
            logger.debug("Missing skill %r not in catalog; left out of category view", skill_id)
            continue
        grouped.setdefault(skill.category, []).append(skill_id)
    return grouped


def analyze_gaps(
    user_skills: Sequence[str],
    role: RoleDefinition,
    catalog: Iterable[Skill],
) -> GapAnalysisResult:
    normalized = _dedupe(user_skills)
    owned = set(normalized)

    matched: list[str] = []
    missing: list[str] = []
    for requirement in role.required_skills:
        if requirement.skill_id in owned:
            matched.append(requirement.skill_id)
        else:
            missing.append(requirement.skill_id)

    return GapAnalysisResult(
        role_id=role.id,
        normalized_user_skills=normalized,
        matched_skills=matched,
        missing_skills=missing,
        readiness_percent=_readiness(len(matched), len(role.required_skills)),
        missing_skills_by_category=_by_category(missing, index_skills(catalog)),
    )
