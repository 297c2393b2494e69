from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Mapping

from aspyr.models import SKILL_CATEGORIES, RoleDefinition, RoleRequirement, Skill

DATA_DIR = Path(__file__).resolve().parent / "data"
SKILLS_PATH = DATA_DIR / "skills.json"
ROLES_PATH = DATA_DIR / "roles.json"


def _read_json(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_skills(path: Path | None = None) -> list[Skill]:
    raw = _read_json(path or SKILLS_PATH)
    skills: list[Skill] = []
    seen: set[str] = set()
    for item in raw["skills"]:
        category = item["category"]
        if category not in SKILL_CATEGORIES:
            raise ValueError(f"Skill {item['id']!r} has unknown category {category!r}")
        if item["id"] in seen:
            raise ValueError(f"Duplicate skill id {item['id']!r}")
        seen.add(item["id"])
        skills.append(
            Skill(
                id=item["id"],
                label=item["label"],
                category=category,
                aliases=tuple(item.get("aliases", [])),
            )
        )
    return skills


def _role_from_dict(item: dict) -> RoleDefinition:
    requirements: list[RoleRequirement] = []
    for req in item.get("requiredSkills", []):
        importance = int(req["importance"])
        if importance not in (1, 2, 3):
            raise ValueError(
                f"Role {item['id']!r} gives {req['skillId']!r} importance {importance}, expected 1-3"
            )
        if any(r.skill_id == req["skillId"] for r in requirements):
            raise ValueError(f"Role {item['id']!r} lists {req['skillId']!r} more than once")
        requirements.append(RoleRequirement(skill_id=req["skillId"], importance=importance))
    return RoleDefinition(
        id=item["id"],
        name=item["name"],
        description=item.get("description", ""),
        responsibilities=tuple(item.get("responsibilities", [])),
        required_skills=tuple(requirements),
    )


def load_roles(path: Path | None = None) -> list[RoleDefinition]:
    raw = _read_json(path or ROLES_PATH)
    roles = [_role_from_dict(item) for item in raw["roles"]]
    ids = [role.id for role in roles]
    if len(ids) != len(set(ids)):
        raise ValueError("Role catalog contains duplicate role ids")
    return roles


def index_skills(catalog: Iterable[Skill]) -> dict[str, Skill]:
    return {skill.id: skill for skill in catalog}


def role_lookup(roles: Iterable[RoleDefinition]) -> dict[str, RoleDefinition]:
    return {role.id: role for role in roles}


def skill_label(skill_id: str, skills_by_id: Mapping[str, Skill]) -> str:
    skill = skills_by_id.get(skill_id)
    return skill.label if skill else skill_id


def suggest_skills(
    query: str,
    catalog: Iterable[Skill],
    exclude: Iterable[str] = (),
    limit: int = 8,
) -> list[Skill]:
    """Return catalog skills whose label or any alias contains ``query``.

    Suggestions are offered to the user to pick from; they are never applied
    to the user's skill list automatically.
    """
    needle = (query or "").strip().lower()
    if not needle or limit <= 0:
        return []
    excluded = set(exclude)
    matches: list[Skill] = []
    for skill in catalog:
        if len(matches) >= limit:
            break
        if skill.id in excluded:
            continue
        if needle in skill.label.lower() or any(needle in alias.lower() for alias in skill.aliases):
            matches.append(skill)
    return matches


def resolve_skill_token(token: str, catalog: Iterable[Skill]) -> str:
    """Map free text to a skill id by exact id, label or alias; otherwise keep the raw token."""
    catalog = list(catalog)
    token = (token or "").strip()
    lowered = token.lower()
    if any(skill.id == token for skill in catalog):
        return token
    for skill in catalog:
        if skill.label.lower() == lowered or any(alias.lower() == lowered for alias in skill.aliases):
            return skill.id
    return token
