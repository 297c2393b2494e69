from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Sequence
from urllib.parse import quote_plus

from aspyr.catalog import index_skills
from aspyr.models import RecommendedResource, RoleDefinition, Skill

ROADMAP_BASE_URL = "https://roadmap.sh"
SEARCH_BASE_URL = "https://www.google.com/search"
MAX_SKILL_RESOURCES = 5

ROLE_ROADMAPS = MappingProxyType(
    {
        "frontend-dev": "frontend",
        "backend-dev": "backend",
        "fullstack-dev": "full-stack",
        "junior-web-dev": "frontend",
        "data-analyst": "data-analyst",
        "devops-engineer": "devops",
        "python-dev": "python",
        "database-admin": "database",
    }
)

# First matching key wins, keep the order.
KEYWORD_ROADMAPS = MappingProxyType(
    {
        "frontend": "frontend",
        "backend": "backend",
        "fullstack": "full-stack",
        "react": "react",
        "nodejs": "nodejs",
        "python": "python",
        "devops": "devops",
        "javascript": "javascript",
        "html": "frontend",
        "css": "frontend",
        "database": "database",
        "data-analyst": "data-analyst",
    }
)

WEB_KEYWORDS = ("web", "html", "css")


def roadmap_path(name: str, role: RoleDefinition | None = None) -> str | None:
    if role is not None and role.id in ROLE_ROADMAPS:
        return ROLE_ROADMAPS[role.id]
    lowered = (name or "").lower()
    for keyword, path in KEYWORD_ROADMAPS.items():
        if keyword in lowered:
            return path
    if any(keyword in lowered for keyword in WEB_KEYWORDS):
        return "frontend"
    return None


def learning_search_url(name: str) -> str:
    query = quote_plus(f"{name} learning resources tutorial")
    return f"{SEARCH_BASE_URL}?q={query}"


def _roadmap_page(path: str) -> str:
    return f"{ROADMAP_BASE_URL}/{path}"


def _skill_resource(label: str, role: RoleDefinition | None) -> RecommendedResource:
    path = roadmap_path(label, role)
    if path:
        return RecommendedResource(
            title=f"Learn {label}",
            url=_roadmap_page(path),
            type="roadmap",
            description=f"Roadmap for {label}",
        )
    return RecommendedResource(
        title=f"Learn {label}",
        url=learning_search_url(label),
        type="web-search",
        description=f"Search for {label} learning resources",
    )


def recommend_resources(
    missing_skills: Sequence[str],
    catalog: Iterable[Skill],
    role: RoleDefinition | None = None,
) -> list[RecommendedResource]:
    resources: list[RecommendedResource] = []

    if role is not None:
        path = roadmap_path(role.name, role)
        if path:
            resources.append(
                RecommendedResource(
                    title=f"{role.name} Roadmap",
                    url=_roadmap_page(path),
                    type="roadmap",
                    description=f"Complete learning path for {role.name}",
                )
            )

    skills_by_id = index_skills(catalog)
    for skill_id in list(missing_skills)[:MAX_SKILL_RESOURCES]:
        skill = skills_by_id.get(skill_id)
        if skill is None:
            resources.append(
                RecommendedResource(
                    title=f"Learn {skill_id}",
                    url=learning_search_url(skill_id),
                    type="web-search",
                    description=f"Search for {skill_id} learning resources",
                )
            )
            continue
        resources.append(_skill_resource(skill.label, role))
    return resources
