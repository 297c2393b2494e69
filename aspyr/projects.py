from __future__ import annotations

import json
import logging
import re
from typing import Iterable, Sequence

import requests

from aspyr.catalog import index_skills, skill_label
from aspyr.config import Settings, load_settings
from aspyr.models import (
    DIFFICULTY_LEVELS,
    GapAnalysisResult,
    ProjectSuggestion,
    RoleDefinition,
    Skill,
)

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5
JSON_ARRAY = re.compile(r"\[[\s\S]*\]")
SYSTEM_PROMPT = (
    "You are a helpful career advisor that suggests coding projects. Always return valid JSON arrays."
)


def difficulty_for_position(index: int) -> str:
    if index < 2:
        return "beginner"
    if index < 4:
        return "intermediate"
    return "advanced"


def fallback_project_suggestions(
    analysis: GapAnalysisResult,
    catalog: Iterable[Skill],
    role: RoleDefinition,
    user_skills: Sequence[str] = (),
) -> list[ProjectSuggestion]:
    skills_by_id = index_skills(catalog)
    missing = analysis.missing_skills[:MAX_SUGGESTIONS]
    projects: list[ProjectSuggestion] = []

    for idx, skill_id in enumerate(missing):
        label = skill_label(skill_id, skills_by_id)
        projects.append(
            ProjectSuggestion(
                name=f"Build a {label} Project",
                description=(
                    f"Create a practical project using {label} to reinforce your learning and build "
                    f"your portfolio. This project will help you apply {label} concepts in a "
                    "real-world scenario."
                ),
                skills=[skill_id],
                difficulty=difficulty_for_position(idx),
            )
        )

    if len(missing) > 2:
        projects.append(
            ProjectSuggestion(
                name=f"Full-Stack {role.name} Portfolio Project",
                description=(
                    f"Build a complete application that showcases your skills as a {role.name}. "
                    "This project combines multiple technologies and demonstrates your ability to "
                    "work on end-to-end solutions."
                ),
                skills=list(missing),
                difficulty="intermediate",
            )
        )

    return projects[:MAX_SUGGESTIONS]


def build_prompt(
    analysis: GapAnalysisResult,
    catalog: Iterable[Skill],
    role: RoleDefinition,
    user_skills: Sequence[str],
) -> str:
    skills_by_id = index_skills(catalog)

    def labels(ids: Sequence[str]) -> str:
        return ", ".join(skill_label(s, skills_by_id) for s in ids)

    return (
        f"You are a career advisor helping someone become a {role.name}.\n"
        f"The user currently has these skills: {labels(user_skills) or 'none'}\n"
        f"They need to learn these skills: {labels(analysis.missing_skills)}\n"
        f"Their role description: {role.description}\n\n"
        f"Generate {MAX_SUGGESTIONS} project suggestions that will help them learn the missing "
        "skills while building their portfolio.\n"
        "For each project, provide a specific name, a 2-3 sentence description, the missing "
        "skills it focuses on, and a difficulty level (beginner, intermediate, or advanced).\n"
        'Return a JSON array of objects with keys "name", "description", "skills", "difficulty".'
    )


def _skill_list(value) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(s) for s in value]


def parse_suggestions(content: str) -> list[ProjectSuggestion]:
    """Pull the first JSON array out of a model reply (code fences allowed)."""
    match = JSON_ARRAY.search(content or "")
    if not match:
        raise ValueError("No JSON array in completion")
    payload = json.loads(match.group(0))
    if not isinstance(payload, list):
        raise ValueError("Completion JSON is not a list")

    projects: list[ProjectSuggestion] = []
    for item in payload[:MAX_SUGGESTIONS]:
        difficulty = item.get("difficulty") or "intermediate"
        if difficulty not in DIFFICULTY_LEVELS:
            difficulty = "intermediate"
        projects.append(
            ProjectSuggestion(
                name=str(item["name"]),
                description=str(item.get("description", "")),
                skills=_skill_list(item.get("skills")),
                difficulty=difficulty,
            )
        )
    return projects


def _request_completion(prompt: str, settings: Settings) -> str:
    response = requests.post(
        settings.openai_url,
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {settings.openai_api_key}",
        },
        json={
            "model": settings.openai_model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": 0.7,
            "max_tokens": 1000,
        },
        timeout=settings.request_timeout,
    )
    response.raise_for_status()
    payload = response.json()
    return payload["choices"][0]["message"]["content"]


def generate_project_suggestions(
    analysis: GapAnalysisResult,
    catalog: Iterable[Skill],
    role: RoleDefinition,
    user_skills: Sequence[str] = (),
    settings: Settings | None = None,
) -> list[ProjectSuggestion]:
    catalog = list(catalog)
    settings = settings or load_settings()
    if not settings.generation_enabled:
        logger.info("OpenAI API key not configured, using fallback project suggestions")
        return fallback_project_suggestions(analysis, catalog, role, user_skills)

    try:
        content = _request_completion(build_prompt(analysis, catalog, role, user_skills), settings)
        projects = parse_suggestions(content)
    except (requests.RequestException, ValueError, KeyError, TypeError, IndexError, AttributeError) as exc:
        logger.warning("Project generation failed for role %s: %s", role.id, exc)
        return fallback_project_suggestions(analysis, catalog, role, user_skills)

    if not projects:
        logger.warning("Project generation returned no suggestions for role %s", role.id)
        return fallback_project_suggestions(analysis, catalog, role, user_skills)
    return projects
