from __future__ import annotations

from dataclasses import dataclass, field

SKILL_CATEGORIES = ("language", "framework", "tool", "soft")
DIFFICULTY_LEVELS = ("beginner", "intermediate", "advanced")
RESOURCE_TYPES = ("roadmap", "web-search")


@dataclass(frozen=True)
class Skill:
    id: str
    label: str
    category: str
    aliases: tuple[str, ...] = ()


@dataclass(frozen=True)
class RoleRequirement:
    skill_id: str
    importance: int


@dataclass(frozen=True)
class RoleDefinition:
    id: str
    name: str
    description: str
    responsibilities: tuple[str, ...] = ()
    required_skills: tuple[RoleRequirement, ...] = ()


@dataclass
class GapAnalysisResult:
    role_id: str
    normalized_user_skills: list[str]
    matched_skills: list[str]
    missing_skills: list[str]
    readiness_percent: int
    missing_skills_by_category: dict[str, list[str]]


@dataclass
class TimelineEvent:
    id: str
    skill_id: str
    skill_name: str
    month: int
    description: str
    completed: bool = False


@dataclass
class RecommendedResource:
    title: str
    url: str
    type: str
    description: str = ""


@dataclass
class ProjectSuggestion:
    name: str
    description: str
    skills: list[str]
    difficulty: str = "intermediate"


@dataclass
class JobStatistics:
    median_pay: str
    number_of_jobs: str
    job_outlook: str
    employment_change: str
    last_updated: str | None = None


@dataclass
class SchoolCourse:
    name: str
    code: str
    description: str
    url: str | None = None


@dataclass
class LearningPlan:
    role: RoleDefinition
    analysis: GapAnalysisResult
    timeline: list[TimelineEvent]
    resources: list[RecommendedResource]
    projects: list[ProjectSuggestion] = field(default_factory=list)
