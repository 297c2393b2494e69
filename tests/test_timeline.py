from __future__ import annotations

from aspyr.gap_analysis import analyze_gaps
from aspyr.models import RoleDefinition, RoleRequirement, Skill
from aspyr.timeline import generate_timeline, order_by_importance, plan_months

CATALOG = [Skill(id=f"s{i}", label=f"Skill {i}", category="tool") for i in range(12)]


def _role(*requirements: tuple[str, int]) -> RoleDefinition:
    return RoleDefinition(
        id="test-role",
        name="Test Role",
        description="",
        required_skills=tuple(RoleRequirement(skill_id=s, importance=i) for s, i in requirements),
    )


def _timeline(role: RoleDefinition, horizon: int, owned: list[str] | None = None, catalog=CATALOG):
    analysis = analyze_gaps(owned or [], role, catalog)
    return generate_timeline(analysis, catalog, role, horizon)


def test_no_missing_skills_gives_two_milestones():
    role = _role(("s0", 3), ("s1", 1))
    events = _timeline(role, horizon=1, owned=["s0", "s1"])
    assert [(e.id, e.month) for e in events] == [("ready", 1), ("apply-jobs", 2)]
    assert events[0].skill_name == "You're Ready!"
    assert events[1].skill_name == "Apply for Jobs"
    assert not any(e.completed for e in events)


def test_five_missing_skills_one_per_month():
    role = _role(*[(f"s{i}", 2) for i in range(5)])
    events = _timeline(role, horizon=12)
    assert [(e.skill_id, e.month) for e in events] == [
        ("s0", 1),
        ("s1", 2),
        ("s2", 3),
        ("s3", 4),
        ("s4", 5),
        ("jobs", 6),
    ]
    assert events[0].id == "s0-1"
    assert events[0].description == "Learn Skill 0 fundamentals and practice with projects"


def test_importance_ordering_is_stable():
    role = _role(("s0", 1), ("s1", 3), ("s2", 3), ("s3", 2))
    events = _timeline(role, horizon=12)
    assert [e.skill_id for e in events[:-1]] == ["s1", "s2", "s3", "s0"]


def test_unknown_importance_sorts_last():
    role = _role(("s0", 1), ("s1", 3))
    assert order_by_importance(["s9", "s0", "s1"], role) == ["s1", "s0", "s9"]


def test_short_horizon_packs_several_skills_per_month():
    role = _role(*[(f"s{i}", 2) for i in range(5)])
    events = _timeline(role, horizon=3)
    assert plan_months(5, 3) == (3, 3)
    assert [e.month for e in events] == [1, 1, 1, 2, 2, 3]
    assert events[-1].skill_id == "jobs"


def test_horizon_of_one_still_reserves_a_job_month():
    role = _role(("s0", 3), ("s1", 2), ("s2", 1))
    events = _timeline(role, horizon=1)
    assert [e.month for e in events] == [1, 1, 1, 2]


def test_uncatalogued_skill_is_skipped_but_keeps_its_slot():
    role = _role(("s0", 3), ("ghost", 2), ("s1", 1))
    events = _timeline(role, horizon=12)
    assert [(e.skill_id, e.month) for e in events] == [("s0", 1), ("s1", 3), ("jobs", 4)]


def test_apply_milestone_uses_effective_month_even_with_unused_months():
    role = _role(("ghost-a", 3), ("ghost-b", 2))
    events = _timeline(role, horizon=12)
    assert [(e.skill_id, e.month) for e in events] == [("jobs", 3)]


def test_months_stay_in_range_and_never_decrease():
    for count in range(1, 12):
        role = _role(*[(f"s{i}", 1 + i % 3) for i in range(count)])
        for horizon in range(1, 15):
            events = _timeline(role, horizon=horizon)
            effective, _ = plan_months(count, horizon)
            months = [e.month for e in events]
            assert all(1 <= m <= effective for m in months)
            assert months == sorted(months)
            assert events[-1].id == "apply-jobs"
            assert events[-1].month == effective
            assert len(events) == count + 1
