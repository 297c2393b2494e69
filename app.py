from __future__ import annotations

import json

import streamlit as st

from aspyr.catalog import load_roles, load_skills, resolve_skill_token, role_lookup, suggest_skills
from aspyr.config import configure_logging, load_settings
from aspyr.job_stats import bls_search_url, fetch_job_statistics
from aspyr.planner import build_learning_plan
from aspyr.report import category_frame, export_payload, resources_frame, timeline_frame
from aspyr.school_courses import get_school_courses

APP_TITLE = "Aspyr"
APP_SUBTITLE = "Your personalized career path analyzer"
DIFFICULTY_BADGES = {"beginner": "🟢", "intermediate": "🟡", "advanced": "🔴"}


def inject_styles():
    st.markdown(
        """
        <style>
        .hero-wrap {
            background: linear-gradient(120deg, #4f46e5 0%, #7c3aed 55%, #0f172a 100%);
            border-radius: 18px;
            padding: 24px;
            color: #f8fafc;
            margin-bottom: 18px;
        }
        .hero-title { font-size: 2rem; font-weight: 700; margin-bottom: 0.3rem; }
        .hero-sub { opacity: 0.92; font-size: 1.02rem; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def parse_free_text(raw: str, catalog) -> list[str]:
    return [resolve_skill_token(token, catalog) for token in raw.split(",") if token.strip()]


def render_workspace(skills, roles_by_id, settings):
    labels = {skill.id: skill.label for skill in skills}
    role_ids = list(roles_by_id)

    with st.expander("Section A - Your Skills and Target Role", expanded=True):
        with st.form("intake_form"):
            c1, c2 = st.columns(2)
            with c1:
                role_id = st.selectbox(
                    "Target role",
                    role_ids,
                    format_func=lambda rid: roles_by_id[rid].name,
                )
                selected = st.multiselect(
                    "Skills you already have",
                    options=[skill.id for skill in skills],
                    format_func=lambda sid: labels[sid],
                )
                extra = st.text_input("Other skills (comma separated, aliases welcome)", value="")
            with c2:
                horizon = st.slider("Planning horizon (months)", 1, 24, min(24, settings.horizon_months))
                school = st.text_input("School (optional)", value="")
            st.form_submit_button("Analyze my skill gap")

    role = roles_by_id[role_id]
    typed = parse_free_text(extra, skills)
    for token in typed:
        if token in labels:
            continue
        hints = suggest_skills(token, skills, exclude=selected, limit=3)
        if hints:
            names = ", ".join(skill.label for skill in hints)
            st.caption(f"\"{token}\" is not a known skill. Did you mean: {names}? Pick it from the list above.")
    user_skills = selected + typed
    plan = build_learning_plan(user_skills, role, skills, horizon_months=horizon, settings=settings)
    analysis = plan.analysis

    with st.expander("Section B - Readiness", expanded=True):
        c1, c2, c3 = st.columns(3)
        c1.metric("Readiness", f"{analysis.readiness_percent}%", role.name)
        c1.progress(analysis.readiness_percent / 100.0)
        c2.metric("Skills matched", len(analysis.matched_skills))
        c3.metric("Skills to learn", len(analysis.missing_skills))
        st.caption(role.description)
        for responsibility in role.responsibilities:
            st.write(f"- {responsibility}")
        st.markdown("Missing skills by category")
        st.dataframe(category_frame(analysis, skills), hide_index=True)

    with st.expander("Section C - Learning Timeline", expanded=True):
        st.dataframe(timeline_frame(plan.timeline), hide_index=True)

    with st.expander("Section D - Resources and Project Ideas", expanded=True):
        left, right = st.columns(2)
        left.markdown("#### Recommended Resources")
        for resource in plan.resources:
            left.write(f"- [{resource.title}]({resource.url}) ({resource.type})")
        if not plan.resources:
            left.info("No resources needed, you already cover this role.")
        left.dataframe(resources_frame(plan.resources), hide_index=True)
        right.markdown("#### Project Ideas")
        for project in plan.projects:
            badge = DIFFICULTY_BADGES.get(project.difficulty, "")
            right.write(f"{badge} **{project.name}** ({project.difficulty})")
            right.caption(project.description)

    with st.expander("Section E - Job Market and Courses", expanded=False):
        stats = fetch_job_statistics(role, settings)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Median Pay", stats.median_pay)
        c2.metric("Number of Jobs", stats.number_of_jobs)
        c3.metric("Job Outlook", stats.job_outlook)
        c4.metric("Employment Change", stats.employment_change)
        st.write(f"[Occupational Outlook Handbook]({bls_search_url(role)})")
        if school.strip():
            for course in get_school_courses(school, role):
                st.write(f"- **{course.code} {course.name}**: {course.description}")

    report = export_payload(plan, skills)
    st.download_button(
        "Download Learning Plan JSON",
        data=json.dumps(report, indent=2),
        file_name=f"{role.id}_learning_plan.json",
        mime="application/json",
    )


settings = load_settings()
configure_logging(settings)

st.set_page_config(page_title=APP_TITLE, layout="wide")
inject_styles()
st.title(APP_TITLE)
st.caption(APP_SUBTITLE)
st.markdown(
    """
    <div class="hero-wrap">
      <div class="hero-title">Find your skill gap</div>
      <div class="hero-sub">Pick a role, tell us what you know, and get a month-by-month plan.</div>
    </div>
    """,
    unsafe_allow_html=True,
)

skills = load_skills()
roles_by_id = role_lookup(load_roles())
render_workspace(skills, roles_by_id, settings)
