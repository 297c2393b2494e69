from __future__ import annotations

from types import MappingProxyType

from aspyr.models import RoleDefinition, SchoolCourse

DEFAULT_COURSE_CATEGORY = "software developers"

COMMON_COURSES = MappingProxyType(
    {
        "web developers": (
            ("Introduction to Web Development", "CS 101", "Learn HTML, CSS, and JavaScript fundamentals"),
            ("Frontend Frameworks", "CS 201", "Learn React, Vue, or Angular"),
            ("Database Systems", "CS 301", "Introduction to SQL and database design"),
        ),
        "software developers": (
            ("Introduction to Programming", "CS 101", "Learn programming fundamentals"),
            ("Data Structures and Algorithms", "CS 201", "Learn core computer science concepts"),
            ("Software Engineering", "CS 301", "Learn software development practices"),
        ),
        "data analysts": (
            ("Introduction to Data Science", "DS 101", "Learn data analysis fundamentals"),
            ("Statistics for Data Science", "DS 201", "Statistical methods for data analysis"),
            ("Data Visualization", "DS 301", "Create compelling data visualizations"),
        ),
    }
)

ROLE_COURSE_CATEGORIES = MappingProxyType(
    {
        "junior-web-dev": "web developers",
        "frontend-dev": "web developers",
        "backend-dev": "software developers",
        "fullstack-dev": "software developers",
        "python-dev": "software developers",
        "data-analyst": "data analysts",
        "devops-engineer": "software developers",
        "database-admin": "software developers",
    }
)


def get_school_courses(school: str, role: RoleDefinition) -> list[SchoolCourse]:
    """Generic course suggestions for ``role``, pointed at ``school``'s own catalog."""
    category = ROLE_COURSE_CATEGORIES.get(role.id, DEFAULT_COURSE_CATEGORY)
    school = (school or "").strip() or "your school's"
    return [
        SchoolCourse(
            name=name,
            code=code,
            description=f"{description} (Check {school} course catalog for exact course codes)",
        )
        for name, code, description in COMMON_COURSES.get(category, ())
    ]
