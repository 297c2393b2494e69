from __future__ import annotations

import logging

import requests

import aspyr.job_stats as job_stats
from aspyr.catalog import load_roles, role_lookup
from aspyr.config import Settings
from aspyr.job_stats import bls_search_url, fetch_job_statistics, static_job_statistics
from aspyr.models import RoleDefinition
from aspyr.school_courses import get_school_courses

ROLES = role_lookup(load_roles())
STATS_SETTINGS = Settings(job_stats_url="https://stats.example.test/api/", request_timeout=2.0)
UNMAPPED = RoleDefinition(id="ml-engineer", name="ML Engineer", description="")


class FakeResponse:
    def __init__(self, payload: dict):
        self._payload = payload

    def raise_for_status(self):
        return None

    def json(self):
        return self._payload


def test_static_statistics_by_role_term():
    stats = static_job_statistics(ROLES["data-analyst"])
    assert stats.median_pay == "$103,500 per year"
    assert stats.last_updated


def test_unmapped_role_uses_software_developer_numbers():
    assert static_job_statistics(UNMAPPED).median_pay == "$124,200 per year"


def test_bls_search_url():
    assert bls_search_url(ROLES["database-admin"]) == (
        "https://www.bls.gov/ooh/computer-and-information-technology/database-administrators.htm"
    )


def test_fetch_without_service_returns_static(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("network should not be used")

    monkeypatch.setattr(job_stats.requests, "get", boom)
    stats = fetch_job_statistics(ROLES["frontend-dev"], Settings())
    assert stats.number_of_jobs == "197,900"


def test_fetch_from_service(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(
            {
                "median_pay": "$90,000 per year",
                "number_of_jobs": "12,000",
                "job_outlook": "10%",
                "employment_change": "+1,200",
            }
        )

    monkeypatch.setattr(job_stats.requests, "get", fake_get)
    stats = fetch_job_statistics(ROLES["python-dev"], STATS_SETTINGS)
    assert calls == [("https://stats.example.test/api/python-dev", 2.0)]
    assert stats.median_pay == "$90,000 per year"
    assert stats.last_updated


def test_fetch_failure_falls_back_to_static(monkeypatch, caplog):
    def offline(*args, **kwargs):
        raise requests.Timeout("slow")

    monkeypatch.setattr(job_stats.requests, "get", offline)
    with caplog.at_level(logging.WARNING, logger="aspyr.job_stats"):
        stats = fetch_job_statistics(ROLES["data-analyst"], STATS_SETTINGS)
    assert stats.median_pay == "$103,500 per year"
    assert "data-analyst" in caplog.text


def test_incomplete_service_payload_falls_back(monkeypatch):
    monkeypatch.setattr(job_stats.requests, "get", lambda *a, **k: FakeResponse({"median_pay": "?"}))
    stats = fetch_job_statistics(ROLES["data-analyst"], STATS_SETTINGS)
    assert stats.number_of_jobs == "113,300"


def test_school_courses_for_role():
    courses = get_school_courses("FIU", ROLES["data-analyst"])
    assert [c.code for c in courses] == ["DS 101", "DS 201", "DS 301"]
    assert all("Check FIU course catalog" in c.description for c in courses)


def test_school_courses_default_category():
    courses = get_school_courses("", UNMAPPED)
    assert courses[0].name == "Introduction to Programming"
    assert "your school's course catalog" in courses[0].description
