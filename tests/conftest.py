from __future__ import annotations

import copy
import json
from typing import Any, Callable

import pytest

_VALID_EMPLOYEE: dict[str, Any] = {
    "employee_id": "generator-supplied-id",
    "first_name": "Maya",
    "last_name": "Lindqvist",
    "date_of_birth": "1991-02-27",
    "address": {
        "street": "42 Harbor Lane",
        "city": "Portland",
        "state": "OR",
        "postal_code": "97205",
        "country": "USA",
    },
    "contact_details": {
        "email": "maya.lindqvist@northwind-labs.io",
        "phone_number": "+1-503-555-0142",
    },
    "job_details": {
        "job_title": "Data Engineer",
        "department": "Platform",
        "hire_date": "2020-09-14",
        "employment_type": "Full-Time",
        "salary": 118500,
        "currency": "USD",
    },
    "work_location": {"nearest_office": "Portland Office", "is_remote": True},
    "reporting_manager": "M-1042",
    "skills": ["Python", "Spark", "Airflow"],
    "performance_reviews": [
        {"review_date": "2022-12-01", "rating": 4.5, "comments": "Shipped the lakehouse migration."},
        {"review_date": "2023-12-01", "rating": 5, "comments": "Mentors new hires."},
    ],
    "benefits": {
        "health_insurance": "Premium PPO",
        "retirement_plan": "401(k)",
        "paid_time_off": 25,
    },
    "emergency_contact": {
        "name": "Erik Lindqvist",
        "relationship": "Brother",
        "phone_number": "+1-503-555-0199",
    },
    "notes": "Leads the data quality guild.",
}


@pytest.fixture
def employee_payload() -> Callable[..., dict[str, Any]]:
    """Factory for a valid record payload with top-level overrides."""

    def _build(**overrides: Any) -> dict[str, Any]:
        payload = copy.deepcopy(_VALID_EMPLOYEE)
        payload.update(overrides)
        return payload

    return _build


@pytest.fixture
def employee_json(employee_payload) -> Callable[..., str]:
    def _build(**overrides: Any) -> str:
        return json.dumps(employee_payload(**overrides))

    return _build
