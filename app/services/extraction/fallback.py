"""
Fixed employee template used when no recovery stage yields a valid record.
"""
from types import MappingProxyType
from typing import Optional

from app.domain.schemas.employee import EmployeeRecord

FALLBACK_TEMPLATE = MappingProxyType(
    {
        "first_name": "Jordan",
        "last_name": "Avery",
        "date_of_birth": "1988-04-12",
        "address": {
            "street": "100 Market Street",
            "city": "Springfield",
            "state": "IL",
            "postal_code": "62701",
            "country": "USA",
        },
        "contact_details": {
            "email": "jordan.avery@acme-corp.io",
            "phone_number": "+1-217-555-0100",
        },
        "job_details": {
            "job_title": "Operations Analyst",
            "department": "Operations",
            "hire_date": "2019-06-03",
            "employment_type": "Full-Time",
            "salary": 68000,
            "currency": "USD",
        },
        "work_location": {"nearest_office": "Springfield HQ", "is_remote": False},
        "reporting_manager": None,
        "skills": ["Process Improvement", "Data Analysis", "Reporting"],
        "performance_reviews": [
            {
                "review_date": "2023-12-15",
                "rating": 4,
                "comments": "Consistently reliable and detail oriented.",
            }
        ],
        "benefits": {
            "health_insurance": "Standard PPO",
            "retirement_plan": "401(k) with 4% match",
            "paid_time_off": 20,
        },
        "emergency_contact": {
            "name": "Casey Avery",
            "relationship": "Spouse",
            "phone_number": "+1-217-555-0101",
        },
        "notes": "Placeholder profile created because the generator response could not be parsed.",
    }
)

# Validated once at import time.
FALLBACK_RECORD = EmployeeRecord.model_validate(dict(FALLBACK_TEMPLATE))


def build_fallback_record(employee_id: Optional[str] = None) -> EmployeeRecord:
    return FALLBACK_RECORD.with_fresh_id(employee_id)
