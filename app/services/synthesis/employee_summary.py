"""
Deterministic natural-language rendering of an employee record.

The summary is the embedding input, so identical records must render to
identical bytes: no locale-aware formatting, no clock, no identifier.
"""
from datetime import date
from typing import Union

from app.domain.schemas.employee import EmployeeRecord, PerformanceReview


def _number(value: Union[int, float]) -> str:
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def _day(value: date) -> str:
    return value.isoformat()


def _review(review: PerformanceReview) -> str:
    return f"Rated {_number(review.rating)} on {_day(review.review_date)}: {review.comments}"


def summarize_employee(record: EmployeeRecord) -> str:
    job = record.job_details
    location = record.work_location

    identity = f"{record.first_name} {record.last_name}, born on {_day(record.date_of_birth)}"
    job_line = (
        f"Job: {job.job_title}, {job.department}, {job.employment_type}, "
        f"hired on {_day(job.hire_date)}"
    )
    skills = f"Skills: {', '.join(record.skills)}"
    reviews = f"Reviews: {' '.join(_review(r) for r in record.performance_reviews)}"
    location_line = (
        f"Location: Works at {location.nearest_office}, "
        f"Remote: {'Yes' if location.is_remote else 'No'}"
    )
    notes = f"Notes: {record.notes}"

    return ". ".join([identity, job_line, skills, reviews, location_line, notes])
