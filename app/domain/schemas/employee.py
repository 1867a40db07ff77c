"""
Canonical employee record synthesized from generator output.

Numeric and boolean fields are strict: a generator that writes
``"salary": "95000"`` or ``"is_remote": "yes"`` produces an invalid record.
"""
from datetime import date
from typing import Annotated, List, Optional, Union
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StringConstraints,
)

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
StrictNumber = Union[StrictInt, StrictFloat]


def new_employee_id() -> str:
    return uuid4().hex


class _RecordPart(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Address(_RecordPart):
    street: NonEmptyStr
    city: NonEmptyStr
    state: NonEmptyStr
    postal_code: NonEmptyStr
    country: NonEmptyStr


class ContactDetails(_RecordPart):
    email: EmailStr
    phone_number: NonEmptyStr


class JobDetails(_RecordPart):
    job_title: NonEmptyStr
    department: NonEmptyStr
    hire_date: date
    employment_type: NonEmptyStr
    salary: StrictNumber
    currency: NonEmptyStr


class WorkLocation(_RecordPart):
    nearest_office: NonEmptyStr
    is_remote: StrictBool


class PerformanceReview(_RecordPart):
    review_date: date
    rating: StrictNumber
    comments: str


class Benefits(_RecordPart):
    health_insurance: NonEmptyStr
    retirement_plan: NonEmptyStr
    paid_time_off: StrictNumber


class EmergencyContact(_RecordPart):
    name: NonEmptyStr
    relationship: NonEmptyStr
    phone_number: NonEmptyStr


class EmployeeRecord(_RecordPart):
    """
    One fully validated employee profile.

    ``employee_id`` is never trusted from the generator; callers obtain the
    persisted identity through ``with_fresh_id``. ``reporting_manager`` has no
    default so that omission fails validation while an explicit null passes.
    """

    employee_id: str = Field(default_factory=new_employee_id)
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    date_of_birth: date
    address: Address
    contact_details: ContactDetails
    job_details: JobDetails
    work_location: WorkLocation
    reporting_manager: Optional[str]
    skills: List[str]
    performance_reviews: List[PerformanceReview]
    benefits: Benefits
    emergency_contact: EmergencyContact
    notes: str

    def with_fresh_id(self, employee_id: Optional[str] = None) -> "EmployeeRecord":
        return self.model_copy(update={"employee_id": employee_id or new_employee_id()})
