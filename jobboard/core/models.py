from dataclasses import dataclass, fields
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

HoursPerWeek = Union[int, Tuple[int, int]]


class WorkStudyStatus(str, Enum):
    YES = "Yes"
    NO = "No"
    EITHER = "EitherAllowed"


@dataclass(frozen=True)
class ListingRecord:
    """
    One row of the portal's job listing table.
    """

    id: str
    title: str
    date: Optional[date]
    work_study: WorkStudyStatus
    on_campus: bool
    hiring_period: str
    hours_per_week: Optional[HoursPerWeek]


@dataclass(frozen=True)
class DetailRecord:
    """
    Fields read from a single posting's detail page.
    Optional fields are None when the page shows the portal's placeholder text.
    """

    description: str
    hourly_pay_rate: int
    on_bus_route: bool
    how_to_apply: str
    website: Optional[str]
    contact: str
    contact_email: str
    contact_phone: Optional[str]
    street_address: Optional[str]
    city: Optional[str]
    state: str
    department_info: Optional[str]


# Output keys used when serializing a JobPosting
FIELD_KEYS = {
    "id": "id",
    "title": "title",
    "date": "date",
    "work_study": "workStudy",
    "on_campus": "onCampus",
    "hiring_period": "hiringPeriod",
    "hours_per_week": "hoursPerWeek",
    "description": "description",
    "hourly_pay_rate": "hourlyPayRate",
    "on_bus_route": "onBusRoute",
    "how_to_apply": "howToApply",
    "website": "website",
    "contact": "contact",
    "contact_email": "contactEmail",
    "contact_phone": "contactPhone",
    "street_address": "streetAddress",
    "city": "city",
    "state": "state",
    "department_info": "departmentInfo",
}


@dataclass(frozen=True)
class JobPosting:
    """
    Canonical posting: a listing row joined with its detail page by id.
    """

    id: str
    title: str
    date: Optional[date]
    work_study: WorkStudyStatus
    on_campus: bool
    hiring_period: str
    hours_per_week: Optional[HoursPerWeek]
    description: str
    hourly_pay_rate: int
    on_bus_route: bool
    how_to_apply: str
    contact: str
    contact_email: str
    state: str
    website: Optional[str] = None
    contact_phone: Optional[str] = None
    street_address: Optional[str] = None
    city: Optional[str] = None
    department_info: Optional[str] = None

    @classmethod
    def from_parts(cls, listing: ListingRecord, detail: DetailRecord) -> "JobPosting":
        values = {f.name: getattr(listing, f.name) for f in fields(listing)}
        values.update({f.name: getattr(detail, f.name) for f in fields(detail)})
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-ready mapping. Absent optional fields are left out.
        """
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, date):
                value = value.isoformat()
            elif isinstance(value, WorkStudyStatus):
                value = value.value
            elif isinstance(value, tuple):
                value = list(value)
            result[FIELD_KEYS[f.name]] = value
        return result
