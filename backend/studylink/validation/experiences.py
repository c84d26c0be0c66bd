from __future__ import annotations

from studylink.models.experience import ExperienceType
from studylink.validation.result import ValidationResult, is_blank, wants


EXPERIENCE_TYPES = tuple(item.value for item in ExperienceType)


def validate_experience_data(data: dict, is_update: bool = False, experience=None) -> ValidationResult:
    result = ValidationResult()

    if is_update and not data:
        result.add("body", "No data provided for update")
        return result

    for name, label in (("position", "Position"), ("company", "Company")):
        if wants(data, name, is_update) and is_blank(data.get(name)):
            result.add(name, f"{label} is required")

    if wants(data, "type", is_update) and data.get("type") not in EXPERIENCE_TYPES:
        result.add("type", f"Invalid experience type: {data.get('type')}")

    # an update is checked against the dates already stored
    start_date = data.get("start_date", getattr(experience, "start_date", None))
    end_date = data.get("end_date", getattr(experience, "end_date", None))
    if start_date is not None and end_date is not None and end_date < start_date:
        result.add("end_date", "End date cannot be before start date")

    return result
