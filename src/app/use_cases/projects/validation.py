from typing import Optional
from libs.result import Error
from src.domain.enums import ProjectStatus

REQUIRED_FIELDS = ["name", "description", "status", "startDate", "endDate"]


def validate_project_fields(fields) -> Optional[Error]:
    """
    Check the create/update payload before the store is touched.

    Returns None when the payload is acceptable, otherwise the Error to report.
    Description may be an empty string but must be present. Start and end dates
    are not checked against each other.
    """
    missing = (
        fields.name is None
        or len(fields.name.strip()) == 0
        or fields.description is None
        or fields.status is None
        or len(fields.status.strip()) == 0
        or fields.start_date is None
        or fields.end_date is None
    )
    if missing:
        return Error(
            code="MISSING_FIELDS",
            message="Missing required fields",
            details={"required": list(REQUIRED_FIELDS)},
        )

    if fields.status not in ProjectStatus.values():
        return Error(
            code="INVALID_STATUS",
            message="Invalid status",
            reason=f"'{fields.status}' is not an allowed status",
            details={"validStatuses": ProjectStatus.values()},
        )

    return None
