from enum import Enum


class ProjectStatus(str, Enum):
    active = "active"
    completed = "completed"
    on_hold = "on-hold"

    @classmethod
    def values(cls) -> list:
        return [member.value for member in cls]
