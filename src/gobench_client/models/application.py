from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

KNOWN_FIELDS = ("id", "name", "scenario", "status", "created_at", "updated_at", "tags")


class ApplicationStatus(str, Enum):
    """Lifecycle states owned by the gobench master."""

    PENDING = "pending"
    PROVISIONING = "provisioning"
    RUNNING = "running"
    FINISHED = "finished"
    CANCEL = "cancel"
    ERROR = "error"


ACTIVE_STATUSES = frozenset(
    {ApplicationStatus.PENDING, ApplicationStatus.PROVISIONING, ApplicationStatus.RUNNING}
)


@dataclass(frozen=True)
class Application:
    """An application record as last reported by the backend.

    Records are never patched locally: any change is observed through the
    next list call, which produces new instances.
    """

    name: str
    scenario: str = ""
    id: Optional[Any] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    tags: str = ""
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __str__(self) -> str:
        return f"{self.name} ({self.id})" if self.id is not None else self.name

    @property
    def state(self) -> Optional[ApplicationStatus]:
        """Typed status, or None when the backend reports something unknown."""
        try:
            return ApplicationStatus(self.status)
        except ValueError:
            return None

    @property
    def is_active(self) -> bool:
        return self.state in ACTIVE_STATUSES

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Application":
        extra = {k: v for k, v in data.items() if k not in KNOWN_FIELDS}
        return cls(
            name=data.get("name") or "",
            scenario=data.get("scenario") or "",
            id=data.get("id"),
            status=data.get("status"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            tags=data.get("tags") or "",
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.extra)
        data.update(
            {
                "id": self.id,
                "name": self.name,
                "scenario": self.scenario,
                "status": self.status,
                "created_at": self.created_at,
                "updated_at": self.updated_at,
                "tags": self.tags,
            }
        )
        return data
