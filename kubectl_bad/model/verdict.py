"""Health verdicts."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Verdict(BaseModel):
    """Healthy, or unhealthy with a short reason."""

    model_config = ConfigDict(frozen=True)

    reason: Optional[str] = None

    @classmethod
    def ok(cls) -> "Verdict":
        return HEALTHY

    @classmethod
    def unhealthy(cls, reason: str) -> "Verdict":
        if not reason:
            raise ValueError("unhealthy verdict needs a reason")
        return cls(reason=reason)

    @property
    def healthy(self) -> bool:
        return self.reason is None


HEALTHY = Verdict()
