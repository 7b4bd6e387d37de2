from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one native command: a message on success, an error otherwise.

    ``partial`` marks a success that the helper only partly achieved. The
    message already says so; the flag is there for callers that want to
    branch on it without parsing text.
    """

    ok: bool
    message: str
    partial: bool = False

    @classmethod
    def success(cls, message: str, *, partial: bool = False) -> "CommandResult":
        return cls(ok=True, message=message, partial=partial)

    @classmethod
    def failure(cls, message: str) -> "CommandResult":
        return cls(ok=False, message=message)

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            data: Dict[str, Any] = {"ok": True, "message": self.message}
            if self.partial:
                data["partial"] = True
            return data
        return {"ok": False, "error": self.message}
