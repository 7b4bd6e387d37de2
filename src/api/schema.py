from typing import List, Optional

from pydantic import BaseModel


class CommandResponse(BaseModel):
    ok: bool
    message: Optional[str] = None
    error: Optional[str] = None
    partial: bool = False


class CommandList(BaseModel):
    commands: List[str]
