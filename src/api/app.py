import logging
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, HTTPException

from api.schema import CommandList, CommandResponse
from services.commands import CommandRegistry

logger = logging.getLogger(__name__)


def create_app(registry: CommandRegistry) -> FastAPI:
    app = FastAPI(title="selection-bridge")

    @app.get("/")
    def root():
        return "running"

    @app.get("/commands", response_model=CommandList)
    def list_commands():
        return CommandList(commands=registry.names())

    @app.post(
        "/invoke/{command}",
        response_model=CommandResponse,
        response_model_exclude_defaults=True,
    )
    def invoke(command: str, args: Optional[Dict[str, Any]] = Body(default=None)):
        if command not in registry:
            logger.warning("Rejected unknown command %s", command)
            raise HTTPException(status_code=404, detail=f"Unknown command: {command}")

        result = registry.invoke(command, args or {})
        return CommandResponse(**result.to_dict())

    return app
