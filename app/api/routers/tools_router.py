"""
app/api/routers/tools_router.py

Tool discovery and invocation endpoints.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from analytics.inflation import MissingInflationIndexError
from app.api.dependencies import get_sales_analytics_service
from app.schemas.analytics import ToolDefinition
from app.services.sales_analytics_service import SalesAnalyticsService
from app.tools import ToolInvocationError, ToolNotFoundError, ToolRegistry, get_tool_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tools", tags=["tools"])


@router.get("", response_model=list[ToolDefinition])
def list_tools(
    registry: ToolRegistry = Depends(get_tool_registry),
) -> list[ToolDefinition]:
    """
    List every invocable tool with its input schema.
    """

    return registry.definitions()


@router.post("/{name}")
def invoke_tool(
    name: str,
    arguments: Any = Body(default=None),
    registry: ToolRegistry = Depends(get_tool_registry),
    service: SalesAnalyticsService = Depends(get_sales_analytics_service),
) -> JSONResponse:
    """
    Invoke tool *name* with a JSON object of arguments.

    The body is the tool's response, serialised with camelCase keys.
    """

    try:
        tool = registry.get(name)
        response = tool.execute(service, arguments)
    except ToolNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ToolInvocationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except MissingInflationIndexError as exc:
        logger.error("Tool %s failed: %s", name, exc)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc

    return JSONResponse(content=response.model_dump(mode="json", by_alias=True))
