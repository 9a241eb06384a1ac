"""
app/tools/base.py

Remote-invocable analytics tool interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

from app.domain.artwork_sales import SaleFilter
from app.schemas.analytics import AnalyticsResponse, ToolDefinition
from app.services.sales_analytics_service import SalesAnalyticsService
from app.tools.parameters import ALL_FILTER_FIELDS, filter_input_schema, parse_sale_filter


class ToolNotFoundError(LookupError):
    """
    Raised when no tool is registered under the requested name.
    """


class ToolInvocationError(ValueError):
    """
    Raised when tool arguments are malformed beyond per-field recovery.
    """


class AnalyticsTool(ABC):
    """
    One named, self-describing operation over the sales analytics service.

    Subclasses declare their metadata as class attributes and implement
    :meth:`run`.  Argument parsing is shared: only ``filter_fields`` are
    read, unparseable values are dropped.
    """

    name: ClassVar[str]
    title: ClassVar[str]
    description: ClassVar[str]
    filter_fields: ClassVar[tuple[str, ...]] = ALL_FILTER_FIELDS
    required_fields: ClassVar[tuple[str, ...]] = ()

    @property
    def input_schema(self) -> dict[str, Any]:
        return filter_input_schema(self.filter_fields, self.required_fields)

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            title=self.title,
            description=self.description,
            input_schema=self.input_schema,
        )

    def execute(self, service: SalesAnalyticsService, arguments: Any) -> AnalyticsResponse:
        """
        Parse *arguments* and run the tool.

        Raises
        ------
        ToolInvocationError
            When *arguments* is neither ``None`` nor a JSON object.
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise ToolInvocationError(
                f"Tool '{self.name}' expects a JSON object of arguments, "
                f"got {type(arguments).__name__}."
            )
        return self.run(service, parse_sale_filter(arguments, self.filter_fields))

    @abstractmethod
    def run(self, service: SalesAnalyticsService, sale_filter: SaleFilter) -> AnalyticsResponse:
        """Execute against an already-parsed filter."""
