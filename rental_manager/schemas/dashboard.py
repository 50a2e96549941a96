import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# camelCase on the wire, snake_case in Python.
_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChartData(BaseModel):
    labels: list[str]  # YYYY-MM, ascending
    income: list[float]
    expenses: list[float]


class ActivityItem(BaseModel):
    type: str  # expense | invoice
    title: str | None
    amount: float | None
    date: datetime.date | None


class DashboardSummary(BaseModel):
    model_config = _camel

    income: float
    expenses: float
    total_properties: int
    total_tenants: int
    chart_data: ChartData
    recent_activity: list[ActivityItem]


class DashboardResponse(BaseModel):
    summary: DashboardSummary
