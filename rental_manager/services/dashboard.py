"""
Dashboard aggregation for one owner.

Five independent reads (totals, counts, monthly chart, recent activity) each
run on their own session and are awaited together; none depends on another.
"""
import asyncio
import datetime
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy import case, func, literal, select, union_all
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from rental_manager.models.expense import Expense
from rental_manager.models.invoice import INVOICE_STATUS_PAID, Invoice
from rental_manager.models.property import Property
from rental_manager.models.tenant import Tenant
from rental_manager.schemas.dashboard import ActivityItem, ChartData, DashboardSummary

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_LIMIT = 5

T = TypeVar("T")


# ─── Individual reads ─────────────────────────────────────────────────────────

async def total_income(db: AsyncSession, owner_id: int) -> float:
    result = await db.execute(
        select(func.coalesce(func.sum(Invoice.amount), 0)).where(
            Invoice.user_id == owner_id,
            Invoice.status == INVOICE_STATUS_PAID,
        )
    )
    return float(result.scalar_one())


async def total_expenses(db: AsyncSession, owner_id: int) -> float:
    result = await db.execute(
        select(func.coalesce(func.sum(Expense.amount), 0)).where(Expense.user_id == owner_id)
    )
    return float(result.scalar_one())


async def record_counts(db: AsyncSession, owner_id: int) -> tuple[int, int]:
    """(property count, tenant count)"""
    properties = (
        select(func.count()).select_from(Property)
        .where(Property.user_id == owner_id)
        .scalar_subquery()
    )
    tenants = (
        select(func.count()).select_from(Tenant)
        .where(Tenant.user_id == owner_id)
        .scalar_subquery()
    )
    row = (await db.execute(select(properties, tenants))).one()
    return int(row[0]), int(row[1])


async def monthly_chart(db: AsyncSession, owner_id: int) -> ChartData:
    """Paid income and expenses summed per YYYY-MM, ascending, active months only."""
    paid = select(
        Invoice.paid_date.label("date"),
        Invoice.amount.label("amount"),
        literal("income").label("type"),
    ).where(Invoice.user_id == owner_id, Invoice.status == INVOICE_STATUS_PAID)
    spent = select(
        Expense.date.label("date"),
        Expense.amount.label("amount"),
        literal("expense").label("type"),
    ).where(Expense.user_id == owner_id)
    activity = union_all(paid, spent).subquery()

    month = func.strftime("%Y-%m", activity.c.date).label("month")
    stmt = (
        select(
            month,
            func.sum(case((activity.c.type == "income", activity.c.amount), else_=0)).label("total_income"),
            func.sum(case((activity.c.type == "expense", activity.c.amount), else_=0)).label("total_expenses"),
        )
        # Undated rows have no month; they still count in the totals.
        .where(activity.c.date.is_not(None))
        .group_by(month)
        .order_by(month)
    )
    rows = (await db.execute(stmt)).all()
    return ChartData(
        labels=[r.month for r in rows],
        income=[float(r.total_income or 0) for r in rows],
        expenses=[float(r.total_expenses or 0) for r in rows],
    )


def _activity_sort_key(item: ActivityItem) -> tuple[bool, datetime.date]:
    return (item.date is not None, item.date or datetime.date.min)


def merge_recent_activity(
    items: list[ActivityItem], limit: int = RECENT_ACTIVITY_LIMIT
) -> list[ActivityItem]:
    """Newest first, undated entries last, at most ``limit`` items."""
    return sorted(items, key=_activity_sort_key, reverse=True)[:limit]


async def recent_activity(db: AsyncSession, owner_id: int) -> list[ActivityItem]:
    expenses_stmt = (
        select(
            literal("expense").label("type"),
            Expense.description.label("title"),
            Expense.amount.label("amount"),
            Expense.date.label("date"),
        )
        .where(Expense.user_id == owner_id)
        .order_by(Expense.date.desc().nulls_last())
        .limit(RECENT_ACTIVITY_LIMIT)
    )
    invoices_stmt = (
        select(
            literal("invoice").label("type"),
            (literal("Invoice for ") + Tenant.full_name).label("title"),
            Invoice.amount.label("amount"),
            Invoice.paid_date.label("date"),
        )
        .select_from(Invoice)
        .join(Tenant, Invoice.tenant_id == Tenant.id)
        .where(Invoice.user_id == owner_id, Invoice.status == INVOICE_STATUS_PAID)
        .order_by(Invoice.paid_date.desc().nulls_last())
        .limit(RECENT_ACTIVITY_LIMIT)
    )
    items = []
    for stmt in (expenses_stmt, invoices_stmt):
        for row in (await db.execute(stmt)).all():
            items.append(ActivityItem(type=row.type, title=row.title, amount=row.amount, date=row.date))
    return merge_recent_activity(items)


# ─── Aggregate ────────────────────────────────────────────────────────────────

async def build_summary(session_factory: async_sessionmaker, owner_id: int) -> DashboardSummary:
    """Run every read concurrently, each on a fresh session, and assemble the summary."""

    async def run(read: Callable[[AsyncSession, int], Awaitable[T]]) -> T:
        async with session_factory() as db:
            return await read(db, owner_id)

    tasks = [
        asyncio.ensure_future(run(read))
        for read in (total_income, total_expenses, record_counts, monthly_chart, recent_activity)
    ]
    try:
        income, expenses, (property_count, tenant_count), chart, activity = await asyncio.gather(*tasks)
    except BaseException:
        # First failure wins; the other reads are cancelled and awaited before it propagates.
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    logger.debug("Dashboard built for user %s", owner_id)
    return DashboardSummary(
        income=income,
        expenses=expenses,
        total_properties=property_count,
        total_tenants=tenant_count,
        chart_data=chart,
        recent_activity=activity,
    )
