"""
ARQ worker — background task definitions.
Run with: python -m farmstead.worker
"""
import logging
from datetime import datetime, timezone

from arq import cron
from arq.connections import RedisSettings

from farmstead.core.config import settings
from farmstead.db.session import AsyncSessionLocal
from farmstead.services.status import local_today
from farmstead.storage import DatabaseStorage

logger = logging.getLogger(__name__)


# ── Job functions ─────────────────────────────────────────────────────────────


async def refresh_task_statuses(ctx: dict) -> int:
    """
    Re-derive stored task statuses so "today"/"overdue" follow the calendar.

    Runs hourly; each user's tasks are evaluated against the date in that
    user's own timezone, so the rollover happens shortly after their midnight.
    """
    logger.info("refresh_task_statuses: starting")
    started_at = datetime.now(timezone.utc)
    changed = 0

    async with AsyncSessionLocal() as db:
        storage = DatabaseStorage(db)
        try:
            # Plain values: a rollback below expires the loaded User rows
            targets = [(u.id, u.timezone) for u in await storage.list_active_users()]
            for user_id, tz_name in targets:
                try:
                    changed += await storage.refresh_task_statuses(user_id, local_today(tz_name))
                except Exception as exc:
                    await db.rollback()
                    logger.warning("refresh_task_statuses: failed for user %d: %s", user_id, exc)
        except Exception:
            logger.exception("refresh_task_statuses: unexpected error")
            raise

    duration_ms = int((datetime.now(timezone.utc) - started_at).total_seconds() * 1000)
    logger.info("refresh_task_statuses: complete — %d tasks updated in %dms", changed, duration_ms)
    return changed


# ── Worker settings ───────────────────────────────────────────────────────────


class WorkerSettings:
    redis_settings = RedisSettings.from_dsn(settings.REDIS_URL)
    functions = [refresh_task_statuses]
    cron_jobs = [
        cron(refresh_task_statuses, minute=5),  # Hourly at :05
    ]
    on_startup = None
    on_shutdown = None


if __name__ == "__main__":
    from arq import run_worker

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    )
    run_worker(WorkerSettings)
