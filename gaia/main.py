"""
Gaia stack core - application entry points.

Hosts wire the core through these two context managers:

    async with lifespan():
        async with stack_service_scope(cost_calculator) as service:
            await service.launch_job(stack_id, JobType.RUN, caller)
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from gaia.config import Settings, get_settings
from gaia.database import close_db, init_db, session_scope
from gaia.engines.stacks.cost import StackCostCalculator
from gaia.engines.stacks.stack_service import StackService
from gaia.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(settings: Optional[Settings] = None) -> AsyncGenerator[None, None]:
    """Startup and shutdown of the core."""
    settings = settings or get_settings()
    configure_logging(
        log_level=settings.log_level,
        environment=settings.environment,
        debug=settings.debug,
    )
    logger.info("Starting %s v%s", settings.project_name, settings.version)
    await init_db()

    yield

    logger.info("Shutting down %s", settings.project_name)
    await close_db()


@asynccontextmanager
async def stack_service_scope(
    cost_calculator: StackCostCalculator,
    settings: Optional[Settings] = None,
) -> AsyncGenerator[StackService, None]:
    """A StackService over one unit of work, committed when the block exits cleanly."""
    async with session_scope() as session:
        yield StackService.from_session(session, cost_calculator, settings=settings)
