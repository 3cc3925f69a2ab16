"""FastAPI main application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from . import __version__
from .config import settings
from .agents import create_agent
from .channels import ChannelRegistry, register_default_channels
from .db import DatabaseConnection
from .db.seed import seed_demo_data
from .services import (
    EventBus,
    InboxStore,
    ReplyPipeline,
    TaskLedger,
    ThreadLocks,
    create_sentiment_classifier,
)
from .utils.logger import init_app_logger
from .api import channels, dashboard, dependencies, messages, tasks, websocket
from .api import register_exception_handlers


# Initialize logger
logger = init_app_logger(settings)

# Global database connection
db_conn: DatabaseConnection = None


def _mask(secret: str) -> str:
    return secret[:8] + "..." + secret[-4:] if len(secret) > 12 else "***"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Args:
        app: FastAPI application instance
    """
    global db_conn

    # Startup
    logger.info("=" * 70)
    logger.info("Starting Omnibox...")
    logger.info("=" * 70)

    logger.info("")
    logger.info("📡 Server Configuration:")
    logger.info(f"  Host: {settings.host}")
    logger.info(f"  Port: {settings.port}")
    logger.info(f"  Debug: {settings.debug}")
    logger.info(f"  Log Level: {settings.log_level}")
    logger.info(f"  Log File: {settings.log_file}")

    logger.info("")
    logger.info("💾 Storage Configuration:")
    logger.info(f"  Database: {settings.database_path}")
    db_conn = DatabaseConnection(settings.database_path)
    store = InboxStore(db_conn)
    if settings.seed_demo_data:
        seeded = seed_demo_data(store)
        logger.info(f"  Demo Data: {'seeded ' + str(seeded) + ' messages' if seeded else 'store not empty, skipped'}")

    logger.info("")
    logger.info("🔌 Registering Channels...")
    registry = register_default_channels(ChannelRegistry(), settings)
    for info in registry.list_channels():
        state = "configured" if info["configured"] else "not configured"
        logger.info(f"  {info['channel']}: {info['name']} ({state})")
    logger.info(f"  Delivery Timeout: {settings.delivery_timeout}s")

    logger.info("")
    logger.info("🤖 Agent Configuration:")
    agent = create_agent(settings)
    logger.info(f"  Name: {agent.name}")
    logger.info(f"  Provider: {agent.__class__.__name__}")
    if settings.agent_provider.lower() == "anthropic":
        logger.info(f"  Model: {settings.agent_model}")
        if settings.agent_api_key:
            logger.info(f"  API Key (from .env): {_mask(settings.agent_api_key)}")
        else:
            logger.info("  API Key (from .env): Not set, using playbook")
    logger.info(f"  Timeout: {settings.agent_timeout}s")
    logger.info(f"  Auto-create Suggested Tasks: {settings.auto_create_suggested_tasks}")

    events = EventBus()
    ledger = TaskLedger(store, events)
    pipeline = ReplyPipeline(
        store=store,
        channels=registry,
        agent=agent,
        classifier=create_sentiment_classifier(settings.reply_sentiment),
        events=events,
        task_ledger=ledger,
        agent_timeout=settings.agent_timeout,
        delivery_timeout=settings.delivery_timeout,
        auto_create_suggested_tasks=settings.auto_create_suggested_tasks,
        locks=ThreadLocks()
    )

    # Set services in API modules
    dependencies.store = store
    dependencies.pipeline = pipeline
    dependencies.task_ledger = ledger
    dependencies.channel_registry = registry
    dependencies.event_bus = events
    dependencies.settings = settings

    logger.info("")
    logger.info("=" * 70)
    logger.info("✅ Omnibox started successfully!")
    logger.info(f"📍 Access at: http://{settings.host}:{settings.port}")
    logger.info(f"📚 API Docs: http://{settings.host}:{settings.port}/docs")
    logger.info("=" * 70)

    yield

    # Shutdown
    logger.info("")
    logger.info("=" * 70)
    logger.info("Shutting down Omnibox...")
    logger.info("=" * 70)

    if db_conn:
        db_conn.close()
        db_conn = None

    logger.info("✅ Omnibox shut down successfully")


# Create FastAPI application
app = FastAPI(
    title="Omnibox",
    description="Unified social inbox with an AI reply assistant",
    version=__version__,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify allowed origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routers
app.include_router(dashboard.router)
app.include_router(messages.router)
app.include_router(tasks.router)
app.include_router(channels.router)
app.include_router(websocket.router)


@app.get("/health")
async def health():
    """
    Simple health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "version": __version__
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "omnibox.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
