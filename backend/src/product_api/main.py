import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_api.api.errors import register_exception_handlers
from product_api.api.v1 import products
from product_api.core.config import settings
from product_api.core.database import create_tables, engine
from product_api.middleware.error_handling import ErrorHandlingMiddleware
from product_api.middleware.metrics import PrometheusMiddleware, metrics_endpoint

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    logger.info("Starting application...")

    if settings.CREATE_TABLES_ON_STARTUP:
        logger.info("Creating products table and id sequence...")
        await create_tables()
        logger.info("Database schema ready")

    yield

    logger.info("Shutting down application...")
    await engine.dispose()


app = FastAPI(
    title="Product API",
    version="1.0.0",
    description="Product catalog with CRUD operations and stock management",
    lifespan=lifespan,
)

# Innermost: turns unhandled exceptions into generic 500 responses
app.add_middleware(ErrorHandlingMiddleware)

# Prometheus Metrics Middleware (wraps error handling so 500s are counted)
app.add_middleware(PrometheusMiddleware)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routers
app.include_router(products.router, prefix="/api/v1/products", tags=["products"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Prometheus metrics endpoint
app.add_route("/metrics", metrics_endpoint)
