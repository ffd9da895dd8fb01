import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from config import settings
from core.limiter import limiter
from store import init_store, close_store

# Routers
from routers import pricing, admin

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    init_store()
    logger.info("Delivery Pricing API started")
    yield
    # Shutdown
    close_store()
    logger.info("Delivery Pricing API stopped")


app = FastAPI(
    title="RichDonlurds Delivery Pricing API",
    description="Calculateur de frais de livraison et configuration tarifaire — Ghana",
    version="1.0.0",
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.DEBUG else ["https://richdonlurds.com"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers — public (calculateur client)
app.include_router(pricing.router, prefix="/api/pricing", tags=["Pricing"])

# Routers — interne (config admin)
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])


@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok", "app": "delivery-pricing", "version": "1.0.0"}
