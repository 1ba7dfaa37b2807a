import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
load_dotenv()  # Load .env file for local development

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hacktemplate.config import CORS_ORIGINS, ENVIRONMENT, PORT, get_ai_api_key, AI_API_KEY_ENV
from hacktemplate.auth.config import SUPABASE_URL, SUPABASE_ANON_KEY
from hacktemplate.exceptions import register_exception_handlers
from hacktemplate.routers import (
    health_router,
    marketing_router,
    auth_router,
    dashboard_router,
    ai_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Report missing configuration on startup; nothing to tear down."""
    logger.info(f"Starting HackTemplate API (environment={ENVIRONMENT})")
    if not SUPABASE_URL or not SUPABASE_ANON_KEY:
        logger.warning("SUPABASE_URL / SUPABASE_ANON_KEY not set - every session check will fail")
    if not get_ai_api_key():
        logger.warning(f"{AI_API_KEY_ENV} not set - /api/ai will answer 500 until it is configured")
    yield


app = FastAPI(
    title="HackTemplate API",
    description="Hackathon starter backend: Supabase auth, dashboard shell and a streaming Gemini proxy",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware so the frontend can send the session cookie
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    allow_credentials=True,
)

register_exception_handlers(app)

# Register routers
app.include_router(health_router)
app.include_router(marketing_router)
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(ai_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)
