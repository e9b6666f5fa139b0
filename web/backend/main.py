from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tuneflow import __version__

from .deps import get_config, reset_session


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Stop the ticker and discard the in-memory session
    reset_session()


app = FastAPI(title="TuneFlow API", version=__version__, lifespan=lifespan)

# CORS: ALLOWED_ORIGINS env var overrides config (see core.config)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().web.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
from web.backend.routers import live, player, playlists, search

app.include_router(search.router, prefix="/api", tags=["search"])
app.include_router(playlists.router, prefix="/api", tags=["playlist"])
app.include_router(player.router, prefix="/api", tags=["player"])
app.include_router(live.router, tags=["live"])


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
