"""
Agent Profile Builder Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import compare, config, profile, versions
from services.config_manager import ConfigManager
from services.workspace import get_workspace


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting Agent Profile Builder Backend...")
    ConfigManager.get_instance()
    print("[Backend] ConfigManager initialized")

    workspace = get_workspace()
    print(f"[Backend] Workspace initialized with {len(workspace.versions.get_history())} saved versions")

    yield
    print("[Backend] Shutting down Agent Profile Builder Backend...")


app = FastAPI(
    title="Agent Profile Builder Backend",
    description="Agent profile wizard backend with version history, diff and merge",
    version="0.3.0",
    lifespan=lifespan,
)

# CORS middleware for the browser wizard
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(profile.router, prefix="/api/profile", tags=["profile"])
app.include_router(versions.router, prefix="/api/versions", tags=["versions"])
app.include_router(compare.router, prefix="/api/compare", tags=["compare"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "agent-profile-builder-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get_section("server")
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=int(server.get("port", 8000)))
