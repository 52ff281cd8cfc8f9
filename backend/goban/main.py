from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .api import game
from .config import Settings, load_settings
from .services.input_gate import FrameGate


def create_app(settings: Optional[Settings] = None, wheel_gate: Optional[FrameGate] = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(title="Goban API", version="1.0.0")
    app.state.settings = settings
    app.state.game = None
    app.state.wheel_gate = wheel_gate or FrameGate(settings.frame_interval)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(game.router, prefix="/api", tags=["game"])

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
