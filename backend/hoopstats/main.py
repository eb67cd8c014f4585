# Main FastAPI application
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from hoopstats.api import game_stats, players, teams
from hoopstats.core.config import Settings, settings as default_settings
from hoopstats.db.session import build_engine, build_sessionmaker, init_models
import logging

# for logging in fastapi
logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format="%(levelname)s: %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


# every failure goes out as {"error": message}
async def http_error_handler(request: Request, exc: HTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


# malformed ids and wrongly typed fields are client errors like any other: 400
async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


def create_app(settings: Settings = default_settings) -> FastAPI:
    app = FastAPI(title="NBA Roster API")

    # the store handle belongs to this app instance, not to the module
    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(HTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(players.router, prefix="/players", tags=["Players"])
    app.include_router(teams.router, prefix="/teams", tags=["Teams"])
    app.include_router(game_stats.router, prefix="/gamestats", tags=["Game Stats"])

    if settings.SERVE_UI:
        app.mount("/ui", StaticFiles(directory=STATIC_DIR, html=True), name="ui")

    @app.on_event("startup")
    async def startup():
        await init_models(engine)
        logger.info(f"Connected to {engine.url.render_as_string(hide_password=True)}")

    @app.on_event("shutdown")
    async def shutdown():
        await engine.dispose()

    @app.get("/")
    def root():
        return {"message": "NBA roster API running"}

    return app


app = create_app()
