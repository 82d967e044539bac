# backend/fieldlog/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fieldlog import __version__, config
from fieldlog.api.routers import export, location, records
from fieldlog.models.category import ObservationCategory
from fieldlog.schemas.commons import CategoryOut
from fieldlog.state import FieldState, build_state


@asynccontextmanager
async def lifespan(app: FastAPI):
    field = app.state.field
    # Ask for location as soon as the app comes up
    field.context.post(field.provider.request_start)
    yield
    field.context.shutdown()


def create_app(state: FieldState | None = None) -> FastAPI:
    config.configure_logging()
    app = FastAPI(title="Geo Field Logger API", version=__version__, lifespan=lifespan)
    app.state.field = state or build_state()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 422 bodies leave out the submitted input; NaN or a lone surrogate there
    # would make the error response itself unencodable
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        errors = [{k: v for k, v in e.items() if k != "input"} for e in exc.errors()]
        return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.get("/categories")
    def categories() -> list[CategoryOut]:
        return [CategoryOut.of(c) for c in ObservationCategory]

    app.include_router(location.router, prefix="/location", tags=["location"])
    app.include_router(records.router,  prefix="/records",  tags=["records"])
    app.include_router(export.router,   prefix="/export",   tags=["export"])
    return app


app = create_app()
