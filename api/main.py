# api/main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import catalog
from app.meta import router as meta
from ddragon.errors import DDragonError, DecodeFailure, FetchFailure, InvalidQuery, NotFound, ReadFailure
from util.logging import setup_logger

log = setup_logger("api")

STATUS_BY_ERROR = {
    NotFound: 404,
    InvalidQuery: 400,
    FetchFailure: 502,
    ReadFailure: 500,
    DecodeFailure: 500,
}

app = FastAPI(
    title="Data Dragon Catalog API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],        # tighten this in prod
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(DDragonError)
def ddragon_error(request: Request, exc: DDragonError):
    status = STATUS_BY_ERROR.get(type(exc), 500)
    if status >= 500:
        log.error(f"{request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=status, content=exc.to_dict())

# Health Check
@app.get("/")
def root():
    return {"status": "ok", "service": "Data Dragon Catalog API"}

app.include_router(meta.router)
app.include_router(catalog.router)
