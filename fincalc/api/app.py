"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fincalc.api.parsing import request_errors
from fincalc.api.routes import growth, mortgage
from fincalc.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_title,
    description="Compound growth and mortgage amortization calculators",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(growth.router)
app.include_router(mortgage.router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Same {field, message} 422 body the engine validator produces."""
    detail = request_errors(exc.errors())
    logger.info("Request to %s rejected: %s", request.url.path, ", ".join(d["field"] for d in detail))
    return JSONResponse(status_code=422, content={"detail": detail})


@app.get("/health")
async def health():
    return {"status": "ok"}
