# main.py
import logging
import time

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from settings import settings
from errors import ApiError, DEFAULT_STATUS

from api.latest import router as latest_router
from api.draw_dates import router as draw_dates_router
from api.draws import router as draws_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("app")

app = FastAPI(title="Atlantic Lottery results API")


@app.get("/health")
def health():
    return {"ok": True}


app.include_router(latest_router)      # /latest, /latest/{game}
app.include_router(draw_dates_router)  # /draw_dates/{game}
app.include_router(draws_router)       # /draw/{game}/{date}, /draws/{game}/{count}


@app.middleware("http")
async def cors_and_access_log(request: Request, call_next):
    start = time.perf_counter()
    response: Response = await call_next(request)
    response.headers["Access-Control-Allow-Origin"] = "*"
    logger.info("%s %s %s %.3fs", request.method, request.url.path, response.status_code,
                time.perf_counter() - start)
    return response


def _error(message: str, status: int) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    logger.warning("%s: %s", request.url.path, exc.message)
    return _error(exc.message, exc.status)


@app.exception_handler(httpx.HTTPStatusError)
async def upstream_status_handler(request: Request, exc: httpx.HTTPStatusError):
    message = f"Request failed with status code {exc.response.status_code}"
    logger.warning("%s: upstream %s", request.url.path, message)
    return _error(message, DEFAULT_STATUS)


@app.exception_handler(httpx.RequestError)
async def upstream_transport_handler(request: Request, exc: httpx.RequestError):
    message = str(exc) or type(exc).__name__
    logger.warning("%s: upstream unreachable: %s", request.url.path, message)
    return _error(message, DEFAULT_STATUS)


@app.exception_handler(ValidationError)
async def payload_error_handler(request: Request, exc: ValidationError):
    err = exc.errors()[0]
    where = ".".join(str(p) for p in err["loc"])
    message = f"Invalid upstream payload: {where or 'body'}: {err['msg']}"
    logger.warning("%s: %s", request.url.path, message)
    return _error(message, DEFAULT_STATUS)


@app.exception_handler(ValueError)
async def decode_error_handler(request: Request, exc: ValueError):
    # malformed upstream dates
    logger.warning("%s: %s", request.url.path, exc)
    return _error(str(exc), DEFAULT_STATUS)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # unmatched paths and unmatched methods alike
    if exc.status_code in (404, 405):
        return _error("Invalid endpoint!", 404)
    return _error(str(exc.detail), exc.status_code)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
