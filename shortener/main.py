from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse

from shortener.api.redirect import router as redirect_router
from shortener.api.v1.router import router as v1_router
from shortener.dependencies.store import build_store
from shortener.logging_config import setup_logging
from shortener.middleware.request_logging import request_logging_middleware

# Setup application logging
logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 在啟動時建立唯一的store，所有請求共用同一個實例
    # 關閉時不需要清理：資料只存在記憶體中，隨行程結束而消失
    app.state.store = build_store()
    logger.info("Link store initialized")
    yield


app = FastAPI(title="Short Link API", lifespan=lifespan)

app.middleware("http")(request_logging_middleware)

# v1 router must be included before the catch-all /{code} redirect route
app.include_router(v1_router, prefix="/api/v1")
app.include_router(redirect_router)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Unwrap the 'detail' field from HTTPException responses."""
    content = exc.detail

    if isinstance(content, dict):
        return JSONResponse(
            status_code=exc.status_code,
            content=content
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": HTTPStatus(exc.status_code).phrase,
            "message": content
        }
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    # exc_info=True：把完整的錯誤堆疊記錄下來
    logger.error(
        f"Unhandled exception: {exc.__class__.__name__}: {str(exc)}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    # Return safe, static message to client (no internal details exposed)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal Server Error",
            "message": "An unexpected error occurred",
        },
    )
