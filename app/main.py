# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.dao.course_dao import CourseDao
from app.dao.review_dao import ReviewDao
from app.database import SessionLocal, init_db
from app.exceptions import ApiError
from app.routers import courses, reviews
from app.utils.sample_data import seed_sample_data

import time
import logging
from fastapi import Request
from app.logging_config import setup_logging


setup_logging()
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(_: FastAPI):
    # 建立資料表（若不存在）
    init_db(drop=settings.DROP_TABLES_IF_EXIST)

    if settings.INITIALIZE_WITH_SAMPLE_DATA:
        db = SessionLocal()
        try:
            seed_sample_data(CourseDao(db), ReviewDao(db))
        finally:
            db.close()

    yield


app = FastAPI(title="CourseReVU RESTful API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, err: ApiError):
    logger.warning("%s %s failed: %s (%d)", request.method, request.url.path, err.message, err.status)
    return JSONResponse(
        status_code=err.status,
        content={"status": err.status, "errorMessage": err.message},
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    try:
        response = await call_next(request)
        ms = int((time.time() - start) * 1000)
        logger.info("%s %s -> %s (%dms)", request.method, request.url.path, response.status_code, ms)
        return response
    except Exception:
        ms = int((time.time() - start) * 1000)
        logger.exception("Unhandled error %s %s (%dms)", request.method, request.url.path, ms)
        raise


# CORS 設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(courses.router)
app.include_router(reviews.router)

@app.get("/")
def root():
    return {"message": "CourseReVU RESTful API"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
