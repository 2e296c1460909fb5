from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn
from contextlib import asynccontextmanager

from core.config import settings
from core.logging import setup_logging
from db.database import check_connection, create_db_and_tables
from routers.live import router as live_router
from routers.reports import router as reports_router
from routers.stock import router as stock_router

logger = setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if await check_connection():
        await create_db_and_tables()
    yield


app = FastAPI(
    title="Floor Stock API",
    description="Floor-wise stock tracking by barcode",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request, exc: RequestValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid data"})


@app.get("/healthz", response_model=dict)
def health():
    return {"status": "healthy"}


# Stock movements + reporting
app.include_router(stock_router, prefix="/api", tags=["stock"])
app.include_router(reports_router, prefix="/api", tags=["reports"])

# Live updates
app.include_router(live_router, tags=["live"])

if __name__ == "__main__":
    logger.info("Floor Stock server starting on port %s", settings.port)
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port)
