from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .core import config
from .core.database import engine, Base
from .auth import router as auth_router
from .catalog import products_router, rackets_router, shoes_router, shuttlecocks_router
from .cart import router as cart_router
import logging

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Không cho phép khởi động khi thiếu khóa ký JWT
    if not config.SECRET_KEY:
        logger.error("SECRET_KEY is not set, refusing to start")
        raise RuntimeError("SECRET_KEY environment variable must be set")

    # Create tables when starting up
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Error creating database tables: {str(e)}")
        raise

    yield


app = FastAPI(title="Badminton Shop API", lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Tham số sai kiểu (path, query, body) là lỗi phía client: 400 thay vì 422
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())}
    )


# Exception handler for generic exceptions
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


# Health check endpoint
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "Server is running"}


# Include routers
app.include_router(auth_router)
app.include_router(products_router)
app.include_router(rackets_router)
app.include_router(shoes_router)
app.include_router(shuttlecocks_router)
app.include_router(cart_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("badminton_api.main:app", host="0.0.0.0", port=config.PORT, reload=config.DEBUG, log_level="info")
