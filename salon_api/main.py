import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import ALLOWED_ORIGINS, LOG_LEVEL, PORT
from .domain.appointments.router import router as appointments_router
from .domain.catalog.router import router as catalog_router
from .domain.orders.router import router as orders_router
from .domain.payments.router import router as payments_router
from .domain.payments.stripe_service import StripePaymentsService
from .domain.users.router import router as auth_router
from .errors import NotFound, SalonAPIError, ValidationError
from .storage import build_stores

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("stripe").setLevel(logging.WARNING)
logging.getLogger("passlib").setLevel(logging.ERROR)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    # State is per-process and volatile: every startup begins from the seed
    app.state.stores = build_stores()
    app.state.payments = StripePaymentsService()
    logger.info(f"🚀 Chi's Luxe Beauties API ready on port {PORT}")
    yield
    logger.info("Application shutting down...")


app = FastAPI(title="Chi's Luxe Beauties API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(SalonAPIError)
async def salon_error_handler(request: Request, exc: SalonAPIError):
    """Render every domain error as {error, details?} with its status code"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} - {exc.message}: {exc.details}")
    else:
        logger.warning(f"{request.method} {request.url.path} - {exc.status_code} {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing input is a 400 like any other ValidationError"""
    # A path id that is not an integer cannot name any record
    if any(tuple(err.get("loc", ()))[:1] == ("path",) for err in exc.errors()):
        return await salon_error_handler(request, NotFound())
    error = ValidationError(details=jsonable_encoder(exc.errors()))
    return await salon_error_handler(request, error)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise
    elapsed_ms = (time.time() - start_time) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
    return response


# Log CORS configuration for debugging
logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Routes
app.include_router(auth_router)
app.include_router(catalog_router)
app.include_router(orders_router)
app.include_router(payments_router)
app.include_router(appointments_router)


@app.get("/")
def root():
    return {"message": "Chi's Luxe Beauties backend API running"}


@app.get("/health")
def health():
    return {"status": "healthy"}


def run():
    """Console entry point: serve the API with uvicorn"""
    import uvicorn

    uvicorn.run("salon_api.main:app", host="0.0.0.0", port=PORT)  # noqa: S104


if __name__ == "__main__":
    run()
