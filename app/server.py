import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv

from app.services.config import settings
from app.services.errors import ResumeToolsError
from app.utils.db import init_db
from app.utils.rate_limit import limiter
from app.routers.analyze import router as analyze_router
from app.routers.analyses import router as analyses_router
from app.routers.clerk import router as clerk_router
from app.routers.resume import router as resume_router

# Load environment variables
load_dotenv()

# Logging
logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)
logger = logging.getLogger("uvicorn.error")

# Create FastAPI app
app = FastAPI(
    title="AI Resume Tools",
    description="ATS match analysis, cover letters and resume rewrites powered by Gemini",
    version="0.1.0",
    redoc_url="/redoc",
    docs_url="/docs",
)

# Include routers immediately so they appear in Swagger Docs
app.include_router(analyze_router, prefix="/api")
app.include_router(resume_router, prefix="/api")
app.include_router(analyses_router, prefix="/api")
app.include_router(clerk_router, prefix="/api")

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every error leaves the API as {"error": message}
@app.exception_handler(ResumeToolsError)
async def resume_tools_error_handler(request: Request, exc: ResumeToolsError):
    return JSONResponse(status_code=exc.http_status(), content={"error": exc.user_message()})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


# Root endpoint
@app.get("/")
@limiter.limit("100/minute")
def read_root(request: Request):
    return {"message": "Welcome to AI Resume Tools"}


@app.get("/health")
def health():
    return {"status": "ok"}


# Initialize DB at startup (local runs only)
@app.on_event("startup")
async def start_db():
    try:
        logger.info("Initializing database (startup)...")
        await init_db()
        logger.info("Database initialized successfully.")
    except Exception as e:
        logger.error(f"Database initialization failed: {repr(e)}")


# Local run entrypoint
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.server:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)
