from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdftopng.api.routers import convert
from pdftopng.core.config import settings

OPENAPI_DESCRIPTION = """
PDF to PNG API.

## API groups
- **convert** – upload a PDF, get one PNG per page (base64) with page metadata
"""

app = FastAPI(
    title="PDF to PNG API",
    description=OPENAPI_DESCRIPTION,
    version="0.1.0",
    openapi_url="/api/v1/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "convert", "description": "Render PDF pages to PNG"},
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(convert.router)

app.include_router(api_router)


@app.get("/", tags=["root"])
async def root():
    """Root endpoint; returns API info."""
    return {"message": "PDF to PNG API"}


@app.get("/health", tags=["root"])
async def health_check():
    """Health check for load balancer / monitoring."""
    return {"status": "healthy"}
