from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.v1 import countries, theme
from app.core.config import settings
from app.core.logging_config import setup_logging

# Setup logging
logger = setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Country Explorer",
    description="Look up a country by name and describe how to display it",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(countries.router, prefix="/v1", tags=["countries"])
app.include_router(theme.router, prefix="/v1", tags=["theme"])


@app.get("/")
async def root():
    return {"status": "ok", "service": "Country Explorer", "version": "1.0.0"}


@app.get("/health")
async def health():
    return {"status": "healthy", "service": "Country Explorer"}


@app.on_event("startup")
async def startup_event():
    logger.info("Country Explorer started, using %s", settings.RESTCOUNTRIES_BASE_URL)


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Country Explorer shutting down")
