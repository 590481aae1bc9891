from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum
import logging

from api.about import router as about_router
from api.artworks import router as artworks_router
from api.auth_admin import router as auth_router
from api.dashboard import router as dashboard_router
from app.config import ARTIST_NAME, get_allowed_origins

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=f"{ARTIST_NAME} API",
    description=f"API du portfolio de {ARTIST_NAME}",
    version="1.0.0"
)

# Configuration CORS
allowed_origins = get_allowed_origins()

# Si on utilise "*" (wildcard), désactiver credentials
allow_credentials = "*" not in allowed_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(auth_router, prefix="/api/admin", tags=["admin-auth"])
app.include_router(dashboard_router, prefix="/api/admin", tags=["admin-dashboard"])
app.include_router(artworks_router, prefix="/api/artworks", tags=["artworks"])
app.include_router(about_router, prefix="/api/about", tags=["about"])

ENDPOINTS = {
    "artworks": "/api/artworks",
    "about": "/api/about",
    "admin": "/api/admin",
}


@app.get("/")
async def root():
    return {"message": f"{ARTIST_NAME} API - FastAPI", "status": "healthy", "endpoints": ENDPOINTS}


@app.get("/api")
async def api_root():
    return {"message": f"{ARTIST_NAME} API - FastAPI", "status": "healthy", "endpoints": ENDPOINTS}


# Handler pour Vercel / AWS Lambda
handler = Mangum(app)
