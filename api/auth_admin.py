# api/auth_admin.py
"""
Authentification de l'admin unique (identifiants en variables d'environnement).

La session est un cookie httponly signé en HMAC-SHA256 qui ne contient que sa
date d'expiration: "payload_b64.signature_b64".
"""
from fastapi import APIRouter, Request, Response, HTTPException, Depends
from pydantic import BaseModel
from datetime import datetime, timedelta, timezone
import hmac
import hashlib
import base64
import json
import logging

from app.config import ADMIN_USERNAME, ADMIN_PASSWORD, SECRET_KEY, SESSION_DURATION_HOURS

logger = logging.getLogger(__name__)
router = APIRouter()

COOKIE_NAME = "auth_token"
LOCAL_HOSTS = ("localhost", "127.0.0.1")


def authenticate_admin(username: str, password: str) -> bool:
    """Vérifier les identifiants admin"""
    return (
        hmac.compare_digest(username.encode(), ADMIN_USERNAME.encode())
        and hmac.compare_digest(password.encode(), ADMIN_PASSWORD.encode())
    )


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode().rstrip('=')


def _b64decode(value: str) -> bytes:
    # Ajouter le padding retiré à l'encodage
    return base64.urlsafe_b64decode(value + '=' * (-len(value) % 4))


def _sign(payload_b64: str) -> str:
    signature = hmac.new(SECRET_KEY.encode(), payload_b64.encode(), hashlib.sha256).digest()
    return _b64encode(signature)


def create_signed_cookie(now: datetime = None) -> str:
    """Créer un cookie signé avec seulement la date d'expiration (timestamp UTC)"""
    now = now or datetime.now(timezone.utc)
    expiry = now + timedelta(hours=SESSION_DURATION_HOURS)
    payload = {"exp": int(expiry.timestamp())}

    payload_b64 = _b64encode(json.dumps(payload, separators=(',', ':')).encode())
    return f"{payload_b64}.{_sign(payload_b64)}"


def verify_signed_cookie(cookie_value: str, now: datetime = None) -> bool:
    """Vérifier la signature et l'expiration d'un cookie"""
    if not cookie_value:
        return False

    parts = cookie_value.split('.')
    if len(parts) != 2:
        return False
    payload_b64, signature_b64 = parts

    if not hmac.compare_digest(signature_b64.encode(), _sign(payload_b64).encode()):
        return False

    try:
        payload = json.loads(_b64decode(payload_b64).decode())
        expiry_timestamp = int(payload["exp"])
    except (ValueError, KeyError, TypeError):
        return False

    now = now or datetime.now(timezone.utc)
    return int(now.timestamp()) <= expiry_timestamp


def get_cookie_settings(request: Request, is_delete: bool = False) -> dict:
    """Paramètres du cookie selon l'environnement (secure hors localhost)"""
    hostname = request.url.hostname or ""
    is_production = hostname not in LOCAL_HOSTS
    is_vercel_preview = "vercel" in hostname.lower()

    settings = {
        "httponly": True,
        "secure": is_production or is_vercel_preview,
        "samesite": "none" if is_vercel_preview else "lax",
        "domain": None,
    }
    if is_delete:
        settings["max_age"] = 0
        settings["expires"] = "Thu, 01 Jan 1970 00:00:00 GMT"
    else:
        settings["max_age"] = SESSION_DURATION_HOURS * 3600
    return settings


# === Dépendance FastAPI pour l'authentification ===

async def require_admin_auth(request: Request) -> bool:
    """
    Dépendance FastAPI pour vérifier l'authentification admin.
    À utiliser avec Depends() dans les routes protégées.
    """
    auth_token = request.cookies.get(COOKIE_NAME)
    if not auth_token:
        raise HTTPException(
            status_code=401,
            detail="Authentification requise",
            headers={"WWW-Authenticate": "Bearer"}
        )

    if not verify_signed_cookie(auth_token):
        raise HTTPException(
            status_code=401,
            detail="Token invalide ou expiré",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return True


# === Routes API ===

class LoginRequest(BaseModel):
    username: str
    password: str


@router.post("/login")
async def login(request: Request, response: Response, creds: LoginRequest):
    if not authenticate_admin(creds.username, creds.password):
        logger.warning(f"Failed admin login attempt for '{creds.username}'")
        raise HTTPException(status_code=401, detail="Identifiants invalides")

    response.set_cookie(key=COOKIE_NAME, value=create_signed_cookie(), **get_cookie_settings(request))
    logger.info("Admin logged in")
    return {"success": True, "message": "Connexion réussie"}


@router.get("/verify")
async def verify(response: Response, _: bool = Depends(require_admin_auth)):
    # Pas de mise en cache de l'état de connexion
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, private"
    response.headers["Pragma"] = "no-cache"
    response.headers["Expires"] = "0"

    return {"valid": True, "username": ADMIN_USERNAME}


@router.post("/logout")
async def logout(request: Request, response: Response):
    response.set_cookie(key=COOKIE_NAME, value="", **get_cookie_settings(request, is_delete=True))
    return {"message": "Déconnexion réussie"}
