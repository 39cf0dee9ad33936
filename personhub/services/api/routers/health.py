# personhub/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from personhub.common.settings import get_settings

router = APIRouter(tags=["health"])

@router.get("/ping", response_class=PlainTextResponse)
def ping() -> str:
    return "pong"

@router.get("/healthz")
def healthz(request: Request):
    s = get_settings()
    handle = getattr(request.app.state, "storage", None)
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "storage": bool(handle is not None and handle.ping()),
    }
