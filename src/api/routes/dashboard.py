from __future__ import annotations

from fastapi import APIRouter, HTTPException

from core.persistence import load_dashboard

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", summary="Ultimo snapshot dashboard.json")
def get_dashboard():
    """Snapshot scritto da scripts/build_dashboard.py; 404 finché non esiste."""
    dashboard = load_dashboard()
    if not dashboard:
        raise HTTPException(status_code=404, detail="dashboard not built yet")
    return dashboard
