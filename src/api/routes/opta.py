from __future__ import annotations

from fastapi import APIRouter, HTTPException

from core.persistence import OPTA_FILE_NAMES, load_opta

router = APIRouter(prefix="/opta", tags=["opta"])


@router.get("/{competition}", summary="Proiezioni Opta (sola lettura)")
def get_opta(competition: str):
    if competition not in OPTA_FILE_NAMES:
        raise HTTPException(status_code=404, detail=f"unknown competition {competition!r}")
    items = load_opta(competition)
    return {"count": len(items), "items": items}
