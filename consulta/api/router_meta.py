"""
Meta endpoints: health, reload.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, BackgroundTasks, Depends

from consulta.data.store import Repository
from consulta.api.dependencies import get_repository_or_empty
from consulta.api.response_models import HealthResponse, ReloadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(repository: Repository = Depends(get_repository_or_empty)):
    """Counts per collection plus the sheets whose last load failed."""
    errors = repository.last_errors
    if errors:
        status = "degraded"
    elif repository.is_loaded:
        status = "ok"
    else:
        status = "loading"
    return HealthResponse(
        status=status,
        clients=len(repository.list_clients()),
        accounts=len(repository.list_accounts()),
        agencies=len(repository.list_agencies()),
        loaded_at=repository.loaded_at,
        errors=errors,
    )


def _do_reload(repository: Repository) -> None:
    summary = repository.load_all()
    if summary.ok:
        logger.info("Reload complete — %s", summary.counts)
    else:
        logger.warning("Reload finished with errors — %s", summary.errors)


@router.post("/reload", response_model=ReloadResponse)
def reload_data(
    background_tasks: BackgroundTasks,
    repository: Repository = Depends(get_repository_or_empty),
):
    """Re-download all sheets.

    Returns immediately, reload happens in background.
    """
    background_tasks.add_task(_do_reload, repository)
    return ReloadResponse(
        status="reloading",
        message="Reload started in background. Check /api/health for updated counts.",
    )
