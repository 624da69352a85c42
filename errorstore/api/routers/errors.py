from fastapi import APIRouter, Depends

from errorstore.api.deps import get_registry
from errorstore.core.config import settings
from errorstore.schemas.error import ClientExport
from errorstore.services.registry import ErrorRegistry

router = APIRouter(prefix=settings.export_prefix, tags=["errors"])


@router.get("", response_model=ClientExport)
def export_errors(registry: ErrorRegistry = Depends(get_registry)):
    """Error tables for the front-end error handling library."""
    exported = registry.export_for_client()
    if not settings.expose_debug:
        for meta in exported["errorMetaMap"].values():
            meta["debug"] = ""
    return exported
