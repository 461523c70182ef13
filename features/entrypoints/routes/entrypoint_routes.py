from fastapi import APIRouter
from features.entrypoints.models.entrypoint_types import EntrypointManifest
from features.entrypoints.registry import get_manifest

router = APIRouter(tags=["Entrypoints"])

@router.get(
    "/entrypoints",
    response_model=EntrypointManifest,
    summary="List priced entrypoints",
    description="Returns every entrypoint with its route, description and price"
)
async def list_entrypoints() -> EntrypointManifest:
    return get_manifest()
