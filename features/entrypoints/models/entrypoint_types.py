from typing import List
from pydantic import BaseModel, Field

class Entrypoint(BaseModel):
    """A priced operation exposed by the service."""
    key: str
    method: str = "GET"
    path: str
    description: str
    price: int = Field(..., description="Price in USDC base units (1000 = $0.001)")

class EntrypointManifest(BaseModel):
    name: str
    version: str
    description: str
    entrypoints: List[Entrypoint]
