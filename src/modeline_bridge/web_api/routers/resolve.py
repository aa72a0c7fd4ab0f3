"""
Resolve Router
==============
Endpoints that run the mode-line engine on submitted text.
"""
from functools import lru_cache
from pathlib import Path

import jsonschema
from fastapi import APIRouter, Depends, HTTPException

from modeline_bridge import api as core_api
from modeline_bridge.contracts.load import validate_instance
from modeline_bridge.core.config import CONFIG_SCHEMA, BridgeConfig
from modeline_bridge.core.dictionary import ModeDictionary
from modeline_bridge.web_api.config import settings
from modeline_bridge.web_api.schemas.resolve import (
    AliasesResponse,
    ResolveRequest,
    ResolveResponse,
)

router = APIRouter()


@lru_cache(maxsize=1)
def get_engine_config() -> BridgeConfig:
    """Engine configuration, loaded once per process."""
    path = settings.MODELINE_BRIDGE_CONFIG
    return BridgeConfig.from_yaml(Path(path)) if path else BridgeConfig()


@lru_cache(maxsize=1)
def get_dictionary() -> ModeDictionary:
    """Startup alias table shared by all requests (read-only)."""
    return core_api.build_dictionary(get_engine_config())


@router.post("/resolve", response_model=ResolveResponse)
async def resolve(
    request: ResolveRequest,
    config: BridgeConfig = Depends(get_engine_config),
    dictionary: ModeDictionary = Depends(get_dictionary),
):
    """
    Resolve the mode-line settings of a buffer.

    - **text**: buffer contents
    - **aliases**: optional per-request mode aliases
    """
    if len(request.text.encode("utf-8")) > settings.MAX_TEXT_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"Text exceeds {settings.MAX_TEXT_BYTES} bytes",
        )

    if request.aliases:
        try:
            validate_instance({"aliases": request.aliases}, CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            raise HTTPException(status_code=422, detail=f"Invalid aliases: {e.message}")
        # Request aliases first so they win; the shared table is not modified.
        dictionary = ModeDictionary(request.aliases).merge(dictionary.as_dict())

    result = core_api.resolve_text(
        request.text,
        config=config,
        dictionary=dictionary,
        source="<request>",
    )
    return ResolveResponse(
        language=result["language"],
        settings=result["settings"],
        applied=result["applied"],
    )


@router.get("/aliases", response_model=AliasesResponse)
async def list_aliases(dictionary: ModeDictionary = Depends(get_dictionary)):
    """
    Return the merged mode alias table.
    """
    return AliasesResponse(aliases=dictionary.as_dict())


def reload_engine_config() -> None:
    """Drop cached configuration so the next request reloads it."""
    get_engine_config.cache_clear()
    get_dictionary.cache_clear()
