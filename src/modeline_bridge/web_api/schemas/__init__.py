"""
Pydantic Schemas
===============
Request and response models for the API.
"""
from .resolve import AliasesResponse, AppliedSettingModel, ResolveRequest, ResolveResponse

__all__ = ["AliasesResponse", "AppliedSettingModel", "ResolveRequest", "ResolveResponse"]
