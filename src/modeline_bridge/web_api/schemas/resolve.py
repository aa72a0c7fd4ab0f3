"""
Resolve Schemas
===============
Request and response models for the resolve endpoints.
"""
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

SettingValue = Union[bool, int, str]


class ResolveRequest(BaseModel):
    """Buffer text to scan for mode lines"""

    text: str = Field(..., description="Full buffer contents")
    aliases: Optional[Dict[str, str]] = Field(
        default=None,
        description="Extra mode aliases; these win over configured and built-in ones",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "// -*- mode: c++; tab-width: 4 -*-\nint main() {}\n",
                "aliases": {"c++": "cpp"},
            }
        }
    )


class AppliedSettingModel(BaseModel):
    """One setting applied from a mode line"""

    kind: str
    option: str
    value: SettingValue
    directive: str
    origin: str
    line: int


class ResolveResponse(BaseModel):
    """Resolved settings for a buffer"""

    language: Optional[str] = Field(default=None)
    settings: Dict[str, SettingValue] = Field(default_factory=dict)
    applied: List[AppliedSettingModel] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "language": "cpp",
                "settings": {"filetype": "cpp", "tabstop": 4, "shiftwidth": 0, "softtabstop": -1},
                "applied": [],
            }
        }
    )


class AliasesResponse(BaseModel):
    """Merged mode alias table"""

    aliases: Dict[str, str] = Field(default_factory=dict)
