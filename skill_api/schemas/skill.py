from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class SkillRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    name: str
    description: str
    logo: str
    tags: list[str]


class SkillCreate(BaseModel):
    key: str = Field(min_length=1)
    name: str = ""
    description: str = ""
    logo: str = ""
    tags: list[str] = Field(default_factory=list)


class SkillUpdate(BaseModel):
    name: str
    description: str
    logo: str
    tags: list[str]


class SkillNameUpdate(BaseModel):
    name: str


class SkillDescriptionUpdate(BaseModel):
    description: str


class SkillLogoUpdate(BaseModel):
    logo: str


class SkillTagsUpdate(BaseModel):
    tags: list[str]


class SkillResponse(BaseModel):
    status: Literal["success"] = "success"
    data: SkillRead


class SkillListResponse(BaseModel):
    status: Literal["success"] = "success"
    data: list[SkillRead]


class MessageResponse(BaseModel):
    status: Literal["success"] = "success"
    message: str


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    message: str
