# __init__.py
from skill_api.schemas.skill import (
	ErrorResponse,
	MessageResponse,
	SkillCreate,
	SkillDescriptionUpdate,
	SkillListResponse,
	SkillLogoUpdate,
	SkillNameUpdate,
	SkillRead,
	SkillResponse,
	SkillTagsUpdate,
	SkillUpdate,
)

__all__ = [
	"ErrorResponse",
	"MessageResponse",
	"SkillCreate",
	"SkillDescriptionUpdate",
	"SkillListResponse",
	"SkillLogoUpdate",
	"SkillNameUpdate",
	"SkillRead",
	"SkillResponse",
	"SkillTagsUpdate",
	"SkillUpdate",
]
