# __init__.py
from skill_api.models.skill import Skill

__all__ = [
	"Skill",
]
