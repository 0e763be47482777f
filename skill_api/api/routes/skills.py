from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from skill_api.api.errors import SkillAPIError
from skill_api.database import get_db
from skill_api.schemas.skill import (
    ErrorResponse,
    MessageResponse,
    SkillCreate,
    SkillDescriptionUpdate,
    SkillListResponse,
    SkillLogoUpdate,
    SkillNameUpdate,
    SkillResponse,
    SkillTagsUpdate,
    SkillUpdate,
)
from skill_api.services import skills as skill_service
from skill_api.services.skills import (
    SkillAlreadyExistsError,
    SkillNotFoundError,
    SkillServiceError,
    SkillStoreError,
)


router = APIRouter(prefix="/skills", tags=["skills"])

logger = logging.getLogger(__name__)

SKILL_NOT_FOUND = "Skill not found"
SKILL_ALREADY_EXISTS = "Skill already exists"

# Fixed client-facing message per endpoint; also used for request validation failures.
ROUTE_ERRORS: dict[str, str] = {
    "get_skills": "not be able to get skills",
    "get_skill_by_key": "not be able to get skill",
    "create_skill": "not be able to create skill",
    "update_skill_by_key": "not be able to update skill",
    "update_skill_name_by_key": "not be able to update skill name",
    "update_skill_description_by_key": "not be able to update skill description",
    "update_skill_logo_by_key": "not be able to update skill logo",
    "update_skill_tags_by_key": "not be able to update skill tags",
    "delete_skill_by_key": "not be able to delete skill",
}

_ERROR_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.get("", response_model=SkillListResponse, responses=_ERROR_RESPONSES)
def get_skills(db: Session = Depends(get_db)) -> SkillListResponse:
    try:
        skills = skill_service.list_skills(db)
    except SkillStoreError as exc:
        logger.warning("Error: Can't get skills: %s", exc)
        raise SkillAPIError(status.HTTP_400_BAD_REQUEST, ROUTE_ERRORS["get_skills"]) from exc

    logger.info("Get skills success count=%d", len(skills))
    return SkillListResponse(data=skills)


@router.get(
    "/{key}",
    response_model=SkillResponse,
    responses={**_ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def get_skill_by_key(key: str, db: Session = Depends(get_db)) -> SkillResponse:
    try:
        skill = skill_service.get_skill(db, key)
    except SkillNotFoundError as exc:
        logger.info("Skill not found key=%s", key)
        raise SkillAPIError(status.HTTP_404_NOT_FOUND, SKILL_NOT_FOUND) from exc
    except SkillStoreError as exc:
        logger.warning("Error: Can't get skill key=%s: %s", key, exc)
        raise SkillAPIError(status.HTTP_400_BAD_REQUEST, ROUTE_ERRORS["get_skill_by_key"]) from exc

    logger.info("Get skill success key=%s", key)
    return SkillResponse(data=skill)


@router.post(
    "",
    response_model=SkillResponse,
    responses={**_ERROR_RESPONSES, status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
def create_skill(payload: SkillCreate, db: Session = Depends(get_db)) -> SkillResponse:
    try:
        skill = skill_service.create_skill(db, payload)
    except SkillAlreadyExistsError as exc:
        logger.info("Skill already exists key=%s", payload.key)
        raise SkillAPIError(status.HTTP_409_CONFLICT, SKILL_ALREADY_EXISTS) from exc
    except SkillStoreError as exc:
        logger.warning("Error: Can't create skill key=%s: %s", payload.key, exc)
        raise SkillAPIError(status.HTTP_400_BAD_REQUEST, ROUTE_ERRORS["create_skill"]) from exc

    logger.info("Create skill success key=%s", skill.key)
    return SkillResponse(data=skill)


def _update(db: Session, key: str, field: str, payload: BaseModel, endpoint: str) -> SkillResponse:
    try:
        skill = skill_service.update_skill(db, key, field, payload.model_dump())
    except SkillServiceError as exc:
        logger.warning("Error: Can't update skill %s key=%s: %s", field, key, exc)
        raise SkillAPIError(status.HTTP_400_BAD_REQUEST, ROUTE_ERRORS[endpoint]) from exc

    logger.info("Update skill %s success key=%s", field, key)
    return SkillResponse(data=skill)


@router.put("/{key}", response_model=SkillResponse, responses=_ERROR_RESPONSES)
def update_skill_by_key(key: str, payload: SkillUpdate, db: Session = Depends(get_db)) -> SkillResponse:
    return _update(db, key, "all", payload, "update_skill_by_key")


@router.patch("/{key}/actions/name", response_model=SkillResponse, responses=_ERROR_RESPONSES)
def update_skill_name_by_key(key: str, payload: SkillNameUpdate, db: Session = Depends(get_db)) -> SkillResponse:
    return _update(db, key, "name", payload, "update_skill_name_by_key")


@router.patch("/{key}/actions/description", response_model=SkillResponse, responses=_ERROR_RESPONSES)
def update_skill_description_by_key(
    key: str,
    payload: SkillDescriptionUpdate,
    db: Session = Depends(get_db),
) -> SkillResponse:
    return _update(db, key, "description", payload, "update_skill_description_by_key")


@router.patch("/{key}/actions/logo", response_model=SkillResponse, responses=_ERROR_RESPONSES)
def update_skill_logo_by_key(key: str, payload: SkillLogoUpdate, db: Session = Depends(get_db)) -> SkillResponse:
    return _update(db, key, "logo", payload, "update_skill_logo_by_key")


@router.patch("/{key}/actions/tags", response_model=SkillResponse, responses=_ERROR_RESPONSES)
def update_skill_tags_by_key(key: str, payload: SkillTagsUpdate, db: Session = Depends(get_db)) -> SkillResponse:
    return _update(db, key, "tags", payload, "update_skill_tags_by_key")


@router.delete("/{key}", response_model=MessageResponse, responses=_ERROR_RESPONSES)
def delete_skill_by_key(key: str, db: Session = Depends(get_db)) -> MessageResponse:
    try:
        skill_service.delete_skill(db, key)
    except SkillServiceError as exc:
        logger.warning("Error: Can't delete skill key=%s: %s", key, exc)
        raise SkillAPIError(status.HTTP_400_BAD_REQUEST, ROUTE_ERRORS["delete_skill_by_key"]) from exc

    logger.info("Delete skill success key=%s", key)
    return MessageResponse(message="Skill deleted")
