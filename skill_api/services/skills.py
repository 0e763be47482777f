from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from skill_api.models.skill import Skill
from skill_api.schemas.skill import SkillCreate, SkillRead


class SkillServiceError(RuntimeError):
    pass


class SkillNotFoundError(SkillServiceError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Skill '{key}' not found")


class SkillAlreadyExistsError(SkillServiceError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Skill '{key}' already exists")


class SkillStoreError(SkillServiceError):
    pass


_COLUMNS = (Skill.key, Skill.name, Skill.description, Skill.logo, Skill.tags)

# Columns written by each update target. "all" is the full replacement used by PUT.
UPDATE_FIELDS: dict[str, tuple[str, ...]] = {
    "name": ("name",),
    "description": ("description",),
    "logo": ("logo",),
    "tags": ("tags",),
    "all": ("name", "description", "logo", "tags"),
}


def _to_skill(row: RowMapping) -> SkillRead:
    return SkillRead.model_validate(dict(row))


def list_skills(db: Session) -> list[SkillRead]:
    try:
        rows = db.execute(select(*_COLUMNS).order_by(Skill.key)).mappings().all()
    except SQLAlchemyError as exc:
        db.rollback()
        raise SkillStoreError("Failed to list skills") from exc
    return [_to_skill(row) for row in rows]


def get_skill(db: Session, key: str) -> SkillRead:
    try:
        row = db.execute(select(*_COLUMNS).where(Skill.key == key)).mappings().one_or_none()
    except SQLAlchemyError as exc:
        db.rollback()
        raise SkillStoreError(f"Failed to get skill '{key}'") from exc
    if row is None:
        raise SkillNotFoundError(key)
    return _to_skill(row)


def create_skill(db: Session, payload: SkillCreate) -> SkillRead:
    stmt = insert(Skill).values(**payload.model_dump()).returning(*_COLUMNS)
    try:
        row = db.execute(stmt).mappings().one()
        db.commit()
    except IntegrityError as exc:
        # The primary key is the only constraint that can fail on a validated payload.
        db.rollback()
        raise SkillAlreadyExistsError(payload.key) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise SkillStoreError(f"Failed to create skill '{payload.key}'") from exc
    return _to_skill(row)


def update_skill(db: Session, key: str, field: str, values: Mapping[str, Any]) -> SkillRead:
    """Run the UPDATE ... RETURNING statement for one update target.

    `field` is one of UPDATE_FIELDS; only the columns it names are written, any other
    entries in `values` are ignored. Raises SkillNotFoundError when no row has `key`.
    """

    columns = UPDATE_FIELDS.get(field)
    if columns is None:
        raise ValueError(f"Unknown skill field '{field}'")

    missing = [column for column in columns if column not in values]
    if missing:
        raise ValueError(f"Missing value(s) for skill field '{field}': {', '.join(missing)}")

    stmt = (
        update(Skill)
        .where(Skill.key == key)
        .values({column: values[column] for column in columns})
        .returning(*_COLUMNS)
        .execution_options(synchronize_session=False)
    )
    try:
        row = db.execute(stmt).mappings().one_or_none()
        if row is None:
            db.rollback()
            raise SkillNotFoundError(key)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise SkillStoreError(f"Failed to update skill '{key}' ({field})") from exc
    return _to_skill(row)


def delete_skill(db: Session, key: str) -> None:
    stmt = (
        delete(Skill)
        .where(Skill.key == key)
        .returning(Skill.key)
        .execution_options(synchronize_session=False)
    )
    try:
        deleted = db.execute(stmt).scalar_one_or_none()
        if deleted is None:
            db.rollback()
            raise SkillNotFoundError(key)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise SkillStoreError(f"Failed to delete skill '{key}'") from exc
