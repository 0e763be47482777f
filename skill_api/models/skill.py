# skill.py
from sqlalchemy import JSON, Column, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import FunctionElement

from skill_api.database import Base


# TEXT[] on PostgreSQL, JSON everywhere else (sqlite for dev and tests).
TagList = JSON().with_variant(ARRAY(Text), "postgresql")


class empty_tags(FunctionElement):
    """Server-side default for `tags`: an empty array literal in the store's own syntax."""

    type = TagList
    inherit_cache = True


@compiles(empty_tags)
def _compile_empty_tags(element, compiler, **kw):
    return "'[]'"


@compiles(empty_tags, "postgresql")
def _compile_empty_tags_postgresql(element, compiler, **kw):
    return "'{}'"


class Skill(Base):
    __tablename__ = "skill"

    key = Column(Text, primary_key=True)
    name = Column(Text, nullable=False, default="", server_default="")
    description = Column(Text, nullable=False, default="", server_default="")
    logo = Column(Text, nullable=False, default="", server_default="")
    tags = Column(TagList, nullable=False, default=list, server_default=empty_tags())
