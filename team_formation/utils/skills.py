"""
Skill set utilities

Skills are compared exactly after trimming surrounding whitespace; case is
significant ("PHP" and "php" are different skills).
"""

import json
import logging
import math
from typing import Any, Iterable, Iterator, Optional

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic_core import core_schema

logger = logging.getLogger(__name__)


class SkillSet:
    """
    Immutable, deduplicated collection of skill names

    Equality and membership follow set semantics, but iteration keeps the
    order in which skills were first seen so that requirement order
    survives normalization.
    """

    __slots__ = ("_items", "_members")

    def __init__(self, skills: Optional[Iterable[str]] = None):
        items = []
        members = set()
        for skill in skills or ():
            if skill not in members:
                members.add(skill)
                items.append(skill)
        self._items = tuple(items)
        self._members = frozenset(members)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, skill: object) -> bool:
        return skill in self._members

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SkillSet):
            return self._members == other._members
        if isinstance(other, (set, frozenset)):
            return self._members == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        return f"SkillSet({list(self._items)!r})"

    def intersect(self, other: Iterable[str]) -> "SkillSet":
        other_members = _members_of(other)
        return SkillSet(s for s in self._items if s in other_members)

    def union(self, other: Iterable[str]) -> "SkillSet":
        return SkillSet(list(self._items) + list(other))

    def difference(self, other: Iterable[str]) -> "SkillSet":
        other_members = _members_of(other)
        return SkillSet(s for s in self._items if s not in other_members)

    def issuperset(self, other: Iterable[str]) -> bool:
        return self._members.issuperset(_members_of(other))

    def to_list(self) -> list:
        return list(self._items)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any,
                                     handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            normalize,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda s: s.to_list()),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema,
                                     handler: GetJsonSchemaHandler) -> dict:
        return {"type": "array", "items": {"type": "string"}, "uniqueItems": True}


def _members_of(skills: Iterable[str]) -> frozenset:
    if isinstance(skills, SkillSet):
        return skills._members
    return frozenset(skills)


def normalize(raw_skills: Any) -> SkillSet:
    """
    Build a SkillSet from free-text or delimited input

    Accepts a SkillSet, a JSON array string, a comma-delimited string or any
    iterable of strings. Sets are taken in sorted order. Entries are trimmed; empty entries and non-string
    entries are dropped. Malformed input degrades to an empty set.

    Args:
        raw_skills: Raw skill data

    Returns:
        Normalized SkillSet
    """
    if raw_skills is None:
        return SkillSet()
    if isinstance(raw_skills, SkillSet):
        return raw_skills

    if isinstance(raw_skills, str):
        text = raw_skills.strip()
        if text.startswith("["):
            try:
                raw_skills = json.loads(text)
            except ValueError:
                logger.debug(f"Could not decode skill list: {text!r}")
                return SkillSet()
            if not isinstance(raw_skills, list):
                return SkillSet()
        else:
            raw_skills = text.split(",")
    elif isinstance(raw_skills, (set, frozenset)):
        # Hash order varies between processes
        raw_skills = sorted(s for s in raw_skills if isinstance(s, str))

    try:
        entries = list(raw_skills)
    except TypeError:
        logger.debug(f"Ignoring non-iterable skill data: {raw_skills!r}")
        return SkillSet()

    return SkillSet(
        entry.strip() for entry in entries
        if isinstance(entry, str) and entry.strip()
    )


def coverage_ratio(skills: Any, required_skills: Any) -> float:
    """
    Fraction of ``required_skills`` present in ``skills``

    Defined as 0.0 when nothing is required.
    """
    required = normalize(required_skills)
    if not required:
        return 0.0
    return len(required.intersect(normalize(skills))) / len(required)


def round_percentage(value: float) -> int:
    """Round a percentage half away from zero (12.5 -> 13)"""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def intersect(left: Any, right: Any) -> SkillSet:
    """Skills present in both collections, in the order of ``left``"""
    return normalize(left).intersect(normalize(right))


def union(left: Any, right: Any) -> SkillSet:
    """All skills of ``left`` followed by the new skills of ``right``"""
    return normalize(left).union(normalize(right))


def difference(left: Any, right: Any) -> SkillSet:
    """Skills of ``left`` that are not in ``right``"""
    return normalize(left).difference(normalize(right))
