"""Mutable profile configuration edited by the user before a session starts."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .errors import UserInputInvalid
from .types import ExperienceLevel, Profile


class ProfileStore:
    """Holds the editable profile; :meth:`snapshot` freezes it for a session."""

    def __init__(
        self,
        job_role_or_skill: str = "",
        experience_level: ExperienceLevel = 0,
        keywords: Iterable[str] = (),
        context_tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self.job_role_or_skill = job_role_or_skill.strip()
        self.experience_level = experience_level
        self._keywords: List[str] = []
        self.context_tags: Dict[str, str] = dict(context_tags or {})
        for keyword in keywords:
            self.add_keyword(keyword)

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileStore":
        return cls(
            job_role_or_skill=profile.job_role_or_skill,
            experience_level=profile.experience_level,
            keywords=profile.keywords,
            context_tags=profile.context_tags,
        )

    @property
    def keywords(self) -> List[str]:
        return list(self._keywords)

    def set_job_role_or_skill(self, value: str) -> None:
        self.job_role_or_skill = (value or "").strip()

    def set_experience_level(self, value: ExperienceLevel) -> None:
        if isinstance(value, str):
            value = value.strip()
        self.experience_level = value

    def add_keyword(self, keyword: str) -> bool:
        """Append ``keyword`` unless already present.

        Returns ``False`` for duplicates; raises :class:`UserInputInvalid` for blanks.
        """

        cleaned = (keyword or "").strip()
        if not cleaned:
            raise UserInputInvalid("Keyword must not be empty.")
        if cleaned in self._keywords:
            return False
        self._keywords.append(cleaned)
        return True

    def remove_keyword(self, keyword: str) -> bool:
        cleaned = (keyword or "").strip()
        if cleaned not in self._keywords:
            return False
        self._keywords.remove(cleaned)
        return True

    def set_context_tag(self, key: str, value: str) -> None:
        key = (key or "").strip()
        if not key:
            raise UserInputInvalid("Context tag name must not be empty.")
        value = (value or "").strip()
        if value:
            self.context_tags[key] = value
        else:
            self.context_tags.pop(key, None)

    def replace(self, profile: Profile) -> None:
        """Overwrite every field from ``profile`` (keywords re-deduplicated).

        All keywords are checked before anything is assigned, so a rejected
        profile leaves the store untouched.
        """

        keywords: List[str] = []
        for keyword in profile.keywords:
            cleaned = (keyword or "").strip()
            if not cleaned:
                raise UserInputInvalid("Keyword must not be empty.")
            if cleaned not in keywords:
                keywords.append(cleaned)
        self.job_role_or_skill = profile.job_role_or_skill.strip()
        self.experience_level = profile.experience_level
        self._keywords = keywords
        self.context_tags = dict(profile.context_tags)

    def snapshot(self) -> Profile:
        return Profile(
            job_role_or_skill=self.job_role_or_skill,
            experience_level=self.experience_level,
            keywords=tuple(self._keywords),
            context_tags=dict(self.context_tags),
        )


__all__ = ["ProfileStore"]
