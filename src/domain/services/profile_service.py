"""Profile service owning the single in-memory profile record."""

import random
import threading
from copy import deepcopy
from typing import Any, ContextManager, Mapping

import structlog
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError
from domain.entities.profile import Profile, ProfileStats, ProfileUpdate

logger = structlog.get_logger()


def format_validation_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten pydantic errors into one readable message per problem."""
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        messages.append(f"{field}: {error['msg']}")
    return messages


class ProfileService:
    """Holds the profile and applies mutations last-write-wins.

    Every read-merge-write runs under ``lock``; upload routes execute on
    the worker thread pool, so the default is a ``threading.Lock``.
    """

    def __init__(
        self,
        initial: Profile,
        lock: ContextManager[Any] | None = None,
        views: random.Random | None = None,
    ) -> None:
        self._profile = initial
        self._lock = lock if lock is not None else threading.Lock()
        self._views = views or random.Random()

    def get(self) -> Profile:
        """Return a snapshot of the current profile."""
        with self._lock:
            return deepcopy(self._profile)

    def update(self, payload: Mapping[str, Any]) -> Profile:
        """Validate a partial update and merge the fields that were sent.

        Raises:
            ValidationError: if any present field breaks its constraints.
                The stored profile is left untouched.
        """
        try:
            update = ProfileUpdate.model_validate(payload)
        except PydanticValidationError as exc:
            errors = format_validation_errors(exc)
            logger.info("profile_update_rejected", errors=errors)
            raise ValidationError(errors) from exc

        changes = update.changes()
        with self._lock:
            for key, value in changes.items():
                setattr(self._profile, key, value)
            self._profile.touch()
            snapshot = deepcopy(self._profile)

        logger.info("profile_updated", fields=sorted(changes))
        return snapshot

    def set_photo_url(self, url: str) -> Profile:
        return self._set_field("photo_url", url)

    def set_resume_url(self, url: str) -> Profile:
        return self._set_field("resume_url", url)

    def stats(self) -> ProfileStats:
        """Derived view; ``profile_views`` is mock data regenerated per call."""
        with self._lock:
            return ProfileStats(
                profile_views=self._views.randint(100, 1099),
                last_updated=self._profile.updated_at,
                skills_count=len(self._profile.skills),
                has_resume=bool(self._profile.resume_url),
                has_photo=bool(self._profile.photo_url),
            )

    def _set_field(self, field: str, url: str) -> Profile:
        with self._lock:
            setattr(self._profile, field, url)
            self._profile.touch()
            snapshot = deepcopy(self._profile)
        logger.info("profile_file_linked", field=field, url=url)
        return snapshot
