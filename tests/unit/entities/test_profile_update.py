"""Unit tests for ProfileUpdate validation rules."""

import pytest
from pydantic import ValidationError

from domain.entities.profile import ProfileUpdate

REQUIRED = {"name": "Jordan Lee", "bio": "Backend engineer who enjoys tidy APIs."}


def _error_fields(exc: ValidationError) -> set[str]:
    return {str(error["loc"][0]) for error in exc.errors()}


class TestProfileUpdate:
    def test_name_and_bio_required(self):
        with pytest.raises(ValidationError) as exc_info:
            ProfileUpdate.model_validate({"location": "Oslo"})

        assert {"name", "bio"} <= _error_fields(exc_info.value)

    def test_changes_only_contains_sent_fields(self):
        update = ProfileUpdate.model_validate({**REQUIRED, "location": "Oslo"})

        assert update.changes() == {**REQUIRED, "location": "Oslo"}

    def test_changes_use_attribute_names(self):
        update = ProfileUpdate.model_validate({**REQUIRED, "githubUrl": "https://github.com/jl"})

        assert update.changes()["github_url"] == "https://github.com/jl"
        assert "githubUrl" not in update.changes()

    @pytest.mark.parametrize(
        "payload,field",
        [
            ({"name": "A"}, "name"),
            ({"name": "x" * 101}, "name"),
            ({"bio": "too short"}, "bio"),
            ({"bio": "x" * 1001}, "bio"),
            ({"skills": []}, "skills"),
            ({"skills": [f"s{i}" for i in range(21)]}, "skills"),
            ({"skills": [""]}, "skills"),
            ({"skills": ["x" * 51]}, "skills"),
            ({"githubUrl": "not a url"}, "githubUrl"),
            ({"email": "nobody-at-example"}, "email"),
            ({"phone": "0123456789"}, "phone"),
            ({"phone": "+1 555"}, "phone"),
            ({"location": "x" * 101}, "location"),
            ({"location": ""}, "location"),
            ({"phone": "+1\u0662\u0663\u0664\u0665\u0666\u0667\u0668\u0669"}, "phone"),
        ],
    )
    def test_rejects_out_of_range_values(self, payload: dict, field: str):
        with pytest.raises(ValidationError) as exc_info:
            ProfileUpdate.model_validate({**REQUIRED, **payload})

        assert field in _error_fields(exc_info.value)

    @pytest.mark.parametrize("field", ["name", "bio", "skills", "email", "location"])
    def test_rejects_null(self, field: str):
        with pytest.raises(ValidationError) as exc_info:
            ProfileUpdate.model_validate({**REQUIRED, field: None})

        assert field in _error_fields(exc_info.value)

    @pytest.mark.parametrize(
        "field", ["id", "photoUrl", "resumeUrl", "createdAt", "updatedAt", "unknown"]
    )
    def test_rejects_server_owned_and_unknown_fields(self, field: str):
        with pytest.raises(ValidationError) as exc_info:
            ProfileUpdate.model_validate({**REQUIRED, field: "x"})

        assert field in _error_fields(exc_info.value)

    def test_boundary_lengths_accepted(self):
        update = ProfileUpdate.model_validate(
            {
                "name": "Al",
                "bio": "x" * 10,
                "skills": ["x" * 50] * 20,
                "location": "x" * 100,
            }
        )

        assert update.name == "Al"
        assert len(update.skills or []) == 20

    def test_keeps_url_as_sent(self):
        update = ProfileUpdate.model_validate({**REQUIRED, "githubUrl": "https://github.com"})

        assert update.github_url == "https://github.com"

    @pytest.mark.parametrize(
        "phone", ["+1 (555) 123-4567", "5551234567", "+44 20 7946 0958"]
    )
    def test_accepts_phone_formats(self, phone: str):
        assert ProfileUpdate.model_validate({**REQUIRED, "phone": phone}).phone == phone
