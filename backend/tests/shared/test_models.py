"""
Tests for shared models.
"""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from shared.models import AuthenticatedUser, CamelModel


class TestAuthenticatedUser:
    """Tests for the AuthenticatedUser model in shared."""

    def test_create_with_required_fields(self):
        """Should create user with only the ID."""
        user = AuthenticatedUser(id=7)
        assert user.id == 7
        assert user.session_id is None
        assert user.expires_at is None

    def test_all_fields(self):
        """Should accept session fields."""
        expires = datetime(2030, 1, 1, tzinfo=timezone.utc)
        user = AuthenticatedUser(id=7, session_id="sid", expires_at=expires)
        assert user.session_id == "sid"
        assert user.expires_at == expires

    def test_is_immutable(self):
        """Should not allow modification."""
        user = AuthenticatedUser(id=7)
        with pytest.raises(ValidationError):
            user.id = 8

    def test_ignores_extra_fields(self):
        """Should ignore unknown fields."""
        user = AuthenticatedUser(id=7, role="admin")
        assert not hasattr(user, "role")


class Sample(CamelModel):
    page_number: int
    processing_time: int = 0


class TestCamelModel:
    def test_dumps_camel_case(self):
        """Wire output should use camelCase keys."""
        assert Sample(page_number=1).model_dump(by_alias=True) == {
            "pageNumber": 1,
            "processingTime": 0,
        }

    def test_accepts_both_spellings(self):
        """Input should accept snake_case and camelCase."""
        assert Sample(page_number=2).page_number == 2
        assert Sample.model_validate({"pageNumber": 3}).page_number == 3
