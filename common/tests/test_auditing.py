from datetime import datetime, timedelta, timezone as dt_timezone
from unittest.mock import patch

import pytest

from django.contrib.auth.models import Group

from common.auditing import (
    AuditOperation,
    auditing_enabled,
    operation_for,
    stamp_audit_fields,
)
from common.signals import stamp_audit_timestamps
from users.factories import UserFactory
from users.models import User

NOW = datetime(2024, 5, 1, 9, 30, tzinfo=dt_timezone.utc)


class TestStampAuditFields:
    """Test the timestamp assignment rules without a database."""

    def test_insert_sets_created_and_modified(self):
        """Test that an insert assigns the same instant to both fields."""
        user = User(name="Rashidi Zin", username="rashidi.zin")

        result = stamp_audit_fields(user, AuditOperation.INSERT, now=NOW)

        assert result is user
        assert user.created == NOW
        assert user.modified == NOW

    def test_update_only_touches_modified(self):
        """Test that an update leaves created alone."""
        user = User(name="Rashidi Zin", username="rashidi.zin")
        user.created = NOW
        user.modified = NOW
        later = NOW + timedelta(minutes=5)

        stamp_audit_fields(user, AuditOperation.UPDATE, now=later)

        assert user.created == NOW
        assert user.modified == later

    def test_accepts_operation_value(self):
        """Test that the raw choice value is accepted as the operation."""
        user = User(name="Rashidi Zin", username="rashidi.zin")

        stamp_audit_fields(user, "insert", now=NOW)

        assert user.created == NOW

    def test_defaults_to_current_time(self):
        """Test that the current time is used when none is given."""
        user = User(name="Rashidi Zin", username="rashidi.zin")

        with patch("common.auditing.timezone.now", return_value=NOW):
            stamp_audit_fields(user, AuditOperation.INSERT)

        assert user.created == NOW
        assert user.modified == NOW

    def test_unknown_operation_rejected(self):
        """Test that an operation outside insert/update is refused."""
        user = User(name="Rashidi Zin", username="rashidi.zin")

        with pytest.raises(ValueError):
            stamp_audit_fields(user, "delete", now=NOW)
        assert user.created is None


class TestAuditingToggle:
    """Test the AUDITING_ENABLED setting lookup."""

    def test_enabled_in_project_settings(self):
        assert auditing_enabled() is True

    def test_disabled_through_settings(self, settings):
        settings.AUDITING_ENABLED = False
        assert auditing_enabled() is False

    def test_missing_setting_means_disabled(self, settings):
        del settings.AUDITING_ENABLED
        assert auditing_enabled() is False


@pytest.mark.django_db
class TestOperationFor:
    """Test insert/update classification."""

    def test_new_instance_is_insert(self):
        assert operation_for(User(name="New", username="new")) == AuditOperation.INSERT

    def test_persisted_instance_is_update(self):
        user = UserFactory()
        assert operation_for(user) == AuditOperation.UPDATE

    def test_reloaded_instance_is_update(self):
        user = UserFactory()
        assert operation_for(User.objects.get(pk=user.pk)) == AuditOperation.UPDATE


class TestStampAuditTimestampsReceiver:
    """Test the pre_save receiver in isolation."""

    def test_ignores_models_without_audit(self):
        """Test that models not extending Audit are left untouched."""
        group = Group(name="editors")

        stamp_audit_timestamps(sender=Group, instance=group)

        assert not hasattr(group, "created")
        assert not hasattr(group, "modified")

    def test_noop_when_auditing_disabled(self, settings):
        settings.AUDITING_ENABLED = False
        user = User(name="Rashidi Zin", username="rashidi.zin")

        stamp_audit_timestamps(sender=User, instance=user)

        assert user.created is None
        assert user.modified is None

    def test_raw_save_keeps_fixture_timestamps(self):
        """Test that loading fixtures does not overwrite stored timestamps."""
        user = User(name="Rashidi Zin", username="rashidi.zin")
        user.created = NOW
        user.modified = NOW + timedelta(days=1)

        stamp_audit_timestamps(sender=User, instance=user, raw=True)

        assert user.created == NOW
        assert user.modified == NOW + timedelta(days=1)

    def test_raw_save_without_timestamps_is_stamped(self):
        user = User(name="Rashidi Zin", username="rashidi.zin")

        with patch("common.auditing.timezone.now", return_value=NOW):
            stamp_audit_timestamps(sender=User, instance=user, raw=True)

        assert user.created == NOW
        assert user.modified == NOW
