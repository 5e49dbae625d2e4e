"""
User repository - persistence gateway for the User entity.
"""

import logging
from typing import Optional

from django.db import transaction

from .models import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Save and look up users.

    Each ``save`` runs in its own transaction; audit timestamps are filled
    in by the ``pre_save`` hook before the row is written. Database errors
    propagate to the caller unchanged.
    """

    model = User

    def save(self, user: User) -> User:
        """Insert or update ``user`` and return it with id and timestamps set."""
        inserting = user._state.adding
        with transaction.atomic():
            user.save()
        logger.info(
            f"{'Inserted' if inserting else 'Updated'} user {user.pk} "
            f"(modified={user.modified.isoformat()})"
        )
        return user

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with primary key ``user_id``, or None."""
        return self.model.objects.filter(pk=user_id).first()
