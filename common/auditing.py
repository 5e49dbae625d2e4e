"""
Timestamp stamping rules for audited models.

The rules here are plain functions so they can be exercised without a
database; ``common.signals`` wires them into the ORM save cycle.
"""

import logging

from django.conf import settings
from django.db import models
from django.utils import timezone

logger = logging.getLogger(__name__)


class AuditOperation(models.TextChoices):
    """Kind of write an audited instance is about to go through."""

    INSERT = "insert", "Insert"
    UPDATE = "update", "Update"


def auditing_enabled():
    """Return True when the ``AUDITING_ENABLED`` setting is switched on.

    Returns
    -------
    bool
        Current value of the toggle, ``False`` when the setting is missing
    """
    return bool(getattr(settings, "AUDITING_ENABLED", False))


def operation_for(instance):
    """Classify the pending write for ``instance``.

    Parameters
    ----------
    instance : django.db.models.Model
        Model instance about to be saved

    Returns
    -------
    AuditOperation
        INSERT for instances that were never persisted, UPDATE otherwise
    """
    if instance._state.adding:
        return AuditOperation.INSERT
    return AuditOperation.UPDATE


def stamp_audit_fields(instance, operation, now=None):
    """Assign ``created``/``modified`` on ``instance`` for the given operation.

    Parameters
    ----------
    instance : common.models.Audit
        Audited instance to stamp in place
    operation : AuditOperation
        Whether the instance is being inserted or updated
    now : datetime.datetime, optional
        Timestamp to use, defaults to ``timezone.now()``

    Returns
    -------
    common.models.Audit
        The same instance, for chaining
    """
    operation = AuditOperation(operation)
    if now is None:
        now = timezone.now()

    if operation == AuditOperation.INSERT:
        instance.created = now
        instance.modified = now
    else:
        instance.modified = now

    logger.debug(
        f"Stamped {operation.label.lower()} of {instance.__class__.__name__} "
        f"pk={instance.pk} at {now.isoformat()}"
    )
    return instance
