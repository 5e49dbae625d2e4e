"""
Signal receivers that stamp audit timestamps on every model save.
"""

from django.db.models.signals import pre_save
from django.dispatch import receiver

from .auditing import auditing_enabled, operation_for, stamp_audit_fields
from .models import Audit


@receiver(pre_save, dispatch_uid="common.stamp_audit_timestamps")
def stamp_audit_timestamps(sender, instance, raw=False, **kwargs):
    """Assign ``created``/``modified`` before an audited row is written.

    Models opt in by subclassing ``common.models.Audit``; every other sender
    is ignored. Fixture loads (``raw``) keep the timestamps they carry.
    """
    if not isinstance(instance, Audit) or not auditing_enabled():
        return
    if raw and instance.created is not None and instance.modified is not None:
        return

    stamp_audit_fields(instance, operation_for(instance))
