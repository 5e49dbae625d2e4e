from django.db import models
from django.utils import timezone

from .auditing import AuditOperation, auditing_enabled, stamp_audit_fields
from .exceptions import NonUpdatableFieldError


class AuditQuerySet(models.QuerySet):
    """QuerySet that keeps audit timestamps current on bulk writes.

    ``update()`` and ``bulk_create()`` never send ``pre_save``, so the
    stamping has to happen here instead.
    """

    def update(self, **kwargs):
        """Bulk update rows, refreshing ``modified``.

        Parameters
        ----------
        **kwargs
            Column values to write

        Returns
        -------
        int
            Number of rows matched

        Raises
        ------
        NonUpdatableFieldError
            If a column fixed at insert time is included
        """
        for field_name in self.model.non_updatable_fields:
            if field_name in kwargs:
                raise NonUpdatableFieldError(
                    f"{field_name} cannot be changed after insert", field=field_name
                )
        if auditing_enabled():
            kwargs.setdefault("modified", timezone.now())
        return super().update(**kwargs)

    update.alters_data = True
    update.queryset_only = False

    def bulk_create(self, objs, *args, **kwargs):
        """Insert ``objs`` in bulk with both timestamps populated."""
        objs = list(objs)
        if auditing_enabled():
            now = timezone.now()
            for obj in objs:
                stamp_audit_fields(obj, AuditOperation.INSERT, now=now)
        return super().bulk_create(objs, *args, **kwargs)

    bulk_create.alters_data = True


class Audit(models.Model):
    """Abstract base model for audit trails with timestamp tracking.

    Subclasses opt in to automatic stamping: ``created`` is assigned once on
    insert and left out of every later UPDATE, ``modified`` is refreshed on
    each write. The stamping itself is done by the ``pre_save`` receiver in
    ``common.signals``.
    """

    created = models.DateTimeField(editable=False)
    modified = models.DateTimeField(editable=False)

    non_updatable_fields = ("created",)

    objects = AuditQuerySet.as_manager()

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        """Save the instance, never writing non-updatable columns on UPDATE."""
        if not self._state.adding:
            kwargs["update_fields"] = self._updatable_fields(kwargs.get("update_fields"))
        super().save(*args, **kwargs)

    def _updatable_fields(self, update_fields=None):
        """Return the column names an UPDATE of this instance may write.

        Parameters
        ----------
        update_fields : iterable of str, optional
            Fields the caller asked for, ``None`` meaning all of them

        Returns
        -------
        list of str
            Requested (or all loaded non-PK) fields minus the
            non-updatable ones, always including ``modified``
        """
        if update_fields is None:
            deferred = self.get_deferred_fields()
            update_fields = [
                field.name
                for field in self._meta.concrete_fields
                if not field.primary_key and field.attname not in deferred
            ]
        fields = [
            name for name in update_fields if name not in self.non_updatable_fields
        ]
        if "modified" not in fields:
            fields.append("modified")
        return fields
