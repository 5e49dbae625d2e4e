from django.core.exceptions import ValidationError
from django.db import models

from common.exceptions import BlankValueError
from common.models import Audit


def _is_blank(value):
    return value is None or not str(value).strip()


class User(Audit):
    """Model representing an application user.

    Identity is generated by the database on first insert; ``created`` and
    ``modified`` are maintained by the auditing hook inherited from
    ``Audit``.
    """

    name = models.CharField(max_length=255)
    username = models.CharField(max_length=255, null=True, blank=True)

    class Meta:
        ordering = ["id"]
        db_table = "users_user"

    def __str__(self):
        return f"{self.name} ({self.username})"

    def set_name(self, name):
        """Set the display name.

        Parameters
        ----------
        name : str
            New display name, must not be blank

        Returns
        -------
        User
            This instance, for chaining

        Raises
        ------
        BlankValueError
            If ``name`` is empty or whitespace only; the current name is kept
        """
        if _is_blank(name):
            raise BlankValueError("name must not be blank", field="name")
        self.name = name
        return self

    def set_username(self, username):
        """Set the login handle.

        Parameters
        ----------
        username : str
            New username, must not be blank

        Returns
        -------
        User
            This instance, for chaining

        Raises
        ------
        BlankValueError
            If ``username`` is empty or whitespace only; the current value is kept
        """
        if _is_blank(username):
            raise BlankValueError("username must not be blank", field="username")
        self.username = username
        return self

    def clean(self):
        """Reject blank ``name``/``username`` during model validation."""
        errors = {}
        if _is_blank(self.name):
            errors["name"] = "Name must not be blank."
        if _is_blank(self.username):
            errors["username"] = "Username must not be blank."
        if errors:
            raise ValidationError(errors)
