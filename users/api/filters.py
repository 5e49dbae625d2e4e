import django_filters

from ..models import User


class UserFilter(django_filters.FilterSet):
    """Filter class for User model."""

    name = django_filters.CharFilter(lookup_expr="icontains")
    username = django_filters.CharFilter(lookup_expr="iexact")

    class Meta:
        model = User
        fields = {
            "created": ["gte", "lte"],
            "modified": ["gte", "lte"],
        }
