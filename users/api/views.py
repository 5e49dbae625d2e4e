from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, mixins, viewsets

from users.api.filters import UserFilter
from users.api.serializers import UserSerializer
from users.models import User
from users.repositories import UserRepository


class UserViewSet(
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    """ViewSet for Users.

    Supports create, retrieve, update and list. Writes go through
    ``UserRepository`` so every save is audited in its own transaction.
    Users cannot be deleted through the API.
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_class = UserFilter
    search_fields = ["name", "username"]
    ordering_fields = ["id", "name", "username", "created", "modified"]
    ordering = ["id"]
    repository_class = UserRepository

    def get_serializer_context(self):
        """Add the repository used for writes to the serializer context."""
        context = super().get_serializer_context()
        context["repository"] = self.repository_class()
        return context
