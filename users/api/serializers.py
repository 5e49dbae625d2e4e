from rest_framework import serializers

from ..models import User


class UserSerializer(serializers.ModelSerializer):
    """Serializer for User model.

    ``created`` and ``modified`` are owned by the auditing hook and are
    never accepted from clients.
    """

    username = serializers.CharField(max_length=255)

    class Meta:
        model = User
        fields = [
            "id",
            "name",
            "username",
            "created",
            "modified",
        ]
        read_only_fields = [
            "id",
            "created",
            "modified",
        ]

    def create(self, validated_data):
        user = User()
        user.set_name(validated_data["name"]).set_username(validated_data["username"])
        return self.context["repository"].save(user)

    def update(self, instance, validated_data):
        if "name" in validated_data:
            instance.set_name(validated_data["name"])
        if "username" in validated_data:
            instance.set_username(validated_data["username"])
        return self.context["repository"].save(instance)
