import factory

from .models import User


class UserFactory(factory.django.DjangoModelFactory):
    """Factory for creating User instances."""

    name = factory.Faker("name")
    username = factory.Sequence(lambda n: f"user{n}")

    class Meta:
        model = User
