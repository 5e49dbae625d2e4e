from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created", models.DateTimeField(editable=False)),
                ("modified", models.DateTimeField(editable=False)),
                ("name", models.CharField(max_length=255)),
                ("username", models.CharField(blank=True, max_length=255, null=True)),
            ],
            options={
                "db_table": "users_user",
                "ordering": ["id"],
            },
        ),
    ]
