from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="License",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("key", models.CharField(db_index=True, max_length=100, unique=True)),
                (
                    "owner",
                    models.CharField(
                        db_index=True, help_text="Login of the issuing account", max_length=150
                    ),
                ),
                ("product", models.CharField(max_length=255)),
                (
                    "one_time",
                    models.BooleanField(default=False, help_text="Recorded only; not enforced"),
                ),
                ("expire_time", models.DateTimeField()),
                ("created_at", models.DateTimeField()),
            ],
            options={
                "db_table": "licenses",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["key", "owner"], name="licenses_key_owner_idx")
                ],
            },
        ),
    ]
