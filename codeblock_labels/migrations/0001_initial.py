from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PluginData",
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
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("key", models.CharField(max_length=100, unique=True)),
                ("data", models.JSONField(blank=True, default=dict)),
            ],
            options={
                "verbose_name": "plugin data",
                "verbose_name_plural": "plugin data",
                "ordering": ["key"],
            },
        ),
    ]
