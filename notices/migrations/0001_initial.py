from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="DismissedNotice",
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
                (
                    "user_id",
                    models.CharField(
                        db_index=True,
                        help_text="User who dismissed the notice",
                        max_length=191,
                    ),
                ),
                (
                    "notice_key",
                    models.CharField(
                        help_text="Storage key of the dismissed notice",
                        max_length=191,
                    ),
                ),
                (
                    "dismissed",
                    models.BooleanField(
                        default=True,
                        help_text="Whether the notice is currently hidden for this user",
                    ),
                ),
                (
                    "dismissed_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="When the flag was last written",
                    ),
                ),
            ],
            options={
                "db_table": "dismissed_notices",
            },
        ),
        migrations.AddConstraint(
            model_name="dismissednotice",
            constraint=models.UniqueConstraint(
                fields=("user_id", "notice_key"),
                name="ux_dismissed_notices_user_key",
            ),
        ),
    ]
