from django.db import migrations, models

from events.domain import normalize_name


def populate_name_key(apps, schema_editor):
    Event = apps.get_model("events", "Event")
    for row in Event.objects.all():
        row.name_key = normalize_name(row.name)
        row.save(update_fields=["name_key"])


class Migration(migrations.Migration):

    dependencies = [
        ("events", "0001_initial"),
    ]

    operations = [
        migrations.RemoveConstraint(
            model_name="event",
            name="events_event_name_ci_unique",
        ),
        migrations.AddField(
            model_name="event",
            name="name_key",
            field=models.CharField(editable=False, max_length=255, null=True),
        ),
        migrations.RunPython(populate_name_key, migrations.RunPython.noop),
        migrations.AlterField(
            model_name="event",
            name="name_key",
            field=models.CharField(editable=False, max_length=255),
        ),
        migrations.AddConstraint(
            model_name="event",
            constraint=models.UniqueConstraint(
                fields=["name_key"], name="events_event_name_key_unique"
            ),
        ),
    ]
