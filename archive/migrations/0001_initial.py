import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='InstanceRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('sop_instance_uid', models.CharField(max_length=255, unique=True)),
                ('study_instance_uid', models.CharField(db_index=True, max_length=255)),
                ('series_instance_uid', models.CharField(blank=True, db_index=True, max_length=255)),
                ('document', models.JSONField(default=dict)),
                ('source_path', models.CharField(blank=True, max_length=1024)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'instance_records',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.CreateModel(
            name='DataElement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tag', models.CharField(max_length=8)),
                ('vr', models.CharField(max_length=2)),
                ('component', models.CharField(blank=True, max_length=16)),
                ('position', models.PositiveIntegerField(default=0)),
                ('value', models.TextField(blank=True)),
                ('record', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='elements', to='archive.instancerecord')),
            ],
            options={
                'db_table': 'data_elements',
                'ordering': ['record', 'tag', 'position'],
                'indexes': [
                    models.Index(fields=['tag'], name='data_elem_tag_idx'),
                    models.Index(fields=['record', 'tag'], name='data_elem_record_tag_idx'),
                ],
            },
        ),
    ]
