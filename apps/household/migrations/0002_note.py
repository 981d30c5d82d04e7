import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('groups', '0001_initial'),
        ('household', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Note',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('content', models.CharField(max_length=200)),
                ('color', models.CharField(choices=[('#FFE066', 'Yellow'), ('#FFB3BA', 'Pink'), ('#BAE1FF', 'Blue'), ('#BAFFC9', 'Green'), ('#FFD9BA', 'Orange'), ('#E0BBE4', 'Purple')], default='#FFE066', max_length=7)),
                ('author_name', models.CharField(blank=True, max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('created_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='notes', to=settings.AUTH_USER_MODEL)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='notes', to='groups.group')),
            ],
            options={
                'db_table': 'household_notes',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['group', 'created_at'], name='note_group_created_idx')],
            },
        ),
    ]
