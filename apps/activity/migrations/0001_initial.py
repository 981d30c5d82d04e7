import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('groups', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Activity',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('task_created', 'Task created'), ('task_completed', 'Task completed'), ('task_uncompleted', 'Task reopened'), ('task_deleted', 'Task deleted'), ('member_joined', 'Member joined'), ('member_left', 'Member left'), ('vote_created', 'Vote created'), ('vote_completed', 'Vote completed'), ('expense_added', 'Expense added'), ('expense_deleted', 'Expense deleted')], max_length=32)),
                ('user_name', models.CharField(blank=True, max_length=100)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('timestamp', models.DateTimeField(auto_now_add=True)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='activities', to='groups.group')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='activities', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'activities',
                'ordering': ['-timestamp'],
                'indexes': [models.Index(fields=['group', 'timestamp'], name='activity_group_ts_idx')],
            },
        ),
    ]
