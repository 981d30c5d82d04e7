import uuid

import django.core.validators
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
            name='Vote',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('delete_task', 'Delete task'), ('delete_expense', 'Delete expense'), ('delete_routine', 'Delete routine'), ('remove_member', 'Remove member'), ('delete_group', 'Delete group')], max_length=20)),
                ('target_id', models.CharField(max_length=64)),
                ('target_name', models.CharField(max_length=255)),
                ('voter_ids', models.JSONField(default=list)),
                ('required_votes', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('total_members', models.PositiveSmallIntegerField()),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('rejected', 'Rejected')], default='pending', max_length=10)),
                ('execution_error', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('resolved_at', models.DateTimeField(blank=True, null=True)),
                ('created_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_votes', to=settings.AUTH_USER_MODEL)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='votes', to='groups.group')),
            ],
            options={
                'db_table': 'votes',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['group', 'status'], name='vote_group_status_idx'),
                    models.Index(fields=['group', 'type', 'status'], name='vote_group_type_status_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('status', 'pending')), fields=('group', 'target_id'), name='unique_pending_vote_per_target'),
                ],
            },
        ),
    ]
