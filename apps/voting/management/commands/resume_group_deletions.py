"""
Management command to finish group deletions that were interrupted.

A group whose cascading delete stopped halfway keeps its
deletion_started_at stamp and refuses new votes and joins until the
remaining rows are gone.

Usage:
    python manage.py resume_group_deletions
    python manage.py resume_group_deletions --dry-run
"""

from django.core.management.base import BaseCommand
from apps.groups.models import Group
from apps.voting.services import resume_group_deletions


class Command(BaseCommand):
    help = 'Finish cascading deletes of groups stamped as being deleted'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='List the groups without deleting anything',
        )

    def handle(self, *args, **options):
        pending = Group.objects.filter(deletion_started_at__isnull=False)
        count = pending.count()

        if count == 0:
            self.stdout.write(
                self.style.SUCCESS('No interrupted group deletions. All good!')
            )
            return

        self.stdout.write(f'\nFound {count} group(s) with an unfinished deletion:\n')

        for group in pending:
            self.stdout.write(
                f'  - {group.name} | {group.id} | Started: {group.deletion_started_at}'
            )

        if options['dry_run']:
            self.stdout.write(
                self.style.WARNING('\n--dry-run mode: No changes made.')
            )
            return

        finished = resume_group_deletions()

        self.stdout.write(
            self.style.SUCCESS(f'\nFinished deleting {len(finished)} group(s).')
        )
