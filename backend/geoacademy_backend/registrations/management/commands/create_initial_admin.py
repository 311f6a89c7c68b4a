from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
import os


class Command(BaseCommand):
    help = 'Creates the dashboard admin account from environment variables'

    def handle(self, *args, **options):
        User = get_user_model()

        username = os.getenv('DJANGO_ADMIN_USERNAME')
        password = os.getenv('DJANGO_ADMIN_PASSWORD')

        if not username or not password:
            self.stdout.write(self.style.WARNING(
                'Skipping admin creation: DJANGO_ADMIN_USERNAME or DJANGO_ADMIN_PASSWORD not set'
            ))
            return

        if User.objects.filter(username=username).exists():
            self.stdout.write(self.style.SUCCESS(f'Admin {username} already exists'))
            return

        User.objects.create_superuser(username=username, email=username if '@' in username else '', password=password)
        self.stdout.write(self.style.SUCCESS(f'Admin created successfully: {username}'))
