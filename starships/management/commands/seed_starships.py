from django.core.management.base import BaseCommand

from starships.services import seed_starships


class Command(BaseCommand):
    help = "Seed an empty starship store from SWAPI, or the embedded set if SWAPI is unavailable"

    def handle(self, *args, **options):
        source = seed_starships()
        if source is None:
            self.stdout.write("Starships already present; nothing to do.")
        else:
            self.stdout.write(self.style.SUCCESS(f"Seeded starships from {source}."))
