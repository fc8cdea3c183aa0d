import logging

from django.core.management.base import BaseCommand, CommandError, CommandParser

from gtincatalog.services.brocade_impl import BrocadeClient, BrocadeError
from gtincatalog.services.gtin_impl import GTIN, GTINParseError

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Fetches a single product record from the Brocade catalog by GTIN."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("gtin", type=str, help="The 14-digit, zero-padded GTIN.")

    def handle(self, *args, **options) -> None:
        try:
            gtin = GTIN.parse(options["gtin"])
        except GTINParseError as e:
            raise CommandError(str(e))

        if not gtin.is_valid():
            self.stdout.write(self.style.WARNING(f"GTIN {gtin} fails validation; querying the catalog anyway."))

        client = BrocadeClient()
        try:
            product = client.get_product(gtin)
        except BrocadeError as e:
            logger.error(f"Could not fetch product {gtin}: {e}")
            raise CommandError(f"Could not fetch product {gtin}: {e}")

        self.stdout.write(self.style.SUCCESS(f"Found product for GTIN {product.gtin14}"))
        self.stdout.write(f"  Brand: {product.brand_name or '-'}")
        self.stdout.write(f"  Name:  {product.name or '-'}")
