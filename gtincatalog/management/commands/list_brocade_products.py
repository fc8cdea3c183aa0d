"""Management command to list products from the Brocade catalog.

Without ``--query`` the unfiltered product list is fetched; with it the
catalog filters by free text.

Usage example:
        python manage.py list_brocade_products --query "cucumber" --limit 5
"""

from django.core.management.base import BaseCommand, CommandError, CommandParser

from gtincatalog.services.brocade_impl import BrocadeClient, BrocadeError


class Command(BaseCommand):
    help = "Lists products from the Brocade catalog, optionally filtered by a query."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--query", type=str, default=None, help="Free-text filter sent to the catalog.")
        parser.add_argument(
            "--limit",
            type=int,
            default=20,
            help="Maximum number of products to print (default: 20)",
        )

    def handle(self, *args, **options) -> None:
        query = options["query"]
        limit = options["limit"]

        client = BrocadeClient()
        try:
            products = client.query_products(query) if query else client.get_product_list()
        except BrocadeError as e:
            raise CommandError(f"Could not list products: {e}")

        if not products:
            self.stdout.write(self.style.WARNING("No products found."))
            return

        self.stdout.write(self.style.NOTICE(f"Received {len(products)} product(s)."))
        for product in products[:limit]:
            self.stdout.write(f"{product.gtin14}  {product.brand_name or '-'}  {product.name or '-'}")
