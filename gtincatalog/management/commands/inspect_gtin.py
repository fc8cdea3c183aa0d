"""Management command to inspect a GTIN without touching the network.

Usage example:
        python manage.py inspect_gtin 09780262134729
"""

from django.core.management.base import BaseCommand, CommandError, CommandParser

from gtincatalog.services.gtin_impl import GTIN, GTINClassificationError, GTINParseError


class Command(BaseCommand):
    help = "Parses a 14-digit GTIN and reports its type, check digit and validity."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("gtin", type=str, help="The 14-digit, zero-padded GTIN.")

    def handle(self, *args, **options) -> None:
        try:
            gtin = GTIN.parse(options["gtin"])
        except GTINParseError as e:
            raise CommandError(str(e))

        self.stdout.write(self.style.NOTICE(f"GTIN: {gtin}"))

        try:
            gtin_type = gtin.classify()
            self.stdout.write(f"Type:             {gtin_type.value}")
            self.stdout.write(f"Indicator digit:  {gtin.indicator_digit()}")
        except GTINClassificationError as e:
            self.stdout.write(self.style.WARNING(f"Type:             unrecognized ({e})"))

        self.stdout.write(f"Leading zeros:    {gtin.leading_zeros()}")
        self.stdout.write(f"Check digit:      {gtin.check_digit()} (calculated: {gtin.calculate_check_digit()})")

        if gtin.is_valid():
            self.stdout.write(self.style.SUCCESS("Valid GTIN."))
        else:
            self.stdout.write(self.style.ERROR("Invalid GTIN."))
