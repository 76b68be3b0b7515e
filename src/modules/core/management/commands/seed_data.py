from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product


class Command(BaseCommand):
    help = "Seed database with development products."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete every product before seeding.",
        )

    def handle(self, *args, **options):
        if options["flush"]:
            deleted, _ = Product.objects.all().delete()
            self.stdout.write(f"Deleted {deleted} products.")

        self.stdout.write("Seeding development data...")
        products = self._seed_products()
        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: products={len(products)}")
        )

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ('Monitor 27"', Decimal("1299.90"), True),
            ("Mechanical Keyboard", Decimal("399.90"), True),
            ("Gaming Mouse", Decimal("249.90"), True),
            ('Notebook 14"', Decimal("3999.00"), False),
            ("Headset", Decimal("299.90"), True),
            ("Curved Monitor", Decimal("12130.00"), True),
            ("Office Chair", Decimal("1499.00"), False),
            ("Laptop Stand", Decimal("149.90"), True),
        ]
        for name, price, availability in catalog:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "availability": availability},
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products
