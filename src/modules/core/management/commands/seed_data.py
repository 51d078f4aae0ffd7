from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product


class Command(BaseCommand):
    help = "Seed database with sample products."

    catalog = [
        ('Monitor 27"', Decimal("1299.90"), True),
        ("Mechanical Keyboard", Decimal("399.90"), True),
        ("Gaming Mouse", Decimal("249.90"), True),
        ('Notebook 14"', Decimal("3999.00"), False),
        ("Headset", Decimal("299.90"), True),
        ("Office Desk", Decimal("899.00"), True),
        ("Ergonomic Chair", Decimal("1499.00"), False),
        ("A4 Paper", Decimal("29.90"), True),
    ]

    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        created = 0
        for name, price, availability in self.catalog:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "availability": availability},
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created} created, "
                f"{len(self.catalog) - created} already present"
            )
        )
