from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import Category, Product, Variant
from apps.common import get_logger

logger = get_logger(__name__).bind(component='common', layer='command')

CATEGORIES = [
    ('CLOTHING', 'Clothing'),
    ('SHOES', 'Shoes'),
    ('ACCESSORIES', 'Accessories'),
]

# (code, price, category code, [(variant name, sku suffix, price or None)])
PRODUCTS = [
    ('PROD001', '10.99', 'CLOTHING', [('Small', 'S', None), ('Medium', 'M', None), ('Large', 'L', '11.49')]),
    ('PROD002', '12.49', 'SHOES', [('Size 40', '40', None), ('Size 42', '42', None)]),
    ('PROD003', '8.75', 'ACCESSORIES', [('Standard', 'STD', None)]),
    ('PROD004', '15.00', 'CLOTHING', [('Small', 'S', '14.00'), ('Large', 'L', None)]),
    ('PROD005', '7.25', 'ACCESSORIES', []),
    ('PROD006', '100.00', 'SHOES', [('Size 41', '41', '95.00'), ('Size 43', '43', None)]),
    ('PROD007', '20.50', 'CLOTHING', [('One size', 'OS', None)]),
    ('PROD008', '5.99', 'ACCESSORIES', [('Black', 'BLK', None), ('Brown', 'BRN', '6.49')]),
]


class Command(BaseCommand):
    help = 'Seed the catalog with demo categories, products and variants'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='Delete existing products and variants before seeding',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['reset']:
            deleted, _ = Product.objects.all().delete()
            logger.info('Catalog reset', deleted_rows=deleted)
            self.stdout.write(self.style.WARNING(f'Deleted {deleted} rows'))

        categories = {}
        for code, name in CATEGORIES:
            category, created = Category.objects.get_or_create(code=code, defaults={'name': name})
            categories[code] = category
            if created:
                logger.debug('Seeded category', code=code)

        product_count = 0
        variant_count = 0
        for code, price, category_code, variants in PRODUCTS:
            product, _ = Product.objects.update_or_create(
                code=code,
                defaults={'price': Decimal(price), 'category': categories[category_code]},
            )
            product_count += 1
            for name, suffix, variant_price in variants:
                Variant.objects.update_or_create(
                    product=product,
                    sku=f'{code}-{suffix}',
                    defaults={
                        'name': name,
                        'price': Decimal(variant_price) if variant_price is not None else None,
                    },
                )
                variant_count += 1

        logger.info('Catalog seeded', products=product_count, variants=variant_count)
        self.stdout.write(
            self.style.SUCCESS(
                f'Seeded {len(categories)} categories, {product_count} products, {variant_count} variants'
            )
        )
