import json

from django.core.management.base import BaseCommand, CommandError
from rest_framework.utils.encoders import JSONEncoder

from apps.api.exceptions import ApplicationError
from apps.catalog.container import build_product_service
from apps.catalog.serializers import ProductDetailSerializer


class Command(BaseCommand):
    help = 'Print every product with its variants (effective prices) as JSON'

    def add_arguments(self, parser):
        parser.add_argument('--indent', type=int, default=2, help='JSON indentation (0 for compact)')

    def handle(self, *args, **options):
        service = build_product_service()
        try:
            products = service.list_all_products()
        except ApplicationError as exc:
            raise CommandError(exc.message) from exc
        payload = {'products': ProductDetailSerializer(products, many=True).data}
        indent = options['indent'] or None
        self.stdout.write(json.dumps(payload, cls=JSONEncoder, indent=indent))
