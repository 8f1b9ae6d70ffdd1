from django.db import migrations

INITIAL_CATEGORIES = [
    ("CLOTHING", "Clothing"),
    ("SHOES", "Shoes"),
    ("ACCESSORIES", "Accessories"),
]


def seed_categories(apps, schema_editor):
    Category = apps.get_model("catalog", "Category")
    for code, name in INITIAL_CATEGORIES:
        Category.objects.get_or_create(code=code, defaults={"name": name})


def unseed_categories(apps, schema_editor):
    Category = apps.get_model("catalog", "Category")
    Category.objects.filter(code__in=[code for code, _ in INITIAL_CATEGORIES]).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("catalog", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_categories, unseed_categories),
    ]
