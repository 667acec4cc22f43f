"""
Initial migration for Countman models.
"""

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Countman models: Location, DraftCount, StockLevel."""

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Location',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Unique location name (ex: Dock, Aisle 4)', max_length=100, unique=True, verbose_name='Name')),
                ('description', models.CharField(blank=True, default='', max_length=255, verbose_name='Description')),
                ('is_active', models.BooleanField(default=True, help_text='Inactive locations are hidden from scanners.', verbose_name='Active')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Location',
                'verbose_name_plural': 'Locations',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='DraftCount',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_id', models.CharField(db_index=True, max_length=64, verbose_name='Product ID')),
                ('product_code', models.CharField(blank=True, default='', help_text='Scanned code at the time of the first scan.', max_length=64, verbose_name='Code')),
                ('product_name', models.CharField(blank=True, default='', max_length=255, verbose_name='Product')),
                ('location', models.CharField(max_length=100, verbose_name='Location')),
                ('quantity', models.PositiveIntegerField(default=1, verbose_name='Quantity')),
                ('status', models.CharField(choices=[('DRAFT', 'Draft'), ('COMMITTED', 'Committed')], default='DRAFT', max_length=20, verbose_name='Status')),
                ('scanned_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Scanned at')),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Counted by')),
            ],
            options={
                'verbose_name': 'Draft Count',
                'verbose_name_plural': 'Draft Counts',
                'ordering': ['-scanned_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='StockLevel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_id', models.CharField(max_length=64, verbose_name='Product ID')),
                ('location', models.CharField(db_index=True, max_length=100, verbose_name='Location')),
                ('on_hand', models.IntegerField(default=0, verbose_name='On hand')),
                ('available', models.IntegerField(default=0, verbose_name='Available')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Stock Level',
                'verbose_name_plural': 'Stock Levels',
                'ordering': ['location', 'product_id'],
            },
        ),
        # Indexes and constraints
        migrations.AddIndex(
            model_name='draftcount',
            index=models.Index(fields=['location', 'status'], name='countman_draft_loc_status_idx'),
        ),
        migrations.AddConstraint(
            model_name='draftcount',
            constraint=models.UniqueConstraint(condition=models.Q(('status', 'DRAFT')), fields=('product_id', 'location'), name='unique_draft_per_product_location'),
        ),
        migrations.AddConstraint(
            model_name='stocklevel',
            constraint=models.UniqueConstraint(fields=('product_id', 'location'), name='unique_stock_level_per_product_location'),
        ),
    ]
