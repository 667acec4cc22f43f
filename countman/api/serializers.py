from rest_framework import serializers

from countman.models import DraftCount
from countman.services.drafts import MAX_QUANTITY


class ScanSerializer(serializers.Serializer):
    barcode = serializers.CharField(max_length=64, trim_whitespace=True)
    location = serializers.CharField(max_length=100)


class DraftUpdateSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    quantity = serializers.IntegerField(max_value=MAX_QUANTITY)


class CommitSerializer(serializers.Serializer):
    location = serializers.CharField(max_length=100)


class ReviewQuerySerializer(serializers.Serializer):
    location = serializers.CharField(max_length=100)


class DraftCountSerializer(serializers.ModelSerializer):
    class Meta:
        model = DraftCount
        fields = ['id', 'product_id', 'product_code', 'product_name',
                  'location', 'quantity', 'scanned_at']
        read_only_fields = fields
