from rest_framework import serializers

from .models import Banner, WebsiteSetting


class BannerSerializer(serializers.ModelSerializer):
    imageUrl = serializers.URLField(source="image_url", max_length=500)
    linkUrl = serializers.CharField(source="link_url", max_length=500, required=False, allow_null=True, allow_blank=True)
    linkText = serializers.CharField(source="link_text", max_length=100, required=False, allow_null=True, allow_blank=True)
    isActive = serializers.BooleanField(source="is_active", default=True)
    displayOrder = serializers.IntegerField(source="display_order", default=0)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Banner
        fields = [
            "id",
            "title",
            "subtitle",
            "imageUrl",
            "linkUrl",
            "linkText",
            "isActive",
            "displayOrder",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id"]
        extra_kwargs = {"subtitle": {"required": False, "allow_null": True, "allow_blank": True}}


class WebsiteSettingSerializer(serializers.ModelSerializer):
    # plain field: uniqueness is handled by upsert, not rejected
    key = serializers.CharField(max_length=100)
    type = serializers.ChoiceField(choices=WebsiteSetting.TYPE_CHOICES, default=WebsiteSetting.TYPE_STRING)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    typedValue = serializers.SerializerMethodField()
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = WebsiteSetting
        fields = ["id", "key", "value", "type", "description", "typedValue", "updatedAt"]
        read_only_fields = ["id"]
        extra_kwargs = {"value": {"allow_blank": True}}

    def get_typedValue(self, obj):
        return obj.typed_value

    def validate(self, attrs):
        value_type = attrs.get("type") or (self.instance.type if self.instance else WebsiteSetting.TYPE_STRING)
        value = attrs.get("value", self.instance.value if self.instance else "")
        try:
            WebsiteSetting.parse_value(value, value_type)
        except ValueError:
            raise serializers.ValidationError({"value": [f"Not a valid {value_type} value."]})
        return attrs
