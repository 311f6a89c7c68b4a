from django.contrib import admin
from .models import Banner, WebsiteSetting


@admin.register(Banner)
class BannerAdmin(admin.ModelAdmin):
    list_display = ('title', 'display_order', 'is_active', 'updated_at')
    list_filter = ('is_active',)
    search_fields = ('title', 'subtitle')
    ordering = ('display_order', 'id')
    readonly_fields = ('created_at',)


@admin.register(WebsiteSetting)
class WebsiteSettingAdmin(admin.ModelAdmin):
    list_display = ('key', 'value', 'type', 'updated_at')
    list_filter = ('type',)
    search_fields = ('key', 'description')
