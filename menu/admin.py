from django.contrib import admin
from .models import MenuItem, MenuItemPhoto, MenuItemIngredient


class MenuItemPhotoInline(admin.TabularInline):
    model = MenuItemPhoto
    extra = 0
    fields = ('display_order', 'photo_url')


class MenuItemIngredientInline(admin.TabularInline):
    model = MenuItemIngredient
    extra = 0
    fields = ('ingredient', 'ingredient_quantity', 'custom_quantity')
    raw_id_fields = ('ingredient', 'ingredient_quantity')


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ('display_id', 'name', 'location', 'food_category', 'price', 'status')
    list_filter = ('status', 'location', 'food_category')
    search_fields = ('name', 'display_id', 'tags')
    readonly_fields = ('display_id', 'created_at', 'updated_at')
    inlines = [MenuItemIngredientInline, MenuItemPhotoInline]
