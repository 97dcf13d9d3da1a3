from django.contrib import admin
from .models import FoodCategory, FoodType, Specification, CookType


class FoodTypeInline(admin.TabularInline):
    model = FoodType
    extra = 0


class CookTypeInline(admin.TabularInline):
    model = CookType
    extra = 0


@admin.register(FoodCategory)
class FoodCategoryAdmin(admin.ModelAdmin):
    list_display = ('name', 'display_order', 'show_specification', 'show_cook_type')
    list_editable = ('display_order',)
    search_fields = ('name',)
    inlines = [FoodTypeInline, CookTypeInline]


@admin.register(FoodType)
class FoodTypeAdmin(admin.ModelAdmin):
    list_display = ('name', 'category', 'created_at')
    list_filter = ('category',)
    search_fields = ('name',)


@admin.register(Specification)
class SpecificationAdmin(admin.ModelAdmin):
    list_display = ('name', 'food_type', 'created_at')
    list_filter = ('food_type__category',)
    search_fields = ('name', 'food_type__name')


@admin.register(CookType)
class CookTypeAdmin(admin.ModelAdmin):
    list_display = ('name', 'category', 'created_at')
    list_filter = ('category',)
    search_fields = ('name',)
