from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Avg, Count

from recipes.models import Ingredient, Mark, Recipe, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin configuration for accounts, keyed by email."""
    list_display = ('email', 'username', 'first_name', 'last_name', 'is_staff')
    search_fields = ('email', 'username', 'first_name', 'last_name')
    ordering = ('email',)
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Roles', {'fields': ('roles',)}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'username', 'first_name', 'last_name', 'password1', 'password2'),
        }),
    )


@admin.register(Ingredient)
class IngredientAdmin(admin.ModelAdmin):
    list_display = ('name', 'price', 'user', 'created_at')
    search_fields = ('name', 'user__email')


class MarkInline(admin.TabularInline):
    """Show marks directly on the recipe page in Admin."""
    model = Mark
    extra = 0
    readonly_fields = ['user', 'mark', 'created_at']


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    """Admin configuration for recipes with their marks."""
    list_display = ('name', 'user', 'is_public', 'created_at', 'average_display', 'marks_display')
    list_filter = ('is_public', 'created_at')
    search_fields = ('name', 'description', 'user__email')
    filter_horizontal = ('ingredients',)
    inlines = [MarkInline]

    def get_queryset(self, request):
        """Annotate mean mark and mark count for list display."""
        return super().get_queryset(request).annotate(
            average_mark=Avg('marks__mark'),
            marks_total=Count('marks', distinct=True),
        )

    @admin.display(description='Moyenne', ordering='average_mark')
    def average_display(self, obj):
        """Return the mean mark rounded to one decimal, or a dash."""
        if obj.average_mark is None:
            return '-'
        return f'{obj.average_mark:.1f}'

    @admin.display(description='Notes', ordering='marks_total')
    def marks_display(self, obj):
        return obj.marks_total


@admin.register(Mark)
class MarkAdmin(admin.ModelAdmin):
    list_display = ('recipe', 'user', 'mark', 'created_at')
    list_filter = ('mark',)
