"""
URL configuration for recipebook project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path
from recipes import views
from recipes.views.api_views import RecipeListApi, RecipeDetailApi

handler403 = "recipes.views.error_views.permission_denied"

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', views.home, name='home'),
    path('connexion', views.LogInView.as_view(), name='log_in'),
    path('deconnexion', views.log_out, name='log_out'),
    path('inscription', views.SignUpView.as_view(), name='sign_up'),
    path('recette', views.recipe_index, name='recipe_index'),
    path('recette/publique', views.recipe_index_public, name='recipe_index_public'),
    path('recette/creation', views.recipe_new, name='recipe_new'),
    path('recette/<int:id>', views.recipe_show, name='recipe_show'),
    path('recette/edition/<int:id>', views.recipe_edit, name='recipe_edit'),
    path('recette/suppression<int:id>', views.recipe_delete, name='recipe_delete'),
    path('ingredient', views.ingredient_index, name='ingredient_index'),
    path('ingredient/creation', views.ingredient_new, name='ingredient_new'),
    path('ingredient/edition/<int:id>', views.ingredient_edit, name='ingredient_edit'),
    path('ingredient/suppression/<int:id>', views.ingredient_delete, name='ingredient_delete'),
    path('utilisateur/edition/<int:id>', views.user_edit, name='user_edit'),
    path('utilisateur/edition-mot-de-passe/<int:id>', views.user_edit_password, name='user_edit_password'),
    path('api/recettes/', RecipeListApi.as_view(), name='recipe_list_api'),
    path('api/recettes/<int:pk>/', RecipeDetailApi.as_view(), name='recipe_detail_api'),
]
