"""
URL configuration for brand API endpoints.
"""

from django.urls import path

from api.v1.brands import views

app_name = "brands"

urlpatterns = [
    path(
        "",
        views.BrandListCreateView.as_view(),
        name="brand-list",
    ),
    path(
        "sort-order",
        views.BrandSortOrderView.as_view(),
        name="brand-sort-order",
    ),
    path(
        "slug/<slug:slug>",
        views.BrandBySlugView.as_view(),
        name="brand-by-slug",
    ),
    path(
        "<uuid:brand_id>",
        views.BrandDetailView.as_view(),
        name="brand-detail",
    ),
    path(
        "<uuid:brand_id>/image",
        views.BrandImageView.as_view(),
        name="brand-image",
    ),
    path(
        "<uuid:brand_id>/toggle-visibility",
        views.BrandVisibilityView.as_view(),
        name="brand-toggle-visibility",
    ),
]
