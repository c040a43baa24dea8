from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    # Storefront first: it owns the root page
    path("", include("storefront.urls")),
    path("admin/", admin.site.urls),
]
