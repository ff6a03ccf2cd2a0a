from rest_framework.routers import DefaultRouter

from django.urls import include, path

from .views import ShiftEntryViewSet

router = DefaultRouter()
router.register(r"entries", ShiftEntryViewSet)

urlpatterns = [
    path("", include(router.urls)),
]
