"""
URL patterns for the wikis app.

The router generates ``/wikis/``, ``/wikis/new/``, ``/wikis/<id>/`` and
``/wikis/<id>/edit/``.  Included under the ``/api/`` prefix.
"""
from rest_framework.routers import DefaultRouter

from .views import WikiViewSet

router = DefaultRouter()
router.register(r"wikis", WikiViewSet, basename="wiki")

urlpatterns = router.urls
