"""URL routing configuration for the notices application."""

from django.urls import path

from .views import ActiveNoticesView, DismissNoticeView

urlpatterns = [
    path("notices/active", ActiveNoticesView.as_view(), name="notices-active"),
    path("notices/dismiss", DismissNoticeView.as_view(), name="notices-dismiss"),
]
