from django.urls import path

from countman.api.views import (
    CommitView,
    DraftUpdateView,
    LocationListView,
    ReviewView,
    ScanView,
)

app_name = 'countman'

urlpatterns = [
    path('locations/', LocationListView.as_view(), name='locations'),
    path('scan/', ScanView.as_view(), name='scan'),
    path('review/', ReviewView.as_view(), name='review'),
    path('update/', DraftUpdateView.as_view(), name='update'),
    path('commit/', CommitView.as_view(), name='commit'),
]
