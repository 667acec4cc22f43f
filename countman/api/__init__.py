"""
Countman HTTP API (Django REST framework).

Include in the project urls:
    path('inventory/', include('countman.api.urls')),
"""
