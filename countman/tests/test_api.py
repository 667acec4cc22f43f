"""
Tests for the HTTP API.
"""

import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from countman.models import DraftCount, StockLevel
from countman.services import StockLedger


pytestmark = pytest.mark.django_db


@pytest.fixture
def api(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


class TestAuthentication:
    """Every endpoint requires an authenticated caller."""

    @pytest.mark.parametrize('name,method', [
        ('countman:locations', 'get'),
        ('countman:scan', 'post'),
        ('countman:review', 'get'),
        ('countman:update', 'post'),
        ('countman:commit', 'post'),
    ])
    def test_anonymous_rejected(self, name, method):
        """Unauthenticated requests never reach the service."""
        response = getattr(APIClient(), method)(reverse(name))

        assert response.status_code in (401, 403)


class TestLocationsEndpoint:
    """Tests for GET locations/."""

    def test_lists_locations(self, api, dock, aisle):
        """Active locations come back as a sorted list of names."""
        response = api.get(reverse('countman:locations'))

        assert response.status_code == 200
        assert response.json() == ['Aisle 4', 'Dock']


class TestScanEndpoint:
    """Tests for POST scan/."""

    def test_scan(self, api, dock, user):
        """Scan returns the product and the draft, recording the caller."""
        response = api.post(reverse('countman:scan'), {'barcode': 'A1', 'location': 'Dock'}, format='json')

        assert response.status_code == 200
        body = response.json()
        assert body['success'] is True
        assert body['product'] == {'product_id': 'p-100', 'code': 'A1', 'name': 'Anchor Bolt'}
        assert body['draft']['quantity'] == 1
        assert DraftCount.objects.get().user == user

    def test_scan_twice_merges(self, api, dock):
        """A second scan of the same pair increments the same draft."""
        url = reverse('countman:scan')
        api.post(url, {'barcode': 'A1', 'location': 'Dock'}, format='json')
        response = api.post(url, {'barcode': 'A1', 'location': 'Dock'}, format='json')

        assert response.json()['draft']['quantity'] == 2
        assert DraftCount.objects.count() == 1

    def test_unknown_barcode(self, api, dock):
        """Unknown codes give a single structured 404 error."""
        response = api.post(reverse('countman:scan'), {'barcode': 'ZZZ', 'location': 'Dock'}, format='json')

        assert response.status_code == 404
        body = response.json()
        assert body['success'] is False
        assert body['error']['code'] == 'PRODUCT_NOT_FOUND'
        assert body['error']['data'] == {'barcode': 'ZZZ'}

    def test_missing_fields(self, api):
        """Both barcode and location are required."""
        response = api.post(reverse('countman:scan'), {}, format='json')

        assert response.status_code == 400
        assert set(response.json()) == {'barcode', 'location'}


class TestReviewEndpoint:
    """Tests for GET review/."""

    def test_review(self, api, dock):
        """Review lists the location's drafts with the review fields."""
        url = reverse('countman:scan')
        api.post(url, {'barcode': 'A1', 'location': 'Dock'}, format='json')
        api.post(url, {'barcode': 'B2', 'location': 'Dock'}, format='json')

        response = api.get(reverse('countman:review'), {'location': 'Dock'})

        assert response.status_code == 200
        rows = response.json()
        assert {r['product_code'] for r in rows} == {'A1', 'B2'}
        assert set(rows[0]) == {'id', 'product_id', 'product_code', 'product_name',
                                'location', 'quantity', 'scanned_at'}

    def test_review_requires_location(self, api):
        """The location query parameter is required."""
        response = api.get(reverse('countman:review'))

        assert response.status_code == 400

    def test_review_unknown_location_is_empty(self, api):
        """Reviewing a location with no drafts returns an empty list."""
        response = api.get(reverse('countman:review'), {'location': 'Roof'})

        assert response.status_code == 200
        assert response.json() == []


class TestUpdateEndpoint:
    """Tests for POST update/."""

    def test_update_quantity(self, api, dock):
        """A positive quantity overwrites the draft."""
        scan = api.post(reverse('countman:scan'), {'barcode': 'A1', 'location': 'Dock'}, format='json')
        draft_id = scan.json()['draft']['id']

        response = api.post(reverse('countman:update'), {'id': draft_id, 'quantity': 7}, format='json')

        assert response.status_code == 200
        assert response.json() == {'success': True, 'deleted': False}
        assert DraftCount.objects.get(pk=draft_id).quantity == 7

    def test_zero_deletes(self, api, dock):
        """Quantity 0 removes the draft."""
        scan = api.post(reverse('countman:scan'), {'barcode': 'A1', 'location': 'Dock'}, format='json')
        draft_id = scan.json()['draft']['id']

        response = api.post(reverse('countman:update'), {'id': draft_id, 'quantity': 0}, format='json')

        assert response.json() == {'success': True, 'deleted': True}
        assert not DraftCount.objects.exists()

    def test_oversized_quantity(self, api, dock):
        """Quantities beyond the column range are a 400, not a server error."""
        scan = api.post(reverse('countman:scan'), {'barcode': 'A1', 'location': 'Dock'}, format='json')
        draft_id = scan.json()['draft']['id']

        response = api.post(reverse('countman:update'), {'id': draft_id, 'quantity': 10**20}, format='json')

        assert response.status_code == 400
        assert 'quantity' in response.json()
        assert DraftCount.objects.get(pk=draft_id).quantity == 1

    def test_unknown_draft(self, api):
        """Unknown draft ids give a structured 404."""
        response = api.post(reverse('countman:update'), {'id': 424242, 'quantity': 1}, format='json')

        assert response.status_code == 404
        assert response.json()['error']['code'] == 'DRAFT_NOT_FOUND'


class TestCommitEndpoint:
    """Tests for POST commit/."""

    def test_commit(self, api, dock):
        """Commit promotes every draft and reports the count."""
        url = reverse('countman:scan')
        api.post(url, {'barcode': 'A1', 'location': 'Dock'}, format='json')
        api.post(url, {'barcode': 'B2', 'location': 'Dock'}, format='json')

        response = api.post(reverse('countman:commit'), {'location': 'Dock'}, format='json')

        assert response.status_code == 200
        assert response.json() == {'success': True, 'count': 2}
        assert StockLevel.objects.filter(location='Dock').count() == 2
        assert not DraftCount.objects.exists()

    def test_storage_failure(self, api, dock, monkeypatch):
        """A failed commit is a 500 with COMMIT_FAILED and leaves drafts in place."""
        from django.db import DatabaseError

        def broken(self, rows):
            raise DatabaseError('disk full')

        api.post(reverse('countman:scan'), {'barcode': 'A1', 'location': 'Dock'}, format='json')
        monkeypatch.setattr(StockLedger, '_write_batch', broken)

        response = api.post(reverse('countman:commit'), {'location': 'Dock'}, format='json')

        assert response.status_code == 500
        assert response.json()['error']['code'] == 'COMMIT_FAILED'
        assert DraftCount.objects.count() == 1
        assert not StockLevel.objects.exists()

    def test_location_without_drafts(self, api):
        """Committing a location with no drafts promotes nothing."""
        response = api.post(reverse('countman:commit'), {'location': 'Roof'}, format='json')

        assert response.status_code == 200
        assert response.json() == {'success': True, 'count': 0}
