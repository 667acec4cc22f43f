"""
Test doubles for the external collaborators.
"""

from countman.protocols.catalog import ProductInfo


CATALOG = {
    'A1': ProductInfo(product_id='p-100', code='A1', name='Anchor Bolt'),
    'B2': ProductInfo(product_id='p-200', code='B2', name='Bracket'),
    'C3': ProductInfo(product_id='p-300', code='C3', name='Cable Tie'),
}


class FakeCatalog:
    """Resolves the codes in CATALOG, nothing else."""

    def resolve(self, code):
        return CATALOG.get(code)


class StaticLocations:
    """Location directory over a fixed list."""

    def __init__(self, names=('Dock', 'Aisle 4')):
        self.names = sorted(names)

    def list_locations(self):
        return list(self.names)
