"""Shared test fixtures."""

import copy

import pytest

from contentfully.transport.base import ContentClient


# ── Sample Identifiers ───────────────────────────────────────────────────

RALLY_ID = '4vh76dbTGgwsKI6qCe42ck'
ROTAX_900_ID = 'Bc6aR9qfPaAQC4I4KsOom'
TERMS_ID = '5nZHNlP6zCESgGuMGKG2Q8'
IMAGE_ID = '3wtvPBbBjiMKqKKga8I2Cu'
SPEC_SHEET_ID = '6FbTzGSiq8mSEWeWIiUqm2'

CREATED_AT = '2019-05-13T17:21:53.523Z'
UPDATED_AT = '2019-06-01T08:00:00.000Z'

LOCALES = {
    'items': [
        {'name': 'English (Canada)', 'code': 'en-CA', 'default': True, 'fallbackCode': None},
        {'name': 'English (British Columbia)', 'code': 'en-CA-BC', 'default': False, 'fallbackCode': 'en-CA'},
        {'name': 'French (Canada)', 'code': 'fr-CA', 'default': False},
    ],
}


# ── Payload Builders ─────────────────────────────────────────────────────

def _entry(entry_id, content_type='thing', fields=None, revision=1,
           created_at=CREATED_AT, updated_at=UPDATED_AT):
    return {
        'sys': {
            'id': entry_id,
            'type': 'Entry',
            'contentType': {'sys': {'type': 'Link', 'linkType': 'ContentType', 'id': content_type}},
            'revision': revision,
            'createdAt': created_at,
            'updatedAt': updated_at,
        },
        'fields': fields or {},
    }


def _link(link_id, link_type='Entry'):
    return {'sys': {'type': 'Link', 'linkType': link_type, 'id': link_id}}


def _asset_fields(title='Rally', url='//images.ctfassets.net/rally.png',
                  content_type='image/png', width=500, height=116, size=1024):
    return {
        'title': title,
        'description': f'{title} image',
        'file': {
            'url': url,
            'fileName': url.rsplit('/', 1)[-1],
            'contentType': content_type,
            'details': {'size': size, 'image': {'width': width, 'height': height}},
        },
    }


def _asset(asset_id, fields=None, revision=3):
    return {
        'sys': {'id': asset_id, 'type': 'Asset', 'revision': revision},
        'fields': _asset_fields() if fields is None else fields,
    }


class FakeClient(ContentClient):
    """In-memory transport returning deep copies of canned payloads."""

    def __init__(self, payload, locales=None):
        self.payload = payload
        self.locales = locales if locales is not None else copy.deepcopy(LOCALES)
        self.calls = []

    def query(self, path, params=None):
        self.calls.append((path, params))
        if path == '/locales':
            return copy.deepcopy(self.locales)
        return copy.deepcopy(self.payload)


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def make_entry():
    """Build a raw entry: make_entry(id, content_type, fields, revision=...)."""
    return _entry


@pytest.fixture
def make_link():
    """Build a link: make_link(id, link_type='Entry')."""
    return _link


@pytest.fixture
def make_asset():
    """Build a raw asset: make_asset(id, fields=None, revision=3)."""
    return _asset


@pytest.fixture
def asset_fields():
    """Build single-locale asset fields with a file and image details."""
    return _asset_fields


@pytest.fixture
def fake_client():
    """Create an in-memory transport: fake_client(payload, locales=None)."""
    return FakeClient


@pytest.fixture
def locales_payload():
    return copy.deepcopy(LOCALES)


@pytest.fixture
def linked_payload():
    """A 14-item collection: a model linking an engine, terms, and colours."""
    rally = _entry(RALLY_ID, 'model', {
        'id': 'ryker.rally',
        'name': 'Ryker Rally',
        'engines': [_link(ROTAX_900_ID)],
        'image': _link(IMAGE_ID, 'Asset'),
        'specSheet': _link(SPEC_SHEET_ID),
        'discontinued': None,
    }, revision=5)
    rotax = _entry(ROTAX_900_ID, 'engine', {'id': 'rotax.900', 'sku': '903'})
    terms = _entry(TERMS_ID, 'terms', {'body': 'All rights reserved.'})
    colours = [
        _entry(f'colour{i}', 'colour', {'name': f'Colour {i}', 'image': _link(IMAGE_ID, 'Asset')})
        for i in range(11)
    ]
    spec_sheet = _entry(SPEC_SHEET_ID, 'specSheet', {'model': _link(RALLY_ID), 'pages': 4})

    return {
        'sys': {'type': 'Array'},
        'total': 14,
        'skip': 0,
        'limit': 100,
        'items': [rally, rotax, terms, *colours],
        'includes': {
            'Entry': [spec_sheet],
            'Asset': [_asset(IMAGE_ID)],
        },
    }


@pytest.fixture
def multi_locale_payload():
    """A locale=* payload: one product with a localized engine link and image."""
    product = _entry('product1', 'product', {
        'title': {'en-CA': 'Rally', 'fr-CA': 'Rallye'},
        'tagline': {'en-CA': 'Go further'},
        'engine': {'en-CA': _link(ROTAX_900_ID)},
        'image': {'en-CA': _link(IMAGE_ID, 'Asset')},
        'colours': {'en-CA': ['red', 'blue']},
        'missing': {'en-CA': _link('does-not-exist')},
    })
    engine = _entry(ROTAX_900_ID, 'engine', {
        'sku': {'en-CA': '903'},
        'name': {'en-CA': 'Rotax 900', 'en-CA-BC': 'Rotax 900 BC'},
    })
    asset = _asset(IMAGE_ID, fields={
        'title': {'en-CA': 'Rally', 'fr-CA': 'Rallye'},
        'file': {
            'en-CA': _asset_fields(url='//images/en.png')['file'],
            'fr-CA': _asset_fields(url='//images/fr.png')['file'],
        },
    })
    return {
        'total': 1,
        'skip': 0,
        'limit': 1000,
        'items': [product],
        'includes': {'Entry': [engine], 'Asset': [asset]},
    }
