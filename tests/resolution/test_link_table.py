"""Tests for link table construction and media projection."""

import logging

import pytest

from contentfully.resolution.link_table import (
    LinkState,
    build_links,
    is_link,
    split_asset_by_locale,
    to_media,
)


class TestToMedia:
    """Tests for the asset → media projection."""

    def test_projection_shape(self, make_asset):
        asset = make_asset('img1', revision=7)
        media = to_media(asset['sys'], asset['fields'])
        assert media == {
            '_id': 'img1',
            'url': '//images.ctfassets.net/rally.png',
            'title': 'Rally',
            'description': 'Rally image',
            'contentType': 'image/png',
            'dimensions': {'width': 500, 'height': 116},
            'size': 1024,
            'version': 7,
        }

    def test_missing_file_does_not_raise(self):
        media = to_media({'id': 'img2', 'revision': 1}, {'title': 'No file'})
        assert media['url'] is None
        assert media['contentType'] is None
        assert media['size'] is None
        assert media['dimensions'] == {'width': 0, 'height': 0}
        assert media['title'] == 'No file'

    def test_transform_result_is_used(self, make_asset):
        asset = make_asset('img1')
        media = to_media(asset['sys'], asset['fields'], lambda m: {**m, 'url': 'https:' + m['url']})
        assert media['url'] == 'https://images.ctfassets.net/rally.png'

    def test_transform_returning_none_keeps_mutated_media(self, make_asset):
        asset = make_asset('img1')

        def transform(media):
            media['description'] = 'default description'

        media = to_media(asset['sys'], asset['fields'], transform)
        assert media['description'] == 'default description'

    def test_failing_transform_is_logged_and_ignored(self, make_asset, caplog):
        asset = make_asset('img1')

        def transform(media):
            raise RuntimeError('boom')

        with caplog.at_level(logging.ERROR):
            media = to_media(asset['sys'], asset['fields'], transform)

        assert media['url'] == '//images.ctfassets.net/rally.png'
        assert 'img1' in caplog.text


class TestSplitAssetByLocale:

    def test_rekeys_fields_per_locale(self):
        asset = {
            'sys': {'id': 'a1'},
            'fields': {
                'title': {'en-US': 'Hello', 'de-DE': 'Hallo'},
                'file': {'en-US': {'url': '//en'}},
            },
        }
        locales = split_asset_by_locale(asset)
        assert set(locales) == {'en-US', 'de-DE'}
        assert locales['en-US']['fields'] == {'title': 'Hello', 'file': {'url': '//en'}}
        assert locales['de-DE']['fields'] == {'title': 'Hallo'}
        assert locales['de-DE']['sys'] is asset['sys']


class TestBuildLinks:
    """Tests for build_links."""

    def test_items_and_includes_are_deferred(self, linked_payload):
        links = build_links(linked_payload, multi_locale=False)
        # 14 items + 1 included entry + 1 asset
        assert len(links) == 16
        assert links.get('Bc6aR9qfPaAQC4I4KsOom').state is LinkState.DEFERRED
        assert links.get('6FbTzGSiq8mSEWeWIiUqm2').state is LinkState.DEFERRED

    def test_assets_are_resolved_immediately(self, linked_payload):
        links = build_links(linked_payload, multi_locale=False)
        slot = links.get('3wtvPBbBjiMKqKKga8I2Cu')
        assert slot.state is LinkState.RESOLVED
        assert slot.value['contentType'] == 'image/png'

    def test_deferred_slots_hold_the_raw_entry(self, linked_payload):
        links = build_links(linked_payload, multi_locale=False)
        slot = links.get('5nZHNlP6zCESgGuMGKG2Q8')
        assert slot.raw is linked_payload['items'][2]
        assert slot.value == {}

    def test_multi_locale_assets_are_split(self, multi_locale_payload):
        links = build_links(multi_locale_payload, multi_locale=True)
        media = links.get('3wtvPBbBjiMKqKKga8I2Cu').value
        assert set(media) == {'en-CA', 'fr-CA'}
        assert media['en-CA']['url'] == '//images/en.png'
        assert media['fr-CA']['title'] == 'Rallye'
        assert '_id' not in media['en-CA']

    def test_multi_locale_skips_locales_without_file(self, make_asset):
        asset = make_asset('a1', fields={
            'title': {'en-CA': 'Rally', 'fr-CA': 'Rallye'},
            'file': {'en-CA': {'url': '//en', 'details': {}}},
        })
        links = build_links({'items': [], 'includes': {'Asset': [asset]}}, multi_locale=True)
        assert set(links.get('a1').value) == {'en-CA'}

    def test_multi_locale_transform_runs_per_locale(self, multi_locale_payload):
        seen = []

        def transform(media):
            seen.append(media['url'])
            return media

        build_links(multi_locale_payload, multi_locale=True, media_transform=transform)
        assert seen == ['//images/en.png', '//images/fr.png']

    def test_failing_transform_does_not_abort_batch(self, make_asset):
        payload = {'items': [], 'includes': {'Asset': [make_asset('a1'), make_asset('a2')]}}

        def transform(media):
            if media['_id'] == 'a1':
                raise ValueError('bad asset')
            media['title'] = 'transformed'
            return media

        links = build_links(payload, multi_locale=False, media_transform=transform)
        assert links.get('a1').value['title'] == 'Rally'
        assert links.get('a2').value['title'] == 'transformed'

    def test_empty_payload(self):
        links = build_links({}, multi_locale=False)
        assert len(links) == 0


class TestIsLink:

    @pytest.mark.parametrize('value,expected', [
        ({'sys': {'type': 'Link', 'linkType': 'Entry', 'id': 'x'}}, True),
        ({'sys': {'type': 'Entry', 'id': 'x'}}, False),
        ({'sys': None}, False),
        ('Link', False),
        (None, False),
    ])
    def test_is_link(self, value, expected):
        assert is_link(value) is expected
