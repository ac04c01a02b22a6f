"""Tests for client settings."""

from contentfully.config import ClientSettings


class TestClientSettings:

    def test_production_uri(self):
        settings = ClientSettings(access_token='t', space_id='space')
        assert settings.space_uri == 'https://cdn.contentful.com/spaces/space/environments/master'

    def test_preview_uri(self):
        settings = ClientSettings(access_token='t', space_id='space', environment_id='dev', preview=True)
        assert settings.space_uri == 'https://preview.contentful.com/spaces/space/environments/dev'

    def test_custom_api_url(self):
        settings = ClientSettings(access_token='t', space_id='s', api_url='http://localhost:8080/')
        assert settings.space_uri == 'http://localhost:8080/spaces/s/environments/master'

    def test_empty_environment_uses_master(self):
        settings = ClientSettings(access_token='t', space_id='s', environment_id='')
        assert settings.space_uri.endswith('/environments/master')


class TestFromEnv:

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv('CONTENTFUL_ACCESS_TOKEN', 'token')
        monkeypatch.setenv('CONTENTFUL_SPACE_ID', 'space')
        monkeypatch.setenv('CONTENTFUL_ENVIRONMENT', 'staging')
        monkeypatch.setenv('CONTENTFUL_PREVIEW', '1')
        monkeypatch.delenv('CONTENTFUL_API_URL', raising=False)

        settings = ClientSettings.from_env()

        assert settings.access_token == 'token'
        assert settings.space_id == 'space'
        assert settings.environment_id == 'staging'
        assert settings.preview is True
        assert settings.api_url is None

    def test_defaults(self, monkeypatch):
        for name in ('CONTENTFUL_ACCESS_TOKEN', 'CONTENTFUL_SPACE_ID', 'CONTENTFUL_ENVIRONMENT',
                     'CONTENTFUL_PREVIEW', 'CONTENTFUL_API_URL'):
            monkeypatch.delenv(name, raising=False)

        settings = ClientSettings.from_env()

        assert settings.access_token == ''
        assert settings.environment_id == 'master'
        assert settings.preview is False

    def test_overrides_win_unless_none(self, monkeypatch):
        monkeypatch.setenv('CONTENTFUL_SPACE_ID', 'env-space')
        monkeypatch.setenv('CONTENTFUL_ACCESS_TOKEN', 'env-token')

        settings = ClientSettings.from_env(space_id='cli-space', access_token=None)

        assert settings.space_id == 'cli-space'
        assert settings.access_token == 'env-token'
