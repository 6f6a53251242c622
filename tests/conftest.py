import os

import pytest

from app import ServerConfig, create_app, resolve_base_path


@pytest.fixture
def config():
    return ServerConfig(base_path=resolve_base_path())


@pytest.fixture
def client(config):
    app = create_app(config)
    app.config['TESTING'] = True
    return app.test_client()


@pytest.fixture
def site(tmp_path):
    """A throwaway base path with its own public/ and views/."""
    (tmp_path / 'public' / 'img').mkdir(parents=True)
    (tmp_path / 'views').mkdir()
    (tmp_path / 'public' / 'style.css').write_bytes(b'body { color: red; }\n')
    (tmp_path / 'public' / 'img' / 'dot.bin').write_bytes(bytes(range(256)))
    (tmp_path / 'views' / 'index.html').write_text('<h1>{{ title }}</h1><p>{{ name }}</p>')
    return tmp_path


@pytest.fixture
def site_client(site):
    app = create_app(ServerConfig(base_path=os.fspath(site)))
    app.config['TESTING'] = True
    return app.test_client()
