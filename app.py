import logging
import os
import sys
import webbrowser
from dataclasses import dataclass, replace

from flask import Flask, render_template
from werkzeug.exceptions import NotFound
from werkzeug.serving import make_server

logger = logging.getLogger(__name__)

PORT = 3000
VIEW_EXTENSION = '.html'


def resolve_base_path():
    """Directory that holds public/ and views/.

    A frozen build (PyInstaller and friends) ships them next to the
    executable; from source they sit next to this file.
    """
    if getattr(sys, 'frozen', False):
        return os.path.dirname(os.path.abspath(sys.executable))
    return os.path.dirname(os.path.abspath(__file__))


@dataclass(frozen=True)
class ServerConfig:
    base_path: str
    port: int = PORT
    host: str = '0.0.0.0'
    static_dir: str = 'public'
    views_dir: str = 'views'
    auto_open_browser: bool = False

    @property
    def static_folder(self):
        return os.path.join(self.base_path, self.static_dir)

    @property
    def template_folder(self):
        return os.path.join(self.base_path, self.views_dir)

    @property
    def url(self):
        return f'http://127.0.0.1:{self.port}'

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        return cls(
            base_path=environ.get('BASE_PATH') or resolve_base_path(),
            auto_open_browser=environ.get('OPEN_BROWSER', '').lower() in ('1', 'true', 'yes'),
        )


def configure_static_assets(app, config):
    # Files under public/ are served from the URL root, e.g. /style.css
    app.static_folder = config.static_folder
    app.static_url_path = ''
    app.add_url_rule('/<path:filename>', endpoint='static', view_func=app.send_static_file)


def configure_template_engine(app, config):
    # Must run before the first render; Flask builds the Jinja loader lazily
    app.template_folder = config.template_folder


def render_view(view, **context):
    return render_template(view + VIEW_EXTENSION, **context)


def create_app(config):
    app = Flask(__name__, static_folder=None)
    configure_static_assets(app, config)
    configure_template_engine(app, config)

    @app.get('/')
    def index():
        return render_view('index', title='My First Node EJS Website', name='Praduman')

    @app.errorhandler(405)
    def method_not_routed(error):
        # A method with no route is as unknown as a path with no route
        return NotFound().get_response()

    return app


def bind(app, config):
    """Bind the listening socket and announce the URL.

    Werkzeug exits the process with status 1 when the port is taken.
    """
    server = make_server(config.host, config.port, app)
    url = replace(config, port=server.port).url
    logger.info('Server running on %s', url)
    if config.auto_open_browser:
        webbrowser.open(url)
    return server


def start(app, config):
    bind(app, config).serve_forever()


def main():
    logging.basicConfig(level=logging.INFO)
    config = ServerConfig.from_env()
    start(create_app(config), config)


if __name__ == '__main__':
    # Runs on http://127.0.0.1:3000
    main()
