"""
Flask application factory for the Release Notes Viewer.

Creates and configures the Flask application with all blueprints.
"""

import os
from flask import Flask

from ..core.store import ReleaseStore


def create_app(config: dict, store: ReleaseStore) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config: Application configuration dict
        store: Release store holding the parsed changelog

    Returns:
        Configured Flask application
    """
    web_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'web')
    template_dir = os.path.join(web_dir, 'templates')
    static_dir = os.path.join(web_dir, 'static')

    app = Flask(
        __name__,
        template_folder=template_dir,
        static_folder=static_dir,
        static_url_path='/static'
    )

    # Category mappings are ordered for display
    app.json.sort_keys = False

    app.config['relnotes_config'] = config
    app.config['store'] = store

    from .routes.releases import releases_bp
    app.register_blueprint(releases_bp, url_prefix='/api/releases')

    from ..web.views import web_bp
    app.register_blueprint(web_bp)

    return app

