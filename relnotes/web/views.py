"""
Web page rendering routes for the Release Notes Viewer.

Provides routes for:
- / - Release history with version sidebar and search (?q=)
- /release/<version> - A single release
"""

from flask import Blueprint, render_template, request, current_app

from ..core.formatter import format_change_text, category_css_class
from ..core.store import FAILURE_MESSAGE, ReleaseStore

web_bp = Blueprint('web', __name__)


def get_store() -> ReleaseStore:
    """Get release store from current app context."""
    return current_app.config.get('store')


@web_bp.app_template_filter('format_change')
def format_change_filter(text, query=None):
    return format_change_text(text, query)


@web_bp.app_template_filter('category_class')
def category_class_filter(category):
    return category_css_class(category)


@web_bp.route('/')
def index():
    """Render the release history page."""
    store = get_store()
    query = request.args.get('q', '')

    if store.error:
        return render_template(
            'index.html',
            releases=[],
            query=query,
            error=FAILURE_MESSAGE
        ), 503

    releases = store.search(query)

    return render_template(
        'index.html',
        releases=releases,
        query=query,
        error=None
    )


@web_bp.route('/release/<path:version>')
def release_detail(version: str):
    """Render a single release."""
    store = get_store()
    release = store.get_release(version)

    if not release:
        return render_template(
            'index.html',
            releases=[],
            query='',
            error=f'Release {version} not found.'
        ), 404

    return render_template(
        'index.html',
        releases=[release],
        query='',
        error=None
    )
