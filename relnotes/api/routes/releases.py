"""
Release API endpoints.

Provides REST API for the parsed changelog:
- GET /api/releases - List releases, optionally filtered by ?q=
- GET /api/releases/<version> - Get a single release
- POST /api/releases/refresh - Re-fetch the changelog
- GET /api/releases/status - Store status and activity log
- GET /api/releases/stats - Summary statistics
"""

from flask import Blueprint, jsonify, request, current_app

from ...core.fetcher import ChangelogFetchError
from ...core.store import ReleaseStore

releases_bp = Blueprint('releases', __name__)


def get_store() -> ReleaseStore:
    """Get release store from current app context."""
    return current_app.config.get('store')


@releases_bp.route('/', methods=['GET'])
@releases_bp.route('', methods=['GET'])
def list_releases():
    """
    List releases in changelog order.

    Query params:
        q: Case-insensitive search over versions and change text (optional)

    Returns:
        JSON list of releases
    """
    store = get_store()
    query = request.args.get('q', '')

    releases = store.search(query)

    return jsonify([release.to_dict() for release in releases])


@releases_bp.route('/status', methods=['GET'])
def get_status():
    """Get store status, including the last load error if any."""
    return jsonify(get_store().status)


@releases_bp.route('/stats', methods=['GET'])
def get_stats():
    """
    Get summary statistics.

    Returns:
        JSON stats object
    """
    return jsonify(get_store().stats())


@releases_bp.route('/refresh', methods=['POST'])
def refresh():
    """
    Re-fetch and re-parse the changelog.

    Returns:
        JSON with the new release count, or 502 if the fetch failed
    """
    store = get_store()

    try:
        releases = store.refresh()
    except ChangelogFetchError as e:
        return jsonify({'refreshed': False, 'error': str(e)}), 502

    return jsonify({'refreshed': True, 'release_count': len(releases)})


@releases_bp.route('/<path:version>', methods=['GET'])
def get_release(version: str):
    """
    Get a single release by version.

    Args:
        version: Full version string as it appears in the changelog

    Returns:
        JSON release object or 404
    """
    release = get_store().get_release(version)

    if not release:
        return jsonify({'error': f'Release {version} not found'}), 404

    return jsonify(release.to_dict())
