import logging
import os
import xml.etree.ElementTree as ET

from flask import Flask, jsonify, redirect, request, url_for

from mapmyfitness.clients.api import MapMyFitnessClient
from mapmyfitness.config import Config
from mapmyfitness.exceptions import (
    AuthFailure,
    AuthRequired,
    ConfigurationError,
    MalformedResponse,
    TransportFailure,
)
from mapmyfitness.services.session import Redirect

logger = logging.getLogger(__name__)


def _to_json(value):
    """Make a decoded body JSON friendly."""
    if isinstance(value, ET.Element):
        return ET.tostring(value, encoding="unicode")
    return value


def create_app(testing: "bool | None" = None, client_factory=None):
    """Create and configure Flask application.

    Args:
        testing: Testing mode. If None, auto-detect from the TESTING
                 environment variable.
        client_factory: Callable returning a ``MapMyFitnessClient`` for the
                        current request. Defaults to ``from_config``.
    """
    app = Flask(__name__)

    # Determine testing mode
    if testing is None:
        testing = os.environ.get("TESTING", "").lower() in ("1", "true", "yes")
    app.config["TESTING"] = testing
    app.secret_key = Config.SECRET_KEY or os.urandom(24).hex()

    if client_factory is None:
        client_factory = MapMyFitnessClient.from_config

    def get_client() -> MapMyFitnessClient:
        # Tokens and handshake state live in the session, so a client per request
        return client_factory()

    @app.errorhandler(AuthRequired)
    def handle_auth_required(e):
        return jsonify({'error': str(e), 'login': url_for('auth')}), 401

    @app.errorhandler(AuthFailure)
    def handle_auth_failure(e):
        return jsonify({'error': str(e)}), 403

    @app.errorhandler(ConfigurationError)
    def handle_configuration_error(e):
        logger.error(f"Configuration error: {e}")
        return jsonify({'error': str(e)}), 500

    @app.errorhandler(TransportFailure)
    def handle_transport_failure(e):
        return jsonify({'error': str(e), 'http_code': e.http_code}), 502

    @app.errorhandler(MalformedResponse)
    def handle_malformed_response(e):
        return jsonify({'error': str(e)}), 502

    @app.route('/')
    def index():
        """Authorization status."""
        client = get_client()
        return jsonify({
            'authorized': client.is_authorized(),
            'state': client.session_state.name,
            'user_id': client.user_id,
        })

    @app.route('/auth')
    def auth():
        """Start the handshake, or finish it when called back by the provider."""
        client = get_client()
        result = client.init_session(request.args)
        if isinstance(result, Redirect):
            return redirect(result.url)
        return redirect(url_for('index'))

    @app.route('/auth/reset', methods=['POST'])
    def reset():
        """Forget the stored tokens."""
        get_client().reset_session()
        return jsonify({'message': 'Session reset'})

    @app.route('/api/user', methods=['GET'])
    def user():
        """Profile of the authorized user, or of ``user_id``."""
        client = get_client()
        if request.args.get('user_id'):
            client.set_user(request.args['user_id'])
        return jsonify({'user': _to_json(client.get_user())})

    @app.route('/api/call/<path:endpoint>', methods=['GET', 'POST'])
    def call(endpoint):
        """Pass a call through to any endpoint."""
        client = get_client()
        parameters = request.args.to_dict()
        if request.method == 'POST':
            parameters.update(request.get_json(silent=True) or request.form.to_dict())
        response = client.custom_call(endpoint, parameters, method=request.method)
        return jsonify({'code': response.code, 'body': _to_json(response.body)})

    return app
