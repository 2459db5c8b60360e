from flask import Blueprint, jsonify, current_app
from leaderboard import db
from leaderboard.api.payloads import json_body, require_string
from leaderboard.models import USERNAME_MAX_LENGTH
from leaderboard.errors import AuthError
from leaderboard.services.credentials import CredentialStore
from leaderboard.services.users import UserRegistry

users = Blueprint('users', __name__)


def _registry():
    rounds = int(current_app.config.get('BCRYPT_LOG_ROUNDS', 12))
    return UserRegistry(db.session, CredentialStore(rounds))


@users.route('/register', methods=['POST'])
def register():
    data = json_body()
    username = require_string(data, 'username', max_length=USERNAME_MAX_LENGTH)
    password = require_string(data, 'password')

    user_id = _registry().register(username, password)
    current_app.logger.info(f"[register] user={username} id={user_id}")
    return jsonify({
        'message': f'User {username} registered successfully',
        'user': {'id': user_id, 'username': username},
    }), 201


@users.route('/login', methods=['POST'])
def login():
    data = json_body()
    username = require_string(data, 'username')
    password = require_string(data, 'password')

    try:
        user_id, name = _registry().login(username, password)
    except AuthError:
        current_app.logger.warning(f"[login] rejected user={username}")
        raise
    return jsonify({
        'message': 'Login successful',
        'user_id': user_id,
        'username': name,
    })
