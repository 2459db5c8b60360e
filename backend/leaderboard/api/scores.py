from flask import Blueprint, jsonify, current_app
from leaderboard import db
from leaderboard.api.payloads import json_body, require_int
from leaderboard.services.scores import ScoreLedger

scores = Blueprint('scores', __name__)


@scores.route('/score', methods=['POST'])
def add_score():
    data = json_body()
    user_id = require_int(data, 'user_id')
    value = require_int(data, 'score')

    entry = ScoreLedger(db.session).add_score(user_id, value)
    current_app.logger.info(f"[score] user={user_id} score={value} id={entry.id}")
    return jsonify({
        'message': f'Score {value} recorded for user {user_id}',
        'score': entry.to_dict(),
    }), 201


@scores.route('/scores', methods=['GET'])
def top_scores():
    limit = int(current_app.config.get('TOP_SCORES_LIMIT', 10))
    ranking = ScoreLedger(db.session).top_scores(limit)
    return jsonify([row.to_dict() for row in ranking])
