from flask import Blueprint, jsonify, render_template

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the leaderboard API! See /docs for the endpoints.'})


@main.route('/docs')
def docs():
    return render_template('docs.html')
