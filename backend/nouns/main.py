from flask import Blueprint, jsonify

from nouns.models import RoundType

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the Nouns game server!'})

@main.route('/rounds')
def list_rounds():
    """Static rules for the three rounds, for the how-to-play screen."""
    return jsonify([r.to_dict() for r in RoundType])
