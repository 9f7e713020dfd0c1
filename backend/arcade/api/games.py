from flask import Blueprint, jsonify
from arcade.api import json_body
from arcade.services import get_services


games = Blueprint('games', __name__)


@games.route('/create', methods=['POST'])
def create_game():
    data = json_body()
    game = get_services().games.create(data)
    return jsonify(game.to_dict())


@games.route('/', methods=['GET'])
def list_games():
    return jsonify({'games': [g.to_dict() for g in get_services().games.list()]})


@games.route('/<string:game_id>', methods=['GET'])
def get_game(game_id):
    return jsonify(get_services().games.get(game_id).to_dict())


@games.route('/<string:game_id>/update', methods=['PUT'])
def update_game(game_id):
    data = json_body()
    return jsonify(get_services().games.update(game_id, data).to_dict())


@games.route('/<string:game_id>/delete', methods=['DELETE'])
def delete_game(game_id):
    return get_services().games.delete(game_id)
