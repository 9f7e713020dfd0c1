from flask import Blueprint, jsonify
from arcade.api import json_body
from arcade.services import get_services


players = Blueprint('players', __name__)


@players.route('/create', methods=['POST'])
def create_player():
    data = json_body()
    return jsonify(get_services().players.create(data).to_dict())


@players.route('/', methods=['GET'])
def list_players():
    return jsonify({'players': [p.to_dict() for p in get_services().players.list()]})


@players.route('/<string:player_id>', methods=['GET'])
def get_player(player_id):
    return jsonify(get_services().players.get(player_id).to_dict())


@players.route('/<string:player_id>/update', methods=['PUT'])
def update_player(player_id):
    data = json_body()
    return jsonify(get_services().players.update(player_id, data).to_dict())


@players.route('/<string:player_id>/publishstats', methods=['POST'])
def publish_stats(player_id):
    data = json_body()
    return jsonify(get_services().players.publish_stats(player_id, data).to_dict())


@players.route('/<string:player_id>/delete', methods=['DELETE'])
def delete_player(player_id):
    return get_services().players.delete(player_id)
