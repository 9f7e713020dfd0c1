from flask import Blueprint, jsonify
from arcade.api import json_body
from arcade.services import get_services


prizes = Blueprint('prizes', __name__)


@prizes.route('/create', methods=['POST'])
def create_prize():
    data = json_body()
    return jsonify(get_services().prizes.create(data).to_dict())


@prizes.route('/', methods=['GET'])
def list_prizes():
    return jsonify({'prizes': [p.to_dict() for p in get_services().prizes.list()]})


@prizes.route('/<string:prize_id>', methods=['GET'])
def get_prize(prize_id):
    return jsonify(get_services().prizes.get(prize_id).to_dict())


@prizes.route('/<string:prize_id>/update', methods=['PUT'])
def update_prize(prize_id):
    data = json_body()
    return jsonify(get_services().prizes.update(prize_id, data).to_dict())


@prizes.route('/<string:prize_id>/redeem', methods=['POST'])
def redeem_prize(prize_id):
    data = json_body()
    return jsonify(get_services().prizes.redeem(prize_id, data).to_dict())


@prizes.route('/<string:prize_id>/delete', methods=['DELETE'])
def delete_prize(prize_id):
    return get_services().prizes.delete(prize_id)
