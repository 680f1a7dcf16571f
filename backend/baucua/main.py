from flask import Blueprint, jsonify
from baucua.services.rooms.payout import SYMBOLS

main = Blueprint('main', __name__)

@main.route('/')
@main.route('/health')
def health():
    return 'OK'

@main.route('/symbols')
def symbols():
    return jsonify(SYMBOLS)
