from flask import Blueprint, current_app, jsonify

table = Blueprint('table', __name__)


@table.route('/state', methods=['GET'])
def get_table_state():
    """
    Returns the public state of the shared table.
    """
    return jsonify(current_app.extensions['lowcard'].snapshot())
