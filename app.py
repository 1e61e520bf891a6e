import logging
import os

from flask import Flask, request, jsonify
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

from core.menu_ordering import MenuOrdering
from storage import CartStorage, DatabaseConnection, FlaskSessionStorage, MemoryStorage, SQLiteStorage

load_dotenv()

logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
)
logger = logging.getLogger(__name__)


def create_storage(backend: str) -> CartStorage:
    """Cart storage backend selected by CART_STORAGE"""
    if backend == 'session':
        return FlaskSessionStorage()
    if backend == 'sqlite':
        return SQLiteStorage(DatabaseConnection(os.getenv('CART_DB_PATH', 'cart.db')))
    if backend == 'memory':
        return MemoryStorage()
    raise ValueError(f"Unknown CART_STORAGE backend: {backend}")


app = Flask(__name__)
app.secret_key = os.getenv('SECRET_KEY', 'dev-secret-key')

ordering = MenuOrdering()
cart_storage = create_storage(os.getenv('CART_STORAGE', 'session').lower())


def respond(result):
    return jsonify(result), (200 if result.get("success") else 400)


@app.route('/api/restaurants/<restaurant_id>/cart', methods=['GET'])
def get_cart(restaurant_id):
    """Current cart with item count and ordering flags"""
    return respond(ordering.get_cart_details(restaurant_id, cart_storage))


@app.route('/api/restaurants/<restaurant_id>/cart/items', methods=['POST'])
def add_cart_item(restaurant_id):
    """Add a dish to the cart"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    model = data.get('model')
    if not isinstance(model, dict) or 'id' not in model:
        return jsonify({'success': False, 'error': 'A dish record with an id is required.'}), 400

    return respond(ordering.add_to_cart(
        restaurant_id,
        cart_storage,
        model,
        quantity=data.get('quantity', 1),
        options=data.get('options'),
        notes=data.get('notes')
    ))


@app.route('/api/restaurants/<restaurant_id>/cart/items/<item_id>', methods=['PATCH'])
def update_cart_item(restaurant_id, item_id):
    """Change the quantity of a cart line (zero or less removes it)"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    quantity = data.get('quantity')
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        return jsonify({'success': False, 'error': 'An integer quantity is required.'}), 400

    return respond(ordering.update_quantity(restaurant_id, cart_storage, item_id, quantity))


@app.route('/api/restaurants/<restaurant_id>/cart/items/<item_id>', methods=['DELETE'])
def remove_cart_item(restaurant_id, item_id):
    """Remove a cart line"""
    return respond(ordering.remove_from_cart(restaurant_id, cart_storage, item_id))


@app.route('/api/restaurants/<restaurant_id>/cart', methods=['DELETE'])
def clear_cart(restaurant_id):
    """Empty the cart"""
    return respond(ordering.clear_cart(restaurant_id, cart_storage))


@app.route('/api/restaurants/<restaurant_id>/pos-config', methods=['GET'])
def get_pos_config(restaurant_id):
    """POS configuration and derived capabilities"""
    return respond(ordering.get_pos_config(restaurant_id))


@app.route('/api/restaurants/<restaurant_id>/pos-config', methods=['PATCH'])
def update_pos_config(restaurant_id):
    """Partially update the POS configuration"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'success': False, 'error': 'A JSON object is required.'}), 400

    return respond(ordering.update_pos_config(restaurant_id, data))


@app.errorhandler(Exception)
def handle_unexpected_error(e):
    if isinstance(e, HTTPException):
        return e
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return jsonify({'success': False, 'error': f'An error occurred: {str(e)}'}), 500


@app.route('/health')
def health():
    """Health check endpoint"""
    return jsonify({'status': 'ok', 'message': 'Menu cart is running!'})


if __name__ == '__main__':
    port = int(os.getenv('PORT', 5000))
    debug = os.getenv('DEBUG', 'False').lower() == 'true'

    print("=== Menu Cart Server ===")
    print(f"Starting server on http://localhost:{port}")
    print("Press Ctrl+C to stop")

    app.run(
        host='0.0.0.0',
        port=port,
        debug=debug
    )
