"""
Tests for the HTTP surface
"""
import unittest

from app import app

PIZZA = {"id": "pizza", "name": "Pizza Margherita", "price": 10.0}


class TestCartAPI(unittest.TestCase):
    """Test cases for the cart endpoints (cart kept in the session cookie)"""

    def setUp(self):
        app.config['TESTING'] = True
        self.client = app.test_client()

    def test_health(self):
        response = self.client.get('/health')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["status"], "ok")

    def test_empty_cart(self):
        response = self.client.get('/api/restaurants/api-empty/cart')
        data = response.get_json()

        self.assertEqual(response.status_code, 200)
        self.assertTrue(data["is_empty"])
        self.assertEqual(data["cart"]["restaurantId"], "api-empty")

    def test_cart_flow(self):
        base = '/api/restaurants/api-flow'
        self.client.patch(f'{base}/pos-config', json={"settings": {"deliveryFee": 2.5}})

        response = self.client.post(f'{base}/cart/items', json={"model": PIZZA})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["cart"]["total"], 12.5)

        response = self.client.post(f'{base}/cart/items', json={"model": PIZZA, "quantity": 2})
        cart = response.get_json()["cart"]
        self.assertEqual(len(cart["items"]), 1)
        self.assertEqual(cart["items"][0]["quantity"], 3)
        self.assertEqual(cart["total"], 32.5)

        item_id = cart["items"][0]["id"]
        response = self.client.patch(f'{base}/cart/items/{item_id}', json={"quantity": 0})
        cart = response.get_json()["cart"]
        self.assertEqual(cart["items"], [])
        self.assertEqual(cart["total"], 2.5)

    def test_cart_survives_between_requests(self):
        base = '/api/restaurants/api-cookie'
        self.client.post(f'{base}/cart/items', json={"model": PIZZA, "notes": "extra crispy"})

        data = self.client.get(f'{base}/cart').get_json()

        self.assertEqual(data["item_count"], 1)
        self.assertEqual(data["cart"]["items"][0]["notes"], "extra crispy")

    def test_remove_and_clear(self):
        base = '/api/restaurants/api-remove'
        cart = self.client.post(f'{base}/cart/items', json={"model": PIZZA}).get_json()["cart"]
        self.client.post(f'{base}/cart/items', json={"model": dict(PIZZA, id="salad", price=7.9)})

        response = self.client.delete(f'{base}/cart/items/{cart["items"][0]["id"]}')
        self.assertEqual(response.get_json()["cart"]["subtotal"], 7.9)

        response = self.client.delete(f'{base}/cart')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get(f'{base}/cart').get_json()["item_count"], 0)

    def test_disabled_ordering_returns_400(self):
        base = '/api/restaurants/api-disabled'
        self.client.patch(f'{base}/pos-config', json={"features": {"ordering": False}})

        response = self.client.post(f'{base}/cart/items', json={"model": PIZZA})

        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.get_json()["success"])
        self.assertTrue(response.get_json()["error"])

    def test_missing_price_returns_400(self):
        response = self.client.post('/api/restaurants/api-price/cart/items',
                                    json={"model": {"id": "water", "name": "Water"}})

        self.assertEqual(response.status_code, 400)

    def test_bad_requests(self):
        base = '/api/restaurants/api-bad'

        self.assertEqual(self.client.post(f'{base}/cart/items', json={}).status_code, 400)
        self.assertEqual(
            self.client.patch(f'{base}/cart/items/x', json={"quantity": "many"}).status_code, 400
        )
        self.assertEqual(self.client.patch(f'{base}/pos-config', json=[1]).status_code, 400)
        self.assertEqual(self.client.get('/api/unknown').status_code, 404)

    def test_quantity_must_be_json_integer(self):
        base = '/api/restaurants/api-quantity'
        cart = self.client.post(f'{base}/cart/items', json={"model": PIZZA, "quantity": 2}).get_json()["cart"]
        item_url = f'{base}/cart/items/{cart["items"][0]["id"]}'

        for quantity in (2.7, True, "3", None):
            response = self.client.patch(item_url, json={"quantity": quantity})
            self.assertEqual(response.status_code, 400)
        self.assertEqual(self.client.patch(item_url, json=[4]).status_code, 400)

        self.assertEqual(self.client.get(f'{base}/cart').get_json()["item_count"], 2)

    def test_string_flags_do_not_toggle_pos(self):
        base = '/api/restaurants/api-flags'

        response = self.client.patch(f'{base}/pos-config',
                                     json={"features": {"ordering": "false"}, "enabled": "false"})

        self.assertEqual(response.status_code, 400)
        data = self.client.get(f'{base}/pos-config').get_json()
        self.assertTrue(data["capabilities"]["can_order"])

    def test_pos_config(self):
        response = self.client.get('/api/restaurants/api-pos/pos-config')
        data = response.get_json()

        self.assertEqual(response.status_code, 200)
        self.assertEqual(data["config"]["settings"]["currency"], "EUR")
        self.assertTrue(data["capabilities"]["can_order"])


if __name__ == '__main__':
    unittest.main()
