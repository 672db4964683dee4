import unittest

from tests.api_case import ApiTestCase, bearer


class TestCatalog(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.menu_id = self.db.menu.insert_one(
            {"name": "Caesar Salad", "category": "salad", "price": 8.5}
        ).inserted_id
        self.db.reviews.insert_one({"name": "Jane", "rating": 5})

    def test_menu_is_public(self):
        r = self.client.get("/menu")

        self.assertEqual(r.status_code, 200)
        self.assertEqual(
            r.json(),
            [
                {
                    "_id": str(self.menu_id),
                    "name": "Caesar Salad",
                    "category": "salad",
                    "price": 8.5,
                }
            ],
        )

    def test_reviews_are_public(self):
        r = self.client.get("/reviews")

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()[0]["rating"], 5)


class TestCollectionReader(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.db.menu.insert_one({"name": "Soup"})
        self.db.carts.insert_one({"email": "a@x.com"})
        self.seed_user("boss@bistro.com", role="admin")
        self.seed_user("guest@bistro.com")

    def test_public_collection_needs_no_token(self):
        r = self.client.get("/m", params={"c": "menu"})

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()[0]["name"], "Soup")

    def test_admin_collection_requires_token(self):
        r = self.client.get("/m", params={"c": "users"})

        self.assertEqual(r.status_code, 401)

    def test_admin_collection_rejects_regular_users(self):
        r = self.client.get(
            "/m", params={"c": "carts"}, headers=bearer("guest@bistro.com")
        )

        self.assertEqual(r.status_code, 403)

    def test_admin_collection_for_admins(self):
        r = self.client.get(
            "/m", params={"c": "users"}, headers=bearer("boss@bistro.com")
        )

        self.assertEqual(r.status_code, 200)
        self.assertEqual(len(r.json()), 2)

    def test_unlisted_collection_is_404(self):
        self.db.secrets.insert_one({"key": "value"})

        r = self.client.get(
            "/m", params={"c": "secrets"}, headers=bearer("boss@bistro.com")
        )

        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.json(), {"message": "unknown collection"})

    def test_missing_name_is_400(self):
        r = self.client.get("/m")

        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json(), {"message": "collection name required"})


if __name__ == "__main__":
    unittest.main()
