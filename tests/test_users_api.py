import unittest
from unittest.mock import patch

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from bistro.services.auth_service import decode_access_token
from tests.api_case import ApiTestCase, bearer


class TestTokenEndpoint(ApiTestCase):
    def test_issue_token(self):
        r = self.client.post("/jwt", json={"email": "a@x.com"})

        self.assertEqual(r.status_code, 200)
        claims = decode_access_token(r.json()["token"])
        self.assertEqual(claims["email"], "a@x.com")
        self.assertEqual(claims["exp"] - claims["iat"], 3600)


class TestRegisterUser(ApiTestCase):
    def test_first_sign_in_inserts(self):
        r = self.client.post(
            "/users",
            json={"email": "a@x.com", "name": "Ann", "createdAt": "2024-01-01"},
        )

        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertTrue(body["acknowledged"])
        self.assertTrue(ObjectId.is_valid(body["insertedId"]))
        stored = self.db.users.find_one({"email": "a@x.com"})
        self.assertEqual(str(stored["_id"]), body["insertedId"])
        self.assertEqual(stored["name"], "Ann")
        self.assertEqual(stored["createdAt"], "2024-01-01")

    def test_repeat_sign_in_reports_existing_user(self):
        payload = {"email": "a@x.com", "name": "Ann", "updatedAt": "t1"}
        self.client.post("/users", json=payload)

        for _ in range(2):
            r = self.client.post("/users", json=payload)
            self.assertEqual(r.status_code, 200)
            existing, update = r.json()
            self.assertEqual(
                existing, {"message": "User already exists", "insertedId": None}
            )
            self.assertEqual(update["matchedCount"], 1)
            self.assertEqual(update["upsertedCount"], 0)

        self.assertEqual(self.db.users.count_documents({"email": "a@x.com"}), 1)

    def test_repeat_sign_in_only_refreshes_timestamps(self):
        self.client.post(
            "/users", json={"email": "a@x.com", "name": "Ann", "updatedAt": "t1"}
        )

        self.client.post(
            "/users",
            json={
                "email": "a@x.com",
                "name": "Changed",
                "updatedAt": "t2",
                "updatedLocal": "local-t2",
            },
        )

        stored = self.db.users.find_one({"email": "a@x.com"})
        self.assertEqual(stored["name"], "Ann")
        self.assertEqual(stored["updatedAt"], "t2")
        self.assertEqual(stored["updatedLocal"], "local-t2")

    def test_fields_are_stored_without_type_checks(self):
        r = self.client.post(
            "/users",
            json={"email": "a@x.com", "name": 123, "profile": {"locale": "en"}},
        )

        self.assertEqual(r.status_code, 200)
        stored = self.db.users.find_one({"email": "a@x.com"})
        self.assertEqual(stored["name"], 123)
        self.assertEqual(stored["profile"], {"locale": "en"})

    def test_concurrent_first_sign_in_is_retried_as_existing_user(self):
        # The other request already inserted this email.
        self.seed_user("a@x.com")
        collection_class = type(self.db.users)
        original_update_one = collection_class.update_one
        calls = []

        def lose_the_race(collection, *args, **kwargs):
            calls.append(args)
            if len(calls) == 1:
                raise DuplicateKeyError("E11000 duplicate key error")
            return original_update_one(collection, *args, **kwargs)

        with patch.object(
            collection_class, "update_one", autospec=True, side_effect=lose_the_race
        ):
            r = self.client.post(
                "/users", json={"email": "a@x.com", "updatedAt": "t1"}
            )

        self.assertEqual(r.status_code, 200)
        self.assertEqual(len(calls), 2)
        existing, update = r.json()
        self.assertEqual(
            existing, {"message": "User already exists", "insertedId": None}
        )
        self.assertEqual(update["matchedCount"], 1)
        self.assertEqual(self.db.users.count_documents({"email": "a@x.com"}), 1)

    def test_role_cannot_be_self_assigned(self):
        self.client.post("/users", json={"email": "a@x.com", "role": "admin"})

        self.assertNotIn("role", self.db.users.find_one({"email": "a@x.com"}))

    def test_email_is_required(self):
        r = self.client.post("/users", json={"name": "Nobody"})

        self.assertEqual(r.status_code, 422)
        self.assertEqual(self.db.users.count_documents({}), 0)


class TestAdminStatus(ApiTestCase):
    def test_admin_sees_true(self):
        self.seed_user("boss@bistro.com", role="admin")

        r = self.client.get(
            "/users/admin/boss@bistro.com", headers=bearer("boss@bistro.com")
        )

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"admin": True})

    def test_regular_user_sees_false(self):
        self.seed_user("guest@bistro.com")

        r = self.client.get(
            "/users/admin/guest@bistro.com", headers=bearer("guest@bistro.com")
        )

        self.assertEqual(r.json(), {"admin": False})

    def test_unknown_user_sees_false(self):
        r = self.client.get(
            "/users/admin/new@bistro.com", headers=bearer("new@bistro.com")
        )

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"admin": False})


class TestAdminManagement(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.seed_user("boss@bistro.com", role="admin")
        self.guest_id = self.seed_user("guest@bistro.com")
        self.headers = bearer("boss@bistro.com")

    def test_promote_user(self):
        r = self.client.patch(f"/users/admin/{self.guest_id}", headers=self.headers)

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["matchedCount"], 1)
        self.assertEqual(r.json()["modifiedCount"], 1)
        stored = self.db.users.find_one({"_id": self.guest_id})
        self.assertEqual(stored["role"], "admin")
        self.assertIn("roleUpdated", stored)

    def test_promote_with_invalid_id_matches_nothing(self):
        r = self.client.patch("/users/admin/not-an-id", headers=self.headers)

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["matchedCount"], 0)

    def test_delete_user(self):
        r = self.client.delete(f"/users/{self.guest_id}", headers=self.headers)

        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"acknowledged": True, "deletedCount": 1})
        self.assertIsNone(self.db.users.find_one({"_id": self.guest_id}))

    def test_delete_with_invalid_id_matches_nothing(self):
        r = self.client.delete("/users/42", headers=self.headers)

        self.assertEqual(r.json(), {"acknowledged": True, "deletedCount": 0})
        self.assertEqual(self.db.users.count_documents({}), 2)


if __name__ == "__main__":
    unittest.main()
