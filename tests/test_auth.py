import pytest

from auth_service.crud import authenticate_user, register_user
from auth_service.models import User
from auth_service.security import hash_password, verify_password
from shared.errors import Conflict, InvalidCredentials, InvalidInput

ROUNDS = 4


class TestPasswordHashing:

    def test_hash_is_not_plaintext(self):
        h = hash_password("pw123", rounds=ROUNDS)
        assert h != "pw123"
        assert h.startswith("$2")

    def test_hash_is_salted(self):
        assert hash_password("pw123", rounds=ROUNDS) != hash_password("pw123", rounds=ROUNDS)

    def test_verify(self):
        h = hash_password("pw123", rounds=ROUNDS)
        assert verify_password("pw123", h)
        assert not verify_password("pw124", h)

    def test_verify_rejects_malformed_hash(self):
        assert not verify_password("pw123", "not-a-bcrypt-hash")

    def test_verify_rejects_overlong_password(self):
        h = hash_password("a" * 72, rounds=ROUNDS)
        assert not verify_password("a" * 73, h)


class TestCredentialStore:

    def test_register_then_authenticate(self, db):
        uid = register_user(db, "alice", "pw123", rounds=ROUNDS)
        assert authenticate_user(db, "alice", "pw123") == uid

    def test_password_stored_hashed(self, db):
        register_user(db, "alice", "pw123", rounds=ROUNDS)
        u = db.query(User).filter(User.username == "alice").one()
        assert u.password_hash != "pw123"
        assert verify_password("pw123", u.password_hash)

    def test_ids_are_unique(self, db):
        a = register_user(db, "alice", "pw123", rounds=ROUNDS)
        b = register_user(db, "bob", "pw123", rounds=ROUNDS)
        assert a != b

    def test_duplicate_username(self, db):
        register_user(db, "alice", "pw123", rounds=ROUNDS)
        with pytest.raises(Conflict):
            register_user(db, "alice", "something else", rounds=ROUNDS)

    @pytest.mark.parametrize("username,password", [("", "pw"), ("alice", ""), ("", "")])
    def test_register_requires_both_fields(self, db, username, password):
        with pytest.raises(InvalidInput):
            register_user(db, username, password, rounds=ROUNDS)

    def test_register_rejects_overlong_password(self, db):
        with pytest.raises(InvalidInput):
            register_user(db, "alice", "x" * 73, rounds=ROUNDS)

    def test_wrong_password_and_unknown_user_look_the_same(self, db):
        register_user(db, "alice", "pw123", rounds=ROUNDS)

        with pytest.raises(InvalidCredentials) as wrong_pw:
            authenticate_user(db, "alice", "nope")
        with pytest.raises(InvalidCredentials) as unknown:
            authenticate_user(db, "mallory", "pw123")

        assert wrong_pw.value.message == unknown.value.message


class TestAuthEndpoints:

    def test_register_and_login(self, client):
        r = client.post("/api/register", json={"username": "alice", "password": "pw123"})
        assert r.status_code == 200
        body = r.json()
        assert body["success"] is True
        uid = body["userId"]

        r = client.post("/api/login", json={"username": "alice", "password": "pw123"})
        assert r.status_code == 200
        assert r.json() == {"success": True, "userId": uid}

    def test_register_missing_fields(self, client):
        r = client.post("/api/register", json={"username": "alice"})
        assert r.status_code == 400
        assert r.json() == {"error": "Username and password required"}

    def test_register_conflict(self, client):
        client.post("/api/register", json={"username": "alice", "password": "pw123"})
        r = client.post("/api/register", json={"username": "alice", "password": "other"})
        assert r.status_code == 400
        assert "error" in r.json()

    def test_login_wrong_password(self, client):
        client.post("/api/register", json={"username": "alice", "password": "pw123"})
        r = client.post("/api/login", json={"username": "alice", "password": "wrong"})
        assert r.status_code == 400
        assert r.json() == {"error": "Invalid username or password"}

    def test_login_unknown_user(self, client):
        r = client.post("/api/login", json={"username": "ghost", "password": "pw123"})
        assert r.status_code == 400
        assert r.json() == {"error": "Invalid username or password"}

    def test_login_missing_fields(self, client):
        r = client.post("/api/login", json={})
        assert r.status_code == 400
        assert "error" in r.json()

    def test_malformed_body(self, client):
        r = client.post("/api/register", content="not json", headers={"content-type": "application/json"})
        assert r.status_code == 400
        assert "error" in r.json()
