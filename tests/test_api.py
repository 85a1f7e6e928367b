from social_media_api.app.api.deps import get_account_service, get_message_service
from social_media_api.app.core.exceptions import PersistenceFault
from social_media_api.app.main import app
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


def register(client, username="bob", password="pass1"):
    return client.post("/register", json={"username": username, "password": password})


def post_message(client, author, text, **extra):
    return client.post("/messages", json={"posted_by": author, "message_text": text, **extra})


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_register_returns_account_without_password(client):
    response = register(client)

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "bob"
    assert isinstance(body["account_id"], int)
    assert "password" not in body


def test_register_validation_errors(client):
    for payload in ({"username": "", "password": "pass1"}, {"username": "bob", "password": "abc"}, {"password": "pass1"}):
        response = client.post("/register", json=payload)
        assert response.status_code == 400
        assert response.json()["detail"]


def test_register_duplicate(client):
    register(client)
    response = register(client, password="different")

    assert response.status_code == 400
    assert response.json() == {"detail": "Username is already taken."}


def test_login(client):
    account_id = register(client).json()["account_id"]

    ok = client.post("/login", json={"username": "bob", "password": "pass1"})
    assert ok.status_code == 200
    assert ok.json() == {"account_id": account_id, "username": "bob"}

    wrong = client.post("/login", json={"username": "bob", "password": "nope"})
    assert wrong.status_code == 401
    assert wrong.json() == {"detail": "Invalid credentials"}

    unknown = client.post("/login", json={"username": "ghost", "password": "pass1"})
    assert unknown.status_code == 401


def test_post_message(client):
    account_id = register(client).json()["account_id"]

    response = post_message(client, account_id, "hi")

    assert response.status_code == 200
    body = response.json()
    assert body["posted_by"] == account_id
    assert body["message_text"] == "hi"
    assert body["time_posted_epoch"] > 0
    assert isinstance(body["message_id"], int)


def test_post_message_keeps_supplied_timestamp(client):
    account_id = register(client).json()["account_id"]

    response = post_message(client, account_id, "hi", time_posted_epoch=1669947792)

    assert response.json()["time_posted_epoch"] == 1669947792


def test_post_message_rejections(client):
    account_id = register(client).json()["account_id"]

    assert post_message(client, account_id, "").status_code == 400
    assert post_message(client, account_id, "x" * 256).status_code == 400
    unknown_author = post_message(client, account_id + 100, "hi")
    assert unknown_author.status_code == 400
    assert unknown_author.json() == {"detail": "Author account does not exist."}
    assert client.get("/messages").json() == []


def test_get_message_by_id(client):
    account_id = register(client).json()["account_id"]
    created = post_message(client, account_id, "hi").json()

    found = client.get(f"/messages/{created['message_id']}")
    assert found.status_code == 200
    assert found.json() == created

    missing = client.get("/messages/9999")
    assert missing.status_code == 200
    assert missing.content == b""


def test_non_integer_id_is_rejected(client):
    assert client.get("/messages/abc").status_code == 422


def test_ids_beyond_64_bits_are_rejected(client):
    huge = 2 ** 70

    assert client.get(f"/messages/{huge}").status_code == 422
    assert client.delete(f"/messages/{huge}").status_code == 422
    assert client.patch(f"/messages/{huge}", json={"message_text": "x"}).status_code == 422
    assert client.get(f"/accounts/{huge}/messages").status_code == 422
    assert post_message(client, huge, "hi").status_code == 422
    assert client.get("/messages").json() == []


def test_post_message_with_negative_timestamp_is_rejected(client):
    account_id = register(client).json()["account_id"]

    response = post_message(client, account_id, "hi", time_posted_epoch=-5)

    assert response.status_code == 422
    assert client.get("/messages").json() == []


def test_post_message_without_author(client):
    register(client)

    response = client.post("/messages", json={"message_text": "hi"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Author account does not exist."}
    assert client.get("/messages").json() == []


def test_list_messages(client):
    bob = register(client).json()["account_id"]
    alice = register(client, "alice", "pass2").json()["account_id"]
    m1 = post_message(client, bob, "one").json()
    m2 = post_message(client, alice, "two").json()

    response = client.get("/messages")

    assert response.status_code == 200
    assert sorted(response.json(), key=lambda m: m["message_id"]) == [m1, m2]


def test_update_message(client):
    account_id = register(client).json()["account_id"]
    created = post_message(client, account_id, "hi").json()

    response = client.patch(f"/messages/{created['message_id']}", json={"message_text": "hello"})

    assert response.status_code == 200
    assert response.json() == {**created, "message_text": "hello"}


def test_update_message_errors(client):
    account_id = register(client).json()["account_id"]
    created = post_message(client, account_id, "hi").json()
    path = f"/messages/{created['message_id']}"

    assert client.patch(path, json={"message_text": ""}).status_code == 400
    assert client.patch(path, json={}).status_code == 400
    assert client.patch(path, json={"message_text": "y" * 256}).status_code == 400

    missing = client.patch("/messages/9999", json={"message_text": "hello"})
    assert missing.status_code == 404
    assert missing.json() == {"detail": "Message 9999 not found"}

    assert client.get(path).json()["message_text"] == "hi"


def test_delete_message(client):
    account_id = register(client).json()["account_id"]
    created = post_message(client, account_id, "bye").json()
    path = f"/messages/{created['message_id']}"

    first = client.delete(path)
    assert first.status_code == 200
    assert first.json() == created

    second = client.delete(path)
    assert second.status_code == 200
    assert second.content == b""
    assert client.get(path).content == b""


def test_messages_by_account(client):
    bob = register(client).json()["account_id"]
    alice = register(client, "alice", "pass2").json()["account_id"]
    b1 = post_message(client, bob, "b1").json()
    post_message(client, alice, "a1")

    response = client.get(f"/accounts/{bob}/messages")
    assert response.status_code == 200
    assert response.json() == [b1]
    assert client.get("/accounts/9999/messages").json() == []


def test_persistence_fault_is_internal_error(client):
    class BrokenMessageDAO:
        def get_all_messages(self):
            raise PersistenceFault("disk I/O error")

    app.dependency_overrides[get_message_service] = lambda: MessageService(BrokenMessageDAO())

    response = client.get("/messages")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_post_message_when_author_lookup_fails(client):
    class BrokenAccountDAO:
        def get_account_by_id(self, account_id):
            raise PersistenceFault("database is locked")

    app.dependency_overrides[get_account_service] = lambda: AccountService(BrokenAccountDAO())

    response = post_message(client, 1, "hi")

    assert response.status_code == 400


def test_end_to_end_scenario(client):
    bob = register(client, "bob", "pass1")
    assert bob.status_code == 200
    bob_id = bob.json()["account_id"]

    assert register(client, "bob", "pass1").status_code == 400

    posted = post_message(client, bob_id, "hi")
    assert posted.status_code == 200
    message = posted.json()

    assert post_message(client, bob_id, "z" * 256).status_code == 400
    assert len(client.get("/messages").json()) == 1

    updated = client.patch(f"/messages/{message['message_id']}", json={"message_text": "hello"}).json()
    assert updated["message_id"] == message["message_id"]
    assert updated["posted_by"] == bob_id
    assert updated["time_posted_epoch"] == message["time_posted_epoch"]

    assert client.delete(f"/messages/{message['message_id']}").json() == updated
    assert client.delete(f"/messages/{message['message_id']}").content == b""
