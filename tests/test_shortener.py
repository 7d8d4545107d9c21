import string

import pytest

from pocketkit.shortener import (
    BASE_URL,
    ShortUrl,
    UrlDatabase,
    connect_from_env,
    create_app,
    generate_key,
)


class _MemoryStore:
    def __init__(self, fail=False):
        self.urls = {}
        self.fail = fail

    def save_url(self, short_key, original_url):
        if self.fail:
            raise RuntimeError("database down")
        self.urls[short_key] = original_url

    def get_url(self, short_key):
        return self.urls[short_key]


class _FakeCursor:
    def __init__(self, connection):
        self.connection = connection
        self.result = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params):
        self.connection.statements.append(sql)
        if sql.startswith("INSERT"):
            self.connection.rows[params[0]] = params[1]
        else:
            value = self.connection.rows.get(params[0])
            self.result = None if value is None else (value,)

    def fetchone(self):
        return self.result


class _FakeConnection:
    def __init__(self):
        self.rows = {}
        self.statements = []
        self.commits = 0

    def cursor(self):
        return _FakeCursor(self)

    def commit(self):
        self.commits += 1


def test_generate_key_length_and_alphabet():
    key = generate_key(6)
    assert len(key) == 6
    assert set(key) <= set(string.ascii_letters + string.digits)


def test_generate_key_zero_and_negative():
    assert generate_key(0) == ""
    with pytest.raises(ValueError):
        generate_key(-1)


def test_short_url_dict_uses_wire_names():
    short = ShortUrl(key="abc123", url="https://example.com", short_url=BASE_URL + "abc123")
    assert short.to_dict() == {
        "key": "abc123",
        "url": "https://example.com",
        "shortUrl": "http://localhost:8081/abc123",
    }


def test_database_round_trip():
    connection = _FakeConnection()
    database = UrlDatabase(connection)
    database.save_url("abc123", "https://example.com/page")
    assert database.get_url("abc123") == "https://example.com/page"
    assert connection.commits == 1
    assert all("urls" in sql for sql in connection.statements)


def test_database_missing_key():
    database = UrlDatabase(_FakeConnection())
    with pytest.raises(KeyError):
        database.get_url("nothing")


def test_connect_from_env_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        connect_from_env(str(tmp_path / "absent.env"))


def test_shorten_rejects_get():
    client = create_app(_MemoryStore()).test_client()
    response = client.get("/shorten")
    assert response.status_code == 405
    assert response.get_data(as_text=True) == "Method not allowed\n"


@pytest.mark.parametrize("body", ["not json", '{"url": ""}', '{"other": "x"}', "[1]"])
def test_shorten_bad_request(body):
    client = create_app(_MemoryStore()).test_client()
    response = client.post("/shorten", data=body)
    assert response.status_code == 400
    assert response.get_data(as_text=True) == "Bad request\n"


def test_shorten_success():
    store = _MemoryStore()
    client = create_app(store, BASE_URL).test_client()
    response = client.post("/shorten", json={"url": "https://example.com/page"})
    assert response.status_code == 200
    assert response.mimetype == "application/json"
    data = response.get_json()
    assert len(data["key"]) == 6
    assert data["url"] == "https://example.com/page"
    assert data["shortUrl"] == BASE_URL + data["key"]
    assert store.urls == {data["key"]: "https://example.com/page"}


def test_shorten_store_failure():
    client = create_app(_MemoryStore(fail=True)).test_client()
    response = client.post("/shorten", json={"url": "https://example.com"})
    assert response.status_code == 500


def test_redirect_root_is_not_found():
    client = create_app(_MemoryStore()).test_client()
    response = client.get("/")
    assert response.status_code == 404
    assert response.get_data(as_text=True) == "Not found\n"


def test_redirect_unknown_key():
    client = create_app(_MemoryStore()).test_client()
    assert client.get("/missing").status_code == 404


def test_redirect_known_key():
    store = _MemoryStore()
    store.urls["abc123"] = "https://example.com/page"
    client = create_app(store).test_client()
    response = client.get("/abc123")
    assert response.status_code == 302
    assert response.headers["Location"] == "https://example.com/page"


def test_shorten_then_follow():
    store = _MemoryStore()
    client = create_app(store).test_client()
    key = client.post("/shorten", json={"url": "https://example.com/x"}).get_json()["key"]
    response = client.get("/" + key)
    assert response.headers["Location"] == "https://example.com/x"