"""A URL shortener web service backed by a MySQL table."""

from __future__ import annotations

import argparse
import json
import logging
import os
import random
import string
from dataclasses import dataclass
from typing import Any, Protocol

import pymysql
from dotenv import load_dotenv
from flask import Flask, Response, redirect, request

BASE_URL = "http://localhost:8081/"
KEY_LENGTH = 6

_CHARSET = string.ascii_lowercase + string.ascii_uppercase + string.digits
_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]
_INSERT = "INSERT INTO urls(short_key, original_url) VALUES(%s, %s)"
_SELECT = "SELECT original_url FROM urls WHERE short_key=%s"

log = logging.getLogger(__name__)


class _Store(Protocol):
    def save_url(self, short_key: str, original_url: str) -> None: ...

    def get_url(self, short_key: str) -> str: ...


@dataclass(frozen=True)
class ShortUrl:
    """The answer to a shortening request."""

    key: str
    url: str
    short_url: str

    def to_dict(self) -> dict[str, str]:
        """Return the JSON body sent to the client."""
        return {"key": self.key, "url": self.url, "shortUrl": self.short_url}


class UrlDatabase:
    """Short keys and their URLs in the ``urls`` table of a DB-API connection."""

    def __init__(self, connection: Any) -> None:
        self._connection = connection

    def save_url(self, short_key: str, original_url: str) -> None:
        """Store a new key for a URL."""
        with self._connection.cursor() as cursor:
            cursor.execute(_INSERT, (short_key, original_url))
        self._connection.commit()

    def get_url(self, short_key: str) -> str:
        """Return the URL stored for a key; KeyError if there is none."""
        with self._connection.cursor() as cursor:
            cursor.execute(_SELECT, (short_key,))
            row = cursor.fetchone()
        if row is None:
            raise KeyError(short_key)
        return row[0]


def generate_key(length: int = KEY_LENGTH) -> str:
    """Return a random key of letters and digits."""
    if length < 0:
        raise ValueError("key length must not be negative")
    return "".join(random.choices(_CHARSET, k=length))


def connect_from_env(env_file: str = ".env") -> Any:
    """Load database settings from an env file and open a checked connection."""
    if not os.path.isfile(env_file):
        raise FileNotFoundError(f"Error loading {env_file} file")
    load_dotenv(env_file)
    password = os.getenv("DB_PASS", "")
    connection = pymysql.connect(
        host=os.getenv("DB_HOST") or "localhost",
        port=int(os.getenv("DB_PORT") or 3306),
        user=os.getenv("DB_USER", ""),
        password=password,
        database=os.getenv("DB_NAME", ""),
    )
    connection.ping(reconnect=False)
    log.info("Connected to database successfully")
    return connection


def _error(message: str, status: int) -> Response:
    return Response(message + "\n", status=status, mimetype="text/plain")


def create_app(store: _Store, base_url: str = BASE_URL) -> Flask:
    """Build the web application around a URL store."""
    app = Flask(__name__)

    @app.route("/shorten", methods=_ALL_METHODS)
    def shorten() -> Response:
        if request.method != "POST":
            return _error("Method not allowed", 405)
        payload = request.get_json(force=True, silent=True)
        url = payload.get("url") if isinstance(payload, dict) else None
        if not isinstance(url, str) or not url:
            return _error("Bad request", 400)

        key = generate_key(KEY_LENGTH)
        try:
            store.save_url(key, url)
        except Exception:
            log.exception("could not save %s", key)
            return _error("Internal server error", 500)

        result = ShortUrl(key=key, url=url, short_url=base_url + key)
        return Response(
            json.dumps(result.to_dict()) + "\n", mimetype="application/json"
        )

    @app.route("/", defaults={"key": ""}, methods=_ALL_METHODS)
    @app.route("/<path:key>", methods=_ALL_METHODS)
    def follow(key: str) -> Response:
        if not key:
            return _error("Not found", 404)
        try:
            original = store.get_url(key)
        except Exception:
            return _error("Url not found", 404)
        return redirect(original, code=302)

    return app


def main(argv: list[str] | None = None) -> int:
    """Connect to the database and serve the shortener."""
    parser = argparse.ArgumentParser(prog="shortener")
    parser.add_argument("--env-file", default=".env")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8081)
    options = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    print("Starting server...")
    try:
        connection = connect_from_env(options.env_file)
    except (OSError, ValueError, pymysql.MySQLError) as exc:
        log.error("%s", exc)
        return 1

    app = create_app(UrlDatabase(connection), BASE_URL)
    app.run(host=options.host, port=options.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())