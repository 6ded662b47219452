"""
Test Fixtures - reusable test data.

Factories for API payloads plus FakeApi, the stand-in for the external REST API.
"""

import json
from urllib.parse import urlsplit

import requests

API_URL = "http://api.test/api"

# ──────────────────────────────────────────────
# Session payloads (GET /account/dashboard)
# ──────────────────────────────────────────────

ADMIN_PROFILE = {
    "user": "principal",
    "email": "principal@estg.test",
    "role": "Admin",
    "avatar": "",
    "backupCode": "123456",
}

CREATOR_PROFILE = {
    "user": "writer",
    "email": "writer@estg.test",
    "role": "ContentCreator",
}


# ──────────────────────────────────────────────
# Content payloads
# ──────────────────────────────────────────────


def make_event(
    id: str = "1",
    title: str = "Fair",
    description: str = "...",
    image_url: str | None = None,
    created_at: str = "2025-01-05T10:00:00.000Z",
) -> dict:
    return {
        "_id": id,
        "title": title,
        "description": description,
        "imageUrl": image_url,
        "author": {"username": "principal"},
        "createdAt": created_at,
    }


def make_update(
    id: str = "1",
    title: str = "Exam timetable",
    description: str = "Exams start on Monday.",
    type: str = "Exam",
    file_url: str | None = None,
) -> dict:
    return {
        "_id": id,
        "title": title,
        "description": description,
        "type": type,
        "fileUrl": file_url,
        "author": {"username": "writer"},
        "createdAt": "2025-02-10T08:00:00.000Z",
    }


def make_creator(
    id: str = "c1",
    username: str = "writer",
    email: str = "writer@estg.test",
    phone: str | None = "0788000000",
    backup_code: int | None = 445566,
) -> dict:
    return {
        "_id": id,
        "username": username,
        "email": email,
        "role": "ContentCreator",
        "phone": phone,
        "backupCodeDecimal": backup_code,
    }


# ──────────────────────────────────────────────
# Fake REST API
# ──────────────────────────────────────────────


def make_response(status=200, body=None, url=API_URL, cookies=None):
    """Builds a real requests.Response the way the transport adapter would."""
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.reason = "OK" if status < 400 else "Error"
    response.headers["Content-Type"] = "application/json"
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    for name, value in (cookies or {}).items():
        response.cookies.set(name, value)
    return response


class FakeApi:
    """
    Routes (method, path) pairs to canned answers and records every call.

    Usage:
        fake_api.add("GET", "/events", body={"data": [...]})
        fake_api.add("DELETE", "/delete_event/1", status=500, body={"message": "boom"})
        fake_api.add("GET", "/events", error=requests.ConnectionError())

    Several answers for the same route are served in order; the last one repeats.
    Unknown routes answer 404.
    """

    def __init__(self, base_url=API_URL):
        self.base_url = base_url
        self.routes = {}
        self.calls = []

    def add(self, method, path, status=200, body=None, cookies=None, error=None):
        self.routes.setdefault((method.upper(), path), []).append(
            {"status": status, "body": body, "cookies": cookies, "error": error}
        )

    def replace(self, method, path, **answer):
        self.routes.pop((method.upper(), path), None)
        self.add(method, path, **answer)

    def _path(self, url):
        base_path = urlsplit(self.base_url).path
        path = urlsplit(url).path
        if path.startswith(base_path):
            path = path[len(base_path):]
        return path or "/"

    def dispatch(self, method, url, **kwargs):
        method = method.upper()
        path = self._path(url)
        self.calls.append({"method": method, "path": path, **kwargs})

        answers = self.routes.get((method, path))
        if not answers:
            return make_response(404, {"message": f"No route for {method} {path}"}, url)
        answer = answers.pop(0) if len(answers) > 1 else answers[0]
        if answer["error"] is not None:
            raise answer["error"]
        return make_response(answer["status"], answer["body"], url, answer["cookies"])

    def calls_to(self, method, path):
        return [c for c in self.calls if c["method"] == method.upper() and c["path"] == path]

    def writes(self):
        """Every non-GET call, i.e. everything that would change data on the API."""
        return [c for c in self.calls if c["method"] != "GET"]


def sign_in(client, fake_api, profile, kind):
    """Puts an API session cookie in the Flask session and answers the session check."""
    with client.session_transaction() as sess:
        sess["api_cookies"] = {"connect.sid": f"{kind}-session"}
        sess["login_kind"] = kind
    fake_api.add("GET", "/account/dashboard", body=profile)
    return client
