"""
Integration tests for the event and update creation forms.
"""

import io

import requests


class TestCreateEvent:

    def test_form_renders(self, admin_client):
        response = admin_client.get("/createevent")
        assert response.status_code == 200
        assert b'name="imageUrl"' in response.data

    def test_requires_session(self, client):
        response = client.get("/createevent")
        assert response.status_code == 302

    def test_missing_field_sends_nothing(self, admin_client, fake_api):
        response = admin_client.post("/createevent", data={"title": "Fair", "description": ""})
        assert response.status_code == 400
        assert b"Please fill out all required fields." in response.data
        assert b'value="Fair"' in response.data
        assert fake_api.writes() == []

    def test_complete_form_sends_one_request(self, admin_client, fake_api):
        fake_api.add("POST", "/upload_events", body={"data": {"_id": "9", "title": "Fair", "description": "Stands"}})

        response = admin_client.post("/createevent", data={"title": "Fair", "description": "Stands"})

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/adminpanel?tab=events")
        calls = fake_api.writes()
        assert len(calls) == 1
        assert calls[0]["json"] == {"title": "Fair", "description": "Stands"}

    def test_image_goes_as_multipart(self, admin_client, fake_api):
        fake_api.add("POST", "/upload_events", body={})
        data = {
            "title": "Fair",
            "description": "Stands",
            "imageUrl": (io.BytesIO(b"\x89PNG"), "poster.png"),
        }
        response = admin_client.post("/createevent", data=data, content_type="multipart/form-data")

        assert response.status_code == 302
        call = fake_api.calls_to("POST", "/upload_events")[0]
        assert call["data"] == {"title": "Fair", "description": "Stands"}
        assert call["files"]["imageUrl"][0] == "poster.png"

    def test_wrong_image_type(self, admin_client, fake_api):
        data = {
            "title": "Fair",
            "description": "Stands",
            "imageUrl": (io.BytesIO(b"MZ"), "virus.exe"),
        }
        response = admin_client.post("/createevent", data=data, content_type="multipart/form-data")
        assert response.status_code == 400
        assert b"File type not allowed" in response.data
        assert fake_api.writes() == []

    def test_success_message(self, admin_client, fake_api):
        fake_api.add("POST", "/upload_events", body={})
        fake_api.add("GET", "/events", body={"data": [{"_id": "9", "title": "Fair", "description": "Stands"}]})
        response = admin_client.post(
            "/createevent", data={"title": "Fair", "description": "Stands"}, follow_redirects=True
        )
        assert b"Event created successfully!" in response.data
        assert b"Fair" in response.data

    def test_api_failure_keeps_values(self, admin_client, fake_api):
        fake_api.add("POST", "/upload_events", error=requests.ConnectionError())
        response = admin_client.post("/createevent", data={"title": "Fair", "description": "Stands"})
        assert response.status_code == 502
        assert b"Failed to create event. Please try again." in response.data
        assert b'value="Fair"' in response.data
        assert b"Stands</textarea>" in response.data


class TestCreateUpdate:

    def test_form_lists_types(self, creator_client):
        response = creator_client.get("/createupdate")
        assert response.status_code == 200
        assert b'<option value="Exam"' in response.data

    def test_type_is_required(self, creator_client, fake_api):
        response = creator_client.post("/createupdate", data={"title": "Exams", "description": "Monday"})
        assert response.status_code == 400
        assert fake_api.writes() == []

    def test_complete_form(self, creator_client, fake_api):
        fake_api.add("POST", "/upload_updates", body={})
        response = creator_client.post(
            "/createupdate", data={"title": "Exams", "description": "Monday", "type": "Exam"}
        )
        assert response.status_code == 302
        assert response.headers["Location"].endswith("/adminpanel?tab=updates")
        assert fake_api.writes()[0]["json"] == {"title": "Exams", "description": "Monday", "type": "Exam"}

    def test_attachment(self, creator_client, fake_api):
        fake_api.add("POST", "/upload_updates", body={})
        data = {
            "title": "Exams",
            "description": "Monday",
            "type": "Exam",
            "fileUrl": (io.BytesIO(b"%PDF-1.4"), "timetable.pdf"),
        }
        creator_client.post("/createupdate", data=data, content_type="multipart/form-data")
        call = fake_api.calls_to("POST", "/upload_updates")[0]
        assert call["files"]["fileUrl"][0] == "timetable.pdf"

    def test_api_failure(self, creator_client, fake_api):
        fake_api.add("POST", "/upload_updates", status=500)
        response = creator_client.post(
            "/createupdate", data={"title": "Exams", "description": "Monday", "type": "Exam"}
        )
        assert response.status_code == 502
        assert b"Failed to create update. Please try again." in response.data
        assert b'<option value="Exam" selected>' in response.data
