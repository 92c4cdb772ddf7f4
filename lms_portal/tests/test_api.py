"""
Integration tests for the HTTP API
"""
import pytest
from httpx import AsyncClient

from portal.core.config import settings

API = settings.API_V1_PREFIX

LESSON = b"# Introduction\nVariables hold values.\n\n## Loops\n- for\n- while\n"


class TestHealthEndpoints:
    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_ready_checks_storage(self, client: AsyncClient):
        response = await client.get("/ready")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["services"]["document_storage"]["backend"] == "LocalFileStore"

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, client: AsyncClient):
        response = await client.get("/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"


class TestDocumentEndpoints:
    @pytest.mark.asyncio
    async def test_preview_text_upload(self, client: AsyncClient):
        response = await client.post(
            f"{API}/documents/preview",
            files={"file": ("lesson.md", LESSON, "text/markdown")},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["document"]["title"] == "lesson"
        assert [s["title"] for s in data["document"]["sections"]] == ["Introduction", "Loops"]
        assert [b["type"] for b in data["blocks"]] == ["heading", "paragraph", "heading", "list"]
        assert data["blocks"][3]["items"] == ["for", "while"]

    @pytest.mark.asyncio
    async def test_preview_binary_upload(self, client: AsyncClient):
        response = await client.post(
            f"{API}/documents/preview",
            files={"file": ("slides.pdf", b"%PDF-1.4", "application/pdf")},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["document"]["sections"] == []
        assert data["blocks"][0]["content"] == "[Document content extracted from slides.pdf]"

    @pytest.mark.asyncio
    async def test_upload_too_large(self, client: AsyncClient, monkeypatch):
        monkeypatch.setattr(settings, "MAX_FILE_SIZE_MB", 0)
        response = await client.post(
            f"{API}/documents/preview",
            files={"file": ("lesson.md", LESSON, "text/markdown")},
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_save_list_get_delete(self, client: AsyncClient):
        response = await client.post(
            f"{API}/documents",
            data={"title": "Week 1", "module_id": "m1", "subtopic_id": "s1"},
            files={"file": ("lesson.md", LESSON, "text/markdown")},
        )
        assert response.status_code == 201
        saved = response.json()["document"]
        assert saved["title"] == "Week 1"
        assert saved["module_id"] == "m1"
        document_id = saved["id"]

        response = await client.get(f"{API}/documents", params={"module_id": "m1"})
        assert response.json()["total"] == 1

        response = await client.get(f"{API}/documents", params={"module_id": "m2"})
        assert response.json()["total"] == 0

        response = await client.get(f"{API}/documents/{document_id}")
        assert response.status_code == 200
        assert response.json()["blocks"][0] == {
            "type": "heading",
            "content": "Introduction",
            "items": None,
            "level": None,
            "language": None,
        }

        response = await client.delete(f"{API}/documents/{document_id}")
        assert response.status_code == 204

        response = await client.get(f"{API}/documents/{document_id}")
        assert response.status_code == 404
        assert response.json()["error"] == f"Document {document_id} not found"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("form", [{"title": "   "}, {"title": ""}, {}])
    async def test_save_requires_title(self, client: AsyncClient, form):
        response = await client.post(
            f"{API}/documents",
            data=form,
            files={"file": ("lesson.md", LESSON, "text/markdown")},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Please provide a title and upload a document"

        response = await client.get(f"{API}/documents")
        assert response.json()["total"] == 0

    @pytest.mark.asyncio
    async def test_save_without_file(self, client: AsyncClient):
        response = await client.post(f"{API}/documents", data={"title": "Week 1"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_error_body_documented(self, client: AsyncClient):
        schema = (await client.get("/openapi.json")).json()
        responses = schema["paths"][f"{API}/documents/{{document_id}}"]["get"]["responses"]
        ref = responses["404"]["content"]["application/json"]["schema"]["$ref"]
        assert ref.endswith("/ErrorResponse")


class TestSessionEndpoints:
    USER = {
        "id": "u-1",
        "email": "student@example.com",
        "phone": "5550100200",
        "name": "Ada Student",
        "role": "student",
        "portal": "online",
    }

    @pytest.mark.asyncio
    async def test_login_switch_portal_logout(self, client: AsyncClient):
        response = await client.get(f"{API}/session")
        assert response.json() == {"user": None}

        response = await client.put(f"{API}/session", json=self.USER)
        assert response.status_code == 200
        assert response.json()["user"] == self.USER

        response = await client.patch(f"{API}/session/portal", json={"portal": "workshop"})
        assert response.json()["user"] == {**self.USER, "portal": "workshop"}

        response = await client.delete(f"{API}/session")
        assert response.status_code == 204

        response = await client.get(f"{API}/session")
        assert response.json() == {"user": None}

    @pytest.mark.asyncio
    async def test_portal_switch_without_user(self, client: AsyncClient):
        response = await client.patch(f"{API}/session/portal", json={"portal": "offline"})
        assert response.status_code == 200
        assert response.json() == {"user": None}

    @pytest.mark.asyncio
    async def test_unknown_portal_rejected(self, client: AsyncClient):
        response = await client.patch(f"{API}/session/portal", json={"portal": "moon"})
        assert response.status_code == 422


class TestContactEndpoint:
    @pytest.mark.asyncio
    async def test_valid_message(self, client: AsyncClient):
        response = await client.post(
            f"{API}/contact",
            json={
                "name": "Jo",
                "email": "jo@example.com",
                "phone": "5550100200",
                "message": "Do you run weekend workshops?",
            },
        )
        assert response.status_code == 200
        assert response.json() == {
            "status": "sent",
            "title": "Message sent!",
            "description": "We'll get back to you soon.",
        }

    @pytest.mark.asyncio
    async def test_errors_reported_per_field(self, client: AsyncClient):
        response = await client.post(
            f"{API}/contact",
            json={"name": "J", "email": "not-an-email", "phone": "123", "message": "short"},
        )
        assert response.status_code == 422
        fields = {error["loc"][-1] for error in response.json()["details"]}
        assert fields == {"name", "email", "phone", "message"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["a@-.-", "x@y..z", "jo@", "@example.com"])
    async def test_malformed_email_rejected(self, client: AsyncClient, email):
        response = await client.post(
            f"{API}/contact",
            json={
                "name": "Jo",
                "email": email,
                "phone": "5550100200",
                "message": "Do you run weekend workshops?",
            },
        )
        assert response.status_code == 422
        assert [error["loc"][-1] for error in response.json()["details"]] == ["email"]


class TestContentEndpoints:
    @pytest.mark.asyncio
    async def test_templates(self, client: AsyncClient):
        response = await client.get(f"{API}/content/templates")
        assert response.status_code == 200
        assert response.json()["kids"]["use_emojis"] is True

    @pytest.mark.asyncio
    async def test_generate_and_validate(self, client: AsyncClient):
        response = await client.post(
            f"{API}/content/generate",
            json={"topic": "Python", "category": "technical"},
        )
        assert response.status_code == 200
        content = response.json()
        assert content["metadata"]["difficulty"] == "intermediate"

        response = await client.post(f"{API}/content/validate", json=content)
        assert response.json() == {"valid": True, "errors": []}

    @pytest.mark.asyncio
    async def test_subtopic_content_generated_for_course(self, client: AsyncClient):
        response = await client.get(
            f"{API}/content/subtopics/1.1.1",
            params={"title": "Loops", "course_title": "Coding Bootcamp"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["source"] == "generated"
        assert data["category"] == "technical"
        assert data["content"][0]["content"] == "Loops - Technical Overview"

    @pytest.mark.asyncio
    async def test_subtopic_custom_content_round_trip(self, client: AsyncClient):
        response = await client.put(
            f"{API}/content/subtopics/1.1.2",
            json={"title": "My lesson", "content": [{"type": "paragraph", "content": "hand written"}]},
        )
        assert response.status_code == 204

        data = (await client.get(f"{API}/content/subtopics/1.1.2")).json()
        assert data["source"] == "custom"
        assert data["title"] == "My lesson"

        response = await client.delete(f"{API}/content/subtopics/1.1.2")
        assert response.status_code == 204

        data = (await client.get(f"{API}/content/subtopics/1.1.2")).json()
        assert data["source"] == "generated"

    @pytest.mark.asyncio
    async def test_subtopic_uses_uploaded_document(self, client: AsyncClient):
        await client.post(
            f"{API}/documents",
            data={"title": "Week 1", "module_id": "m1", "subtopic_id": "1.2.1"},
            files={"file": ("lesson.md", LESSON, "text/markdown")},
        )

        data = (await client.get(f"{API}/content/subtopics/1.2.1")).json()

        assert data["source"] == "document"
        assert data["title"] == "Week 1"
        assert [b["type"] for b in data["content"]] == ["heading", "paragraph", "heading", "list"]
