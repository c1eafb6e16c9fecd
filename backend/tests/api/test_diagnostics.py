"""
Tests for the Document AI and OpenAI diagnostic endpoints.
"""

from datetime import datetime, timezone

from modules.analysis.models import AnalysisServiceStatus
from modules.extraction.models import ExtractionServiceStatus

from fakes import JPEG_BYTES, make_extraction_result


class TestDocumentAI:

    def test_process_image(self, logged_in_client):
        """OCR output and image info should be returned in camelCase."""
        response = logged_in_client.post(
            "/api/documentai/process-image",
            files={"image": ("menu.jpg", JPEG_BYTES, "image/jpeg")},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["data"]["text"] == "Hola mundo"
        assert data["metadata"]["processingTime"] == 42
        assert data["imageInfo"] == {
            "originalName": "menu.jpg",
            "size": len(JPEG_BYTES),
            "mimeType": "image/jpeg",
        }
        assert "error" not in data

    def test_process_image_failure(self, logged_in_client, extraction_service):
        """An extraction failure should return 400 with the result."""
        extraction_service.process_document.return_value = make_extraction_result(
            success=False, error="503 backend down"
        )

        response = logged_in_client.post(
            "/api/documentai/process-image",
            files={"image": ("menu.jpg", JPEG_BYTES, "image/jpeg")},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "503 backend down"
        assert data["imageInfo"]["originalName"] == "menu.jpg"

    def test_process_image_without_file(self, logged_in_client):
        """No file should return 400."""
        response = logged_in_client.post("/api/documentai/process-image")

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "No image file provided"}

    def test_status(self, logged_in_client, extraction_service):
        """Status should report the gateway's configuration."""
        extraction_service.get_status.return_value = ExtractionServiceStatus(
            status="configuration_error", processor="", errors=["Project ID is required"]
        )

        response = logged_in_client.get("/api/documentai/status")

        assert response.status_code == 200
        assert response.json() == {
            "status": "configuration_error",
            "processor": "",
            "errors": ["Project ID is required"],
        }

    def test_requires_session(self, client):
        """Diagnostics should sit behind the capture gate."""
        assert client.get("/api/documentai/status").status_code == 401


class TestOpenAI:

    def test_chat(self, logged_in_client, analysis_service):
        """Text should be analyzed without OCR."""
        response = logged_in_client.post(
            "/api/openai/chat", json={"text": "Hola mundo", "language": "Spanish"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["data"]["words"][0] == {"text": "Hola", "translation": ["Hello"]}
        assert "timestamp" in data
        analysis_service.process_text.assert_awaited_once_with("Hola mundo", "Spanish")

    def test_chat_without_text(self, logged_in_client, analysis_service):
        """Blank text should return 400 without calling the model."""
        response = logged_in_client.post("/api/openai/chat", json={"text": "  ", "language": "Spanish"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "No text supplied"}
        analysis_service.process_text.assert_not_awaited()

    def test_chat_without_language(self, logged_in_client, analysis_service):
        """Blank language should return 400 without calling the model."""
        response = logged_in_client.post("/api/openai/chat", json={"text": "Hola", "language": " "})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Language parameter is required"}
        analysis_service.process_text.assert_not_awaited()

    def test_chat_no_output(self, logged_in_client, analysis_service):
        """No model output should return 400."""
        analysis_service.process_text.return_value = None

        response = logged_in_client.post("/api/openai/chat", json={"text": "Hola", "language": "Spanish"})

        assert response.status_code == 400
        assert response.json()["error"] == "Failed to generate response"

    def test_status(self, logged_in_client, analysis_service):
        """Status should be returned in camelCase."""
        analysis_service.get_status.return_value = AnalysisServiceStatus(
            status="healthy",
            message="OpenAI service is configured",
            model="gpt-4.1-2025-04-14",
            timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

        response = logged_in_client.get("/api/openai/status")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["model"] == "gpt-4.1-2025-04-14"

    def test_requires_session(self, client, analysis_service):
        """Diagnostics should sit behind the capture gate."""
        response = client.post("/api/openai/chat", json={"text": "Hola", "language": "Spanish"})

        assert response.status_code == 401
        analysis_service.process_text.assert_not_awaited()
