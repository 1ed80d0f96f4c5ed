"""
Basic Resource — Health Endpoint and CLI Tests
================================================

What we test:
    ✅ /health reports healthy with the shipped templates
    ✅ /health reports unhealthy (503) when templates are missing
    ✅ `--get-routes` prints the route table as JSON
    ✅ Settings validation for log_level
"""

import json
from unittest.mock import patch

import pytest
from pydantic import ValidationError as PydanticValidationError

from app import __version__
from app.cli import main
from app.config import Settings
from app.routes import health as health_routes
from app.services.template_service import TemplateEngine


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_healthy(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["templates"] == "available"
        assert body["version"] == __version__
        assert body["routes"] >= 3

    @pytest.mark.asyncio
    async def test_health_unhealthy_without_templates(self, test_client, tmp_path):
        with patch.object(health_routes, "template_engine", TemplateEngine(str(tmp_path))):
            response = await test_client.get("/health")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["templates"] == "unavailable"


class TestCli:

    def test_get_routes_prints_json(self, capsys):
        exit_code = main(["--get-routes"])

        assert exit_code == 0
        routes = json.loads(capsys.readouterr().out)
        keys = {(r["method"], r["path"]) for r in routes}
        assert ("GET", "/hello") in keys
        assert ("GET", "/hello/customer/{name}") in keys
        assert ("PUT", "/hello/customer/{name}/{sufix}") in keys

    def test_serve_runs_uvicorn(self):
        with patch("uvicorn.run") as mock_run, \
             patch("app.main.setup_logging") as mock_logging:
            exit_code = main(["--port", "9090"])

        assert exit_code == 0
        mock_logging.assert_called_once()
        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs["port"] == 9090


class TestSettings:

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="chatty")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
