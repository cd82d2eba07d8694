"""
Heads Up - API Dependency Tests
"""

from typing import List

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from starlette.middleware.sessions import SessionMiddleware

from headsup.alerts import Alerts
from headsup.api import get_alerts


def _build_app(with_sessions: bool = True) -> FastAPI:
    app = FastAPI()
    
    @app.post("/save")
    def save(alerts: Alerts = Depends(get_alerts)) -> dict:
        alerts.success("Saved", "header", is_flash=True)
        alerts.info("Only now", notifier="view")
        return {"count": len(alerts.all())}
    
    @app.get("/page")
    def page(alerts: Alerts = Depends(get_alerts)) -> List[dict]:
        return [message.to_dict() for message in alerts.where_area("header").get()]
    
    if with_sessions:
        app.add_middleware(SessionMiddleware, secret_key="test-secret")
    return app


class TestGetAlerts:
    """Tests for the per-request alerts dependency."""
    
    def test_flash_survives_one_redirect(self):
        client = TestClient(_build_app())
        
        assert client.post("/save").json() == {"count": 1}
        
        assert client.get("/page").json() == [
            {"text": "Saved", "type": "success", "area": "header", "extra": None},
        ]
        assert client.get("/page").json() == []
    
    def test_requires_session_middleware(self):
        client = TestClient(_build_app(with_sessions=False))
        
        response = client.get("/page")
        
        assert response.status_code == 500
