"""API tests for require_roles and framework-raised errors."""

import pytest
from fastapi import Depends, FastAPI, status
from fastapi.testclient import TestClient

from review_identity.domain.enums import UserRole
from review_identity.main import app as main_app
from review_identity.presentation.routers.api.middleware import (
    get_current_user,
    require_roles,
)
from review_identity.presentation.routers.api.v1.errors import (
    register_exception_handlers,
)
from tests.utils.utils import create_test_user


def _guarded_app(role: UserRole) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/admin-only", dependencies=[Depends(require_roles(UserRole.ADMIN))])
    async def admin_only() -> dict[str, str]:
        return {"ok": "yes"}

    app.dependency_overrides[get_current_user] = lambda: create_test_user(role=role)
    return app


@pytest.mark.api
class TestRequireRoles:
    """require_roles(UserRole.ADMIN)"""

    def test_admin_admitted(self):
        response = TestClient(_guarded_app(UserRole.ADMIN)).get("/admin-only")

        assert response.status_code == status.HTTP_200_OK

    def test_user_forbidden(self):
        response = TestClient(_guarded_app(UserRole.USER)).get("/admin-only")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        body = response.json()
        assert body["type"] == "/errors/forbidden"
        assert body["instance"] == "/admin-only"


@pytest.mark.api
def test_unknown_route_is_problem_details():
    response = TestClient(main_app).get("/api/v1/nope")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["type"] == "/errors/not-found"
