"""
Integration tests for the resource dispatch endpoint.
"""
import uuid

import pytest
from django.urls import reverse

from licenses.infrastructure.models import LicenseKey as LicenseKeyModel


def _url(resource):
    return f"{reverse('v1:data')}?resource={resource}"


@pytest.mark.django_db
@pytest.mark.integration
class TestResourceDispatchAPI:
    """Tests for /api/v1/data?resource=..."""

    def test_options_preflight(self, api_client):
        response = api_client.options(_url("keys"))

        assert response.status_code == 204

    def test_unknown_resource(self, api_client):
        response = api_client.get(_url("widgets"))

        assert response.status_code == 404
        assert response.json()["error"]["message"] == (
            "Resource or method not found for key: GET_widgets"
        )

    def test_unsupported_method(self, api_client):
        response = api_client.put(_url("validate"), {}, format="json")

        assert response.status_code == 404

    def test_list_keys(self, client_as, db_admin_factory, db_license_key_factory):
        key = db_license_key_factory()

        response = client_as(db_admin_factory()).get(_url("keys") + "&status=Active")

        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == [str(key.id)]

    def test_login(self, api_client, db_admin_factory):
        db_admin_factory(email="ed@example.com", password="secret")

        response = api_client.post(
            _url("login"), {"email": "ed@example.com", "password": "secret"}, format="json"
        )

        assert response.status_code == 200

    def test_validate(self, api_client, db_license_key_factory):
        db_license_key_factory(key_value="KG-VALID")

        response = api_client.post(_url("validate"), {"keyValue": "KG-VALID"}, format="json")

        assert response.status_code == 200
        assert response.json()["status"] is True

    def test_update_key_reads_id_from_body(self, client_as, db_superadmin, db_license_key_factory, db_application):
        key = db_license_key_factory()

        response = client_as(db_superadmin).put(
            _url("keys"),
            {
                "id": str(key.id),
                "keyValue": key.key_value,
                "applicationId": str(db_application.id),
                "userName": "Renamed",
                "userContact": key.user_contact,
                "startDate": key.start_date.isoformat(),
                "endDate": key.end_date.isoformat(),
                "isActive": True,
            },
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["userName"] == "Renamed"

    def test_toggle_key(self, client_as, db_superadmin, db_license_key_factory):
        key = db_license_key_factory()

        response = client_as(db_superadmin).post(
            _url("toggleKeyStatus"), {"id": str(key.id)}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["isActive"] is False

    def test_delete_key(self, client_as, db_superadmin, db_license_key_factory):
        key = db_license_key_factory()

        response = client_as(db_superadmin).delete(
            _url("keys"), {"id": str(key.id)}, format="json"
        )

        assert response.status_code == 204
        assert not LicenseKeyModel.objects.filter(id=key.id).exists()

    def test_missing_id(self, client_as, db_superadmin):
        response = client_as(db_superadmin).delete(_url("keys"), {}, format="json")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "A valid id is required"

    def test_malformed_id(self, client_as, db_superadmin):
        response = client_as(db_superadmin).post(
            _url("resetPassword"), {"id": "nope"}, format="json"
        )

        assert response.status_code == 400

    def test_unknown_id_is_not_found(self, client_as, db_superadmin):
        response = client_as(db_superadmin).post(
            _url("toggleKeyStatus"), {"id": str(uuid.uuid4())}, format="json"
        )

        assert response.status_code == 404
