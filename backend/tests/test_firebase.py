import pytest

from app.core import firebase
from app.core.exceptions import ConfigurationError


@pytest.fixture
def no_default_app(monkeypatch):
    def get_app():
        raise ValueError("The default Firebase app does not exist.")

    monkeypatch.setattr(firebase.firebase_admin, "get_app", get_app)


def test_missing_credentials_are_reported(monkeypatch, no_default_app):
    monkeypatch.setattr(firebase.settings, "FIREBASE_PROJECT_ID", "demo-project")
    monkeypatch.setattr(firebase.settings, "FIREBASE_CLIENT_EMAIL", "")
    monkeypatch.setattr(firebase.settings, "FIREBASE_PRIVATE_KEY", "")

    with pytest.raises(ConfigurationError) as exc_info:
        firebase.init_firebase()
    assert "FIREBASE_CLIENT_EMAIL" in str(exc_info.value)
    assert "FIREBASE_PRIVATE_KEY" in str(exc_info.value)
    assert "FIREBASE_PROJECT_ID" not in str(exc_info.value)


def test_service_account_key_is_unescaped(monkeypatch):
    monkeypatch.setattr(firebase.settings, "FIREBASE_PROJECT_ID", "demo-project")
    monkeypatch.setattr(firebase.settings, "FIREBASE_CLIENT_EMAIL", "svc@demo-project.iam.gserviceaccount.com")
    monkeypatch.setattr(firebase.settings, "FIREBASE_PRIVATE_KEY", "-----BEGIN-----\\nabc\\n-----END-----")

    info = firebase._service_account_info()

    assert info["type"] == "service_account"
    assert info["private_key"] == "-----BEGIN-----\nabc\n-----END-----"
    assert info["token_uri"] == firebase.TOKEN_URI


def test_bucket_requires_setting(monkeypatch):
    monkeypatch.setattr(firebase.settings, "FIREBASE_STORAGE_BUCKET", "")

    with pytest.raises(ConfigurationError):
        firebase.get_bucket()
