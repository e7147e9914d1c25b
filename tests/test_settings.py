"""
Tests for the typed settings repository.
"""

import pytest

from app.core.exceptions import ValidationError
from app.crud import settings as settings_crud
from app.models.system import KeyValueStore
from app.schemas.settings import AdSettings, SecuritySettings, default_settings


class TestSettingsRepository:

    def test_defaults_when_absent(self, db_session):
        security = settings_crud.get_settings(db_session, "securitySettings")

        assert isinstance(security, SecuritySettings)
        assert security.demo_mode_enabled is True
        assert security.auto_logout_minutes == 30

    def test_defaults_when_stored_value_is_invalid(self, db_session):
        db_session.add(KeyValueStore(key_name="adSettings", value='{"adFrequency": "extreme"}'))
        db_session.commit()

        assert settings_crud.get_settings(db_session, "adSettings") == AdSettings()

    def test_put_and_get(self, db_session):
        settings_crud.put_settings(db_session, "securitySettings", {"demoModeEnabled": False})

        security = settings_crud.get_settings(db_session, "securitySettings")
        assert security.demo_mode_enabled is False
        assert security.enable_csp is True

    def test_put_rejects_bad_shape(self, db_session):
        with pytest.raises(ValidationError):
            settings_crud.put_settings(db_session, "adSettings", {"activeTests": ["nowhereAd"]})

        assert db_session.query(KeyValueStore).count() == 0

    def test_unknown_key_stored_raw(self, db_session):
        settings_crud.put_settings(db_session, "experiments", [1, "two", {"three": 3}])

        assert settings_crud.get_raw(db_session)["experiments"] == [1, "two", {"three": 3}]

    def test_merged_settings_fills_partial_category(self, db_session):
        db_session.add(KeyValueStore(key_name="themeSettings", value='{"primaryColor": "#000000"}'))
        db_session.commit()

        merged = settings_crud.merged_settings(db_session)

        assert merged["themeSettings"] == {"primaryColor": "#000000", "accentColor": "#9333ea"}
        assert merged["seoSettings"] == default_settings()["seoSettings"]

    def test_wire_aliases(self):
        defaults = default_settings()

        assert "global" in defaults["seoSettings"]
        assert "pass" in defaults["smtpSettings"]
        assert "whatsApp" in defaults["alertSettings"]
        assert "enableCSP" in defaults["securitySettings"]
        assert defaults["adSettings"]["abTests"][0]["stats"]["impressionsA"] == 10520
        assert defaults["adSettings"]["activeTests"] == []
