import logging

from sqlalchemy.orm import Session

from app.models.setting import Setting
from app.utils.exceptions import NotFoundException
from app.utils.timeutil import iso

logger = logging.getLogger(__name__)


# Default keys
DEFAULT_SETTINGS = [
    {"key": "site_name",        "value": "Steel Solution"},
    {"key": "site_description", "value": "Profesjonalne zabudowy pojazdów dla straży pożarnej"},
    {"key": "contact_email",    "value": "kontakt@steelsolution.pl"},
    {"key": "contact_phone",    "value": "+48 690 418 119"},
    {"key": "address",          "value": "Leśna 12, 64-020 Betkowo"},
]


def _serialize(s: Setting) -> dict:
    return {
        "key":       s.key,
        "value":     s.value,
        "updatedAt": iso(s.updatedAt),
    }


class SettingService:

    def list_settings(self, db: Session) -> list[dict]:
        return [_serialize(s) for s in db.query(Setting).order_by(Setting.key).all()]

    def get_public_settings(self, db: Session) -> dict[str, str]:
        return {s.key: s.value for s in db.query(Setting).all()}

    def get_setting(self, db: Session, key: str) -> dict:
        s = db.query(Setting).filter(Setting.key == key).first()
        if not s:
            raise NotFoundException(f"Setting '{key}'")
        return _serialize(s)

    def upsert_setting(self, db: Session, key: str, value: str) -> dict:
        s = db.query(Setting).filter(Setting.key == key).first()
        if s:
            s.value = value
        else:
            s = Setting(key=key, value=value)
            db.add(s)
        db.commit()
        db.refresh(s)
        logger.info(f"Setting '{key}' updated")
        return _serialize(s)

    def seed_defaults(self, db: Session) -> None:
        """Insert default settings if not already present."""
        for d in DEFAULT_SETTINGS:
            existing = db.query(Setting).filter(Setting.key == d["key"]).first()
            if not existing:
                db.add(Setting(**d))
        db.commit()


setting_service = SettingService()
