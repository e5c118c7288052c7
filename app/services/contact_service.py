import logging

from sqlalchemy.orm import Session

from app.models.contact_message import ContactMessage
from app.schemas.contact import ContactCreateRequest
from app.schemas.common import page_offset
from app.services.serializers import serialize_message
from app.utils.exceptions import NotFoundException

logger = logging.getLogger(__name__)


class ContactService:

    def submit(self, db: Session, data: ContactCreateRequest) -> str:
        """Store a visitor inquiry and return its id. No dedup, no throttling."""
        msg = ContactMessage(
            name=data.name,
            email=str(data.email),
            phone=data.phone,
            subject=data.subject,
            message=data.message,
            read=False,
        )
        db.add(msg)
        db.commit()
        logger.info(f"Contact message {msg.id} received from {msg.email}")
        return msg.id

    # ─── Admin inbox ──────────────────────────────────────────────────────────
    def list_messages(
        self, db: Session, page: int, limit: int, unread: bool | None = None,
    ) -> tuple[list[dict], int]:
        q = db.query(ContactMessage)
        if unread is not None:
            q = q.filter(ContactMessage.read == (not unread))
        total = q.count()
        items = q.order_by(ContactMessage.createdAt.desc()).offset(page_offset(page, limit)).limit(limit).all()
        return [serialize_message(m) for m in items], total

    def get_message(self, db: Session, message_id: str) -> dict:
        m = db.query(ContactMessage).filter(ContactMessage.id == message_id).first()
        if not m:
            raise NotFoundException("Message")
        return serialize_message(m)

    def set_read(self, db: Session, message_id: str, read: bool) -> dict:
        m = db.query(ContactMessage).filter(ContactMessage.id == message_id).first()
        if not m:
            raise NotFoundException("Message")
        m.read = read
        db.commit()
        db.refresh(m)
        return serialize_message(m)

    def unread_count(self, db: Session) -> int:
        return db.query(ContactMessage).filter(ContactMessage.read == False).count()


contact_service = ContactService()
