from sqlalchemy import Column, Integer, String, Text, Boolean, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base, generate_id
from app.utils.timeutil import utcnow


class VehicleBrand(Base):
    __tablename__ = "vehicle_brands"

    id                 = Column(String(32), primary_key=True, default=generate_id)
    name               = Column(String(150), nullable=False)
    slug               = Column(String(150), unique=True, nullable=False, index=True)
    fullName           = Column(String(255), nullable=True)
    description        = Column(Text, nullable=True)
    longDescription    = Column(Text, nullable=True)
    contentDescription = Column(Text, nullable=True)
    type               = Column(String(20), default="truck", nullable=False)   # truck | pickup
    models             = Column(Text, default="[]", nullable=False)            # JSON: [{name, years}]
    image              = Column(String(500), nullable=True)
    heroImage          = Column(String(500), nullable=True)
    gallery            = Column(Text, default="[]", nullable=False)            # JSON: [url]
    metaTitle          = Column(String(255), nullable=True)
    metaDescription    = Column(Text, nullable=True)
    sortOrder          = Column(Integer, default=0, nullable=False)
    published          = Column(Boolean, default=True, nullable=False)
    createdAt          = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updatedAt          = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(),
                                onupdate=utcnow, nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    category_links = relationship("CategoryVehicleBrand", back_populates="vehicle_brand",
                                  cascade="all, delete-orphan")

    def __repr__(self):
        return f"<VehicleBrand id={self.id} slug={self.slug}>"
