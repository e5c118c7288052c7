from sqlalchemy import Column, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.database import Base, generate_id


class CategoryVehicleBrand(Base):
    """Association row: this category's products are offered for this brand."""
    __tablename__ = "category_vehicle_brands"

    id             = Column(String(32), primary_key=True, default=generate_id)
    categoryId     = Column(String(32), ForeignKey("categories.id", ondelete="CASCADE"),
                            nullable=False, index=True)
    vehicleBrandId = Column(String(32), ForeignKey("vehicle_brands.id", ondelete="CASCADE"),
                            nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("categoryId", "vehicleBrandId", name="uq_category_vehicle_brand"),
    )

    # ─── Relationships ─────────────────────────────────────────────────────────
    category      = relationship("Category", back_populates="brand_links")
    vehicle_brand = relationship("VehicleBrand", back_populates="category_links")

    def __repr__(self):
        return f"<CategoryVehicleBrand category={self.categoryId} brand={self.vehicleBrandId}>"
