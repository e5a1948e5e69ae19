"""SQLAlchemy models for abstract products.

Defines ProductAbstract and its per-locale attributes for persistent storage.
"""

from typing import Any

from sqlalchemy import JSON, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from product_management.attribute.models import LocaleModel
from product_management.domain.entities import LocalizedAttributes, ProductAbstract
from product_management.infrastructure.database import Base


class ProductAbstractModel(Base):
    """Abstract product row.

    Attributes:
        id: Product abstract identifier.
        sku: Unique stock keeping unit.
        attributes: Non-localized attribute values keyed by attribute key.
    """

    __tablename__ = "product_abstracts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sku: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    attributes: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    # Relationships
    localized_attributes: Mapped[list["ProductAbstractLocalizedAttributesModel"]] = relationship(
        "ProductAbstractLocalizedAttributesModel",
        back_populates="product_abstract",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductAbstractModel(id={self.id}, sku={self.sku})>"

    def to_domain(self) -> ProductAbstract:
        """Convert to domain entity.

        ``localized_attributes`` and their locales must be loaded first.
        """
        return ProductAbstract(
            id=self.id,
            sku=self.sku,
            attributes=dict(self.attributes or {}),
            localized_attributes={
                localized.locale.locale_name: localized.to_domain()
                for localized in self.localized_attributes
            },
        )


class ProductAbstractLocalizedAttributesModel(Base):
    """Per-locale name, description and attributes of an abstract product."""

    __tablename__ = "product_abstract_localized_attributes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fk_product_abstract: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("product_abstracts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    fk_locale: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("locales.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    attributes: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    # Relationships
    product_abstract: Mapped["ProductAbstractModel"] = relationship(
        "ProductAbstractModel", back_populates="localized_attributes"
    )
    locale: Mapped[LocaleModel] = relationship(LocaleModel)

    __table_args__ = (
        UniqueConstraint("fk_product_abstract", "fk_locale", name="uq_product_abstract_locale"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<ProductAbstractLocalizedAttributesModel("
            f"fk_product_abstract={self.fk_product_abstract}, fk_locale={self.fk_locale})>"
        )

    def to_domain(self) -> LocalizedAttributes:
        """Convert to domain object."""
        return LocalizedAttributes(
            locale_name=self.locale.locale_name,
            name=self.name,
            description=self.description,
            attributes=dict(self.attributes or {}),
        )
