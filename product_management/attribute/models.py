"""SQLAlchemy models for product management attributes.

Defines locale, attribute definition, attribute value and attribute
value translation tables.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from product_management.domain.value_objects import (
    AttributeDefinition,
    AttributeInputType,
    AttributeValueTranslation,
    Locale,
)
from product_management.infrastructure.database import Base


class LocaleModel(Base):
    """Locale available to the back-office.

    Attributes:
        id: Locale identifier.
        locale_name: Locale code (e.g., "de_DE").
        is_active: Whether the locale is offered for editing.
    """

    __tablename__ = "locales"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    locale_name: Mapped[str] = mapped_column(String(10), nullable=False, unique=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        """String representation."""
        return f"<LocaleModel(id={self.id}, locale_name={self.locale_name})>"

    def to_domain(self) -> Locale:
        """Convert to domain value object."""
        return Locale(id=self.id, locale_name=self.locale_name, is_active=self.is_active)


class AttributeModel(Base):
    """Attribute definition managed in the back-office.

    Attributes:
        id: Attribute identifier.
        key: Unique attribute key (e.g., "color").
        label: Optional display label.
        input_type: Form widget type.
        allow_input: Whether free-text values are accepted.
    """

    __tablename__ = "product_management_attributes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    label: Mapped[str | None] = mapped_column(String(255), nullable=True)
    input_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=AttributeInputType.TEXT.value
    )
    allow_input: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    values: Mapped[list["AttributeValueModel"]] = relationship(
        "AttributeValueModel",
        back_populates="attribute",
        cascade="all, delete-orphan",
        order_by="AttributeValueModel.id",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<AttributeModel(id={self.id}, key={self.key})>"

    def to_domain(self) -> AttributeDefinition:
        """Convert to domain value object.

        ``values`` must be loaded (selectinload) before calling this.
        """
        return AttributeDefinition(
            id=self.id,
            key=self.key,
            label=self.label,
            input_type=AttributeInputType(self.input_type),
            allow_input=self.allow_input,
            values=tuple(v.value for v in self.values),
        )


class AttributeValueModel(Base):
    """Canonical value of an attribute definition."""

    __tablename__ = "product_management_attribute_values"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fk_attribute: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("product_management_attributes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    value: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    attribute: Mapped["AttributeModel"] = relationship("AttributeModel", back_populates="values")
    translations: Mapped[list["AttributeValueTranslationModel"]] = relationship(
        "AttributeValueTranslationModel",
        back_populates="attribute_value",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<AttributeValueModel(id={self.id}, value={self.value})>"


class AttributeValueTranslationModel(Base):
    """Locale-specific text of an attribute value."""

    __tablename__ = "product_management_attribute_value_translations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fk_attribute_value: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("product_management_attribute_values.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    fk_locale: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("locales.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    translation: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    attribute_value: Mapped["AttributeValueModel"] = relationship(
        "AttributeValueModel", back_populates="translations"
    )

    __table_args__ = (
        UniqueConstraint("fk_attribute_value", "fk_locale", name="uq_attribute_value_locale"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<AttributeValueTranslationModel(id={self.id}, "
            f"fk_locale={self.fk_locale}, translation={self.translation})>"
        )

    def to_domain(self) -> AttributeValueTranslation:
        """Convert to domain value object.

        ``attribute_value`` must be loaded before calling this.
        """
        return AttributeValueTranslation(
            id_attribute=self.attribute_value.fk_attribute,
            id_locale=self.fk_locale,
            id_attribute_value=self.fk_attribute_value,
            value=self.attribute_value.value,
            translation=self.translation,
        )
