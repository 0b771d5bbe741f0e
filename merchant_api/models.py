from sqlalchemy import Column, String, Integer, Numeric, DateTime, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship

from merchant_api.constants import FieldLimits
from merchant_api.database import Base


class Address(Base):
    """
    Postal address owned by exactly one Supplier or Customer.

    Has no lifecycle of its own: the owning service creates, updates and
    deletes it together with its owner inside the same transaction.
    """
    __tablename__ = 'addresses'

    id = Column(Integer, primary_key=True, autoincrement=True)
    street_line = Column(String(FieldLimits.STREET_LINE), nullable=False)
    number = Column(String(FieldLimits.NUMBER), nullable=False)
    complement = Column(String(FieldLimits.COMPLEMENT), nullable=True)
    neighborhood = Column(String(FieldLimits.NEIGHBORHOOD), nullable=False)
    city = Column(String(FieldLimits.CITY), nullable=False)
    state = Column(String(FieldLimits.STATE), nullable=False)
    country = Column(String(FieldLimits.COUNTRY), nullable=False)
    postal_code = Column(String(FieldLimits.POSTAL_CODE), nullable=False)

    __table_args__ = (
        {'sqlite_autoincrement': True},
    )


class Supplier(Base):
    """
    A supplier with its exclusively owned address.

    tax_id is written once at creation and never updated.
    created_at is set once; updated_at is refreshed on every mutation.
    """
    __tablename__ = 'suppliers'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(FieldLimits.SUPPLIER_NAME), nullable=False)
    tax_id = Column(String(FieldLimits.CNPJ_LENGTH), nullable=False, unique=True)
    supplier_type = Column(String(20), nullable=False)
    address_id = Column(Integer, ForeignKey('addresses.id'), nullable=False, unique=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    # No ORM delete cascade: SupplierService removes the address explicitly
    address = relationship("Address")

    __table_args__ = (
        CheckConstraint("name != ''"),
        CheckConstraint("supplier_type IN ('STANDARD', 'PREMIUM')", name='ck_supplier_type'),
        {'sqlite_autoincrement': True},
    )


class Product(Base):
    """
    A product referencing its supplier by identity.

    supplier_id is a plain column, not a foreign key: deleting a supplier
    leaves its products in place with a dangling reference.
    """
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(FieldLimits.PRODUCT_NAME), nullable=False)
    price = Column(Numeric(FieldLimits.PRICE_MAX_DIGITS, FieldLimits.PRICE_DECIMAL_PLACES), nullable=False)
    description = Column(String(FieldLimits.PRODUCT_DESCRIPTION), nullable=True)
    stock_quantity = Column(Integer, nullable=False, default=0)
    supplier_id = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("price > 0", name='ck_product_price_positive'),
        CheckConstraint("stock_quantity >= 0", name='ck_product_stock_non_negative'),
        Index('idx_products_supplier', 'supplier_id'),
        {'sqlite_autoincrement': True},
    )


class Customer(Base):
    """A customer with its exclusively owned address. tax_id is not unique."""
    __tablename__ = 'customers'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(FieldLimits.CUSTOMER_NAME), nullable=False)
    tax_id = Column(String(FieldLimits.CPF_LENGTH), nullable=True)
    email = Column(String(FieldLimits.EMAIL), nullable=False)
    address_id = Column(Integer, ForeignKey('addresses.id'), nullable=False, unique=True)

    address = relationship("Address")

    __table_args__ = (
        {'sqlite_autoincrement': True},
    )


class User(Base):
    """System user for authentication and authorization."""
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(FieldLimits.USERNAME), nullable=False, unique=True)
    email = Column(String(FieldLimits.EMAIL), nullable=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default='USER')

    __table_args__ = (
        CheckConstraint("role IN ('ADMIN', 'USER')", name='ck_user_role'),
        {'sqlite_autoincrement': True},
    )
