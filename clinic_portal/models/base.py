# clinic_portal/models/base.py
from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """
    Base class for the auth store (clinics, users).

    Every domain service owns a separate database, so each store gets its
    own declarative base and MetaData.
    """

    pass


class HrBase(DeclarativeBase):
    pass


class InventoryBase(DeclarativeBase):
    pass


class MarketingBase(DeclarativeBase):
    pass
