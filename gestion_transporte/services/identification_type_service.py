# gestion_transporte/services/identification_type_service.py
from typing import List
from sqlalchemy import delete as sql_delete
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError
from sqlalchemy.exc import SQLAlchemyError
import logging

from gestion_transporte.models.identification_type import IdentificationType
from gestion_transporte.schemas.identification_type import NAME_LABEL

logger = logging.getLogger(__name__)


# ================================
# CUSTOM EXCEPTIONS
# ================================
class IdentificationTypeException(Exception):
    """Base exception for identification type operations"""
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class IdentificationTypeNotFoundException(IdentificationTypeException):
    """Raised when an identification type is not found"""
    def __init__(self, message: str = "Identification type not found"):
        super().__init__(message, status_code=404)


class IdentificationTypeValidationException(IdentificationTypeException):
    """Raised when a submitted field is invalid"""
    def __init__(self, field: str, message: str = "Validation failed"):
        self.field = field
        super().__init__(message, status_code=400)


class IdentificationTypeConcurrencyException(IdentificationTypeException):
    """Raised when a row changed between read and write and still exists"""
    def __init__(self, message: str = "Identification type was modified by another request"):
        super().__init__(message, status_code=409)


class StoreUnavailableException(IdentificationTypeException):
    """Raised on any lower-level database fault"""
    def __init__(self, message: str = "Store unavailable"):
        super().__init__(message, status_code=503)


# ================================
# IDENTIFICATION TYPE SERVICE
# ================================
class IdentificationTypeService:

    @staticmethod
    def list_all(db: Session) -> List[IdentificationType]:
        try:
            id_types = db.query(IdentificationType).all()
        except SQLAlchemyError as e:
            logger.error(f"Error listing identification types: {str(e)}")
            raise StoreUnavailableException() from e

        logger.info(f"Identification types listed: {len(id_types)}")
        return id_types

    @staticmethod
    def get_by_id(db: Session, id_type_id: int) -> IdentificationType:
        try:
            id_type = db.get(IdentificationType, id_type_id)
        except SQLAlchemyError as e:
            logger.error(f"Error loading identification type {id_type_id}: {str(e)}")
            raise StoreUnavailableException() from e

        if not id_type:
            raise IdentificationTypeNotFoundException(f"Identification type {id_type_id} not found")
        return id_type

    @staticmethod
    def exists(db: Session, id_type_id: int) -> bool:
        try:
            return db.query(
                db.query(IdentificationType).filter(IdentificationType.id == id_type_id).exists()
            ).scalar()
        except SQLAlchemyError as e:
            logger.error(f"Error checking identification type {id_type_id}: {str(e)}")
            raise StoreUnavailableException() from e

    @staticmethod
    def update_name(db: Session, id_type_id: int, new_name: str) -> IdentificationType:
        """
        Rename an identification type.

        An UPDATE that matches no row raises ``StaleDataError``. The row is
        then looked up again: if it is gone the request is a plain not-found,
        otherwise the conflict propagates.
        """
        if not new_name or not new_name.strip():
            raise IdentificationTypeValidationException(
                "name", f"The {NAME_LABEL} field is required."
            )

        id_type = IdentificationTypeService.get_by_id(db, id_type_id)

        try:
            id_type.name = new_name
            db.commit()
        except StaleDataError as e:
            db.rollback()
            if not IdentificationTypeService.exists(db, id_type_id):
                logger.info(f"Identification type {id_type_id} deleted during update")
                raise IdentificationTypeNotFoundException(
                    f"Identification type {id_type_id} not found"
                ) from e
            logger.error(f"Concurrency conflict updating identification type {id_type_id}: {str(e)}")
            raise IdentificationTypeConcurrencyException() from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating identification type {id_type_id}: {str(e)}")
            raise StoreUnavailableException() from e

        logger.info(f"Identification type updated: {id_type_id}")
        return id_type

    @staticmethod
    def delete(db: Session, id_type_id: int) -> None:
        IdentificationTypeService.get_by_id(db, id_type_id)

        try:
            result = db.execute(
                sql_delete(IdentificationType).where(IdentificationType.id == id_type_id)
            )
            # no row matched: deleted by another request since the lookup
            if result.rowcount == 0:
                db.rollback()
                logger.info(f"Identification type {id_type_id} deleted during delete")
                raise IdentificationTypeNotFoundException(
                    f"Identification type {id_type_id} not found"
                )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting identification type {id_type_id}: {str(e)}")
            raise StoreUnavailableException() from e

        logger.info(f"Identification type deleted: {id_type_id}")
