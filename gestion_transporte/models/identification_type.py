from sqlalchemy import Column, Integer, String
from gestion_transporte.core.database import Base

__all__ = ["IdentificationType"]


class IdentificationType(Base):
    __tablename__ = "Tipo_Identificacion"

    id = Column("IdTipoIdentificacion", Integer, primary_key=True, autoincrement=True)
    # VARCHAR, not NVARCHAR: the legacy column is single-byte
    name = Column("NombreTipoIdentificacion", String(50), nullable=True)

    def __repr__(self) -> str:
        return f"<IdentificationType id={self.id} name={self.name!r}>"
