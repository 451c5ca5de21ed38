from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vigenere_es.core.config import Settings, get_settings
from vigenere_es.db.session import get_db_session
from vigenere_es.services.engines.vigenere import VigenereEngine


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Database session dependency
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with get_db_session() as session:
        yield session

DbSessionDep = Annotated[AsyncSession, Depends(get_db)]


# Engine dependency
def get_engine(settings: SettingsDep) -> VigenereEngine:
    """Get an engine configured from the settings."""
    return VigenereEngine.from_settings(settings)

EngineDep = Annotated[VigenereEngine, Depends(get_engine)]
