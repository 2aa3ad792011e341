from fastapi import Depends

from bookbuddy.config import get_settings
from bookbuddy.database import get_db

DBSession = Depends(get_db)
AppSettings = Depends(get_settings)
