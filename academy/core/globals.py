# ============================================================================
# FILE: academy/core/globals.py
# ============================================================================
"""Global application instances - database client"""

from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient

# Global instances
client: Optional[AsyncIOMotorClient] = None
