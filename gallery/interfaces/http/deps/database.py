"""Database session dependency.

Each request gets its own ``AsyncSession``; it commits after the handler
returns and rolls back when the handler raises.
"""

from gallery.infrastructure.database import get_session as get_db_session

__all__ = ["get_db_session"]
