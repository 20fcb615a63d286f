"""
Model package.

IMPORTANT (Alembic / SQLModel):
- Alembic autogenerate relies on `SQLModel.metadata`, which is populated only
  when the table models are imported.
- `alembic/env.py` imports `motortech.models`, so this module must import all
  SQLModel `table=True` models to register them.
"""

# Import table models so SQLModel registers them in metadata.
from motortech.car.models import Car  # noqa: F401
from motortech.inspection.models import Inspection  # noqa: F401
from motortech.user.models import User  # noqa: F401
