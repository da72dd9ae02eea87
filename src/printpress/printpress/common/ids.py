from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque record identifier shared by every storage backend."""
    return str(uuid.uuid4())
