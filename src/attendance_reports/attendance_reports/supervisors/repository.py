from __future__ import annotations

from typing import Optional, Protocol


class SupervisorRepository(Protocol):
    def get_full_name(self, supervisor_id: str) -> Optional[str]:
        raise NotImplementedError
