from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_for_company(self, company_id: str, *, supervisor_id: Optional[str] = None) -> Sequence[Employee]:
        raise NotImplementedError
