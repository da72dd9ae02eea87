from __future__ import annotations

from typing import Optional

from ..storage.local_state import LocalStateStore
from .model import CompanyInfo
from .repository import CompanyInfoRepository


class LocalCompanyInfoRepository(CompanyInfoRepository):
    def __init__(self, store: LocalStateStore):
        self._store = store

    def get(self) -> Optional[CompanyInfo]:
        return self._store.state.company_info

    def save(self, info: CompanyInfo) -> None:
        self._store.state.company_info = info
        self._store.save()
