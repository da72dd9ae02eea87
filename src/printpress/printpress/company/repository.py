from __future__ import annotations

from typing import Optional, Protocol

from .model import CompanyInfo


class CompanyInfoRepository(Protocol):
    def get(self) -> Optional[CompanyInfo]:
        raise NotImplementedError

    def save(self, info: CompanyInfo) -> None:
        raise NotImplementedError
